"""Request helpers shared by route tests."""


def register(client, username="alice", password="s3cret", first_name="Alice", image_url="http://img/alice.png"):
    return client.post(
        "/api/auth/register",
        json={
            "username": username,
            "password": password,
            "firstName": first_name,
            "imageUrl": image_url,
        },
    )


def login(client, username="alice", password="s3cret"):
    return client.post("/api/auth/login", json={"username": username, "password": password})


def create_playlist(client, name="Road trip"):
    resp = client.post("/api/playlists", json={"name": name})
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["playlist"]


def add_youtube_item(client, playlist_id, video_id="dQw4w9WgXcQ", title="Never Gonna Give You Up"):
    resp = client.post(
        f"/api/playlists/{playlist_id}/items",
        json={"type": "youtube", "videoId": video_id, "title": title},
    )
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["item"]
