import pytest

from tests.support.helpers import add_youtube_item, create_playlist, login, register


@pytest.mark.unit
@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/api/playlists"),
        ("post", "/api/playlists"),
        ("delete", "/api/playlists/pl-1"),
        ("post", "/api/playlists/pl-1/items"),
        ("patch", "/api/playlists/pl-1/items/it-1"),
        ("delete", "/api/playlists/pl-1/items/it-1"),
        ("post", "/api/playlists/upload/mp3"),
        ("get", "/api/youtube/search?q=x"),
    ],
)
def test_guarded_routes_require_a_session(client, method, path):
    resp = getattr(client, method)(path)
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Not authenticated"}


@pytest.mark.unit
def test_list_is_empty_for_new_user(auth_client):
    resp = auth_client.get("/api/playlists")
    assert resp.status_code == 200
    assert resp.get_json() == {"playlists": []}


@pytest.mark.unit
def test_create_then_list(auth_client):
    playlist = create_playlist(auth_client, "x")
    assert playlist["name"] == "x"
    assert playlist["items"] == []
    assert playlist["id"].startswith("pl-")
    assert "createdAt" in playlist

    listed = auth_client.get("/api/playlists").get_json()["playlists"]
    assert len(listed) == 1
    assert listed[0]["name"] == "x"
    assert listed[0]["items"] == []


@pytest.mark.unit
def test_create_without_name_is_bad_request(auth_client):
    resp = auth_client.post("/api/playlists", json={})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing name"}


@pytest.mark.unit
def test_get_single_playlist(auth_client):
    playlist = create_playlist(auth_client)
    resp = auth_client.get(f"/api/playlists/{playlist['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["playlist"]["id"] == playlist["id"]
    assert auth_client.get("/api/playlists/pl-missing").status_code == 404


@pytest.mark.unit
def test_delete_playlist_and_absent_playlist(auth_client):
    playlist = create_playlist(auth_client)
    assert auth_client.delete(f"/api/playlists/{playlist['id']}").get_json() == {"ok": True}
    assert auth_client.get("/api/playlists").get_json() == {"playlists": []}

    absent = auth_client.delete("/api/playlists/pl-missing")
    assert absent.status_code == 200
    assert absent.get_json() == {"ok": True}


@pytest.mark.unit
def test_add_item_returns_item_with_id_and_zero_rating(auth_client):
    playlist = create_playlist(auth_client)
    item = add_youtube_item(auth_client, playlist["id"])
    assert item["itemId"].startswith("it-")
    assert item["rating"] == 0
    assert item["videoId"] == "dQw4w9WgXcQ"
    assert item["type"] == "youtube"


@pytest.mark.unit
def test_add_item_to_unknown_playlist_is_not_found(auth_client):
    resp = auth_client.post("/api/playlists/pl-missing/items", json={"type": "youtube"})
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Playlist not found"}


@pytest.mark.unit
def test_item_without_type_is_stored_without_one(auth_client, store):
    playlist = create_playlist(auth_client)
    resp = auth_client.post(f"/api/playlists/{playlist['id']}/items", json={"videoId": "abc"})
    assert resp.status_code == 200
    item = resp.get_json()["item"]
    assert "type" not in item
    assert set(item) == {"itemId", "rating", "videoId"}

    stored = store.get("alice").find_playlist(playlist["id"]).items[0].to_dict()
    assert "type" not in stored


@pytest.mark.unit
def test_add_then_remove_item_round_trip(auth_client):
    playlist = create_playlist(auth_client)
    item = add_youtube_item(auth_client, playlist["id"])

    resp = auth_client.delete(f"/api/playlists/{playlist['id']}/items/{item['itemId']}")
    assert resp.get_json() == {"ok": True}
    stored = auth_client.get(f"/api/playlists/{playlist['id']}").get_json()["playlist"]
    assert stored["items"] == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "rating, expected",
    [("7", 7), ("abc", 0), (3, 3), (10 ** 400, 10), ("1" + "0" * 400, 10)],
)
def test_rate_item(auth_client, rating, expected):
    playlist = create_playlist(auth_client)
    item = add_youtube_item(auth_client, playlist["id"])

    resp = auth_client.patch(
        f"/api/playlists/{playlist['id']}/items/{item['itemId']}",
        json={"rating": rating},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}

    stored = auth_client.get(f"/api/playlists/{playlist['id']}").get_json()["playlist"]
    assert stored["items"][0]["rating"] == expected


@pytest.mark.unit
def test_rate_unknown_item_or_playlist_is_not_found(auth_client):
    playlist = create_playlist(auth_client)
    missing_item = auth_client.patch(f"/api/playlists/{playlist['id']}/items/it-x", json={"rating": 5})
    assert missing_item.status_code == 404
    missing_playlist = auth_client.patch("/api/playlists/pl-x/items/it-x", json={"rating": 5})
    assert missing_playlist.status_code == 404


@pytest.mark.unit
def test_users_only_see_their_own_playlists(app):
    alice = app.test_client()
    bob = app.test_client()
    register(alice, "alice")
    register(bob, "bob", first_name="Bob")
    login(alice, "alice")
    login(bob, "bob")

    playlist = create_playlist(alice, "private")

    assert bob.get("/api/playlists").get_json() == {"playlists": []}
    assert bob.get(f"/api/playlists/{playlist['id']}").status_code == 404
    assert bob.delete(f"/api/playlists/{playlist['id']}").status_code == 200
    assert len(alice.get("/api/playlists").get_json()["playlists"]) == 1


@pytest.mark.unit
def test_mutations_are_persisted_in_the_user_document(auth_client, store):
    playlist = create_playlist(auth_client, "persisted")
    add_youtube_item(auth_client, playlist["id"])

    user = store.get("alice")
    assert [pl.name for pl in user.playlists] == ["persisted"]
    assert len(user.playlists[0].items) == 1
