import pytest

from playlist_manager.database import JsonUserStore
from playlist_manager.domain import PlaylistService
from playlist_manager.errors import BadRequest, NotFound
from playlist_manager.models import User
from playlist_manager.support.identity import Identity


@pytest.fixture
def json_store(tmp_path):
    store = JsonUserStore(str(tmp_path / "users.json"))
    store.add(
        User(
            username="alice",
            password_hash="hash",
            first_name="Alice",
            image_url="http://img/alice.png",
        )
    )
    return store


@pytest.fixture
def identity():
    return Identity(username="alice", first_name="Alice", image_url="http://img/alice.png")


@pytest.fixture
def playlists(json_store):
    return PlaylistService(json_store)


@pytest.mark.unit
def test_new_user_has_no_playlists(playlists, identity):
    assert playlists.list(identity) == []


@pytest.mark.unit
def test_create_then_list_returns_single_empty_playlist(playlists, identity):
    created = playlists.create(identity, "x")

    listed = playlists.list(identity)
    assert len(listed) == 1
    assert listed[0].name == "x"
    assert listed[0].items == []
    assert listed[0].id == created.id
    assert created.id.startswith("pl-")
    assert created.created_at.endswith("Z")


@pytest.mark.unit
@pytest.mark.parametrize("name", ["", "   ", None])
def test_create_requires_a_name(playlists, identity, name):
    with pytest.raises(BadRequest):
        playlists.create(identity, name)
    assert playlists.list(identity) == []


@pytest.mark.unit
def test_ids_stay_unique_within_one_user(playlists, identity):
    ids = {playlists.create(identity, f"List {n}").id for n in range(5)}
    assert len(ids) == 5


@pytest.mark.unit
def test_get_unknown_playlist_raises_not_found(playlists, identity):
    with pytest.raises(NotFound):
        playlists.get(identity, "pl-missing")


@pytest.mark.unit
def test_remove_existing_and_absent_playlist(playlists, identity):
    keep = playlists.create(identity, "keep")
    drop = playlists.create(identity, "drop")

    playlists.remove(identity, drop.id)
    playlists.remove(identity, "pl-does-not-exist")

    assert [pl.id for pl in playlists.list(identity)] == [keep.id]


@pytest.mark.unit
def test_add_item_keeps_payload_and_assigns_id_and_rating(playlists, identity):
    pl = playlists.create(identity, "mix")
    item = playlists.add_item(
        identity,
        pl.id,
        {"type": "youtube", "videoId": "abc", "title": "Song", "itemId": "forged", "rating": 9},
    )

    assert item.item_id.startswith("it-")
    assert item.item_id != "forged"
    assert item.rating == 0
    stored = playlists.get(identity, pl.id).items[0].to_dict()
    assert stored["videoId"] == "abc"
    assert stored["title"] == "Song"
    assert stored["type"] == "youtube"
    assert stored["rating"] == 0


@pytest.mark.unit
def test_add_item_accepts_mp3_fields_verbatim(playlists, identity):
    pl = playlists.create(identity, "uploads")
    item = playlists.add_item(
        identity,
        pl.id,
        {"type": "mp3", "fileUrl": "/uploads/1-song.mp3", "originalName": "song.mp3"},
    )
    assert item.to_dict()["fileUrl"] == "/uploads/1-song.mp3"
    assert item.to_dict()["originalName"] == "song.mp3"


@pytest.mark.unit
def test_add_item_to_unknown_playlist_raises_not_found(playlists, identity):
    with pytest.raises(NotFound):
        playlists.add_item(identity, "pl-missing", {"type": "youtube"})


@pytest.mark.unit
def test_add_item_requires_object_payload(playlists, identity):
    pl = playlists.create(identity, "mix")
    with pytest.raises(BadRequest):
        playlists.add_item(identity, pl.id, ["not", "an", "object"])


@pytest.mark.unit
def test_add_then_remove_item_restores_item_count(playlists, identity):
    pl = playlists.create(identity, "mix")
    playlists.add_item(identity, pl.id, {"type": "youtube", "videoId": "keep"})
    before = len(playlists.get(identity, pl.id).items)

    item = playlists.add_item(identity, pl.id, {"type": "youtube", "videoId": "temp"})
    playlists.remove_item(identity, pl.id, item.item_id)

    assert len(playlists.get(identity, pl.id).items) == before


@pytest.mark.unit
def test_remove_absent_item_is_a_noop(playlists, identity):
    pl = playlists.create(identity, "mix")
    playlists.add_item(identity, pl.id, {"type": "youtube", "videoId": "keep"})
    playlists.remove_item(identity, pl.id, "it-missing")
    assert len(playlists.get(identity, pl.id).items) == 1


@pytest.mark.unit
def test_remove_item_from_unknown_playlist_raises_not_found(playlists, identity):
    with pytest.raises(NotFound):
        playlists.remove_item(identity, "pl-missing", "it-1")


@pytest.mark.unit
@pytest.mark.parametrize(
    "given, expected",
    [("7", 7), ("abc", 0), ("", 0), (None, 0), (5, 5), ("7.9", 7), (12, 10), (-3, 0), ("nan", 0),
     (10 ** 400, 10), (-(10 ** 400), 0), ("1e400", 0), (7.9, 7)],
)
def test_rate_stores_numeric_value(playlists, identity, given, expected):
    pl = playlists.create(identity, "mix")
    item = playlists.add_item(identity, pl.id, {"type": "youtube", "videoId": "v"})

    playlists.rate(identity, pl.id, item.item_id, given)

    assert playlists.get(identity, pl.id).find_item(item.item_id).rating == expected


@pytest.mark.unit
def test_rate_unknown_playlist_or_item_raises_not_found(playlists, identity):
    pl = playlists.create(identity, "mix")
    with pytest.raises(NotFound):
        playlists.rate(identity, "pl-missing", "it-1", 5)
    with pytest.raises(NotFound):
        playlists.rate(identity, pl.id, "it-missing", 5)


@pytest.mark.unit
def test_playlists_are_scoped_to_their_owner(json_store, playlists, identity):
    json_store.add(
        User(username="bob", password_hash="hash", first_name="Bob", image_url="http://img/bob.png")
    )
    bob = Identity(username="bob", first_name="Bob", image_url="http://img/bob.png")
    pl = playlists.create(identity, "alice only")

    assert playlists.list(bob) == []
    with pytest.raises(NotFound):
        playlists.get(bob, pl.id)
