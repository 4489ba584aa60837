from datetime import timedelta
from functools import cmp_to_key

import pytest

from spotui.model import (
    USER_LIKED_TRACKS_ID,
    USER_TOP_TRACKS_ID,
    Album,
    AlbumContext,
    Artist,
    ArtistContext,
    Category,
    ContextId,
    Device,
    ItemType,
    Playback,
    Playlist,
    PlaylistContext,
    SpotifyId,
    Track,
    TrackOrder,
    TracksContext,
)


def make_track(name="Song", track_id="t1", explicit=False, album=True, ms=125000, artists=("A1",)):
    data = {
        "id": track_id,
        "name": name,
        "artists": [{"id": f"ar{i}", "name": n} for i, n in enumerate(artists)],
        "duration_ms": ms,
        "explicit": explicit,
    }
    if album:
        data["album"] = {
            "id": "al1",
            "name": "Record",
            "release_date": "2020",
            "artists": [{"id": "ar0", "name": "A1"}],
        }
    return Track.from_api(data)


def test_spotify_id_round_trip():
    uri = "spotify:track:abc123XYZ"
    parsed = SpotifyId.from_uri(uri)
    assert parsed.item_type is ItemType.TRACK
    assert parsed.id == "abc123XYZ"
    assert parsed.uri() == uri
    assert str(parsed) == uri


@pytest.mark.parametrize(
    "uri", ["track:abc", "spotify:track", "spotify:movie:abc", "spotify:track:a-b", "spotify:album:"]
)
def test_spotify_id_invalid(uri):
    with pytest.raises(ValueError):
        SpotifyId.from_uri(uri)


def test_user_id_allows_any_characters():
    assert SpotifyId.from_uri("spotify:user:some.user").id == "some.user"


def test_track_from_api_fields():
    track = make_track(artists=("A1", "A2"))
    assert track.id == SpotifyId(ItemType.TRACK, "t1")
    assert track.duration == timedelta(milliseconds=125000)
    assert track.artists_info() == "A1, A2"
    assert track.album_info() == "Record"
    assert track.added_at == 0


def test_track_uses_linked_from_id():
    track = Track.from_api(
        {"id": "relinked", "linked_from": {"id": "orig"}, "name": "x", "artists": [], "duration_ms": 0}
    )
    assert track.id.id == "orig"


def test_unplayable_track_is_dropped():
    assert Track.from_api({"id": "t", "name": "x", "is_playable": False}) is None


def test_track_without_id_is_dropped():
    assert Track.from_api({"id": None, "name": "x"}) is None


def test_track_without_album_has_empty_album_info():
    track = make_track(album=False)
    assert track.album is None
    assert track.album_info() == ""


def test_display_name_marks_explicit():
    assert make_track(explicit=True).display_name() == "Song (E)"
    assert make_track(explicit=False).display_name() == "Song"


def test_track_str():
    assert str(make_track()) == "Song • A1 ▎ Record"


def test_track_to_dict_formats_duration_and_skips_added_at():
    data = make_track().to_dict()
    assert data["duration"] == "2:05"
    assert "added_at" not in data
    assert data["album"]["name"] == "Record"


def test_artists_without_id_are_skipped():
    album = Album.from_api({"id": "al", "name": "N", "artists": [{"id": None, "name": "X"}, {"id": "b", "name": "Y"}]})
    assert [a.name for a in album.artists] == ["Y"]
    assert album.release_date == ""
    assert str(album) == "N • Y"


def test_playlist_from_api():
    playlist = Playlist.from_api(
        {"id": "p1", "name": "Mix", "collaborative": True, "owner": {"id": "bob", "display_name": None}}
    )
    assert playlist.owner == ("", SpotifyId(ItemType.USER, "bob"))
    assert playlist.collaborative is True
    assert str(playlist) == "Mix • "


def test_category_and_device():
    assert str(Category.from_api({"id": "c", "name": "Pop"})) == "Pop"
    assert Device.from_api({"id": None, "name": "Phone"}) is None
    assert Device.from_api({"id": "d", "name": "Phone"}) == Device("d", "Phone")


def test_tracks_id_constants():
    assert ContextId(USER_TOP_TRACKS_ID).uri() == "tracks:user-top-tracks"
    assert USER_LIKED_TRACKS_ID.kind == "Liked Tracks"


def test_context_id_uri_for_spotify_id():
    sid = SpotifyId(ItemType.ALBUM, "al1")
    assert ContextId(sid).uri() == sid.uri()


def test_context_id_rejects_track():
    with pytest.raises(ValueError):
        ContextId(SpotifyId(ItemType.TRACK, "t"))


def test_context_descriptions():
    track = make_track()
    album = track.album
    playlist = Playlist(SpotifyId(ItemType.PLAYLIST, "p"), False, "Mix", ("Bob", SpotifyId(ItemType.USER, "bob")))
    artist = Artist(SpotifyId(ItemType.ARTIST, "a"), "Singer")
    assert AlbumContext(album, [track, track]).description() == "Record | 2020 | 2 songs"
    assert PlaylistContext(playlist, [track]).description() == "Mix | Bob | 1 songs"
    assert ArtistContext(artist).description() == "Singer"
    assert TracksContext([], "Top Tracks").description() == "Top Tracks | 0 songs"


def test_track_order_sorting():
    a = make_track(name="b", ms=3000)
    b = make_track(name="a", ms=5000)
    a.added_at, b.added_at = 2, 1
    assert sorted([a, b], key=cmp_to_key(TrackOrder.TRACK_NAME.compare)) == [b, a]
    assert sorted([b, a], key=cmp_to_key(TrackOrder.DURATION.compare)) == [a, b]
    assert sorted([a, b], key=cmp_to_key(TrackOrder.ADDED_AT.compare)) == [b, a]
    assert TrackOrder.ALBUM.compare(a, b) == 0


def test_playback_context_offset():
    ctx = ContextId(SpotifyId(ItemType.PLAYLIST, "p"))
    result = Playback(context=ctx).uri_offset("spotify:track:x", 10)
    assert result.context == ctx
    assert result.offset == "spotify:track:x"


def test_playback_uris_short_list_kept():
    ids = [SpotifyId(ItemType.TRACK, f"t{i}") for i in range(3)]
    result = Playback(uris=ids).uri_offset(ids[1].uri(), 10)
    assert result.uris == ids
    assert result.offset == ids[1].uri()


def test_playback_uris_long_list_window_contains_track():
    ids = [SpotifyId(ItemType.TRACK, f"t{i}") for i in range(50)]
    target = ids[30]
    result = Playback(uris=ids).uri_offset(target.uri(), 10)
    assert len(result.uris) == 10
    assert target in result.uris
    assert result.uris == ids[25:35]


def test_playback_uris_unknown_track_starts_at_beginning():
    ids = [SpotifyId(ItemType.TRACK, f"t{i}") for i in range(20)]
    result = Playback(uris=ids).uri_offset("spotify:track:missing", 5)
    assert result.uris == ids[:5]


def test_playback_rejects_both_modes():
    with pytest.raises(ValueError):
        Playback(context=ContextId(USER_TOP_TRACKS_ID), uris=[SpotifyId(ItemType.TRACK, "t")])