"""Data models for Spotify items, contexts and playback requests."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Mapping, Optional, Union

from .utils import format_duration, map_join


class ItemType(enum.Enum):
    """The kind of item a Spotify id refers to."""

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    USER = "user"


@dataclass(frozen=True)
class SpotifyId:
    """A typed Spotify identifier."""

    item_type: ItemType
    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("empty Spotify id")
        if self.item_type is not ItemType.USER and not (
            self.id.isascii() and self.id.isalnum()
        ):
            raise ValueError(f"invalid {self.item_type.value} id: {self.id!r}")

    @classmethod
    def from_uri(cls, uri: str) -> SpotifyId:
        """Parse a ``spotify:{type}:{id}`` URI."""
        parts = uri.split(":", 2)
        if len(parts) != 3 or parts[0] != "spotify":
            raise ValueError(f"invalid Spotify URI: {uri!r}")
        try:
            item_type = ItemType(parts[1])
        except ValueError:
            raise ValueError(f"unknown item type in URI: {uri!r}") from None
        return cls(item_type, parts[2])

    def uri(self) -> str:
        return f"spotify:{self.item_type.value}:{self.id}"

    def __str__(self) -> str:
        return self.uri()


class RepeatState(enum.Enum):
    OFF = "off"
    TRACK = "track"
    CONTEXT = "context"


def _artists_from_api(items: Any) -> list[Artist]:
    artists = (Artist.from_api(a) for a in items or [])
    return [a for a in artists if a is not None]


@dataclass
class Artist:
    """A Spotify artist."""

    id: SpotifyId
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Optional[Artist]:
        if not data.get("id"):
            return None
        return cls(SpotifyId(ItemType.ARTIST, data["id"]), data["name"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id.id, "name": self.name}

    def __str__(self) -> str:
        return self.name


@dataclass
class Album:
    """A Spotify album."""

    id: SpotifyId
    release_date: str
    name: str
    artists: list[Artist] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Optional[Album]:
        if not data.get("id"):
            return None
        return cls(
            id=SpotifyId(ItemType.ALBUM, data["id"]),
            release_date=data.get("release_date") or "",
            name=data["name"],
            artists=_artists_from_api(data.get("artists")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.id,
            "release_date": self.release_date,
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
        }

    def __str__(self) -> str:
        return f"{self.name} • {map_join(self.artists, lambda a: a.name, ', ')}"


@dataclass
class Track:
    """A Spotify track."""

    id: SpotifyId
    name: str
    artists: list[Artist]
    album: Optional[Album]
    duration: timedelta
    explicit: bool
    added_at: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Optional[Track]:
        """Build a track from a simplified or full API track; unplayable or
        id-less tracks give ``None``."""
        is_playable = data.get("is_playable")
        if is_playable is not None and not is_playable:
            return None
        linked_from = data.get("linked_from")
        if linked_from:
            raw_id = linked_from["id"]
        else:
            raw_id = data.get("id")
            if not raw_id:
                return None
        album_data = data.get("album")
        return cls(
            id=SpotifyId(ItemType.TRACK, raw_id),
            name=data["name"],
            artists=_artists_from_api(data.get("artists")),
            album=Album.from_api(album_data) if album_data else None,
            duration=timedelta(milliseconds=data.get("duration_ms", 0)),
            explicit=bool(data.get("explicit", False)),
        )

    def artists_info(self) -> str:
        return map_join(self.artists, lambda a: a.name, ", ")

    def album_info(self) -> str:
        return self.album.name if self.album is not None else ""

    def display_name(self) -> str:
        return f"{self.name} (E)" if self.explicit else self.name

    def to_dict(self) -> dict[str, Any]:
        """Serializable form of the track; ``added_at`` is left out."""
        return {
            "id": self.id.id,
            "name": self.name,
            "artists": [a.to_dict() for a in self.artists],
            "album": self.album.to_dict() if self.album is not None else None,
            "duration": format_duration(self.duration),
            "explicit": self.explicit,
        }

    def __str__(self) -> str:
        return f"{self.display_name()} • {self.artists_info()} ▎ {self.album_info()}"


@dataclass
class Playlist:
    """A Spotify playlist; ``owner`` is ``(display name, user id)``."""

    id: SpotifyId
    collaborative: bool
    name: str
    owner: tuple[str, SpotifyId]

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Playlist:
        owner = data["owner"]
        return cls(
            id=SpotifyId(ItemType.PLAYLIST, data["id"]),
            collaborative=bool(data.get("collaborative", False)),
            name=data["name"],
            owner=(owner.get("display_name") or "", SpotifyId(ItemType.USER, owner["id"])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id.id,
            "collaborative": self.collaborative,
            "name": self.name,
            "owner": [self.owner[0], self.owner[1].id],
        }

    def __str__(self) -> str:
        return f"{self.name} • {self.owner[0]}"


@dataclass
class Category:
    """A Spotify browse category."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Category:
        return cls(id=data["id"], name=data["name"])

    def __str__(self) -> str:
        return self.name


@dataclass
class Device:
    """A Spotify Connect device."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Optional[Device]:
        if not data.get("id"):
            return None
        return cls(id=data["id"], name=data["name"])


@dataclass(frozen=True)
class TracksId:
    """Identifier of a generic list of tracks (top tracks, liked tracks, ...)."""

    uri: str
    kind: str


USER_TOP_TRACKS_ID = TracksId("tracks:user-top-tracks", "Top Tracks")
USER_RECENTLY_PLAYED_TRACKS_ID = TracksId(
    "tracks:user-recently-played-tracks", "Recently Played Tracks"
)
USER_LIKED_TRACKS_ID = TracksId("tracks:user-liked-tracks", "Liked Tracks")

_CONTEXT_ITEM_TYPES = (ItemType.PLAYLIST, ItemType.ALBUM, ItemType.ARTIST)


@dataclass(frozen=True)
class ContextId:
    """Identifier of a playing context: a playlist, album, artist or track list."""

    id: Union[SpotifyId, TracksId]

    def __post_init__(self) -> None:
        if isinstance(self.id, SpotifyId) and self.id.item_type not in _CONTEXT_ITEM_TYPES:
            raise ValueError(f"{self.id.item_type.value} is not a context type")

    def uri(self) -> str:
        if isinstance(self.id, TracksId):
            return self.id.uri
        return self.id.uri()


@dataclass
class PlaylistContext:
    playlist: Playlist
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return f"{self.playlist.name} | {self.playlist.owner[0]} | {len(self.tracks)} songs"


@dataclass
class AlbumContext:
    album: Album
    tracks: list[Track] = field(default_factory=list)

    def description(self) -> str:
        return f"{self.album.name} | {self.album.release_date} | {len(self.tracks)} songs"


@dataclass
class ArtistContext:
    artist: Artist
    top_tracks: list[Track] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    related_artists: list[Artist] = field(default_factory=list)

    def description(self) -> str:
        return self.artist.name


@dataclass
class TracksContext:
    tracks: list[Track]
    desc: str

    def description(self) -> str:
        return f"{self.desc} | {len(self.tracks)} songs"


Context = Union[PlaylistContext, AlbumContext, ArtistContext, TracksContext]


@dataclass
class SearchResults:
    """Results of a search query."""

    tracks: list[Track] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    albums: list[Album] = field(default_factory=list)
    playlists: list[Playlist] = field(default_factory=list)


class TrackOrder(enum.Enum):
    """An order in which tracks can be sorted."""

    ADDED_AT = "added_at"
    TRACK_NAME = "track_name"
    ALBUM = "album"
    ARTISTS = "artists"
    DURATION = "duration"

    def _key(self, track: Track) -> Any:
        if self is TrackOrder.ADDED_AT:
            return track.added_at
        if self is TrackOrder.TRACK_NAME:
            return track.name
        if self is TrackOrder.ALBUM:
            return track.album_info()
        if self is TrackOrder.DURATION:
            return track.duration
        return track.artists_info()

    def compare(self, x: Track, y: Track) -> int:
        """Return -1, 0 or 1 as ``x`` sorts before, equal to or after ``y``."""
        a, b = self._key(x), self._key(y)
        return (a > b) - (a < b)


Offset = Union[int, str]


@dataclass
class Playback:
    """Data to start a new playback: either a context or a list of track ids,
    with an optional offset (a track URI or an absolute position)."""

    context: Optional[ContextId] = None
    uris: list[SpotifyId] = field(default_factory=list)
    offset: Optional[Offset] = None

    def __post_init__(self) -> None:
        if self.context is not None and self.uris:
            raise ValueError("a playback has either a context or a list of tracks")

    def uri_offset(self, uri: str, limit: int) -> Playback:
        """Create a playback starting at ``uri``; long track lists are narrowed
        to at most ``limit`` tracks around that track."""
        if self.context is not None:
            return Playback(context=self.context, offset=uri)
        ids = self.uris
        if len(ids) < limit:
            window = list(ids)
        else:
            pos = next((i for i, track_id in enumerate(ids) if track_id.uri() == uri), 0)
            left = max(pos - limit // 2, 0)
            right = min(left + limit, len(ids))
            window = ids[left:right]
        return Playback(uris=window, offset=uri)