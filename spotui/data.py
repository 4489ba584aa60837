"""The application's data: user library, browse data and expiring caches."""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Generic, Optional, TypeVar, Union

from .model import (
    AlbumContext,
    ArtistContext,
    Category,
    Context,
    ContextId,
    Playlist,
    PlaylistContext,
    SearchResults,
    Track,
    TracksContext,
    Album,
    Artist,
)

K = TypeVar("K")
V = TypeVar("V")

CACHE_DURATION = timedelta(hours=3)
CACHE_CAPACITY = 64


class TtlCache(Generic[K, V]):
    """A bounded cache whose entries expire after their own time-to-live.

    When the cache is full, expired entries are dropped first and then the
    oldest inserted entry is evicted.
    """

    def __init__(self, capacity: int, clock: Callable[[], float] = time.monotonic) -> None:
        self._capacity = capacity
        self._clock = clock
        self._entries: OrderedDict[K, tuple[V, float]] = OrderedDict()

    def _is_expired(self, expires_at: float) -> bool:
        return expires_at <= self._clock()

    def _purge_expired(self) -> None:
        expired = [k for k, (_, exp) in self._entries.items() if self._is_expired(exp)]
        for key in expired:
            del self._entries[key]

    def get(self, key: K) -> Optional[V]:
        """Return the live value stored under ``key``, or ``None``."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._is_expired(expires_at):
            del self._entries[key]
            return None
        return value

    def insert(self, key: K, value: V, ttl: Union[timedelta, float]) -> Optional[V]:
        """Store ``value`` for ``ttl`` (a timedelta or seconds); return the
        previous live value under ``key``, if any."""
        seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
        old = self.remove(key)
        if self._capacity <= 0:
            return old
        if len(self._entries) >= self._capacity:
            self._purge_expired()
        while len(self._entries) >= self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = (value, self._clock() + seconds)
        return old

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key``; return its value if it was still live."""
        entry = self._entries.pop(key, None)
        if entry is None:
            return None
        value, expires_at = entry
        return None if self._is_expired(expires_at) else value

    def __contains__(self, key: object) -> bool:
        return self.get(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        self._purge_expired()
        return len(self._entries)


def _new_cache() -> TtlCache[str, Any]:
    return TtlCache(CACHE_CAPACITY)


@dataclass
class Caches:
    """The application's caches, keyed by URI or query."""

    context: TtlCache[str, Context] = field(default_factory=_new_cache)
    search: TtlCache[str, SearchResults] = field(default_factory=_new_cache)
    lyrics: TtlCache[str, Any] = field(default_factory=_new_cache)
    images: TtlCache[str, Any] = field(default_factory=_new_cache)


@dataclass
class UserData:
    """The current user's data; ``user`` is the raw user profile."""

    user: Optional[Mapping[str, Any]] = None
    playlists: list[Playlist] = field(default_factory=list)
    followed_artists: list[Artist] = field(default_factory=list)
    saved_albums: list[Album] = field(default_factory=list)
    saved_tracks: dict[str, Track] = field(default_factory=dict)

    def modifiable_playlists(self) -> list[Playlist]:
        """Playlists that are possibly modifiable by the user."""
        if self.user is None:
            return []
        user_id = self.user["id"]
        return [p for p in self.playlists if p.owner[1].id == user_id or p.collaborative]

    def is_liked_track(self, track: Track) -> bool:
        return track.id.uri() in self.saved_tracks


@dataclass
class BrowseData:
    categories: list[Category] = field(default_factory=list)
    category_playlists: dict[str, list[Playlist]] = field(default_factory=dict)


@dataclass
class AppData:
    """The application's data."""

    user_data: UserData = field(default_factory=UserData)
    caches: Caches = field(default_factory=Caches)
    browse: BrowseData = field(default_factory=BrowseData)

    def get_tracks_by_id(self, context_id: ContextId) -> Optional[list[Track]]:
        """Return the (mutable) track list of a cached context."""
        context = self.caches.context.get(context_id.uri())
        if context is None:
            return None
        if isinstance(context, ArtistContext):
            return context.top_tracks
        if isinstance(context, (AlbumContext, PlaylistContext, TracksContext)):
            return context.tracks
        raise TypeError(f"unexpected context: {context!r}")