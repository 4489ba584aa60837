"""Player state: devices, current playback and queue."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any, Optional

from .model import ContextId, Device, ItemType, RepeatState, SpotifyId
from .utils import parse_uri

_CONTEXT_TYPES = {
    "playlist": ItemType.PLAYLIST,
    "album": ItemType.ALBUM,
    "artist": ItemType.ARTIST,
}


@dataclass
class PlaybackDevice:
    """The device a playback runs on."""

    id: Optional[str]
    name: str
    volume_percent: Optional[int] = None


@dataclass
class PlaybackContext:
    """The context a playback runs in; ``type`` is the API's context type."""

    uri: str
    type: str


@dataclass
class CurrentPlayback:
    """The current playback as reported by the API; ``item`` is the raw item."""

    device: PlaybackDevice
    is_playing: bool
    repeat_state: RepeatState
    shuffle_state: bool
    progress: Optional[timedelta] = None
    context: Optional[PlaybackContext] = None
    item: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> CurrentPlayback:
        device = data["device"]
        context = data.get("context")
        progress_ms = data.get("progress_ms")
        return cls(
            device=PlaybackDevice(
                id=device.get("id"),
                name=device["name"],
                volume_percent=device.get("volume_percent"),
            ),
            is_playing=bool(data["is_playing"]),
            repeat_state=RepeatState(data["repeat_state"]),
            shuffle_state=bool(data["shuffle_state"]),
            progress=None if progress_ms is None else timedelta(milliseconds=progress_ms),
            context=PlaybackContext(context["uri"], context["type"]) if context else None,
            item=data.get("item"),
        )


@dataclass
class SimplifiedPlayback:
    """Playback metadata buffered to give fast feedback to the user."""

    device_name: str
    device_id: Optional[str]
    volume: Optional[int]
    is_playing: bool
    repeat_state: RepeatState
    shuffle_state: bool
    mute_state: Optional[int] = None

    @classmethod
    def from_playback(cls, playback: CurrentPlayback) -> SimplifiedPlayback:
        return cls(
            device_name=playback.device.name,
            device_id=playback.device.id,
            volume=playback.device.volume_percent,
            is_playing=playback.is_playing,
            repeat_state=playback.repeat_state,
            shuffle_state=playback.shuffle_state,
        )


@dataclass
class PlayerState:
    """The player's state."""

    devices: list[Device] = field(default_factory=list)
    playback: Optional[CurrentPlayback] = None
    playback_last_updated_time: Optional[float] = None
    buffered_playback: Optional[SimplifiedPlayback] = None
    queue: Optional[list[Mapping[str, Any]]] = None
    clock: Callable[[], float] = time.monotonic

    def update_playback(self, playback: Optional[CurrentPlayback]) -> None:
        """Store a freshly fetched playback and record when it was fetched."""
        self.playback = playback
        self.playback_last_updated_time = self.clock()

    def _elapsed(self, playback: CurrentPlayback) -> timedelta:
        if not playback.is_playing or self.playback_last_updated_time is None:
            return timedelta(0)
        return timedelta(seconds=self.clock() - self.playback_last_updated_time)

    def current_playback(self) -> Optional[CurrentPlayback]:
        """The estimated current playback, with progress advanced by the time
        since the last update and metadata taken from the buffered playback."""
        if self.playback is None:
            return None
        playback = replace(self.playback, device=replace(self.playback.device))
        if playback.progress is not None:
            playback.progress = playback.progress + self._elapsed(playback)
        buffered = self.buffered_playback
        if buffered is not None:
            playback.device.name = buffered.device_name
            playback.device.id = buffered.device_id
            playback.device.volume_percent = buffered.volume
            playback.is_playing = buffered.is_playing
            playback.repeat_state = buffered.repeat_state
            playback.shuffle_state = buffered.shuffle_state
        return playback

    def current_playing_track(self) -> Optional[Mapping[str, Any]]:
        """The raw track being played, if the playing item is a track."""
        if self.playback is None or self.playback.item is None:
            return None
        item = self.playback.item
        return item if item.get("type") == "track" else None

    def playback_progress(self) -> Optional[timedelta]:
        if self.playback is None or self.playback.progress is None:
            return None
        return self.playback.progress + self._elapsed(self.playback)

    def playing_context_id(self) -> Optional[ContextId]:
        """The id of the playing playlist, album or artist context."""
        if self.playback is None or self.playback.context is None:
            return None
        context = self.playback.context
        expected = _CONTEXT_TYPES.get(context.type)
        if expected is None:
            return None
        try:
            spotify_id = SpotifyId.from_uri(parse_uri(context.uri))
        except ValueError:
            return None
        if spotify_id.item_type is not expected:
            return None
        return ContextId(spotify_id)