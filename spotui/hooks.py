"""Player events and the user-configured command run on each of them."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from typing import Union

from .model import SpotifyId

MAX_VOLUME_LEVEL = 65535


class HookCommandError(Exception):
    """The player event hook command exited unsuccessfully."""


@dataclass
class HookCommand:
    """A command with its leading arguments."""

    command: str
    args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChangedEvent:
    old_track_id: SpotifyId
    new_track_id: SpotifyId

    def args(self) -> list[str]:
        return ["Changed", str(self.old_track_id), str(self.new_track_id)]


@dataclass(frozen=True)
class PlayingEvent:
    track_id: SpotifyId
    position_ms: int
    duration_ms: int

    def args(self) -> list[str]:
        return ["Playing", str(self.track_id), str(self.position_ms), str(self.duration_ms)]


@dataclass(frozen=True)
class PausedEvent:
    track_id: SpotifyId
    position_ms: int
    duration_ms: int

    def args(self) -> list[str]:
        return ["Paused", str(self.track_id), str(self.position_ms), str(self.duration_ms)]


@dataclass(frozen=True)
class EndOfTrackEvent:
    track_id: SpotifyId

    def args(self) -> list[str]:
        return ["EndOfTrack", str(self.track_id)]


PlayerEvent = Union[ChangedEvent, PlayingEvent, PausedEvent, EndOfTrackEvent]


def volume_percent_to_level(volume: int) -> int:
    """Convert a 0-100 volume percentage (larger values are clamped) into the
    player's 0-65535 volume level."""
    if volume < 0:
        raise ValueError(f"volume must not be negative: {volume}")
    scaled = min(volume, 100) / 100.0 * MAX_VOLUME_LEVEL
    return int(scaled + 0.5)


def execute_player_event_hook_command(cmd: HookCommand, event: PlayerEvent) -> None:
    """Run ``cmd`` with the event's arguments appended.

    Raises HookCommandError carrying the command's stderr if it fails.
    """
    result = subprocess.run(
        [cmd.command, *cmd.args, *event.args()],
        capture_output=True,
        check=False,
    )
    if result.returncode != 0:
        raise HookCommandError(result.stderr.decode("utf-8"))