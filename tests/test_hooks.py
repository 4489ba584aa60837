import json
import sys

import pytest

from spotui.hooks import (
    ChangedEvent,
    EndOfTrackEvent,
    HookCommand,
    HookCommandError,
    PausedEvent,
    PlayingEvent,
    execute_player_event_hook_command,
    volume_percent_to_level,
)
from spotui.model import ItemType, SpotifyId

TRACK_A = SpotifyId(ItemType.TRACK, "aaa")
TRACK_B = SpotifyId(ItemType.TRACK, "bbb")


def test_changed_args():
    assert ChangedEvent(TRACK_A, TRACK_B).args() == [
        "Changed",
        "spotify:track:aaa",
        "spotify:track:bbb",
    ]


def test_playing_args():
    assert PlayingEvent(TRACK_A, 1000, 2000).args() == [
        "Playing",
        "spotify:track:aaa",
        "1000",
        "2000",
    ]


def test_paused_args():
    assert PausedEvent(TRACK_B, 5, 10).args() == ["Paused", "spotify:track:bbb", "5", "10"]


def test_end_of_track_args():
    assert EndOfTrackEvent(TRACK_A).args() == ["EndOfTrack", "spotify:track:aaa"]


def test_volume_bounds():
    assert volume_percent_to_level(0) == 0
    assert volume_percent_to_level(100) == 65535


def test_volume_is_clamped():
    assert volume_percent_to_level(250) == volume_percent_to_level(100)


def test_volume_is_monotonic():
    levels = [volume_percent_to_level(v) for v in range(101)]
    assert levels == sorted(levels)
    assert len(set(levels)) == 101


def test_volume_negative_rejected():
    with pytest.raises(ValueError):
        volume_percent_to_level(-1)


def test_hook_command_receives_event_args(tmp_path):
    out = tmp_path / "args.json"
    script = "import sys, json; open(sys.argv[1], 'w').write(json.dumps(sys.argv[2:]))"
    cmd = HookCommand(sys.executable, ["-c", script, str(out), "extra"])
    execute_player_event_hook_command(cmd, EndOfTrackEvent(TRACK_A))
    assert json.loads(out.read_text()) == ["extra", "EndOfTrack", "spotify:track:aaa"]


def test_hook_command_failure_reports_stderr():
    script = "import sys; sys.stderr.write('boom'); sys.exit(3)"
    cmd = HookCommand(sys.executable, ["-c", script])
    with pytest.raises(HookCommandError) as info:
        execute_player_event_hook_command(cmd, PausedEvent(TRACK_A, 1, 2))
    assert str(info.value) == "boom"


def test_missing_command_raises_os_error(tmp_path):
    cmd = HookCommand(str(tmp_path / "no-such-command"))
    with pytest.raises(OSError):
        execute_player_event_hook_command(cmd, EndOfTrackEvent(TRACK_B))