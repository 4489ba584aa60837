"""Small helpers shared by the application's state and UI code."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import timedelta
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")

_UNSAFE_FILE_NAME_CHARS = '?:*"<>|'


def format_duration(duration: timedelta) -> str:
    """Format a duration as ``{minutes}:{seconds}`` with two-digit seconds."""
    secs = int(duration.total_seconds())
    minutes, rem = divmod(abs(secs), 60)
    if secs < 0:
        minutes, rem = -minutes, -rem
    return f"{minutes}:{rem:02}"


def map_join(items: Iterable[T], func: Callable[[T], str], sep: str) -> str:
    """Join the mapped items with ``sep``.

    A separator is only inserted once the accumulated text is non-empty,
    so leading empty strings do not produce leading separators.
    """
    result = ""
    for item in items:
        part = func(item)
        result = result + sep + part if result else result + part
    return result


def get_track_album_image_url(track: Mapping[str, Any]) -> str | None:
    """Return the URL of the first image of a track's album, if any."""
    images = (track.get("album") or {}).get("images") or []
    if not images:
        return None
    return images[0]["url"]


def parse_uri(uri: str) -> str:
    """Normalise a ``spotify:user:{user_id}:{type}:{id}`` URI to ``spotify:{type}:{id}``."""
    parts = uri.split(":")
    if len(parts) == 5:
        return ":".join((parts[0], parts[3], parts[4]))
    return uri


def sanitize_file_name(uri: str, cache_folder: str | Path) -> str:
    """Strip characters that are unsafe in file names from the part of ``uri``
    that follows the image cache folder."""
    image_folder = str(Path(cache_folder) / "image")
    filename = uri.replace(image_folder, "")
    sanitized = "".join(ch for ch in filename if ch not in _UNSAFE_FILE_NAME_CHARS)
    return uri.replace(filename, sanitized)