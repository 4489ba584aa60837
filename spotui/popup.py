"""Popup states of the application's UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .model import Album, Artist, Playlist, SpotifyId, Track
from .page import ListState


@dataclass(frozen=True)
class PlaylistPopupAction:
    """Browse a playlist, or add ``track_id`` to it when one is given."""

    track_id: Optional[SpotifyId] = None


class ArtistPopupAction(enum.Enum):
    BROWSE = "browse"
    GO_TO_RADIO = "go_to_radio"


@dataclass
class ActionListItem:
    """An item together with the actions that can be taken on it."""

    item: Union[Track, Artist, Album, Playlist]
    actions: list[Any] = field(default_factory=list)

    def n_actions(self) -> int:
        return len(self.actions)

    def name(self) -> str:
        return self.item.name

    def actions_desc(self) -> list[str]:
        return [a.name if isinstance(a, enum.Enum) else str(a) for a in self.actions]


@dataclass
class CommandHelpPopup:
    scroll_offset: int = 0


@dataclass
class SearchPopup:
    query: str = ""


@dataclass
class QueuePopup:
    scroll_offset: int = 0


@dataclass
class UserPlaylistListPopup:
    action: PlaylistPopupAction
    list_state: ListState = field(default_factory=ListState)


@dataclass
class UserFollowedArtistListPopup:
    list_state: ListState = field(default_factory=ListState)


@dataclass
class UserSavedAlbumListPopup:
    list_state: ListState = field(default_factory=ListState)


@dataclass
class DeviceListPopup:
    list_state: ListState = field(default_factory=ListState)


@dataclass
class ArtistListPopup:
    action: ArtistPopupAction
    artists: list[Artist]
    list_state: ListState = field(default_factory=ListState)


@dataclass
class ThemeListPopup:
    themes: list[Any]
    list_state: ListState = field(default_factory=ListState)


@dataclass
class ActionListPopup:
    item: ActionListItem
    list_state: ListState = field(default_factory=ListState)


PopupState = Union[
    CommandHelpPopup,
    SearchPopup,
    QueuePopup,
    UserPlaylistListPopup,
    UserFollowedArtistListPopup,
    UserSavedAlbumListPopup,
    DeviceListPopup,
    ArtistListPopup,
    ThemeListPopup,
    ActionListPopup,
]

_NON_LIST_POPUPS = (CommandHelpPopup, SearchPopup, QueuePopup)


def list_state(popup: PopupState) -> Optional[ListState]:
    """The list state of a list popup; ``None`` for other popups."""
    if isinstance(popup, _NON_LIST_POPUPS):
        return None
    return popup.list_state


def list_selected(popup: PopupState) -> Optional[int]:
    """The selected position of a list popup."""
    state = list_state(popup)
    return None if state is None else state.selected


def list_select(popup: PopupState, index: Optional[int]) -> None:
    """Select a position in a list popup; other popups are left unchanged."""
    state = list_state(popup)
    if state is not None:
        state.selected = index