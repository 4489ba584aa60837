"""Page states of the application's UI and their focusable windows."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from .model import Category, ContextId, ItemType, TracksId


@dataclass
class ListState:
    """Selection state of a list window."""

    selected: Optional[int] = 0
    offset: int = 0


@dataclass
class TableState:
    """Selection state of a table window."""

    selected: Optional[int] = 0
    offset: int = 0


WindowState = Union[ListState, TableState]


def _step(member: enum.Enum, offset: int):
    """The member ``offset`` places away from ``member``, cycling in definition order."""
    members = list(type(member))
    return members[(members.index(member) + offset) % len(members)]


class LibraryFocusState(enum.Enum):
    PLAYLISTS = "playlists"
    SAVED_ALBUMS = "saved_albums"
    FOLLOWED_ARTISTS = "followed_artists"

    def next(self) -> LibraryFocusState:
        return _step(self, 1)

    def previous(self) -> LibraryFocusState:
        return _step(self, -1)


class ArtistFocusState(enum.Enum):
    TOP_TRACKS = "top_tracks"
    ALBUMS = "albums"
    RELATED_ARTISTS = "related_artists"

    def next(self) -> ArtistFocusState:
        return _step(self, 1)

    def previous(self) -> ArtistFocusState:
        return _step(self, -1)


class SearchFocusState(enum.Enum):
    INPUT = "input"
    TRACKS = "tracks"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"

    def next(self) -> SearchFocusState:
        return _step(self, 1)

    def previous(self) -> SearchFocusState:
        return _step(self, -1)


class PageType(enum.Enum):
    LIBRARY = "library"
    CONTEXT = "context"
    SEARCH = "search"
    BROWSE = "browse"
    LYRIC = "lyric"


@dataclass
class LibraryPageUIState:
    playlist_list: ListState = field(default_factory=ListState)
    saved_album_list: ListState = field(default_factory=ListState)
    followed_artist_list: ListState = field(default_factory=ListState)
    focus: LibraryFocusState = LibraryFocusState.PLAYLISTS


@dataclass
class SearchPageUIState:
    track_list: ListState = field(default_factory=ListState)
    album_list: ListState = field(default_factory=ListState)
    artist_list: ListState = field(default_factory=ListState)
    playlist_list: ListState = field(default_factory=ListState)
    focus: SearchFocusState = SearchFocusState.INPUT


@dataclass
class ContextPageType:
    """Either the currently playing context (``browsing`` is None) or a browsed one."""

    browsing: Optional[ContextId] = None

    def title(self) -> str:
        if self.browsing is None:
            return "Current Playing"
        inner = self.browsing.id
        if isinstance(inner, TracksId):
            return inner.kind
        return {
            ItemType.PLAYLIST: "Playlist",
            ItemType.ALBUM: "Album",
            ItemType.ARTIST: "Artist",
        }[inner.item_type]


@dataclass
class ContextPageUIState:
    """Window states of a context page.

    ``kind`` is one of ``"playlist"``, ``"album"``, ``"artist"`` or ``"tracks"``.
    For an artist page ``track_table`` holds the top tracks and the list and
    focus fields are set; other kinds only have a track table.
    """

    kind: str
    track_table: TableState = field(default_factory=TableState)
    album_list: Optional[ListState] = None
    related_artist_list: Optional[ListState] = None
    focus: Optional[ArtistFocusState] = None

    @classmethod
    def new_playlist(cls) -> ContextPageUIState:
        return cls("playlist")

    @classmethod
    def new_album(cls) -> ContextPageUIState:
        return cls("album")

    @classmethod
    def new_artist(cls) -> ContextPageUIState:
        return cls(
            "artist",
            album_list=ListState(),
            related_artist_list=ListState(),
            focus=ArtistFocusState.TOP_TRACKS,
        )

    @classmethod
    def new_tracks(cls) -> ContextPageUIState:
        return cls("tracks")


@dataclass
class CategoryListState:
    state: ListState = field(default_factory=ListState)


@dataclass
class CategoryPlaylistListState:
    category: Category
    state: ListState = field(default_factory=ListState)


@dataclass
class LibraryPage:
    state: LibraryPageUIState = field(default_factory=LibraryPageUIState)


@dataclass
class ContextPage:
    id: Optional[ContextId]
    context_page_type: ContextPageType
    state: Optional[ContextPageUIState] = None


@dataclass
class SearchPage:
    input: str = ""
    current_query: str = ""
    state: SearchPageUIState = field(default_factory=SearchPageUIState)


@dataclass
class BrowsePage:
    state: Union[CategoryListState, CategoryPlaylistListState] = field(
        default_factory=CategoryListState
    )


@dataclass
class LyricPage:
    track: str
    artists: str
    scroll_offset: int = 0


PageState = Union[LibraryPage, ContextPage, SearchPage, BrowsePage, LyricPage]

_PAGE_TYPES = {
    LibraryPage: PageType.LIBRARY,
    ContextPage: PageType.CONTEXT,
    SearchPage: PageType.SEARCH,
    BrowsePage: PageType.BROWSE,
    LyricPage: PageType.LYRIC,
}


def page_type(page: PageState) -> PageType:
    """The type of the page."""
    try:
        return _PAGE_TYPES[type(page)]
    except KeyError:
        raise TypeError(f"not a page state: {page!r}") from None


def focus_window_state(page: PageState) -> Optional[WindowState]:
    """The state of the page's currently focused window, if any."""
    if isinstance(page, LibraryPage):
        s = page.state
        return {
            LibraryFocusState.PLAYLISTS: s.playlist_list,
            LibraryFocusState.SAVED_ALBUMS: s.saved_album_list,
            LibraryFocusState.FOLLOWED_ARTISTS: s.followed_artist_list,
        }[s.focus]
    if isinstance(page, SearchPage):
        s = page.state
        return {
            SearchFocusState.INPUT: None,
            SearchFocusState.TRACKS: s.track_list,
            SearchFocusState.ALBUMS: s.album_list,
            SearchFocusState.ARTISTS: s.artist_list,
            SearchFocusState.PLAYLISTS: s.playlist_list,
        }[s.focus]
    if isinstance(page, ContextPage):
        s = page.state
        if s is None:
            return None
        if s.kind == "artist":
            return {
                ArtistFocusState.TOP_TRACKS: s.track_table,
                ArtistFocusState.ALBUMS: s.album_list,
                ArtistFocusState.RELATED_ARTISTS: s.related_artist_list,
            }[s.focus]
        return s.track_table
    if isinstance(page, BrowsePage):
        return page.state.state
    return None


def select(page: PageState, index: int) -> None:
    """Select the ``index``-th item in the page's focused window."""
    window = focus_window_state(page)
    if window is not None:
        window.selected = index


def selected(page: PageState) -> Optional[int]:
    """The selected position in the page's focused window."""
    window = focus_window_state(page)
    return None if window is None else window.selected


def _focus_holder(page: PageState):
    if isinstance(page, (LibraryPage, SearchPage)):
        return page.state
    if isinstance(page, ContextPage) and page.state is not None and page.state.kind == "artist":
        return page.state
    return None


def _shift_focus(page: PageState, forward: bool) -> None:
    holder = _focus_holder(page)
    if holder is not None:
        holder.focus = holder.focus.next() if forward else holder.focus.previous()
    select(page, 0)


def focus_next(page: PageState) -> None:
    """Move the focus to the next window and reset its selection."""
    _shift_focus(page, True)


def focus_previous(page: PageState) -> None:
    """Move the focus to the previous window and reset its selection."""
    _shift_focus(page, False)