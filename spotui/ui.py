"""The application's UI state: page history, popup and input."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TypeVar

from .model import ContextId, TracksId
from .page import ContextPage, ContextPageType, LibraryPage, PageState
from .popup import PopupState, SearchPopup

T = TypeVar("T")


def is_match(text: str, query: str) -> bool:
    """Whether ``text`` contains every space-separated word of ``query``."""
    return all(word in text for word in query.split(" "))


def _default_history() -> list[PageState]:
    return [LibraryPage()]


@dataclass
class UIState:
    """The application's UI state."""

    is_running: bool = True
    theme: Any = None
    input_key_sequence: list[Any] = field(default_factory=list)
    history: list[PageState] = field(default_factory=_default_history)
    popup: Optional[PopupState] = None
    playback_progress_bar_rect: tuple[int, int, int, int] = (0, 0, 0, 0)
    last_cover_image_render_info: Optional[tuple[str, float]] = None

    def current_page(self) -> PageState:
        if not self.history:
            raise RuntimeError("history must not be empty")
        return self.history[-1]

    def create_new_page(self, page: PageState) -> None:
        self.history.append(page)
        self.popup = None

    def create_new_radio_page(self, uri: str) -> None:
        self.create_new_page(
            ContextPage(
                id=None,
                context_page_type=ContextPageType(
                    ContextId(TracksId(f"radio:{uri}", "Recommendations"))
                ),
                state=None,
            )
        )

    def has_focused_popup(self) -> bool:
        """Whether a popup holds the focus; an open search popup does not."""
        return self.popup is not None and not isinstance(self.popup, SearchPopup)

    def search_filtered_items(self, items: Sequence[T]) -> list[T]:
        """The items, filtered by the search popup's query if one is open."""
        if isinstance(self.popup, SearchPopup):
            query = self.popup.query.lower()
            return [item for item in items if is_match(str(item).lower(), query)]
        return list(items)