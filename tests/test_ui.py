import pytest

from spotui.page import (
    ContextPage,
    LibraryFocusState,
    LibraryPage,
    SearchPage,
)
from spotui.popup import CommandHelpPopup, QueuePopup, SearchPopup
from spotui.ui import UIState, is_match


def test_default_state():
    ui = UIState()
    assert ui.is_running is True
    page = ui.current_page()
    assert isinstance(page, LibraryPage)
    assert page.state.focus is LibraryFocusState.PLAYLISTS
    assert ui.popup is None


def test_empty_history_raises():
    ui = UIState(history=[])
    with pytest.raises(RuntimeError):
        ui.current_page()


def test_create_new_page_clears_popup():
    ui = UIState(popup=QueuePopup())
    page = SearchPage()
    ui.create_new_page(page)
    assert ui.current_page() is page
    assert len(ui.history) == 2
    assert ui.popup is None


def test_create_new_radio_page():
    ui = UIState()
    ui.create_new_radio_page("spotify:track:abc")
    page = ui.current_page()
    assert isinstance(page, ContextPage)
    assert page.id is None
    assert page.state is None
    assert page.context_page_type.title() == "Recommendations"
    assert page.context_page_type.browsing.uri() == "radio:spotify:track:abc"


def test_has_focused_popup():
    assert UIState().has_focused_popup() is False
    assert UIState(popup=SearchPopup("x")).has_focused_popup() is False
    assert UIState(popup=CommandHelpPopup()).has_focused_popup() is True


def test_is_match():
    assert is_match("hello world", "world hello")
    assert not is_match("hello", "bye")
    assert is_match("anything", "")


def test_search_filtered_items_without_search_popup():
    items = ["A", "B"]
    assert UIState().search_filtered_items(items) == items


def test_search_filtered_items_case_insensitive():
    ui = UIState(popup=SearchPopup("ROCK song"))
    items = ["Rock Song", "rock ballad", "Pop song"]
    assert ui.search_filtered_items(items) == ["Rock Song"]