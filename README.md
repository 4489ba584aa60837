# spotui

`spotui` is the state layer of a terminal music player client. It holds the
data the client works with and the state of its screens. It has no
dependencies outside the standard library.

## What is in it

- `spotui.model`: `SpotifyId` and `ItemType`, which parse and build
  `spotify:{type}:{id}` URIs. `Track`, `Album`, `Artist`, `Playlist`,
  `Category` and `Device` each have a `from_api` constructor that takes an
  API payload. For a track with no id, or one marked unplayable, `from_api`
  returns `None`. The module also has context ids (`ContextId`, `TracksId`),
  the four context kinds (`PlaylistContext`, `AlbumContext`,
  `ArtistContext`, `TracksContext`) with their `description()`, and
  `SearchResults`. `TrackOrder.compare` is a three-way comparison.
  `Playback.uri_offset` starts a playback at a track URI, and cuts long
  track lists down to at most `limit` tracks around that track. The
  constants `USER_TOP_TRACKS_ID`, `USER_RECENTLY_PLAYED_TRACKS_ID` and
  `USER_LIKED_TRACKS_ID` name the built-in track lists.
- `spotui.data`: `TtlCache` is a bounded cache. Each entry has its own
  time-to-live. When the cache is full it drops expired entries first and
  then the oldest entry. The clock can be swapped out. `Caches` holds the
  context, search, lyrics and image caches, 64 entries each. `UserData`
  holds the user's library and has `modifiable_playlists()` and
  `is_liked_track()`. `BrowseData` and `AppData` hold the rest; use
  `AppData.get_tracks_by_id` to get the track list of a cached context.
  `CACHE_DURATION` is three hours.
- `spotui.player`: `CurrentPlayback.from_api` reads a playback payload.
  `PlayerState` stores the playback together with the time of its last
  update. It estimates the current progress from that time, and lays the
  buffered `SimplifiedPlayback` metadata over the stored playback. It also
  works out the playing context id, including from
  `spotify:user:{user}:{type}:{id}` URIs.
- `spotui.page`: the page states `LibraryPage`, `ContextPage`,
  `SearchPage`, `BrowsePage` and `LyricPage`, with their list and table
  selections. It has the focus enums, which cycle with `next()` and
  `previous()`. The functions `page_type`, `focus_window_state`, `select`,
  `selected`, `focus_next` and `focus_previous` work on any page.
- `spotui.popup`: the popup states, `ActionListItem`, and `list_state`,
  `list_selected` and `list_select` for list popups.
- `spotui.ui`: `UIState` holds the page history, the open popup and the
  search filtering (`search_filtered_items`, built on `is_match`).
- `spotui.hooks`: player events (`ChangedEvent`, `PlayingEvent`,
  `PausedEvent`, `EndOfTrackEvent`) and `execute_player_event_hook_command`.
  `volume_percent_to_level` converts a 0-100 volume to the 0-65535 scale.
  Values above 100 are clamped. Negative values raise `ValueError`.
- `spotui.utils`: `format_duration`, `map_join`, `parse_uri`,
  `get_track_album_image_url` and `sanitize_file_name`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Sort tracks by their artists:

```python
import functools

from spotui.model import TrackOrder

tracks.sort(key=functools.cmp_to_key(TrackOrder.ARTISTS.compare))
```

Find the playlists the user can probably change. These are the playlists the
user owns and the collaborative ones. With no user set, the list is empty:

```python
from spotui.data import UserData

user_data = UserData(user={"id": "someone"}, playlists=playlists)
editable = user_data.modifiable_playlists()
```

Narrow a list of items with a search popup. An item matches when its text
contains every space-separated word of the query, ignoring case:

```python
from spotui.popup import SearchPopup
from spotui.ui import UIState

ui = UIState()
ui.popup = SearchPopup(query="daft punk")
matches = ui.search_filtered_items(tracks)
```

Move the focus on the current page:

```python
from spotui.page import focus_next, selected

page = ui.current_page()
focus_next(page)
assert selected(page) == 0
```

Run a hook command on a player event:

```python
from spotui.hooks import HookCommand, PlayingEvent, execute_player_event_hook_command
from spotui.model import SpotifyId

track_id = SpotifyId.from_uri("spotify:track:4uLU6hMCjMI75M1A2tKUQC")
cmd = HookCommand(command="notify-hook", args=["--verbose"])
execute_player_event_hook_command(cmd, PlayingEvent(track_id, 1000, 200000))
```

The command runs with `--verbose Playing spotify:track:4uLU6hMCjMI75M1A2tKUQC
1000 200000` as its arguments. If it exits with a non-zero status,
`HookCommandError` is raised and carries the command's standard error.

## What it does not do

`spotui` holds state only. It does not:

- talk to the music service's web API or fetch tokens;
- stream or play audio;
- draw anything on the terminal;
- read configuration, themes or keymaps.

It has no command to run. The `theme` field of `UIState` and the lyrics and
image caches hold whatever values the caller puts in them.