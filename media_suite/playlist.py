from __future__ import annotations

from typing import List, Protocol, Tuple

from .types import BONUS_TRACK, CHILL_MIX, CHILL_MIX_TRACKS, COMPOSITE_BANNER, MAIN_PLAYLIST
from .utils import banner, emit


class MediaItem(Protocol):
    def show_info(self) -> None:
        ...


class Track:
    def __init__(self, title: str):
        self.title = title

    def show_info(self) -> None:
        emit(f"Track: {self.title}")


class Playlist:
    """A titled, ordered collection of tracks and nested playlists."""

    def __init__(self, title: str):
        self.title = title
        self._items: List[MediaItem] = []

    @property
    def items(self) -> Tuple[MediaItem, ...]:
        return tuple(self._items)

    def add(self, item: MediaItem) -> None:
        # No duplicate or cycle checks: callers build a tree.
        self._items.append(item)

    def show_info(self) -> None:
        emit(f"Playlist: {self.title}")
        for item in self._items:
            item.show_info()


def build_demo_playlist(media_name: str) -> Playlist:
    main = Playlist(MAIN_PLAYLIST)
    main.add(Track(media_name))
    main.add(Track(BONUS_TRACK))
    mix = Playlist(CHILL_MIX)
    for title in CHILL_MIX_TRACKS:
        mix.add(Track(title))
    main.add(mix)
    return main


class PlaylistManager:
    def __init__(self, root: MediaItem):
        self._root = root

    def show_all(self) -> None:
        banner(COMPOSITE_BANNER)
        self._root.show_info()
