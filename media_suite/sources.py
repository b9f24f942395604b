from __future__ import annotations

from typing import Dict, Protocol, Type

from .types import ADAPTER_BANNER, API, LOCAL, STREAM
from .utils import banner, emit, matches_token


class Source(Protocol):
    """Gives uniform access to media regardless of where it lives."""

    def connect(self, media_name: str) -> None:
        ...


class LocalSource:
    def connect(self, media_name: str) -> None:
        emit(f"Opening local file: {media_name}")


class StreamSource:
    def connect(self, media_name: str) -> None:
        emit(f"Accessing HLS stream: {media_name}")


class ApiSource:
    def connect(self, media_name: str) -> None:
        emit(f"Requesting media from remote API: {media_name}")


_SOURCES: Dict[str, Type[Source]] = {
    LOCAL: LocalSource,
    STREAM: StreamSource,
    API: ApiSource,
}


def select_source(source_type: str | None) -> Source:
    """Pick a source from a type token; anything unrecognized is a local file."""
    for token, source_cls in _SOURCES.items():
        if matches_token(source_type, token):
            return source_cls()
    return _SOURCES[LOCAL]()


class MediaApp:
    def __init__(self, source: Source):
        self._source = source

    def play_media(self, media_name: str) -> None:
        banner(ADAPTER_BANNER)
        self._source.connect(media_name)
