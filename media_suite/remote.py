from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from .types import PROXY_BANNER
from .utils import banner, emit

logger = logging.getLogger(__name__)


class RemoteMedia(Protocol):
    def play_stream(self, media_name: str) -> None:
        ...


class RealRemoteMedia:
    def play_stream(self, media_name: str) -> None:
        emit(f"Streaming remote media: {media_name}")


class RemoteMediaProxy:
    """Stands in for a remote stream and keeps the last one it opened.

    The cache holds a single entry. A request for the cached name reuses the
    handle; any other request replaces it with a freshly built one.
    """

    def __init__(self, factory: Callable[[], RemoteMedia] = RealRemoteMedia):
        self._factory = factory
        self._real: Optional[RemoteMedia] = None
        self._cached_name: Optional[str] = None

    @property
    def cached_name(self) -> Optional[str]:
        return self._cached_name

    def play_stream(self, media_name: str) -> None:
        if self._real is None or self._cached_name != media_name:
            logger.debug("Cache miss for %r (cached: %r)", media_name, self._cached_name)
            emit(f"Caching remote stream for: {media_name}")
            self._real = self._factory()
            self._cached_name = media_name
        else:
            logger.debug("Cache hit for %r", media_name)
            emit(f"Using cached version for: {media_name}")
        self._real.play_stream(media_name)


class StreamController:
    def __init__(self, stream: RemoteMedia):
        self._stream = stream

    def play_stream(self, media_name: str) -> None:
        banner(PROXY_BANNER)
        self._stream.play_stream(media_name)
