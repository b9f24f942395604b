from __future__ import annotations

from typing import Protocol

from .types import BRIDGE_BANNER
from .utils import banner, emit, is_yes


class Renderer(Protocol):
    """Rendering backend used by both the bridge player and the base player."""

    def render(self, media_name: str) -> None:
        ...


class HardwareRenderer:
    def render(self, media_name: str) -> None:
        emit(f"Rendering {media_name} with hardware acceleration.")


class SoftwareRenderer:
    def render(self, media_name: str) -> None:
        emit(f"Rendering {media_name} using software rendering.")


def select_renderer(answer: str | None) -> Renderer:
    return HardwareRenderer() if is_yes(answer) else SoftwareRenderer()


class MediaPlayerBridge:
    """Player abstraction that delegates rendering to whichever renderer it holds.

    Subclasses define how a title is played; the renderer can be swapped
    without touching them.
    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    def play(self, media_name: str) -> None:
        raise NotImplementedError


class AdvancedMediaPlayer(MediaPlayerBridge):
    def play(self, media_name: str) -> None:
        banner(BRIDGE_BANNER)
        self.renderer.render(media_name)
        emit(f"Playing: {media_name}")
