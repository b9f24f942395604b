from __future__ import annotations

from typing import Protocol

from .rendering import Renderer
from .types import DECORATOR_BANNER
from .utils import banner, emit


class Player(Protocol):
    def play(self) -> None:
        ...


class BaseMediaPlayer:
    def __init__(self, media_name: str, renderer: Renderer):
        self.media_name = media_name
        self.renderer = renderer

    def play(self) -> None:
        self.renderer.render(self.media_name)
        emit(f"Playing {self.media_name}...")


class PlayerDecorator:
    """Wraps another player; subclasses add their effect after the inner one plays."""

    def __init__(self, player: Player):
        self.wrappee = player

    def play(self) -> None:
        self.wrappee.play()


class SubtitleDecorator(PlayerDecorator):
    def play(self) -> None:
        super().play()
        emit("Subtitles enabled.")


class EqualizerDecorator(PlayerDecorator):
    def play(self) -> None:
        super().play()
        emit("Equalizer applied.")


class WatermarkDecorator(PlayerDecorator):
    def play(self) -> None:
        super().play()
        emit("Watermark displayed.")


def build_player_chain(
    base: Player,
    subtitles: bool = False,
    equalizer: bool = False,
    watermark: bool = False,
) -> Player:
    """Wrap base with the enabled features.

    Layers always go subtitles, equalizer, watermark from the inside out, so
    their lines are printed in that order after the base player's output.
    """
    player = base
    if subtitles:
        player = SubtitleDecorator(player)
    if equalizer:
        player = EqualizerDecorator(player)
    if watermark:
        player = WatermarkDecorator(player)
    return player


class MediaController:
    def __init__(self, player: Player):
        self._player = player

    def start_play(self) -> None:
        banner(DECORATOR_BANNER)
        self._player.play()
