from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .config import load_settings
from .log_utils import setup_logging
from .player import BaseMediaPlayer, MediaController, build_player_chain
from .playlist import PlaylistManager, build_demo_playlist
from .remote import RemoteMediaProxy, StreamController
from .rendering import AdvancedMediaPlayer, select_renderer
from .sources import MediaApp, select_source
from .types import (
    API,
    LOG_LEVELS,
    PROMPT_EQUALIZER,
    PROMPT_HARDWARE,
    PROMPT_MEDIA,
    PROMPT_SOURCE,
    PROMPT_SUBTITLES,
    PROMPT_WATERMARK,
    TITLE,
)
from .utils import console, emit, is_yes, matches_token

logger = logging.getLogger(__name__)

Ask = Callable[[str], str]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="media-suite",
        description="Console walkthrough of adapter, bridge, decorator, proxy and composite players",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Console log level (default: MEDIA_SUITE_LOG_LEVEL or WARNING)",
    )
    p.add_argument("--log-dir", type=Path, default=None, help="Write a debug log file per run into this folder")
    return p.parse_args(argv)


def console_ask(prompt: str) -> str:
    return console.input(prompt, markup=False, emoji=False)


def _reader(ask: Ask) -> Ask:
    def read(prompt: str) -> str:
        try:
            return ask(prompt)
        except EOFError:
            # Missing input takes the default branch of whatever is being asked
            logger.warning("No input for %r, using the default answer", prompt.strip())
            return ""

    return read


def run(ask: Optional[Ask] = None) -> None:
    """Run the whole demo once: six prompts, five pattern sections."""
    read = _reader(ask or console_ask)

    emit(TITLE)
    src_type = read(PROMPT_SOURCE)
    media = read(PROMPT_MEDIA)

    source = select_source(src_type)
    logger.info("Source: %s", type(source).__name__)
    MediaApp(source).play_media(media)

    renderer = select_renderer(read(PROMPT_HARDWARE))
    logger.info("Renderer: %s", type(renderer).__name__)
    AdvancedMediaPlayer(renderer).play(media)

    subtitles = is_yes(read(PROMPT_SUBTITLES))
    equalizer = is_yes(read(PROMPT_EQUALIZER))
    watermark = is_yes(read(PROMPT_WATERMARK))
    logger.info("Extras: subtitles=%s equalizer=%s watermark=%s", subtitles, equalizer, watermark)
    player = build_player_chain(
        BaseMediaPlayer(media, renderer),
        subtitles=subtitles,
        equalizer=equalizer,
        watermark=watermark,
    )
    MediaController(player).start_play()

    if matches_token(src_type, API):
        StreamController(RemoteMediaProxy()).play_stream(media)

    PlaylistManager(build_demo_playlist(media)).show_all()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    _, log_path = setup_logging(
        args.log_level or settings.log_level,
        args.log_dir or settings.log_dir,
    )
    if log_path:
        logger.debug("Log file: %s", log_path)

    try:
        run()
    except KeyboardInterrupt:
        emit("")
        emit("Interrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
