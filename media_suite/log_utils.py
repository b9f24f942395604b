from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .types import LOG_LEVELS
from .utils import ensure_dir, now_timestamp_str

LOGGER_NAME = "media_suite"


def setup_logging(level: str = "WARNING", log_dir: Optional[Path] = None) -> tuple[logging.Logger, Optional[Path]]:
    """Initialize logging to stderr and, when log_dir is given, to a file per run.

    Unknown levels fall back to WARNING. Returns (logger, log_file_path or None).
    """
    level_name = (level or "").upper()
    if level_name not in LOG_LEVELS:
        level_name = "WARNING"

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    # Console handler (stderr, stdout carries the demo output)
    ch = logging.StreamHandler()
    ch.setLevel(getattr(logging, level_name))
    ch.setFormatter(logging.Formatter("%(levelname)s | %(message)s"))
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        ensure_dir(log_dir)
        log_path = log_dir / f"media-suite-{now_timestamp_str()}.log"
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(fh)

    logger.debug("Logging initialized")
    return logger, log_path
