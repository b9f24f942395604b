from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Runtime settings; none of them change what the demo prints."""
    log_level: str = DEFAULT_LOG_LEVEL
    log_dir: Optional[Path] = None


def _load_env() -> None:
    # Load .env from the working directory (or a parent), without overriding the real environment
    load_dotenv(find_dotenv(usecwd=True), override=False)


def load_settings() -> Settings:
    """Read settings from the environment (and .env).

    Variables:
    - MEDIA_SUITE_LOG_LEVEL: console log threshold (default WARNING)
    - MEDIA_SUITE_LOG_DIR: directory for per-run debug logs (default: no file)
    """
    _load_env()
    level = os.getenv("MEDIA_SUITE_LOG_LEVEL") or DEFAULT_LOG_LEVEL
    log_dir = os.getenv("MEDIA_SUITE_LOG_DIR")
    return Settings(
        log_level=level.strip().upper(),
        log_dir=Path(log_dir) if log_dir else None,
    )
