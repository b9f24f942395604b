from __future__ import annotations

from datetime import datetime
from pathlib import Path

from rich.console import Console

from .types import YES

console = Console(highlight=False, emoji=False, soft_wrap=True)


def emit(line: str) -> None:
    # Plain print: rich would expand tabs and drop control characters in media names
    print(line)


def banner(title: str) -> None:
    """Print a blank line followed by a section banner."""
    console.print()
    console.print(title, markup=False, style="bold")


def matches_token(text: str | None, token: str) -> bool:
    """Case-insensitive exact match against a lowercase token.

    Compared character by character after upper- then lower-casing, so "yeſ"
    matches "yes" and "apı" matches "api". Whitespace is not stripped.
    """
    text = text or ""
    if len(text) != len(token):
        return False
    return all(c == t or c.upper().lower() == t for c, t in zip(text, token))


def is_yes(answer: str | None) -> bool:
    return matches_token(answer, YES)


def now_timestamp_str() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)
