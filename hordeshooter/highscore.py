"""Persisting the best score in a small text file."""

from __future__ import annotations

import os
import re
import sys

DEFAULT_PATH = "highscore.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def read_high_score(path: str | os.PathLike[str] = DEFAULT_PATH) -> int:
    """Return the stored high score, or 0 if the file is missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError):
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def write_high_score(score: int, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
    """Overwrite the file with ``score``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(str(score))


def create_high_score_file_if_not_exist(
        path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
    """Create the file holding 0 unless it already exists."""
    if os.path.exists(path):
        return
    try:
        write_high_score(0, path)
    except OSError:
        print(f"Cannot create {os.fspath(path)}!", file=sys.stderr)