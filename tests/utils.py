from __future__ import annotations

from pathlib import Path

SAMPLE_TEXT = (
    "It's a fine day. The sun's out, and we'll walk.\n"
    "\n"
    "Don't forget the $5 tickets!\n"
)


def write_sample_text(path: Path, text: str = SAMPLE_TEXT) -> Path:
    """Write text to path as UTF-8 and return the path."""
    path.write_text(text, encoding="utf-8")
    return path
