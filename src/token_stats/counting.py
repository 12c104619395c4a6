from __future__ import annotations

import re
from functools import lru_cache

from .segmenters import PunktSegmenter, SentenceSegmenter

# A blank line followed by a line that carries at least two characters.
PARAGRAPH_BREAK_RE = re.compile(r"\n\n[^\n]\S*.+")


def count_paragraphs(text: str | None) -> int:
    """
    Count paragraphs as the start of the text plus every blank-line break.

    A break at offset 0 belongs to the implicit first paragraph, so leading
    blank lines never add a paragraph of their own.
    """
    if not text:
        return 1
    breaks = sum(1 for match in PARAGRAPH_BREAK_RE.finditer(text) if match.start() > 0)
    return 1 + breaks


@lru_cache(maxsize=1)
def _default_segmenter() -> SentenceSegmenter:
    return PunktSegmenter(locale="en_US")


def count_sentences(
    text: str | None, segmenter: SentenceSegmenter | None = None
) -> int:
    """Count sentence boundaries reported by the segmenter (US English by default)."""
    if not text or not text.strip():
        return 0
    if segmenter is None:
        segmenter = _default_segmenter()
    return segmenter.count(text)
