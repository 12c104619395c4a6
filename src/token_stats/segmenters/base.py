from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Tuple


class UnsupportedLocaleError(ValueError):
    """Raised when a segmenter is asked for a locale it cannot serve."""


class SentenceSegmenter(ABC):
    """Abstract locale-aware sentence-boundary capability."""

    locale: str

    @abstractmethod
    def segment(self, text: str) -> List[Tuple[int, int]]:
        """Return the (start, end) character span of every sentence in text."""
        raise NotImplementedError

    def count(self, text: str) -> int:
        """Return the number of sentence boundaries found in text."""
        return len(self.segment(text))
