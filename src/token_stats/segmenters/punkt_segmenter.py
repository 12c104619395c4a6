from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

from .base import SentenceSegmenter, UnsupportedLocaleError

logger = logging.getLogger(__name__)

# Punkt stores abbreviations lower-cased and without the final period.
US_ENGLISH_ABBREVIATIONS = frozenset(
    {
        "mr",
        "mrs",
        "ms",
        "dr",
        "prof",
        "sr",
        "jr",
        "st",
        "vs",
        "etc",
        "e.g",
        "i.e",
        "u.s",
        "u.s.a",
        "a.m",
        "p.m",
        "no",
        "inc",
        "ltd",
        "co",
        "corp",
        "gen",
        "gov",
        "sen",
        "rep",
        "rev",
        "jan",
        "feb",
        "mar",
        "apr",
        "jun",
        "jul",
        "aug",
        "sep",
        "sept",
        "oct",
        "nov",
        "dec",
    }
)

SUPPORTED_LOCALES = {"en", "en_us"}


def normalize_locale(locale: str) -> str:
    return locale.strip().replace("-", "_").lower()


class PunktSegmenter(SentenceSegmenter):
    """Sentence segmenter backed by NLTK's Punkt tokenizer with fixed parameters."""

    def __init__(
        self,
        locale: str = "en_US",
        extra_abbreviations: Iterable[str] = (),
    ) -> None:
        if normalize_locale(locale) not in SUPPORTED_LOCALES:
            raise UnsupportedLocaleError(
                f"Punkt segmenter does not support locale '{locale}'."
            )
        self.locale = locale
        params = PunktParameters()
        params.abbrev_types = set(US_ENGLISH_ABBREVIATIONS) | {
            abbr.lower().rstrip(".") for abbr in extra_abbreviations if abbr
        }
        self._tokenizer = PunktSentenceTokenizer(params)

    def segment(self, text: str) -> List[Tuple[int, int]]:
        if not text or not text.strip():
            return []
        spans = list(self._tokenizer.span_tokenize(text))
        logger.debug("Punkt found %d sentence spans", len(spans))
        return spans
