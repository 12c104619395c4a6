from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import SentenceSegmenter, UnsupportedLocaleError
from .punkt_segmenter import PunktSegmenter

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import TokenStatsConfig

__all__ = [
    "SentenceSegmenter",
    "PunktSegmenter",
    "UnsupportedLocaleError",
    "create_segmenter",
    "build_segmenter_from_config",
]


def create_segmenter(name: str, **kwargs: Any) -> SentenceSegmenter:
    """Factory for building sentence segmenters by name."""
    normalized = name.lower().strip()
    if normalized in {"punkt", "nltk"}:
        return PunktSegmenter(**kwargs)
    raise ValueError(f"Unknown segmenter '{name}'.")


def build_segmenter_from_config(config: "TokenStatsConfig") -> SentenceSegmenter:
    """Convenience helper to build a segmenter from TokenStatsConfig."""
    settings = config.segmenter
    return create_segmenter(
        settings.name,
        locale=settings.locale,
        extra_abbreviations=settings.extra_abbreviations,
    )
