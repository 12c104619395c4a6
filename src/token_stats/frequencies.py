from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Mapping, Tuple


def build_distribution(tokens: Iterable[str]) -> Counter[str]:
    """Count exact, case-sensitive occurrences of every token."""
    distribution: Counter[str] = Counter()
    for token in tokens:
        distribution[token] += 1
    return distribution


def sort_distribution(distribution: Mapping[str, int]) -> List[Tuple[str, int]]:
    """Order entries by descending count, breaking ties by ascending token."""
    return sorted(distribution.items(), key=lambda item: (-item[1], item[0]))
