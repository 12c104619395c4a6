from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class Rule:
    """A single text-rewrite step of the tokenization pipeline."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


@dataclass(frozen=True, slots=True)
class Report:
    """Descriptive statistics computed for one input text."""

    paragraph_count: int
    sentence_count: int
    token_count: int
    type_count: int
    sorted_entries: Tuple[Tuple[str, int], ...]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of the report."""
        return {
            "paragraphs": self.paragraph_count,
            "sentences": self.sentence_count,
            "tokens": self.token_count,
            "types": self.type_count,
            "distribution": [
                {"token": token, "count": count}
                for token, count in self.sorted_entries
            ],
        }
