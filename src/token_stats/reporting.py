from __future__ import annotations

import json
from typing import List, Mapping

from .frequencies import sort_distribution
from .models import Report

SEPARATOR = "=" * 32


def build_report(
    paragraph_count: int,
    sentence_count: int,
    distribution: Mapping[str, int],
) -> Report:
    """Freeze counts and the frequency table into a Report."""
    return Report(
        paragraph_count=paragraph_count,
        sentence_count=sentence_count,
        token_count=sum(distribution.values()),
        type_count=len(distribution),
        sorted_entries=tuple(sort_distribution(distribution)),
    )


def format_report(report: Report) -> str:
    """Render the report in the fixed plain-text layout."""
    lines: List[str] = [
        f"# of paragraphs = {report.paragraph_count}",
        f"# of sentences = {report.sentence_count}",
        f"# of tokens = {report.token_count}",
        f"# of types = {report.type_count}",
        "",
        SEPARATOR,
    ]
    lines.extend(f"{token} {count}" for token, count in report.sorted_entries)
    return "\n".join(lines) + "\n"


def report_to_json(report: Report) -> str:
    """Render the report as indented JSON."""
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)
