"""
token_stats package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TokenStatsConfig, config_from_dict, config_from_yaml, load_config
from .counting import count_paragraphs, count_sentences
from .frequencies import build_distribution, sort_distribution
from .models import Report, Rule
from .pipeline import analyze_text
from .reporting import build_report, format_report, report_to_json
from .segmenters import build_segmenter_from_config, create_segmenter
from .tokenization import DEFAULT_RULES, apply_rules, build_rules, tokenize

__all__ = [
    "TokenStatsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "count_paragraphs",
    "count_sentences",
    "build_distribution",
    "sort_distribution",
    "Report",
    "Rule",
    "analyze_text",
    "build_report",
    "format_report",
    "report_to_json",
    "create_segmenter",
    "build_segmenter_from_config",
    "DEFAULT_RULES",
    "apply_rules",
    "build_rules",
    "tokenize",
]

__version__ = "0.1.0"
