from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple

from .config import TokenStatsConfig
from .counting import count_paragraphs, count_sentences
from .frequencies import build_distribution
from .models import Report, Rule
from .reporting import build_report
from .segmenters import SentenceSegmenter, build_segmenter_from_config
from .tokenization import build_rules, tokenize

logger = logging.getLogger(__name__)


def analyze_text(
    text: str | None,
    config: TokenStatsConfig | None = None,
    segmenter: SentenceSegmenter | None = None,
) -> Report:
    """Compute paragraph, sentence, token and type statistics for text."""
    cfg = config or TokenStatsConfig()
    if segmenter is None:
        segmenter = build_segmenter_from_config(cfg)
    rules = build_rules(cfg.slash_exceptions)

    if cfg.parallel:
        paragraphs, sentences, tokens = _run_parallel(text, segmenter, rules)
    else:
        paragraphs = count_paragraphs(text)
        sentences = count_sentences(text, segmenter)
        tokens = tokenize(text, rules)

    report = build_report(paragraphs, sentences, build_distribution(tokens))
    logger.info(
        "Analyzed text: %d paragraphs, %d sentences, %d tokens (%d types).",
        report.paragraph_count,
        report.sentence_count,
        report.token_count,
        report.type_count,
    )
    return report


def _run_parallel(
    text: str | None, segmenter: SentenceSegmenter, rules: Sequence[Rule]
) -> Tuple[int, int, List[str]]:
    # The three passes share only the immutable input text.
    with ThreadPoolExecutor(max_workers=3) as pool:
        paragraphs = pool.submit(count_paragraphs, text)
        sentences = pool.submit(count_sentences, text, segmenter)
        tokens = pool.submit(tokenize, text, rules)
        return paragraphs.result(), sentences.result(), tokens.result()
