"""Turn scored sentences into the overview and key point lists."""

from __future__ import annotations

import re
from typing import List, Sequence

from .config import SummarizerConfig
from .scoring import ScoringContext, SentenceScorer
from .types import ScoredSentence, Sentence

KEY_POINT_PATTERNS = [
    re.compile(r"important|key|main|primary|essential|critical|significant|major", re.IGNORECASE),
    re.compile(r"definition|defined as|refers to|means|is called", re.IGNORECASE),
    re.compile(r"formula|equation|calculate|computed", re.IGNORECASE),
    re.compile(r"step|first|second|third|finally|therefore|thus|hence", re.IGNORECASE),
    re.compile(r"example|for instance|such as|including", re.IGNORECASE),
    re.compile(r"note|remember|always|never|must|should", re.IGNORECASE),
]


def rank_sentences(
    sentences: Sequence[Sentence],
    scorer: SentenceScorer,
    context: ScoringContext,
    scan_cap: int,
) -> List[ScoredSentence]:
    return [
        ScoredSentence(sentence=sentence, score=scorer.score(sentence, context))
        for sentence in sentences[:scan_cap]
    ]


def select_sentences(scored: Sequence[ScoredSentence], count: int) -> List[Sentence]:
    """Pick the ``count`` best sentences and return them in reading order.

    Selection is by descending score (ties keep document order); presentation
    is by ascending ordinal.
    """
    best = sorted(scored, key=lambda item: item.score, reverse=True)[:count]
    return [item.sentence for item in sorted(best, key=lambda item: item.sentence.ordinal)]


def compose_overview(sentences: Sequence[Sentence]) -> str:
    return " ".join(sentence.text for sentence in sentences)


def extract_key_points(
    sentences: Sequence[Sentence],
    keywords: Sequence[str],
    config: SummarizerConfig,
    fallback: Sequence[Sentence],
) -> List[Sentence]:
    points: List[Sentence] = []
    for sentence in sentences[: config.key_point_scan_cap]:
        if len(points) >= config.key_point_count:
            break
        if _is_key_point(sentence.text, keywords, config.key_point_min_length):
            points.append(sentence)
    if not points:
        points = list(fallback[: config.key_point_fallback_count])
    return points


def _is_key_point(text: str, keywords: Sequence[str], min_length: int) -> bool:
    lowered = text.lower()
    if len(text) > min_length and any(keyword in lowered for keyword in keywords):
        return True
    return any(pattern.search(text) for pattern in KEY_POINT_PATTERNS)
