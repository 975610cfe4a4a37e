"""Frequency-ranked keyword extraction."""

from __future__ import annotations

from collections import Counter
from typing import Mapping, List

from .types import TermStat


def rank_keywords(stats: Mapping[str, TermStat], limit: int) -> List[str]:
    # Counter.most_common sorts stably, so ties keep first-seen order.
    counts = Counter({term: stat.frequency for term, stat in stats.items()})
    return [term for term, _ in counts.most_common(limit)]
