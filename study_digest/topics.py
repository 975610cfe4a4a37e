"""Heading-like sentence detection."""

from __future__ import annotations

import re
from typing import List, Sequence

from .types import Sentence

TOPIC_PATTERNS = [
    re.compile(r"^[A-Z][A-Za-z\s]{2,30}:"),
    re.compile(r"^\d+\.\s+[A-Z]"),
    re.compile(r"^[IVX]+\.\s+"),
    re.compile(r"^Chapter\s+\d+", re.IGNORECASE),
    re.compile(r"^Section\s+\d+", re.IGNORECASE),
]


def detect_topics(
    sentences: Sequence[Sentence],
    limit: int = 5,
    scan_cap: int = 200,
    max_chars: int = 60,
) -> List[str]:
    """Return up to ``limit`` heading-like sentences, truncated, in document order."""
    topics: List[str] = []
    for sentence in sentences[:scan_cap]:
        if len(topics) >= limit:
            break
        text = sentence.text.strip()
        if any(pattern.search(text) for pattern in TOPIC_PATTERNS):
            topics.append(text[:max_chars])
    return topics
