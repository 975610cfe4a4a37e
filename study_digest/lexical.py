"""Tokenization and term statistics."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, List, Pattern, Sequence

from .config import StopWords
from .types import Sentence, TermStat

_ANY_WORD_RE = re.compile(r"\b[a-z]+\b", re.ASCII)


@lru_cache(maxsize=None)
def _word_pattern(min_length: int) -> Pattern[str]:
    return re.compile(rf"\b[a-z]{{{min_length},}}\b", re.IGNORECASE | re.ASCII)


def tokenize(text: str, min_length: int) -> List[str]:
    """Return the lower-cased alphabetic words of at least ``min_length`` letters."""
    return [match.group(0).lower() for match in _word_pattern(min_length).finditer(text)]


def content_terms(text: str, stopwords: StopWords, min_length: int) -> List[str]:
    return [word for word in tokenize(text, min_length) if word not in stopwords]


def word_set(text: str) -> set:
    return set(_ANY_WORD_RE.findall(text.lower()))


def word_count(text: str) -> int:
    return len(_ANY_WORD_RE.findall(text.lower()))


def build_term_stats(
    text: str,
    sentences: Sequence[Sentence],
    stopwords: StopWords,
    min_length: int,
    count_sentences: bool = False,
) -> Dict[str, TermStat]:
    """Count term frequencies over ``text``.

    Keys keep first-seen order. With ``count_sentences`` each term also records
    how many sentences contain it at least once.
    """
    stats: Dict[str, TermStat] = {}
    for word in content_terms(text, stopwords, min_length):
        stat = stats.get(word)
        if stat is None:
            stat = stats[word] = TermStat()
        stat.frequency += 1

    if count_sentences:
        for sentence in sentences:
            for word in _unique(content_terms(sentence.text, stopwords, min_length)):
                stat = stats.get(word)
                if stat is not None:
                    stat.sentence_frequency += 1
    return stats


def _unique(words: Iterable[str]) -> Iterable[str]:
    return dict.fromkeys(words)
