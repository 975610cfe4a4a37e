"""Tuning knobs for the summarization engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class StopWords:
    """A named, versioned stop-word set shared by both scoring strategies."""

    version: str
    words: FrozenSet[str]

    def __contains__(self, word: object) -> bool:
        return word in self.words


STOPWORDS_V1 = StopWords(
    version="v1",
    words=frozenset(
        {
            # Four letters and longer, used by the frequency strategy.
            "this", "that", "these", "those", "have", "been", "were", "will",
            "would", "could", "should", "being", "which", "their", "there",
            "where", "when", "what", "about", "from", "into", "with", "than",
            "then", "they", "them", "also", "more", "most", "some", "such",
            "only", "other", "each", "very", "just", "over", "after",
            "before", "your", "does", "while", "because", "between", "through",
            # Three letter function words seen by the TF-IDF strategy.
            "the", "and", "for", "are", "but", "not", "you", "all", "any",
            "can", "had", "her", "was", "one", "our", "out", "has", "his",
            "how", "its", "may", "who", "did", "get", "him", "she", "too",
            "use", "way", "per", "via", "own", "off", "yet", "nor",
        }
    ),
)


@dataclass(frozen=True)
class FrequencyWeights:
    min_word_length: int = 4
    lead_sentences: int = 3
    lead_bonus: float = 5.0
    short_length: int = 30
    long_length: int = 400
    length_penalty: float = 3.0


@dataclass(frozen=True)
class TfidfWeights:
    min_word_length: int = 3
    lead_sentences: int = 3
    lead_multiplier: float = 1.3
    signal_multiplier: float = 1.4
    short_length: int = 40
    long_length: int = 500
    length_multiplier: float = 0.7
    summary_ratio: float = 0.15
    max_summary_sentences: int = 6
    signal_phrases: Tuple[str, ...] = (
        r"\bimportant\b",
        r"\bsignificant(ly)?\b",
        r"\btherefore\b",
        r"\bthus\b",
        r"\bin summary\b",
        r"\bin conclusion\b",
        r"\bconclusions?\b",
        r"\bfindings?\b",
        r"\bresults? show",
        r"\bkey\b",
        r"\bessential\b",
        r"\bcrucial\b",
    )


@dataclass(frozen=True)
class SummarizerConfig:
    """Everything the pipeline needs besides the text itself.

    The defaults reproduce the behaviour of the study app summarizer. Override
    fields with ``dataclasses.replace`` rather than mutating a shared instance.
    """

    keyword_count: int = 10
    key_point_count: int = 8
    topic_count: int = 5
    overview_sentence_count: int = 5
    sentence_scan_cap: int = 500
    scoring_keyword_count: int = 15
    key_point_scan_cap: int = 300
    key_point_min_length: int = 40
    key_point_fallback_count: int = 4
    topic_scan_cap: int = 200
    topic_max_chars: int = 60
    min_sentences: int = 3
    min_text_length: int = 100
    chars_per_page: int = 3000
    stopwords: StopWords = STOPWORDS_V1
    frequency: FrequencyWeights = field(default_factory=FrequencyWeights)
    tfidf: TfidfWeights = field(default_factory=TfidfWeights)

    def __post_init__(self) -> None:
        for name in (
            "keyword_count",
            "key_point_count",
            "topic_count",
            "overview_sentence_count",
            "sentence_scan_cap",
            "scoring_keyword_count",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.keyword_count > self.scoring_keyword_count:
            raise ValueError("keyword_count cannot exceed scoring_keyword_count")
        if self.min_sentences < 1:
            raise ValueError("min_sentences must be at least 1")
