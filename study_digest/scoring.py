"""Sentence scoring strategies.

Both strategies share the same three-step contract: build a per-document
context once, score each sentence against it, and report how many of the top
sentences the composer should keep.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np

from .config import SummarizerConfig
from .keywords import rank_keywords
from .lexical import build_term_stats, content_terms, word_count, word_set
from .types import Sentence, TermStat


@dataclass
class ScoringContext:
    """Per-document state built by a strategy; never shared between runs."""

    total_sentences: int
    term_stats: Dict[str, TermStat]
    keywords: List[str] = field(default_factory=list)
    weights: Dict[str, float] = field(default_factory=dict)


class SentenceScorer(ABC):
    name: str = ""

    def __init__(self, config: SummarizerConfig) -> None:
        self.config = config

    @abstractmethod
    def build_context(self, text: str, sentences: Sequence[Sentence]) -> ScoringContext:
        ...

    @abstractmethod
    def score(self, sentence: Sentence, context: ScoringContext) -> float:
        ...

    @abstractmethod
    def selection_size(self, total_sentences: int) -> int:
        ...


class FrequencyScorer(SentenceScorer):
    """Rank-weighted keyword presence with a lead boost and a length penalty."""

    name = "basic"

    def build_context(self, text: str, sentences: Sequence[Sentence]) -> ScoringContext:
        stats = build_term_stats(
            text,
            sentences,
            self.config.stopwords,
            self.config.frequency.min_word_length,
        )
        return ScoringContext(
            total_sentences=len(sentences),
            term_stats=stats,
            keywords=rank_keywords(stats, self.config.scoring_keyword_count),
        )

    def score(self, sentence: Sentence, context: ScoringContext) -> float:
        weights = self.config.frequency
        words = word_set(sentence.text)
        top = self.config.scoring_keyword_count
        score = float(sum(top - rank for rank, keyword in enumerate(context.keywords) if keyword in words))
        if sentence.ordinal < weights.lead_sentences:
            score += weights.lead_bonus
        length = len(sentence.text)
        if length < weights.short_length or length > weights.long_length:
            score -= weights.length_penalty
        return score

    def selection_size(self, total_sentences: int) -> int:
        return self.config.overview_sentence_count


class TfidfScorer(SentenceScorer):
    """Length-normalized TF-IDF salience, treating each sentence as a document."""

    name = "enhanced"

    def __init__(self, config: SummarizerConfig) -> None:
        super().__init__(config)
        self._signal_re = re.compile("|".join(config.tfidf.signal_phrases), re.IGNORECASE)

    def build_context(self, text: str, sentences: Sequence[Sentence]) -> ScoringContext:
        stats = build_term_stats(
            text,
            sentences,
            self.config.stopwords,
            self.config.tfidf.min_word_length,
            count_sentences=True,
        )
        total = len(sentences)
        # Terms only seen in unterminated trailing text belong to no sentence.
        terms = [term for term, stat in stats.items() if stat.sentence_frequency > 0]
        weights: Dict[str, float] = {}
        if terms and total:
            frequency = np.array([stats[term].frequency for term in terms], dtype=np.float64)
            sentence_frequency = np.array(
                [stats[term].sentence_frequency for term in terms], dtype=np.float64
            )
            tfidf = frequency * np.log(total / sentence_frequency)
            weights = dict(zip(terms, tfidf.tolist()))
        return ScoringContext(total_sentences=total, term_stats=stats, weights=weights)

    def score(self, sentence: Sentence, context: ScoringContext) -> float:
        weights = self.config.tfidf
        words = word_count(sentence.text)
        if words == 0:
            return 0.0
        terms = content_terms(sentence.text, self.config.stopwords, weights.min_word_length)
        score = sum(context.weights.get(term, 0.0) for term in terms) / math.sqrt(words)
        if sentence.ordinal < weights.lead_sentences:
            score *= weights.lead_multiplier
        if self._signal_re.search(sentence.text):
            score *= weights.signal_multiplier
        length = len(sentence.text)
        if length < weights.short_length or length > weights.long_length:
            score *= weights.length_multiplier
        return score

    def selection_size(self, total_sentences: int) -> int:
        weights = self.config.tfidf
        return min(weights.max_summary_sentences, math.ceil(total_sentences * weights.summary_ratio))

