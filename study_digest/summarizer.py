"""Generate extractive summaries and keywords for study documents."""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Tuple

from .composer import compose_overview, extract_key_points, rank_sentences, select_sentences
from .config import SummarizerConfig
from .errors import InsufficientContentError
from .lexical import tokenize
from .scoring import FrequencyScorer, SentenceScorer, TfidfScorer
from .text_normalizer import normalize_text, split_sentences
from .topics import detect_topics
from .types import DocumentStats, EnhancedSummary, Sentence, SummaryResult

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int], None]


class DocumentSummarizer:
    """Summarize one document's text with the frequency or TF-IDF strategy.

    The instance only holds configuration, so a single summarizer can serve any
    number of runs; each call builds its own term tables.
    """

    def __init__(self, config: Optional[SummarizerConfig] = None) -> None:
        self.config = config or SummarizerConfig()

    def summarize(self, text: str, progress: Optional[ProgressCallback] = None) -> SummaryResult:
        report = progress or _noop
        report("Analyzing content...", 20)
        normalized, sentences = self._prepare(text)

        report("Identifying keywords...", 40)
        scorer = FrequencyScorer(self.config)
        context = scorer.build_context(normalized, sentences)

        report("Generating summary...", 60)
        scored = rank_sentences(sentences, scorer, context, self.config.sentence_scan_cap)
        top_sentences = select_sentences(scored, scorer.selection_size(len(sentences)))

        # Nothing past the scan cap reaches the output.
        scanned = sentences[: self.config.sentence_scan_cap]

        report("Extracting key points...", 75)
        key_points = extract_key_points(scanned, context.keywords, self.config, top_sentences)

        report("Detecting topics...", 90)
        topics = detect_topics(
            scanned,
            limit=self.config.topic_count,
            scan_cap=self.config.topic_scan_cap,
            max_chars=self.config.topic_max_chars,
        )

        result = SummaryResult(
            overview=compose_overview(top_sentences),
            key_points=[sentence.text for sentence in key_points],
            keywords=context.keywords[: self.config.keyword_count],
            topics=topics,
            stats=self._stats(normalized, sentences),
        )
        logger.info(
            "Basic summary: %d sentences, %d key points, %d topics",
            len(sentences),
            len(result.key_points),
            len(result.topics),
        )
        report("Complete!", 100)
        return result

    def summarize_enhanced(
        self, text: str, progress: Optional[ProgressCallback] = None
    ) -> EnhancedSummary:
        report = progress or _noop
        report("Analyzing content...", 20)
        normalized, sentences = self._prepare(text)

        report("Scoring sentences...", 60)
        try:
            selected = self._run_strategy(TfidfScorer(self.config), normalized, sentences)
        except Exception as exc:
            logger.exception("%s scoring failed", TfidfScorer.name)
            report("Complete!", 100)
            return EnhancedSummary.failed(f"Enhanced summary failed: {exc}")

        report("Generating summary...", 90)
        summary = EnhancedSummary.ok(compose_overview(selected), selected)
        logger.info("Enhanced summary: %d of %d sentences", len(selected), len(sentences))
        report("Complete!", 100)
        return summary

    def _run_strategy(
        self, scorer: SentenceScorer, normalized: str, sentences: List[Sentence]
    ) -> List[Sentence]:
        context = scorer.build_context(normalized, sentences)
        scored = rank_sentences(sentences, scorer, context, self.config.sentence_scan_cap)
        return select_sentences(scored, scorer.selection_size(len(sentences)))

    def _prepare(self, text: str) -> Tuple[str, List[Sentence]]:
        normalized = normalize_text(text)
        if not normalized:
            raise InsufficientContentError("No text could be extracted from this document.")
        if len(normalized) < self.config.min_text_length:
            raise InsufficientContentError(
                "Could not extract enough text from this document. It may be scanned or image-based."
            )
        sentences = split_sentences(normalized)
        if len(sentences) < self.config.min_sentences:
            raise InsufficientContentError(
                f"Found {len(sentences)} sentence(s); at least {self.config.min_sentences} are needed.",
                sentence_count=len(sentences),
            )
        logger.debug("Prepared %d characters, %d sentences", len(normalized), len(sentences))
        return normalized, sentences

    def _stats(self, normalized: str, sentences: List[Sentence]) -> DocumentStats:
        total_words = len(tokenize(normalized, self.config.frequency.min_word_length))
        total_sentences = len(sentences)
        return DocumentStats(
            total_words=total_words,
            total_sentences=total_sentences,
            total_pages=math.ceil(len(normalized) / self.config.chars_per_page),
            avg_words_per_sentence=int(math.floor(total_words / total_sentences + 0.5)),
        )


def _noop(stage: str, percent: int) -> None:
    return None
