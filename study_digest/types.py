"""Common data structures for the study document summarizer."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RawDocument:
    """Represents one extracted page of a source file."""

    source: str
    page: int
    text: str


@dataclass(frozen=True)
class Sentence:
    """A sentence and its position in document order."""

    text: str
    ordinal: int


@dataclass
class TermStat:
    frequency: int = 0
    sentence_frequency: int = 0


@dataclass(frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: float


@dataclass(frozen=True)
class DocumentStats:
    total_words: int
    total_sentences: int
    total_pages: int
    avg_words_per_sentence: int


@dataclass(frozen=True)
class SummaryResult:
    """Stores the basic-mode digest of one document."""

    overview: str
    key_points: List[str]
    keywords: List[str]
    topics: List[str]
    stats: DocumentStats

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EnhancedSummary:
    """Outcome of a TF-IDF run: either a summary or an error message."""

    summary: str = ""
    success: bool = False
    error: bool = False
    message: Optional[str] = None
    sentences: List[Sentence] = field(default_factory=list)

    @classmethod
    def ok(cls, summary: str, sentences: List[Sentence]) -> "EnhancedSummary":
        return cls(summary=summary, success=True, sentences=list(sentences))

    @classmethod
    def failed(cls, message: str) -> "EnhancedSummary":
        return cls(error=True, message=message)

    def to_dict(self) -> Dict[str, Any]:
        if self.error:
            return {"error": True, "message": self.message}
        return {"summary": self.summary, "success": self.success}
