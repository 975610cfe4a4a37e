"""Exceptions raised by the summarizer and its loaders."""


class SummarizerError(Exception):
    """Base class for errors surfaced to callers of the summarizer."""


class InsufficientContentError(SummarizerError):
    """The text is empty or too short to produce a meaningful summary."""

    def __init__(self, message: str, sentence_count: int = 0) -> None:
        super().__init__(message)
        self.sentence_count = sentence_count


class DocumentLoadError(SummarizerError):
    """A source file could not be read."""
