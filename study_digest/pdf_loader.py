"""Load PDF, Markdown, and TXT files into raw page text for the summarizer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .errors import DocumentLoadError
from .types import RawDocument

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".pdf", ".md", ".markdown", ".txt"}
PAGE_SEPARATOR = "\n\n"


class DocumentLoader:
    """Loads a single source file into `RawDocument` pages."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        if not self.path.is_file():
            raise DocumentLoadError(f"Document not found: {self.path}")
        if self.path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            raise DocumentLoadError(f"Unsupported file type: {self.path.suffix or self.path.name}")

    def load(self, progress: Optional[Callable[[str, int], None]] = None) -> List[RawDocument]:
        if self.path.suffix.lower() == ".pdf":
            return self._load_pdf(progress)
        return [self._load_text_like()]

    def _load_pdf(self, progress: Optional[Callable[[str, int], None]]) -> List[RawDocument]:
        try:
            reader = PdfReader(str(self.path))
            pages = list(reader.pages)
        except (PyPdfError, OSError, ValueError) as exc:
            raise DocumentLoadError(
                "Failed to read PDF. The file may be corrupted or password-protected."
            ) from exc
        if progress:
            progress("Extracting text...", 10)

        items: List[RawDocument] = []
        total = len(pages)
        for idx, page in enumerate(pages, start=1):
            try:
                text = page.extract_text() or ""
            except (PyPdfError, ValueError, KeyError) as exc:
                logger.warning("Skipping page %d of %s: %s", idx, self.path.name, exc)
                continue
            if text.strip():
                items.append(RawDocument(source=self.path.name, page=idx, text=text))
            if progress:
                progress(f"Extracting page {idx} of {total}...", 10 + round(idx / total * 70))
        return items

    def _load_text_like(self) -> RawDocument:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read {self.path.name}: {exc}") from exc
        return RawDocument(source=self.path.name, page=1, text=text)


def join_pages(documents: Iterable[RawDocument]) -> str:
    """Concatenate page texts in page order, separated by blank lines."""
    ordered = sorted(documents, key=lambda doc: doc.page)
    return PAGE_SEPARATOR.join(doc.text for doc in ordered)
