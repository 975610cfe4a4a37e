import pytest
from pypdf import PdfWriter

from study_digest.errors import DocumentLoadError
from study_digest.pdf_loader import DocumentLoader, join_pages
from study_digest.types import RawDocument


def test_loads_text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Some lecture notes.", encoding="utf-8")
    assert DocumentLoader(path).load() == [RawDocument(source="notes.txt", page=1, text="Some lecture notes.")]


def test_missing_file_raises(tmp_path):
    with pytest.raises(DocumentLoadError):
        DocumentLoader(tmp_path / "absent.pdf")


def test_unsupported_extension_raises(tmp_path):
    path = tmp_path / "slides.pptx"
    path.write_bytes(b"data")
    with pytest.raises(DocumentLoadError):
        DocumentLoader(path)


def test_corrupted_pdf_raises(tmp_path):
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")
    with pytest.raises(DocumentLoadError, match="corrupted or password-protected"):
        DocumentLoader(path).load()


def test_blank_pdf_pages_are_skipped_and_progress_reported(tmp_path):
    path = tmp_path / "blank.pdf"
    writer = PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.add_blank_page(width=200, height=200)
    with path.open("wb") as handle:
        writer.write(handle)

    stages = []
    pages = DocumentLoader(path).load(progress=lambda stage, percent: stages.append((stage, percent)))
    assert pages == []
    assert stages[0] == ("Extracting text...", 10)
    assert stages[-1] == ("Extracting page 2 of 2...", 80)


def test_join_pages_uses_blank_lines_in_page_order():
    pages = [
        RawDocument(source="a.pdf", page=2, text="Second page."),
        RawDocument(source="a.pdf", page=1, text="First page."),
    ]
    assert join_pages(pages) == "First page.\n\nSecond page."
