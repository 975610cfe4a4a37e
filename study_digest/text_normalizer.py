"""Whitespace cleanup and sentence segmentation."""

from __future__ import annotations

import re
from typing import List

from .types import Sentence

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


def normalize_text(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    if text is None:
        raise TypeError("text must be a string, not None")
    return _WHITESPACE_RE.sub(" ", text).strip()


def split_sentences(text: str) -> List[Sentence]:
    sentences: List[Sentence] = []
    for match in _SENTENCE_RE.finditer(text):
        sentence = match.group(0).strip()
        # A bare run of terminators (for example "...") is not a sentence.
        if not sentence.strip(".!? "):
            continue
        sentences.append(Sentence(text=sentence, ordinal=len(sentences)))
    return sentences
