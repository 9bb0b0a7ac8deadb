"""Text segmentation for rule evaluation."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

SentenceSplitter = Callable[[str], Sequence[str]]

_PARAGRAPH_BREAK = re.compile(r"\n[ \t\r\f\v]*\n")
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+|\n+")


class NormalizedInput(BaseModel):
    """Counts and segments derived from raw post text."""

    model_config = ConfigDict(frozen=True)

    char_count: int = Field(default=0, ge=0)
    word_count: int = Field(default=0, ge=0)
    paragraphs: tuple[str, ...] = ()
    sentences: tuple[str, ...] = ()
    avg_word_length: float = Field(default=0.0, ge=0.0)

    @property
    def is_empty(self) -> bool:
        return self.char_count == 0


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping blank paragraphs."""
    return [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def split_sentences(text: str) -> list[str]:
    """Split after sentence-ending punctuation and at line breaks."""
    return [s.strip() for s in _SENTENCE_BREAK.split(text) if s.strip()]


def normalize(text: str, splitter: SentenceSplitter | None = None) -> NormalizedInput:
    """Segment raw text into words, paragraphs and sentences.

    Args:
        text: Raw post content
        splitter: Sentence splitter to use instead of the regex heuristic

    Returns:
        NormalizedInput, all zeros for empty text; non-empty text always
        has at least one sentence
    """
    text = text or ""
    words = text.split()

    sentences: list[str] = []
    if text.strip():
        split = splitter or split_sentences
        sentences = [s for s in split(text) if s.strip()] or [text.strip()]
    elif text:
        sentences = [text]

    return NormalizedInput(
        char_count=len(text),
        word_count=len(words),
        paragraphs=tuple(split_paragraphs(text)),
        sentences=tuple(sentences),
        avg_word_length=sum(len(w) for w in words) / len(words) if words else 0.0,
    )
