"""Linguistic feature types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import runtime_checkable


class LinguisticFeatures(BaseModel):
    """Features extracted from a post by a linguistic toolkit."""

    model_config = ConfigDict(frozen=True)

    sentences: tuple[str, ...] = Field(default=(), description="Sentences in order")
    sentiment: float = Field(
        default=0.0,
        ge=-1.0,
        le=1.0,
        description="Sentiment polarity, -1 very negative to 1 very positive",
    )
    questions: tuple[str, ...] = Field(default=(), description="Interrogative sentences")
    imperatives: tuple[str, ...] = Field(default=(), description="Imperative sentences")
    superlatives: tuple[str, ...] = Field(default=(), description="Superlative words")
    topics: tuple[str, ...] = Field(default=(), description="Named entities and topics")


@runtime_checkable
class LinguisticProvider(Protocol):
    """Toolkit capability injected into the rule engine."""

    def sentences(self, text: str) -> Sequence[str]:
        """Split text into sentences."""
        ...

    def features(self, text: str, sentences: Sequence[str]) -> LinguisticFeatures:
        """Extract linguistic features from text."""
        ...
