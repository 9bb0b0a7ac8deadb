"""Output models for post scoring."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from postchecker.common.types import Dimension, FeedbackKind, Language, ScoreBand


class FeedbackItem(BaseModel):
    """A single human-readable remark about the post."""

    model_config = ConfigDict(frozen=True)

    kind: FeedbackKind = Field(..., description="Feedback severity")
    message: str = Field(..., min_length=1, description="Feedback text")

    @classmethod
    def success(cls, message: str) -> FeedbackItem:
        return cls(kind=FeedbackKind.SUCCESS, message=message)

    @classmethod
    def warning(cls, message: str) -> FeedbackItem:
        return cls(kind=FeedbackKind.WARNING, message=message)

    @classmethod
    def error(cls, message: str) -> FeedbackItem:
        return cls(kind=FeedbackKind.ERROR, message=message)

    @classmethod
    def info(cls, message: str) -> FeedbackItem:
        return cls(kind=FeedbackKind.INFO, message=message)


class AidaScore(BaseModel):
    """Attention, interest, desire and action scores."""

    model_config = ConfigDict(frozen=True)

    attention: int = Field(default=0, ge=0, le=100)
    interest: int = Field(default=0, ge=0, le=100)
    desire: int = Field(default=0, ge=0, le=100)
    action: int = Field(default=0, ge=0, le=100)


class AnalysisResult(BaseModel):
    """Scores and feedback produced by one analysis."""

    model_config = ConfigDict(frozen=True)

    aida_score: AidaScore = Field(
        default_factory=AidaScore,
        description="AIDA scores",
    )
    engagement_score: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Estimated audience interaction",
    )
    feedback: tuple[FeedbackItem, ...] = Field(
        default=(),
        description="Feedback in rule evaluation order",
    )
    language: Language = Field(
        default=Language.DEFAULT,
        description="Language whose lexicon was applied",
    )

    def score(self, dimension: Dimension) -> int:
        """Get the final score of a dimension."""
        if dimension is Dimension.ENGAGEMENT:
            return self.engagement_score
        return getattr(self.aida_score, dimension.value)

    def band(self, dimension: Dimension) -> ScoreBand:
        """Classify the score of a dimension."""
        return ScoreBand.of(self.score(dimension))

    def feedback_of(self, kind: FeedbackKind) -> list[FeedbackItem]:
        return [item for item in self.feedback if item.kind is kind]

    def to_record(self) -> dict[str, Any]:
        """Flatten into a single row for tabular output."""
        record: dict[str, Any] = {d.value: self.score(d) for d in Dimension}
        record["language"] = self.language.value
        record["feedback"] = [item.model_dump(mode="json") for item in self.feedback]
        return record
