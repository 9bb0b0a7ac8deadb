"""Scorer configuration."""

from __future__ import annotations

from pydantic import Field, field_validator, model_validator

from postchecker.common.config import BaseConfig
from postchecker.common.types import Language
from postchecker.rules import DEFAULT_RULES, Rule


class LinguisticsConfig(BaseConfig):
    """Linguistic toolkit configuration."""

    enabled: bool = Field(
        default=False,
        description="Run the toolkit-backed rules",
    )
    provider: str = Field(
        default="nltk",
        description="Linguistic toolkit",
    )

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        if v.lower() != "nltk":
            raise ValueError(f"Unsupported linguistic provider: {v}")
        return v.lower()


class ScorerConfig(BaseConfig):
    """Scorer configuration."""

    default_language: Language = Field(
        default=Language.DEFAULT,
        description="Language used when none is given or detected",
    )
    detect_language: bool = Field(
        default=True,
        description="Detect the language when the caller gives none",
    )
    rules: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RULES),
        description="Rules to evaluate, in order",
    )
    linguistics: LinguisticsConfig = Field(
        default_factory=LinguisticsConfig,
        description="Linguistic toolkit configuration",
    )

    @field_validator("default_language", mode="before")
    @classmethod
    def validate_default_language(cls, v: Language | str) -> Language:
        language = Language.lookup(v)
        if language is None:
            raise ValueError(f"Unsupported default language: {v}")
        return language

    @model_validator(mode="after")
    def validate_rules(self) -> ScorerConfig:
        unknown = [name for name in self.rules if name not in Rule.registered()]
        if unknown:
            raise ValueError(f"Unknown rules: {', '.join(unknown)}")
        if len(set(self.rules)) != len(self.rules):
            raise ValueError("Rules must not be listed twice")
        return self
