"""Keyword lexicons per language."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, model_validator

from postchecker.common.types import Dimension, Language


class Lexicon(BaseModel):
    """Trigger words and phrases for each AIDA category."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attention: tuple[str, ...] = Field(default=(), description="Attention-building words")
    interest: tuple[str, ...] = Field(default=(), description="Interest-building words")
    desire: tuple[str, ...] = Field(default=(), description="Desire-building words")
    action: tuple[str, ...] = Field(default=(), description="Call-to-action words")

    @model_validator(mode="after")
    def validate_disjoint(self) -> Lexicon:
        """Validate that no word is listed under two categories."""
        seen: dict[str, str] = {}
        for dimension in Dimension.aida():
            for word in self.words(dimension):
                key = word.lower()
                if key in seen:
                    raise ValueError(
                        f"Word {word!r} listed under both {seen[key]} and {dimension.value}"
                    )
                seen[key] = dimension.value
        return self

    def words(self, dimension: Dimension) -> tuple[str, ...]:
        """Get the words of an AIDA category."""
        if dimension not in Dimension.aida():
            raise ValueError(f"No lexicon category for dimension: {dimension.value}")
        return getattr(self, dimension.value)

    def categories(self) -> list[tuple[Dimension, tuple[str, ...]]]:
        """Get (dimension, words) pairs in AIDA order."""
        return [(d, self.words(d)) for d in Dimension.aida()]


LEXICONS: Mapping[Language, Lexicon] = MappingProxyType(
    {
        Language.EN: Lexicon(
            attention=("wow", "amazing", "exclusive", "breaking", "urgent"),
            interest=("why", "how", "what if", "imagine", "discover", "curious"),
            desire=("limited", "special", "unique", "new", "improved", "best"),
            action=("click", "buy", "subscribe", "sign up", "learn more", "visit", "try"),
        ),
        Language.NL: Lexicon(
            attention=("wow", "verbazingwekkend", "exclusief", "breaking", "dringend"),
            interest=("waarom", "hoe", "wat als", "stel je voor", "ontdek", "nieuwsgierig"),
            desire=("beperkt", "speciaal", "uniek", "nieuw", "verbeterd", "beste"),
            action=("klik", "koop", "abonneer", "meld je aan", "leer meer", "bezoek", "probeer"),
        ),
    }
)


def get_lexicon(language: Language | str | None) -> Lexicon:
    """Look up the lexicon of a language, falling back to the default language."""
    return LEXICONS[Language.from_code(language)]
