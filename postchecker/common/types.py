"""Common type definitions."""

from __future__ import annotations

from enum import Enum


class InvalidPlatformError(ValueError):
    """Raised when a post targets a platform without a known length limit."""


class Platform(str, Enum):
    """Supported social media platforms."""

    TWITTER = "twitter"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"

    @property
    def max_length(self) -> int:
        """Get the maximum post length in characters."""
        return {
            Platform.TWITTER: 280,
            Platform.FACEBOOK: 63206,
            Platform.INSTAGRAM: 2200,
            Platform.LINKEDIN: 3000,
        }[self]

    @classmethod
    def parse(cls, value: Platform | str) -> Platform:
        """Parse a platform identifier, rejecting unknown platforms."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            supported = ", ".join(p.value for p in cls)
            raise InvalidPlatformError(
                f"Unsupported platform: {value!r} (expected one of: {supported})"
            ) from e


class Language(str, Enum):
    """Languages with a keyword lexicon."""

    EN = "en"
    NL = "nl"
    DEFAULT = EN

    @property
    def iso639_3(self) -> str:
        """Get the three-letter language code."""
        return {
            Language.EN: "eng",
            Language.NL: "nld",
        }[self]

    @classmethod
    def lookup(cls, code: Language | str | None) -> Language | None:
        """Find the supported language of a two- or three-letter code.

        Region suffixes (``en-GB``) are ignored.
        """
        if isinstance(code, cls):
            return code
        if not code:
            return None

        base = str(code).strip().lower().replace("_", "-").split("-")[0]
        for language in cls:
            if base in (language.value, language.iso639_3):
                return language
        return None

    @classmethod
    def from_code(cls, code: Language | str | None) -> Language:
        """Map a code to a supported language, else the default language."""
        return cls.lookup(code) or cls.DEFAULT


class Dimension(str, Enum):
    """Score dimensions."""

    ATTENTION = "attention"
    INTEREST = "interest"
    DESIRE = "desire"
    ACTION = "action"
    ENGAGEMENT = "engagement"

    @classmethod
    def aida(cls) -> tuple[Dimension, ...]:
        """Get the four AIDA dimensions in model order."""
        return (cls.ATTENTION, cls.INTEREST, cls.DESIRE, cls.ACTION)


class FeedbackKind(str, Enum):
    """Feedback severity."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


class ScoreBand(str, Enum):
    """Coarse classification of a 0-100 score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def of(cls, score: int) -> ScoreBand:
        if score < 30:
            return cls.LOW
        if score < 70:
            return cls.MEDIUM
        return cls.HIGH
