"""Input models for post scoring."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from postchecker.common.types import Language, Platform


class PostInput(BaseModel):
    """A post as submitted for scoring."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(
        default="",
        description="Raw post content",
    )
    platform: Platform = Field(
        ...,
        description="Target platform",
    )
    language: Language | None = Field(
        default=None,
        description="Explicit language, detected when omitted",
    )

    @field_validator("platform", mode="before")
    @classmethod
    def validate_platform(cls, v: Platform | str) -> Platform:
        return Platform.parse(v)

    @field_validator("language", mode="before")
    @classmethod
    def validate_language(cls, v: Language | str | None) -> Language | None:
        if v is None:
            return None
        return Language.from_code(v)
