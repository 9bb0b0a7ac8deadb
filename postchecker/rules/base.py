"""Rule types and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from postchecker.common.types import Dimension, Language
from postchecker.language.lexicon import Lexicon
from postchecker.linguistics.types import LinguisticFeatures
from postchecker.models.input import PostInput
from postchecker.models.output import FeedbackItem
from postchecker.text.normalizer import NormalizedInput


class RuleContext(BaseModel):
    """Immutable input shared by every rule in one analysis."""

    model_config = ConfigDict(frozen=True)

    post: PostInput
    normalized: NormalizedInput
    language: Language
    lexicon: Lexicon
    features: LinguisticFeatures | None = None

    @property
    def text(self) -> str:
        return self.post.text


class RuleHit(BaseModel):
    """Score delta and feedback emitted by a firing rule."""

    model_config = ConfigDict(frozen=True)

    dimension: Dimension | None = Field(default=None, description="Scored dimension")
    delta: int = Field(default=0, ge=0, description="Points added to the dimension")
    feedback: FeedbackItem | None = Field(default=None, description="Feedback to report")


class Rule(ABC):
    """Independent detector evaluated once per analysis."""

    name: ClassVar[str]
    _registry: ClassVar[dict[str, type[Rule]]] = {}

    @abstractmethod
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        """Inspect the context and return hits, empty when the rule is silent.

        ``running`` holds the totals accumulated by earlier rules in the same
        pass and must not be modified.
        """

    @classmethod
    def register(cls, name: str) -> Any:
        """Register a rule type under a name."""

        def wrapper(rule_cls: type[TRule]) -> type[TRule]:
            if name in cls._registry:
                raise ValueError(f"Rule already registered: {name}")
            rule_cls.name = name
            cls._registry[name] = rule_cls
            return rule_cls

        return wrapper

    @classmethod
    def from_name(cls, name: str) -> Rule:
        """Create a registered rule by name."""
        if name not in cls._registry:
            raise ValueError(f"No rule registered for name: {name}")
        return cls._registry[name]()

    @classmethod
    def registered(cls) -> list[str]:
        return list(cls._registry)


TRule = TypeVar("TRule", bound=Rule)


def hit(
    feedback: FeedbackItem | None = None,
    dimension: Dimension | None = None,
    delta: int = 0,
) -> RuleHit:
    """Shorthand for building a RuleHit."""
    return RuleHit(dimension=dimension, delta=delta, feedback=feedback)
