"""Detector rules, evaluated in declaration order."""

from . import attention, engagement, keywords, linguistic, quality  # noqa: F401
from .base import Rule, RuleContext, RuleHit

DEFAULT_RULES: tuple[str, ...] = (
    "length",
    "structure",
    "density",
    "attention_emoji",
    "attention_opening",
    "attention_punctuation",
    "keywords",
    "sentiment",
    "questions",
    "imperatives",
    "superlatives",
    "topics",
    "word_length",
    "brackets",
    "hashtags",
    "mentions",
    "links",
)

LINGUISTIC_RULES: frozenset[str] = frozenset(
    {"sentiment", "questions", "imperatives", "superlatives", "topics", "word_length"}
)


def build_rules(names: tuple[str, ...] | list[str] = DEFAULT_RULES) -> tuple[Rule, ...]:
    """Instantiate registered rules in the given order."""
    return tuple(Rule.from_name(name) for name in names)


__all__ = [
    "DEFAULT_RULES",
    "LINGUISTIC_RULES",
    "Rule",
    "RuleContext",
    "RuleHit",
    "build_rules",
]
