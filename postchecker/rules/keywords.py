"""Lexicon keyword rule."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from postchecker.common.types import Dimension
from postchecker.models.output import FeedbackItem
from postchecker.rules.base import Rule, RuleContext, RuleHit, hit

KEYWORD_DELTAS: Mapping[Dimension, int] = MappingProxyType(
    {
        Dimension.ATTENTION: 10,
        Dimension.INTEREST: 10,
        Dimension.DESIRE: 10,
        Dimension.ACTION: 15,
    }
)


@Rule.register("keywords")
class KeywordRule(Rule):
    """Score every lexicon word found in the post.

    Matching is a case-insensitive substring test, one hit per matching word.
    """

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        text = context.text.lower()
        if not text:
            return []

        hits = []
        for dimension, words in context.lexicon.categories():
            for word in words:
                if word.lower() in text:
                    hits.append(
                        hit(
                            FeedbackItem.success(
                                f'Good use of the {dimension.value}-building word "{word}".'
                            ),
                            dimension,
                            KEYWORD_DELTAS[dimension],
                        )
                    )
        return hits
