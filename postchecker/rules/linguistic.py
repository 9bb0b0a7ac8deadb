"""Rules over toolkit-extracted features.

All of them stay silent unless the engine runs with a linguistic provider.
"""

from __future__ import annotations

from collections.abc import Mapping

from postchecker.common.types import Dimension
from postchecker.models.output import FeedbackItem
from postchecker.rules.base import Rule, RuleContext, RuleHit, hit

POSITIVE_SENTIMENT = 0.5
NEGATIVE_SENTIMENT = -0.5
MAX_AVG_WORD_LENGTH = 6.0


@Rule.register("sentiment")
class SentimentRule(Rule):
    """Positive tone draws attention; strongly negative tone does too, at a cost."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None:
            return []

        sentiment = context.features.sentiment
        if sentiment > POSITIVE_SENTIMENT:
            return [
                hit(
                    FeedbackItem.success("Positive tone makes your post more appealing."),
                    Dimension.ATTENTION,
                    10,
                )
            ]
        if sentiment < NEGATIVE_SENTIMENT:
            return [
                hit(
                    FeedbackItem.info(
                        "Strongly negative tone grabs attention but can put readers off."
                    ),
                    Dimension.ATTENTION,
                    5,
                )
            ]
        return []


@Rule.register("questions")
class QuestionRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None or not context.features.questions:
            return []
        return [
            hit(
                FeedbackItem.success("Asking questions invites readers to think along."),
                Dimension.INTEREST,
                10,
            )
        ]


@Rule.register("imperatives")
class ImperativeRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None or not context.features.imperatives:
            return []
        return [
            hit(
                FeedbackItem.success("Direct instructions make your call-to-action clear."),
                Dimension.ACTION,
                10,
            )
        ]


@Rule.register("superlatives")
class SuperlativeRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None or not context.features.superlatives:
            return []
        return [
            hit(
                FeedbackItem.success("Superlatives make your offer sound more desirable."),
                Dimension.DESIRE,
                10,
            )
        ]


@Rule.register("topics")
class TopicRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None or not context.features.topics:
            return []
        topics = ", ".join(context.features.topics[:3])
        message = FeedbackItem.success(f"Mentioning specific names and topics ({topics}) adds relevance.")
        return [
            hit(message, Dimension.INTEREST, 5),
            hit(dimension=Dimension.ENGAGEMENT, delta=5),
        ]


@Rule.register("word_length")
class WordLengthRule(Rule):
    """Check readability through the average word length."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if context.features is None or not context.normalized.word_count:
            return []
        if context.normalized.avg_word_length > MAX_AVG_WORD_LENGTH:
            return [
                hit(
                    FeedbackItem.warning(
                        "Your words are long on average. Simpler words are easier to read."
                    )
                )
            ]
        return [
            hit(
                FeedbackItem.success("Your word choice is easy to read."),
                Dimension.ENGAGEMENT,
                5,
            )
        ]
