"""Length and layout rules."""

from __future__ import annotations

from collections.abc import Mapping

from postchecker.common.types import Dimension
from postchecker.models.output import FeedbackItem
from postchecker.rules.base import Rule, RuleContext, RuleHit, hit

NEAR_LIMIT_RATIO = 0.9
LENGTH_BONUS = 10
PARAGRAPHS_BONUS = 5
SINGLE_BLOCK_WORDS = 30
MAX_WORDS_PER_PARAGRAPH = 50


@Rule.register("length")
class LengthRule(Rule):
    """Compare the post length to the platform limit."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        chars = context.normalized.char_count
        if chars == 0:
            return []

        platform = context.post.platform
        limit = platform.max_length
        if chars > limit:
            return [
                hit(
                    FeedbackItem.error(
                        f"Post is too long for {platform.value}. "
                        f"Maximum length is {limit} characters."
                    )
                )
            ]
        if chars > limit * NEAR_LIMIT_RATIO:
            return [hit(FeedbackItem.warning(f"Post is close to {platform.value}'s character limit."))]
        return [
            hit(
                FeedbackItem.success(f"Post length is good for {platform.value}."),
                Dimension.ENGAGEMENT,
                LENGTH_BONUS,
            )
        ]


@Rule.register("structure")
class StructureRule(Rule):
    """Reward posts split into paragraphs, warn about long single blocks."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        paragraphs = len(context.normalized.paragraphs)
        if paragraphs == 1 and context.normalized.word_count > SINGLE_BLOCK_WORDS:
            return [
                hit(
                    FeedbackItem.warning(
                        "Consider breaking your content into paragraphs for better readability."
                    )
                )
            ]
        if paragraphs > 1:
            return [
                hit(
                    FeedbackItem.success("Good use of paragraphs to structure your content."),
                    Dimension.ENGAGEMENT,
                    PARAGRAPHS_BONUS,
                )
            ]
        return []


@Rule.register("density")
class DensityRule(Rule):
    """Warn when paragraphs average too many words."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        paragraphs = len(context.normalized.paragraphs)
        if not paragraphs:
            return []
        if context.normalized.word_count / paragraphs > MAX_WORDS_PER_PARAGRAPH:
            return [
                hit(
                    FeedbackItem.warning(
                        "Your paragraphs seem long. Consider breaking them up for easier reading."
                    )
                )
            ]
        return []
