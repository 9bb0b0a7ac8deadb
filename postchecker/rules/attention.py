"""Attention-grabbing opening rules.

The punctuation rule reads the attention accumulated by the two opening
rules, so the three must stay registered in this order.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from postchecker.common.types import Dimension
from postchecker.models.output import FeedbackItem
from postchecker.rules.base import Rule, RuleContext, RuleHit, hit

ALERT_EMOJI = ("🚨", "💥", "🎉", "📢", "❗")
EMOJI_BONUS = 25
OPENING_BONUS = 20
PUNCTUATION_BONUS = 15
PUNCTUATION_CEILING = 45

_LEADING_CAPS = re.compile(r"[A-Z\s!?]+")


@Rule.register("attention_emoji")
class EmojiOpeningRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if not context.text.startswith(ALERT_EMOJI):
            return []
        return [
            hit(
                FeedbackItem.success("Great use of attention-grabbing emoji at the start!"),
                Dimension.ATTENTION,
                EMOJI_BONUS,
            )
        ]


@Rule.register("attention_opening")
class CapitalOpeningRule(Rule):
    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if not _LEADING_CAPS.match(context.text):
            return []
        return [
            hit(
                FeedbackItem.success("Strong opening with capital letters or punctuation."),
                Dimension.ATTENTION,
                OPENING_BONUS,
            )
        ]


@Rule.register("attention_punctuation")
class PunctuationRule(Rule):
    """Reward ? and ! unless the opening already grabs enough attention."""

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        text = context.text
        if "?" not in text and "!" not in text:
            return []
        if running.get(Dimension.ATTENTION, 0) >= PUNCTUATION_CEILING:
            return []
        return [
            hit(
                FeedbackItem.success("Good use of question or exclamation marks to grab attention."),
                Dimension.ATTENTION,
                PUNCTUATION_BONUS,
            )
        ]
