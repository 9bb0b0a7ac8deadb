"""Engagement marker rules, each firing at most once per post."""

from __future__ import annotations

import re
from collections.abc import Mapping

from postchecker.common.types import Dimension
from postchecker.models.output import FeedbackItem
from postchecker.rules.base import Rule, RuleContext, RuleHit, hit

_BRACKETS = re.compile(r"\[.*?\]")
_LINK = re.compile(r"https?://\S+")


class MarkerRule(Rule):
    """Award a fixed engagement bonus when a marker is present."""

    delta: int
    message: str

    def present(self, text: str) -> bool:
        raise NotImplementedError

    def evaluate(self, context: RuleContext, running: Mapping[Dimension, int]) -> list[RuleHit]:
        if not self.present(context.text):
            return []
        return [hit(FeedbackItem.success(self.message), Dimension.ENGAGEMENT, self.delta)]


@Rule.register("brackets")
class BracketRule(MarkerRule):
    delta = 15
    message = "Good use of brackets to highlight important information."

    def present(self, text: str) -> bool:
        return _BRACKETS.search(text) is not None


@Rule.register("hashtags")
class HashtagRule(MarkerRule):
    delta = 10
    message = "Hashtags can increase engagement and discoverability."

    def present(self, text: str) -> bool:
        return "#" in text


@Rule.register("mentions")
class MentionRule(MarkerRule):
    delta = 10
    message = "Mentioning others can boost engagement and reach."

    def present(self, text: str) -> bool:
        return "@" in text


@Rule.register("links")
class LinkRule(MarkerRule):
    delta = 5
    message = "Including a link can drive traffic and engagement."

    def present(self, text: str) -> bool:
        return _LINK.search(text) is not None
