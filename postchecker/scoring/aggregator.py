"""Score aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from postchecker.common.types import Dimension, Language
from postchecker.models.output import AidaScore, AnalysisResult, FeedbackItem
from postchecker.rules.base import RuleHit

MIN_SCORE = 0
MAX_SCORE = 100
WEAK_SCORE = 30

WEAKNESS_MESSAGES: Mapping[Dimension, str] = MappingProxyType(
    {
        Dimension.ATTENTION: "Your post needs a stronger attention-grabbing element.",
        Dimension.INTEREST: "Try to make your post more interesting or intriguing.",
        Dimension.DESIRE: "Increase the desirability of your offer or content.",
        Dimension.ACTION: "Include a clearer call-to-action in your post.",
    }
)


def clamp(value: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, value))


class ScoreAggregator:
    """Sum rule hits into a bounded AnalysisResult."""

    def totals(self, hits: Iterable[RuleHit]) -> dict[Dimension, int]:
        """Sum deltas per dimension, unclamped."""
        totals = {dimension: 0 for dimension in Dimension}
        for rule_hit in hits:
            if rule_hit.dimension is not None:
                totals[rule_hit.dimension] += rule_hit.delta
        return totals

    def aggregate(
        self, hits: Iterable[RuleHit], language: Language = Language.DEFAULT
    ) -> AnalysisResult:
        """Build the final result.

        Rule feedback keeps its order; weakness feedback for AIDA dimensions
        scoring below 30 follows in attention, interest, desire, action order.
        """
        hits = list(hits)
        scores = {dimension: clamp(total) for dimension, total in self.totals(hits).items()}

        feedback = [h.feedback for h in hits if h.feedback is not None]
        for dimension in Dimension.aida():
            if scores[dimension] < WEAK_SCORE:
                feedback.append(FeedbackItem.error(WEAKNESS_MESSAGES[dimension]))

        return AnalysisResult(
            aida_score=AidaScore(**{d.value: scores[d] for d in Dimension.aida()}),
            engagement_score=scores[Dimension.ENGAGEMENT],
            feedback=tuple(feedback),
            language=language,
        )
