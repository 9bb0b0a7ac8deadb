"""Model package for post scoring."""

from .input import PostInput
from .output import AidaScore, AnalysisResult, FeedbackItem

__all__ = [
    "AidaScore",
    "AnalysisResult",
    "FeedbackItem",
    "PostInput",
]
