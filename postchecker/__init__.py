"""Rule-based AIDA scoring for social media posts."""

from types import MappingProxyType

from .common import Dimension, FeedbackKind, InvalidPlatformError, Language, Platform, ScoreBand
from .language import LEXICONS, Lexicon
from .models import AidaScore, AnalysisResult, FeedbackItem, PostInput
from .scoring import RuleEngine, ScorerConfig, analyze

PLATFORM_MAX_LENGTHS = MappingProxyType({platform: platform.max_length for platform in Platform})

__all__ = [
    "LEXICONS",
    "PLATFORM_MAX_LENGTHS",
    "AidaScore",
    "AnalysisResult",
    "Dimension",
    "FeedbackItem",
    "FeedbackKind",
    "InvalidPlatformError",
    "Language",
    "Lexicon",
    "Platform",
    "PostInput",
    "RuleEngine",
    "ScoreBand",
    "ScorerConfig",
    "analyze",
]
