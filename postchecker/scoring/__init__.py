"""Post scoring."""

from .aggregator import WEAKNESS_MESSAGES, ScoreAggregator
from .config import LinguisticsConfig, ScorerConfig
from .engine import RuleEngine, analyze, default_engine

__all__ = [
    "LinguisticsConfig",
    "RuleEngine",
    "ScoreAggregator",
    "ScorerConfig",
    "WEAKNESS_MESSAGES",
    "analyze",
    "default_engine",
]
