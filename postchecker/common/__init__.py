from .component import ComponentFactory
from .config import BaseConfig, RootConfig
from .types import Dimension, FeedbackKind, InvalidPlatformError, Language, Platform, ScoreBand

__all__ = [
    "BaseConfig",
    "ComponentFactory",
    "Dimension",
    "FeedbackKind",
    "InvalidPlatformError",
    "Language",
    "Platform",
    "RootConfig",
    "ScoreBand",
]
