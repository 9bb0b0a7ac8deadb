"""Language resolution and keyword lexicons."""

from .detector import StopwordDetector
from .lexicon import LEXICONS, Lexicon, get_lexicon
from .resolver import LanguageResolver

__all__ = ["LEXICONS", "LanguageResolver", "Lexicon", "StopwordDetector", "get_lexicon"]
