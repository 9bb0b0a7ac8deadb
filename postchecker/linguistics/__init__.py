"""Optional linguistic toolkit integration."""

from .nltk_provider import NltkProvider
from .types import LinguisticFeatures, LinguisticProvider

__all__ = ["LinguisticFeatures", "LinguisticProvider", "NltkProvider"]
