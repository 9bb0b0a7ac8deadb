"""Pytest configuration."""

import sys
from collections.abc import Sequence

import path
import pytest

sys.path.append(str(path.Path(__file__).parent.parent))

from postchecker.common.types import Language, Platform
from postchecker.language.lexicon import LEXICONS
from postchecker.linguistics.types import LinguisticFeatures
from postchecker.models.input import PostInput
from postchecker.rules.base import RuleContext
from postchecker.scoring.config import ScorerConfig
from postchecker.scoring.engine import RuleEngine
from postchecker.text.normalizer import normalize


class FakeProvider:
    """Linguistic provider returning canned features."""

    def __init__(self, features: LinguisticFeatures | None = None):
        self._features = features or LinguisticFeatures()
        self.calls: list[str] = []

    def sentences(self, text: str) -> list[str]:
        return [s.strip() for s in text.split(".") if s.strip()]

    def features(self, text: str, sentences: Sequence[str]) -> LinguisticFeatures:
        self.calls.append(text)
        return self._features.model_copy(update={"sentences": tuple(sentences)})


@pytest.fixture
def engine() -> RuleEngine:
    """Create an engine that never runs language detection."""
    return RuleEngine(ScorerConfig(detect_language=False))


@pytest.fixture
def make_context():
    """Build a rule context for a post."""

    def _make(
        text: str,
        platform: Platform = Platform.TWITTER,
        language: Language = Language.EN,
        features: LinguisticFeatures | None = None,
    ) -> RuleContext:
        return RuleContext(
            post=PostInput(text=text, platform=platform, language=language),
            normalized=normalize(text),
            language=language,
            lexicon=LEXICONS[language],
            features=features,
        )

    return _make


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    """Provide the fake linguistic provider class."""
    return FakeProvider
