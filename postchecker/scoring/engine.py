"""Rule engine for post scoring."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType

from postchecker.common.component import ComponentFactory
from postchecker.common.types import Dimension, Language, Platform
from postchecker.language.detector import LanguageDetector
from postchecker.language.lexicon import LEXICONS
from postchecker.language.resolver import LanguageResolver
from postchecker.linguistics.nltk_provider import NltkProvider
from postchecker.linguistics.types import LinguisticProvider
from postchecker.models.input import PostInput
from postchecker.models.output import AnalysisResult
from postchecker.rules import LINGUISTIC_RULES, RuleContext, RuleHit, build_rules
from postchecker.scoring.aggregator import ScoreAggregator
from postchecker.scoring.config import ScorerConfig
from postchecker.text.normalizer import normalize

logger = logging.getLogger(__name__)


class RuleEngine(ComponentFactory[ScorerConfig]):
    """Score posts by running every configured rule once per call.

    The engine holds no per-call state, so one instance can serve any
    number of calls.
    """

    _config_type = ScorerConfig

    def __init__(
        self,
        config: ScorerConfig | None = None,
        provider: LinguisticProvider | None = None,
        detector: LanguageDetector | None = None,
    ) -> None:
        """Initialize engine."""
        super().__init__(config or ScorerConfig())
        self._resolver = LanguageResolver(
            detector=detector,
            default=self.config.default_language,
            detect=self.config.detect_language,
        )
        self._provider = provider if provider is not None else self._load_provider()
        self._aggregator = ScoreAggregator()

        names = self.config.rules
        if self._provider is None:
            names = [name for name in names if name not in LINGUISTIC_RULES]
        self._rules = build_rules(names)
        logger.debug("Initialized engine with rules: %s", ", ".join(names))

    def _load_provider(self) -> LinguisticProvider | None:
        if not self.config.linguistics.enabled:
            return None

        missing = NltkProvider.missing_resources()
        if missing:
            logger.warning(
                "Linguistic rules disabled, missing NLTK resources: %s", ", ".join(missing)
            )
            return None
        return NltkProvider()

    @property
    def rules(self) -> tuple[str, ...]:
        """Names of the rules this engine evaluates, in order."""
        return tuple(rule.name for rule in self._rules)

    @property
    def provider(self) -> LinguisticProvider | None:
        return self._provider

    def analyze(
        self,
        text: str,
        platform: Platform | str,
        language: Language | str | None = None,
    ) -> AnalysisResult:
        """Score a post.

        Args:
            text: Raw post content
            platform: Target platform
            language: Explicit language, detected from the text when omitted

        Returns:
            AnalysisResult with AIDA and engagement scores and feedback

        Raises:
            InvalidPlatformError: If the platform is not supported
        """
        platform = Platform.parse(platform)
        text = text or ""
        resolved = self._resolver.resolve(text, language)

        return self.analyze_post(PostInput(text=text, platform=platform, language=resolved))

    def analyze_post(self, post: PostInput) -> AnalysisResult:
        """Score a validated post."""
        language = post.language or self._resolver.resolve(post.text)
        splitter = self._provider.sentences if self._provider is not None else None
        normalized = normalize(post.text, splitter)

        features = None
        if self._provider is not None and post.text.strip():
            features = self._provider.features(post.text, normalized.sentences)

        context = RuleContext(
            post=post,
            normalized=normalized,
            language=language,
            lexicon=LEXICONS[language],
            features=features,
        )

        hits: list[RuleHit] = []
        running = {dimension: 0 for dimension in Dimension}
        for rule in self._rules:
            for rule_hit in rule.evaluate(context, MappingProxyType(running)):
                hits.append(rule_hit)
                if rule_hit.dimension is not None:
                    running[rule_hit.dimension] += rule_hit.delta

        logger.debug(
            "Analyzed %d chars for %s in %s: %d hits",
            normalized.char_count,
            post.platform.value,
            language.value,
            len(hits),
        )
        return self._aggregator.aggregate(hits, language)


@lru_cache(maxsize=1)
def default_engine() -> RuleEngine:
    """Get a shared engine with the default configuration."""
    return RuleEngine()


def analyze(
    text: str,
    platform: Platform | str,
    language: Language | str | None = None,
) -> AnalysisResult:
    """Score a post with the default engine."""
    return default_engine().analyze(text, platform, language)
