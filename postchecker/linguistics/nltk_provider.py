"""Linguistic features backed by NLTK."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer
from nltk.tokenize import sent_tokenize, word_tokenize

from postchecker.linguistics.types import LinguisticFeatures

logger = logging.getLogger(__name__)

REQUIRED_RESOURCES = (
    "tokenizers/punkt_tab",
    "taggers/averaged_perceptron_tagger_eng",
    "sentiment/vader_lexicon.zip",
)

SUPERLATIVE_TAGS = {"JJS", "RBS"}
PROPER_NOUN_TAGS = {"NNP", "NNPS"}


class NltkProvider:
    """Extract sentences, sentiment and part-of-speech features with NLTK.

    Resources are never downloaded here; install them ahead of time with
    ``python -m nltk.downloader punkt_tab averaged_perceptron_tagger_eng vader_lexicon``.
    """

    def __init__(self) -> None:
        missing = self.missing_resources()
        if missing:
            raise LookupError(f"Missing NLTK resources: {', '.join(missing)}")
        self._analyzer = SentimentIntensityAnalyzer()

    @staticmethod
    def missing_resources() -> list[str]:
        missing = []
        for resource in REQUIRED_RESOURCES:
            try:
                nltk.data.find(resource)
            except LookupError:
                missing.append(resource)
        return missing

    @classmethod
    def available(cls) -> bool:
        """Check whether all required NLTK resources are installed."""
        return not cls.missing_resources()

    def sentences(self, text: str) -> list[str]:
        return sent_tokenize(text)

    def features(self, text: str, sentences: Sequence[str]) -> LinguisticFeatures:
        questions: list[str] = []
        imperatives: list[str] = []
        superlatives: list[str] = []
        topics: list[str] = []

        for sentence in sentences:
            tagged = nltk.pos_tag(word_tokenize(sentence))
            words = [(w, t) for w, t in tagged if any(c.isalnum() for c in w)]
            if sentence.rstrip().endswith("?"):
                questions.append(sentence)
            elif words and words[0][1] == "VB":
                imperatives.append(sentence)

            for word, tag in words:
                if tag in SUPERLATIVE_TAGS:
                    superlatives.append(word)
                elif tag in PROPER_NOUN_TAGS and word not in topics:
                    topics.append(word)

        sentiment = self._analyzer.polarity_scores(text)["compound"] if text.strip() else 0.0
        logger.debug(
            "Extracted %d questions, %d imperatives, %d superlatives, %d topics",
            len(questions),
            len(imperatives),
            len(superlatives),
            len(topics),
        )

        return LinguisticFeatures(
            sentences=tuple(sentences),
            sentiment=sentiment,
            questions=tuple(questions),
            imperatives=tuple(imperatives),
            superlatives=tuple(superlatives),
            topics=tuple(topics),
        )
