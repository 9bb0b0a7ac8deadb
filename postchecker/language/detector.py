"""Stopword-based language detection."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from nltk.corpus import stopwords

logger = logging.getLogger(__name__)

LanguageDetector = Callable[[str], str | None]

# NLTK stopword list name -> ISO 639-3 code
STOPWORD_LANGUAGES: dict[str, str] = {
    "english": "eng",
    "dutch": "nld",
    "german": "deu",
    "french": "fra",
    "spanish": "spa",
    "italian": "ita",
    "portuguese": "por",
}

_WORD = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")


class StopwordDetector:
    """Classify text by its overlap with per-language stopword lists.

    Returns the ISO 639-3 code of the language whose stopwords occur most
    often, or ``None`` when no stopword matches or the best two languages
    tie. Raises ``LookupError`` when the NLTK ``stopwords`` corpus is not
    installed; the corpus is looked up once and a failure is remembered.
    """

    def __init__(self, languages: dict[str, str] | None = None) -> None:
        self._languages = dict(languages or STOPWORD_LANGUAGES)
        self._stopwords: dict[str, frozenset[str]] | None = None
        self._error: LookupError | None = None

    def _load(self) -> dict[str, frozenset[str]]:
        if self._error is not None:
            raise self._error
        if self._stopwords is None:
            try:
                loaded = {
                    code: frozenset(w.lower() for w in stopwords.words(name))
                    for name, code in self._languages.items()
                }
            except LookupError as e:
                self._error = e
                raise
            self._stopwords = loaded
            logger.debug("Loaded stopwords for %d languages", len(loaded))
        return self._stopwords

    def __call__(self, text: str) -> str | None:
        tokens = [t.lower() for t in _WORD.findall(text or "")]
        if not tokens:
            return None

        counts = {
            code: sum(1 for t in tokens if t in words) for code, words in self._load().items()
        }
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        best_code, best = ranked[0]
        if best == 0 or (len(ranked) > 1 and ranked[1][1] == best):
            return None
        return best_code
