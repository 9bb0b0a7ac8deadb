"""Working-language resolution."""

from __future__ import annotations

import logging

from postchecker.common.types import Language
from postchecker.language.detector import LanguageDetector, StopwordDetector

logger = logging.getLogger(__name__)


class LanguageResolver:
    """Pick the language whose lexicon applies to a post."""

    def __init__(
        self,
        detector: LanguageDetector | None = None,
        default: Language = Language.DEFAULT,
        detect: bool = True,
    ) -> None:
        self._detector = detector if detector is not None else StopwordDetector()
        self._default = default
        self._detect = detect

    @property
    def default(self) -> Language:
        return self._default

    def resolve(self, text: str, explicit: Language | str | None = None) -> Language:
        """Resolve the working language.

        An explicit language always wins; unsupported codes fall back to the
        default. Without one, the text is classified and the detected code
        mapped to a supported language.
        """
        if explicit is not None:
            return self._supported(explicit)

        if not self._detect or not (text or "").strip():
            return self._default

        try:
            code = self._detector(text)
        except LookupError as e:
            # Detection stays off for the lifetime of this resolver
            self._detect = False
            logger.warning("Language detection unavailable, using %s: %s", self._default.value, e)
            return self._default

        logger.debug("Detected language code: %s", code)
        return self._supported(code)

    def _supported(self, code: Language | str | None) -> Language:
        return Language.lookup(code) or self._default
