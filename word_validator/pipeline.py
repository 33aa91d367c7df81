"""
Main validation pipeline — orchestrates the lookup.

Flow:
  ┌──────────┐
  │ Raw word │──── absent ────▶ MissingParameterError (HTTP 400)
  └────┬─────┘
       │
  ┌────▼──────┐
  │ Normalize │──── empty ─────▶ found=false, source=none
  └────┬──────┘
       │
  ┌────▼──────┐
  │ Word list │──── hit ───────▶ found=true,  source=local
  └────┬──────┘
       │ miss
  ┌────▼──────┐
  │ Providers │──── confirm ───▶ found=true,  source=external
  └────┬──────┘
       │ exhausted
       ▼
  found=false, source=none

Design principles:
  - The word list ALWAYS goes first; a local hit never touches the network.
  - Providers are best-effort; a dead provider is just a "no".
  - One pass per request. No retries, no caching between requests.
"""

from __future__ import annotations

import logging

from .chain import ExternalSourceChain
from .config import Settings
from .models import ProviderAttempt, Source, ValidationResult
from .normalizer import normalize
from .providers import default_providers
from .wordlist import PreloadedWordList, WordList, load_word_list

logger = logging.getLogger(__name__)


class WordValidationPipeline:
    """Local word list first, external providers on a miss.

    Usage:
        pipeline = WordValidationPipeline.from_settings(Settings.from_env())
        result = pipeline.validate("Hello!")
        result.found, result.source   # True, Source.LOCAL
    """

    def __init__(self, word_list: WordList, chain: ExternalSourceChain):
        self.word_list = word_list
        self.chain = chain

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WordValidationPipeline:
        settings = settings or Settings()
        word_list = load_word_list(settings.word_list_path, settings.word_list_strategy)
        chain = ExternalSourceChain(
            default_providers(settings.merriam_webster_key),
            timeout=settings.provider_timeout,
            parallel=settings.parallel,
            deadline=settings.lookup_deadline,
        )
        return cls(word_list, chain)

    @property
    def dictionary_size(self) -> int | None:
        """Number of preloaded words, or None when the list is scanned on demand."""
        if isinstance(self.word_list, PreloadedWordList):
            return len(self.word_list)
        return None

    def validate(self, raw_word: str | None) -> ValidationResult:
        """Decide whether ``raw_word`` is a known word.

        Args:
            raw_word: The word as the caller sent it; None if not sent at all.

        Returns:
            ValidationResult tagged with the stage that confirmed it.

        Raises:
            MissingParameterError: if ``raw_word`` is None.
        """
        word = normalize(raw_word)

        # ── Step 1: Nothing left to look up ─────────────────────────
        if not word:
            logger.info("Query %r normalized to an empty key — not found", raw_word)
            return ValidationResult(word=word, found=False, source=Source.NONE)

        # ── Step 2: Local word list ─────────────────────────────────
        if self.word_list.contains(word):
            logger.debug("'%s' found in local word list", word)
            return ValidationResult(word=word, found=True, source=Source.LOCAL)

        # ── Step 3: External provider chain ─────────────────────────
        attempts = self.chain.run(word)
        confirmed_by = _confirming_provider(attempts)

        if confirmed_by is not None:
            return ValidationResult(
                word=word,
                found=True,
                source=Source.EXTERNAL,
                provider=confirmed_by,
                attempts=attempts,
            )

        logger.info("'%s' not confirmed by any of %d provider(s)", word, len(attempts))
        return ValidationResult(word=word, found=False, source=Source.NONE, attempts=attempts)

    def close(self) -> None:
        self.chain.close()


def _confirming_provider(attempts: list[ProviderAttempt]) -> str | None:
    for attempt in attempts:
        if attempt.confirmed:
            return attempt.provider
    return None
