"""
Local word list — the first (and cheapest) source of truth.

Two interchangeable strategies:
  1. Preloaded: read the file once at startup into a frozenset (O(1) lookups)
  2. Streaming: scan the file on every lookup (no resident memory, picks up edits)

The file is plain text, one word per line. Punctuation is tolerated because
every token goes through the same normalizer as the query.

A missing or unreadable file is NOT fatal: the list is simply empty and the
pipeline falls through to the external providers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from .exceptions import ConfigurationError
from .normalizer import normalize

logger = logging.getLogger(__name__)

PRELOAD = "preload"
STREAM = "stream"
STRATEGIES: frozenset[str] = frozenset({PRELOAD, STREAM})


def default_word_list_path() -> Path:
    """The bundled ``dictionary.txt`` at the project root."""
    return Path(__file__).parent.parent / "dictionary.txt"


# ─── Strategies ──────────────────────────────────────────────────────


class PreloadedWordList:
    """An immutable set of normalized words held for the process lifetime."""

    strategy = PRELOAD

    def __init__(self, words: frozenset[str]):
        self._words = words

    @classmethod
    def from_words(cls, words: Iterable[str]) -> PreloadedWordList:
        return cls(frozenset(key for key in map(normalize, words) if key))

    @classmethod
    def from_file(cls, path: str | Path) -> PreloadedWordList:
        """Load and normalize every token in ``path``.

        An absent or unreadable file yields an empty list.
        """
        path = Path(path)
        try:
            with path.open(encoding="utf-8", errors="replace") as f:
                words = frozenset(_iter_keys(f))
        except OSError as e:
            logger.warning("Word list %s unavailable (%s) — starting with an empty list", path, e)
            return cls(frozenset())

        logger.info("Loaded %d words from %s", len(words), path)
        return cls(words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)


class StreamingWordList:
    """Scans the word-list file on every lookup.

    Each call opens its own handle, so concurrent requests never share a cursor.
    """

    strategy = STREAM

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def contains(self, word: str) -> bool:
        if not word:
            return False
        try:
            with self.path.open(encoding="utf-8", errors="replace") as f:
                return any(key == word for key in _iter_keys(f))
        except OSError as e:
            logger.warning("Word list %s unavailable (%s) — treating as a local miss", self.path, e)
            return False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)


WordList = PreloadedWordList | StreamingWordList


# ─── Public API ──────────────────────────────────────────────────────


def load_word_list(path: str | Path | None = None, strategy: str = PRELOAD) -> WordList:
    """Build the local source for ``path`` using the named strategy.

    Args:
        path: Word-list file. Defaults to the bundled dictionary.txt.
        strategy: ``"preload"`` or ``"stream"``.
    """
    resolved = default_word_list_path() if path is None else Path(path)

    if strategy == PRELOAD:
        return PreloadedWordList.from_file(resolved)
    if strategy == STREAM:
        logger.info("Word list %s will be scanned on demand", resolved)
        return StreamingWordList(resolved)

    raise ConfigurationError(
        f"Unknown word list strategy '{strategy}'",
        details={"allowed": sorted(STRATEGIES)},
    )


# ─── Internal Helpers ────────────────────────────────────────────────


def _iter_keys(lines: Iterable[str]) -> Iterator[str]:
    """Yield the normalized, non-empty key of every whitespace-separated token."""
    for line in lines:
        for token in line.split():
            key = normalize(token)
            if key:
                yield key
