"""
External word-lookup providers.

Each provider answers one question — "do you know this word?" — with a
tri-state ProviderOutcome:

  CONFIRMED       the provider recognised the word
  NOT_CONFIRMED   the provider answered, and did not recognise it
  UNREACHABLE     network error, timeout, or a body we could not parse

A provider NEVER raises. Failure is not an error here — the chain simply
moves on to the next provider.

Providers (in chain order):
  1. Free Dictionary API   → any 2xx for /entries/en/{word}
  2. Datamuse              → first spelling suggestion equals the word
  3. Merriam-Webster       → any 2xx for /collegiate/json/{word}
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from .models import ProviderOutcome
from .normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0  # Seconds, per provider call


# ─── Base Provider ───────────────────────────────────────────────────


class ExternalProvider(ABC):
    """A named endpoint plus a rule for reading its response as found / not found."""

    name: str = "provider"

    @abstractmethod
    def request(self, client: httpx.Client, word: str, timeout: float) -> httpx.Response:
        """Issue the HTTP lookup for ``word``."""

    @abstractmethod
    def interpret(self, response: httpx.Response, word: str) -> bool:
        """Decide whether ``response`` confirms ``word``."""

    def check(self, word: str, client: httpx.Client, timeout: float = DEFAULT_TIMEOUT) -> ProviderOutcome:
        """Look ``word`` up and classify the answer. Never raises."""
        try:
            response = self.request(client, word, timeout)
            confirmed = self.interpret(response, word)
        except httpx.TimeoutException:
            logger.warning("%s timed out after %.1fs for '%s'", self.name, timeout, word)
            return ProviderOutcome.UNREACHABLE
        except (httpx.HTTPError, httpx.InvalidURL, httpx.CookieConflict) as e:
            logger.warning("%s request failed for '%s': %s", self.name, word, e)
            return ProviderOutcome.UNREACHABLE
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("%s returned an unreadable response for '%s': %s", self.name, word, e)
            return ProviderOutcome.UNREACHABLE

        if confirmed:
            logger.info("%s confirmed '%s'", self.name, word)
            return ProviderOutcome.CONFIRMED

        logger.debug("%s did not confirm '%s'", self.name, word)
        return ProviderOutcome.NOT_CONFIRMED

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


# ─── Concrete Providers ──────────────────────────────────────────────


class DefinitionLookupProvider(ExternalProvider):
    """Free Dictionary API: a successful status means a definition exists."""

    name = "free_dictionary"

    def __init__(self, base_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"):
        self.base_url = base_url.rstrip("/")

    def request(self, client: httpx.Client, word: str, timeout: float) -> httpx.Response:
        return client.get(f"{self.base_url}/{word}", timeout=timeout)

    def interpret(self, response: httpx.Response, word: str) -> bool:
        return response.is_success


class FuzzyMatchProvider(ExternalProvider):
    """Datamuse spelling suggestions.

    Datamuse always returns *something* close to the query, so a 2xx alone
    proves nothing. The word is confirmed only when the top-ranked suggestion
    normalizes to exactly the query.
    """

    name = "datamuse"

    def __init__(self, base_url: str = "https://api.datamuse.com/words", top_k: int = 1):
        self.base_url = base_url
        self.top_k = top_k

    def request(self, client: httpx.Client, word: str, timeout: float) -> httpx.Response:
        return client.get(self.base_url, params={"sp": word, "max": self.top_k}, timeout=timeout)

    def interpret(self, response: httpx.Response, word: str) -> bool:
        response.raise_for_status()
        suggestions = response.json()

        if not isinstance(suggestions, list):
            raise ValueError(f"expected a list of suggestions, got {type(suggestions).__name__}")
        if not suggestions:
            return False

        top = suggestions[0]["word"]
        if not isinstance(top, str):
            raise ValueError(f"suggestion word is not a string: {top!r}")

        return normalize(top) == word


class DictionaryEntryProvider(ExternalProvider):
    """Merriam-Webster Collegiate: a successful status means an entry exists.

    The public key "test" is accepted by the reference behaviour.
    """

    name = "merriam_webster"

    def __init__(
        self,
        api_key: str = "test",
        base_url: str = "https://www.dictionaryapi.com/api/v3/references/collegiate/json",
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def request(self, client: httpx.Client, word: str, timeout: float) -> httpx.Response:
        return client.get(f"{self.base_url}/{word}", params={"key": self.api_key}, timeout=timeout)

    def interpret(self, response: httpx.Response, word: str) -> bool:
        return response.is_success


# ─── Public API ──────────────────────────────────────────────────────


def default_providers(merriam_webster_key: str = "test") -> list[ExternalProvider]:
    """The three providers in their fixed chain order."""
    return [
        DefinitionLookupProvider(),
        FuzzyMatchProvider(),
        DictionaryEntryProvider(api_key=merriam_webster_key),
    ]
