"""
External source chain — ask providers in a fixed order, stop at the first yes.

Sequential (default):
    provider 1 ──no──▶ provider 2 ──no──▶ provider 3 ──no──▶ not found
        │yes               │yes               │yes
        ▼                  ▼                  ▼
      found              found              found

Parallel (opt-in):
    All providers are dispatched at once under an overall deadline, but the
    answer is still attributed to the first confirming provider IN CHAIN
    ORDER, so both modes produce identical results for identical responses.

Every provider call carries its own timeout. In sequential mode three
timeouts in a row cost roughly three times the per-call timeout; parallel
mode caps the whole lookup at the deadline.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from time import monotonic
from typing import Sequence

import httpx

from .models import ProviderAttempt, ProviderOutcome
from .providers import DEFAULT_TIMEOUT, ExternalProvider

logger = logging.getLogger(__name__)

USER_AGENT = "word-validator/0.1"


def build_client() -> httpx.Client:
    """Shared HTTP client (connection pool) used by every provider."""
    return httpx.Client(headers={"User-Agent": USER_AGENT}, follow_redirects=True)


class ExternalSourceChain:
    """Ordered provider fallback with first-success-wins semantics.

    Usage:
        chain = ExternalSourceChain(default_providers())
        if chain.check("hello"):
            ...
        chain.close()
    """

    def __init__(
        self,
        providers: Sequence[ExternalProvider],
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        parallel: bool = False,
        deadline: float | None = None,
    ):
        self.providers = list(providers)
        self.timeout = timeout
        self.parallel = parallel
        self.deadline = deadline
        self._owns_client = client is None
        self.client = build_client() if client is None else client

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self.providers]

    def check(self, word: str) -> bool:
        """True if any provider confirms ``word``."""
        return any(attempt.confirmed for attempt in self.run(word))

    def run(self, word: str) -> list[ProviderAttempt]:
        """Consult providers and return every attempt made.

        The last attempt is the confirming one when the word was found.
        """
        if self.parallel and len(self.providers) > 1:
            return self._run_parallel(word)
        return self._run_sequential(word)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> ExternalSourceChain:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ─── Strategies ──────────────────────────────────────────────────

    def _run_sequential(self, word: str) -> list[ProviderAttempt]:
        attempts: list[ProviderAttempt] = []

        for provider in self.providers:
            outcome = provider.check(word, self.client, self.timeout)
            attempts.append(ProviderAttempt(provider=provider.name, outcome=outcome))
            if outcome == ProviderOutcome.CONFIRMED:
                break

        return attempts

    def _run_parallel(self, word: str) -> list[ProviderAttempt]:
        attempts: list[ProviderAttempt] = []
        budget = self.deadline if self.deadline is not None else self.timeout * len(self.providers)
        expires = monotonic() + budget

        executor = ThreadPoolExecutor(
            max_workers=len(self.providers), thread_name_prefix="provider"
        )
        try:
            futures: list[Future[ProviderOutcome]] = [
                executor.submit(provider.check, word, self.client, self.timeout)
                for provider in self.providers
            ]

            # Walk in chain order so attribution matches sequential mode
            for provider, future in zip(self.providers, futures):
                remaining = max(0.0, expires - monotonic())
                try:
                    outcome = future.result(timeout=remaining)
                except FutureTimeout:
                    logger.warning("%s missed the %.1fs lookup deadline for '%s'", provider.name, budget, word)
                    outcome = ProviderOutcome.UNREACHABLE

                attempts.append(ProviderAttempt(provider=provider.name, outcome=outcome))
                if outcome == ProviderOutcome.CONFIRMED:
                    break
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return attempts
