"""
Pydantic models for validation results — one immutable record per request.

A result always says WHERE the answer came from. If it came from the network,
it also says which provider, and the full list of providers we asked.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Source Attribution ─────────────────────────────────────────────


class Source(str, Enum):
    """Which stage of the pipeline confirmed the word."""

    LOCAL = "local"  # Found in the word list
    EXTERNAL = "external"  # Confirmed by a provider
    NONE = "none"  # Nobody confirmed it


# ─── Provider Outcomes ──────────────────────────────────────────────


class ProviderOutcome(str, Enum):
    """Tri-state answer from a single external provider."""

    CONFIRMED = "confirmed"
    NOT_CONFIRMED = "not_confirmed"  # Provider answered, word not recognised
    UNREACHABLE = "unreachable"  # Network error, timeout or malformed body


class ProviderAttempt(BaseModel):
    """One provider consulted during an external lookup."""

    model_config = {"frozen": True}

    provider: str
    outcome: ProviderOutcome

    @property
    def confirmed(self) -> bool:
        return self.outcome == ProviderOutcome.CONFIRMED


# ─── Validation Result ──────────────────────────────────────────────


class ValidationResult(BaseModel):
    """The final output of the validation pipeline."""

    model_config = {"frozen": True}

    word: str  # The normalized key, e.g. "hello" for "HELLO!"
    found: bool
    source: Source
    provider: Optional[str] = None  # Set only when source is EXTERNAL
    attempts: list[ProviderAttempt] = Field(default_factory=list)
