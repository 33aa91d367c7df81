"""
Runtime settings, read from the environment (and a .env file, if present).

Every setting has a default, so the service starts with no configuration at all.
Bad values fail loudly at startup with ConfigurationError, never mid-request.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from .exceptions import ConfigurationError
from .providers import DEFAULT_TIMEOUT
from .wordlist import PRELOAD, STRATEGIES, default_word_list_path

SEQUENTIAL = "sequential"
PARALLEL = "parallel"
LOOKUP_MODES: frozenset[str] = frozenset({SEQUENTIAL, PARALLEL})
LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    word_list_path: Path = field(default_factory=default_word_list_path)
    word_list_strategy: str = PRELOAD
    provider_timeout: float = DEFAULT_TIMEOUT
    lookup_mode: str = SEQUENTIAL
    lookup_deadline: float = 10.0
    merriam_webster_key: str = "test"
    log_level: str = "INFO"

    @property
    def parallel(self) -> bool:
        return self.lookup_mode == PARALLEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        defaults = cls()

        strategy = env.get("WORD_LIST_STRATEGY", defaults.word_list_strategy).strip().lower()
        if strategy not in STRATEGIES:
            raise ConfigurationError(
                f"WORD_LIST_STRATEGY must be one of {sorted(STRATEGIES)}, got '{strategy}'",
                details={"value": strategy},
            )

        mode = env.get("LOOKUP_MODE", defaults.lookup_mode).strip().lower()
        if mode not in LOOKUP_MODES:
            raise ConfigurationError(
                f"LOOKUP_MODE must be one of {sorted(LOOKUP_MODES)}, got '{mode}'",
                details={"value": mode},
            )

        raw_path = env.get("WORD_LIST_PATH")

        return cls(
            host=env.get("HOST", defaults.host),
            port=_parse_port(env.get("PORT")),
            word_list_path=Path(raw_path) if raw_path else defaults.word_list_path,
            word_list_strategy=strategy,
            provider_timeout=_parse_seconds("PROVIDER_TIMEOUT", env.get("PROVIDER_TIMEOUT"), defaults.provider_timeout),
            lookup_mode=mode,
            lookup_deadline=_parse_seconds("LOOKUP_DEADLINE", env.get("LOOKUP_DEADLINE"), defaults.lookup_deadline),
            merriam_webster_key=env.get("MERRIAM_WEBSTER_API_KEY", defaults.merriam_webster_key),
            log_level=_parse_log_level(env.get("LOG_LEVEL")),
        )


# ─── Safe Parsers ────────────────────────────────────────────────────


def _parse_port(value: str | None) -> int:
    if value is None or not value.strip():
        return Settings.port
    try:
        port = int(value)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got '{value}'", details={"value": value})
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}", details={"value": port})
    return port


def _parse_seconds(name: str, value: str | None, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        seconds = float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got '{value}'", details={"value": value})
    if seconds <= 0:
        raise ConfigurationError(f"{name} must be positive, got {seconds}", details={"value": seconds})
    return seconds


def _parse_log_level(value: str | None) -> str:
    if value is None or not value.strip():
        return logging.getLevelName(logging.INFO)
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got '{value}'",
            details={"value": value},
        )
    return level
