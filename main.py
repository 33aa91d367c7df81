#!/usr/bin/env python3
"""
Word Validator — Entry Point
=============================

Usage:
    python main.py                      # Serve the API on HOST:PORT (default 0.0.0.0:8080)
    python main.py check hello xyzzy    # Validate words from the command line
    PORT=9000 python main.py            # Port override
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from word_validator.config import Settings
from word_validator.models import Source, ValidationResult
from word_validator.pipeline import WordValidationPipeline

load_dotenv()

logger = logging.getLogger("word_validator")


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60

_SOURCE_COLORS = {
    Source.LOCAL: _GREEN,
    Source.EXTERNAL: _CYAN,
    Source.NONE: _RED,
}


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_result(raw: str, result: ValidationResult) -> None:
    """Print one lookup: verdict, source, and every provider consulted."""
    color = _SOURCE_COLORS[result.source]
    verdict = "FOUND" if result.found else "NOT FOUND"
    shown = result.word or f"{_DIM}(empty after normalization){_RESET}"

    print(f"  {_BOLD}{raw}{_RESET} {_DIM}→{_RESET} {shown}")
    print(f"    {color}{_BOLD}{verdict}{_RESET}  source={result.source.value}")
    if result.provider:
        print(f"    {_DIM}confirmed by {result.provider}{_RESET}")
    for attempt in result.attempts:
        mark = _GREEN if attempt.confirmed else _YELLOW
        print(f"      {mark}{attempt.provider:<16}{_RESET} {attempt.outcome.value}")


def check_words(words: list[str], settings: Settings) -> int:
    """Validate each word and print a report.

    Returns:
        0 if every word was found, 1 otherwise.
    """
    pipeline = WordValidationPipeline.from_settings(settings)
    try:
        print(f"\n{'=' * _WIDTH}")
        print(f"{_BOLD}{_CYAN}  WORD VALIDATION{_RESET}")
        print(f"{'=' * _WIDTH}")
        results = []
        for raw in words:
            result = pipeline.validate(raw)
            print_result(raw, result)
            results.append(result)
        print(f"{'=' * _WIDTH}\n")
    finally:
        pipeline.close()

    return 0 if all(r.found for r in results) else 1


# ─── Main ────────────────────────────────────────────────────────────


def serve(settings: Settings) -> None:
    """Start the HTTP server."""
    logger.info("Word Validator API")
    logger.info("Starting server on http://%s:%d", settings.host, settings.port)
    uvicorn.run("api:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    if args and args[0] == "check":
        if len(args) < 2:
            print("Usage: python main.py check WORD [WORD ...]", file=sys.stderr)
            return 2
        return check_words(args[1:], settings)

    if args:
        print(__doc__, file=sys.stderr)
        return 2

    serve(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
