"""
Custom exception hierarchy for word validation.

Only request-level and startup failures are exceptions. A missing word list or
an unreachable provider degrades to "not found" and never raises.
"""

from __future__ import annotations


class WordValidatorError(Exception):
    """Base exception for all word validator failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class MissingParameterError(WordValidatorError):
    """The caller did not supply a word at all (as opposed to an empty one)."""

    def __init__(self, message: str = "Missing 'word' query parameter", details: dict | None = None):
        super().__init__("MISSING_PARAMETER", message, details)


class ConfigurationError(WordValidatorError):
    """An environment setting has a value the service cannot use."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_CONFIGURATION", message, details)
