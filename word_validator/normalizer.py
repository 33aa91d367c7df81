"""
Canonicalize raw query text into a comparable key.

Both the query and every word-list entry pass through the same function,
so "Cat!", "CAT" and "cat" all meet at "cat".
"""

from __future__ import annotations

from .exceptions import MissingParameterError


def normalize(raw: str | None) -> str:
    """Lower-case the input and drop every non-alphanumeric character.

    Args:
        raw: The query text. ``None`` means the caller supplied nothing.

    Returns:
        The normalized key. May be empty if the input was all symbols.

    Raises:
        MissingParameterError: if ``raw`` is None.
    """
    if raw is None:
        raise MissingParameterError()

    # Lower first: some characters lower-case into a letter plus a combining mark
    return "".join(ch for ch in raw.lower() if ch.isalnum())
