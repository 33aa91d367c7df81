"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent))


def _offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network disabled in tests", request=request)


@pytest.fixture(autouse=True)
def _no_network_calls():
    """Every default client is offline — providers see a dead network unless a test says otherwise."""
    with patch(
        "word_validator.chain.build_client",
        side_effect=lambda: httpx.Client(transport=httpx.MockTransport(_offline)),
    ):
        yield
