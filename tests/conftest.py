"""Pytest configuration and fixtures."""

import pytest


class FakeResponse:
    """Response double that keeps headers as ordered (name, value) pairs."""

    def __init__(self, headers):
        self.raw_headers = list(headers)


@pytest.fixture
def make_response():
    """Build a response-like object from (name, value) header pairs."""
    return FakeResponse


@pytest.fixture
def sample_response():
    """Create a response carrying two Set-Cookie headers."""
    return FakeResponse(
        [
            ("Content-Type", "text/html"),
            ("Set-Cookie", "NAME=VALUE;"),
            ("Set-Cookie", "FOO=BAR;"),
        ]
    )
