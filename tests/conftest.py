"""
Pytest configuration and fixtures for all tests.
"""

import os

import pytest

from ezmessage.config import ENV_PREFIX, get_settings


@pytest.fixture(autouse=True)
def clear_defaults(monkeypatch):
    """Clear configured defaults so every test starts from an empty builder."""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dummy_source():
    """Data source that carries its own name."""
    from ezmessage import ByteArrayDataSource
    return ByteArrayDataSource(b"\x00\x00\x00", "text/txt", name="dummy")


@pytest.fixture
def anonymous_source():
    """Data source without a name."""
    from ezmessage import ByteArrayDataSource
    return ByteArrayDataSource(b"\x00\x00\x00", "text/txt")
