"""Pytest configuration and shared fixtures for api-version-client tests."""

import pytest

from api_version_client.testing import RequestRecorder


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing settings resolution.
    """
    import os

    test_prefixes = ("TEST_", "API_", "CLIENT_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def recorder():
    """Mock transport recording every request sent through it."""
    return RequestRecorder()
