"""Shared test fixtures and configuration."""

import os

import pytest


# Complete test environment that pins every Settings value
TEST_ENV = {
    "SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT": "5",
    "SEARCH_SERVER_RELEVANCE_EPSILON": "1e-6",
    "SEARCH_SERVER_METRICS_WINDOW_SIZE": "1000",
    "SEARCH_SERVER_SLOW_QUERY_MS": "10.0",
    "SEARCH_SERVER_LOG_LEVEL": "info",
    "SEARCH_SERVER_LOG_JSON": "false",
}


# Set environment variables immediately when conftest.py is loaded
for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset search-server environment variables before each test."""
    for key in list(os.environ):
        if key.startswith("SEARCH_SERVER_") and key not in TEST_ENV:
            monkeypatch.delenv(key, raising=False)
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
