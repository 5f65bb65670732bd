"""Shared pytest fixtures for HTTP-backed and settings-backed tests."""

from __future__ import annotations

import os
from typing import Callable

import httpx
import pytest
import structlog
import structlog.testing

from glsearch.config import get_settings

TEST_ORIGIN = "http://search.test"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for key in list(os.environ):
        if key.startswith("GLSEARCH_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def log_output():
    """Capture structlog events instead of printing them."""

    capture = structlog.testing.LogCapture()
    structlog.configure(processors=[capture], cache_logger_on_first_use=False)
    yield capture
    structlog.reset_defaults()


@pytest.fixture
def mock_client() -> Callable[[Callable], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by ``handler``."""

    def factory(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=TEST_ORIGIN, transport=httpx.MockTransport(handler))

    return factory
