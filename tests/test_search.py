"""Tests for the structured search client and its explicit outcomes."""

from __future__ import annotations

import io
import json

import httpx
import pytest

from glsearch.config import ProbeSettings
from glsearch.services.exceptions import SearchRequestError
from glsearch.services.search import (
    SearchClient,
    SearchFailure,
    SearchSuccess,
    build_search_body,
    report_outcome,
)


def test_build_search_body_is_encoded_once():
    body = build_search_body("  bind texture to buffer ")
    assert json.loads(body) == {"query": "bind texture to buffer"}


def test_build_search_body_rejects_blank_query():
    with pytest.raises(ValueError):
        build_search_body("   ")


@pytest.mark.asyncio
async def test_search_success(mock_client):
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        assert request.url.path == "/api/search"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"query": "glBindBuffer"}
        return httpx.Response(200, json={"results": []})

    async with mock_client(handler) as client:
        outcome = await SearchClient(client).search("glBindBuffer")

    assert isinstance(outcome, SearchSuccess)
    assert outcome.ok is True
    assert outcome.response.json() == {"results": []}
    assert outcome.describe() == "<Response [200 OK]>"


@pytest.mark.asyncio
async def test_search_uses_configured_path(mock_client):
    paths: list[str] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(204)

    settings = ProbeSettings(search_path="v2/search")
    async with mock_client(handler) as client:
        outcome = await SearchClient(client, settings=settings).search("texture")

    assert outcome.ok
    assert paths == ["/v2/search"]


@pytest.mark.asyncio
async def test_search_status_error_becomes_failure(mock_client):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="x" * 800)

    async with mock_client(handler) as client:
        outcome = await SearchClient(client).search("texture")

    assert isinstance(outcome, SearchFailure)
    assert outcome.ok is False
    error = outcome.error
    assert isinstance(error, SearchRequestError)
    assert error.status_code == 503
    assert len(error.detail) == 500
    assert isinstance(error.__cause__, httpx.HTTPStatusError)
    assert outcome.describe().startswith("Search failed: Search request failed (503)")


@pytest.mark.asyncio
async def test_search_transport_error_becomes_failure(mock_client):
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with mock_client(handler) as client:
        outcome = await SearchClient(client).search("texture")

    assert isinstance(outcome, SearchFailure)
    assert outcome.error.status_code is None
    assert "connection refused" in str(outcome.error)
    assert isinstance(outcome.error.__cause__, httpx.ConnectError)


def test_report_outcome_exit_codes():
    request = httpx.Request("POST", "http://search.test/api/search")
    success = SearchSuccess(httpx.Response(200, request=request))
    failure = SearchFailure(SearchRequestError("Search request failed: boom"))

    out = io.StringIO()
    assert report_outcome(success, out) == 0
    assert report_outcome(failure, out) == 1
    assert out.getvalue().splitlines() == [
        "<Response [200 OK]>",
        "Search failed: Search request failed: boom",
    ]


@pytest.mark.asyncio
async def test_search_failure_is_logged(mock_client, log_output):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    async with mock_client(handler) as client:
        await SearchClient(client).search("texture")

    events = [entry for entry in log_output.entries if entry["event"] == "search_request_failed"]
    assert len(events) == 1
    assert events[0]["status_code"] == 500
    assert events[0]["log_level"] == "warning"
