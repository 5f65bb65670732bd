"""Search client that reports every call as an explicit outcome."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import TextIO

import httpx

from glsearch.config import ProbeSettings
from glsearch.logging import logger
from glsearch.services.exceptions import SearchRequestError
from glsearch.services.invoker import REQUEST_HEADERS

DETAIL_CHAR_LIMIT = 500


@dataclass(slots=True)
class SearchSuccess:
    response: httpx.Response

    @property
    def ok(self) -> bool:
        return True

    def describe(self) -> str:
        return str(self.response)


@dataclass(slots=True)
class SearchFailure:
    error: SearchRequestError

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        return f"Search failed: {self.error}"


SearchOutcome = SearchSuccess | SearchFailure


def build_search_body(query: str) -> bytes:
    query = (query or "").strip()
    if not query:
        raise ValueError("Search query must not be empty.")
    return json.dumps({"query": query}, ensure_ascii=False).encode("utf-8")


class SearchClient:
    """POSTs ``{"query": ...}`` and never raises for transport or status errors."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ProbeSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ProbeSettings()

    async def search(self, query: str) -> SearchOutcome:
        body = build_search_body(query)
        path = self._settings.search_path
        try:
            response = await self._client.post(path, content=body, headers=dict(REQUEST_HEADERS))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:DETAIL_CHAR_LIMIT]
            status_code = exc.response.status_code
            error = SearchRequestError(
                f"Search request failed ({status_code}): {detail}",
                status_code=status_code,
                detail=detail,
            )
            error.__cause__ = exc
            return self._failure(error, path)
        except httpx.RequestError as exc:
            error = SearchRequestError(f"Search request failed: {exc}", detail=str(exc))
            error.__cause__ = exc
            return self._failure(error, path)

        logger.info("search_completed", path=path, status_code=response.status_code)
        return SearchSuccess(response)

    @staticmethod
    def _failure(error: SearchRequestError, path: str) -> SearchFailure:
        logger.warning(
            "search_request_failed",
            path=path,
            status_code=error.status_code,
            error=str(error),
        )
        return SearchFailure(error)


def report_outcome(outcome: SearchOutcome, out: TextIO | None = None) -> int:
    """Print the outcome and return the matching process exit code."""

    print(outcome.describe(), file=out or sys.stdout, flush=True)
    return 0 if outcome.ok else 1


__all__ = [
    "SearchClient",
    "SearchFailure",
    "SearchOutcome",
    "SearchSuccess",
    "build_search_body",
    "report_outcome",
]
