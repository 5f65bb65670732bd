"""Fire-and-forget search probe.

Prints a marker line, posts a fixed payload to ``/api/search`` without
waiting for it, and prints the response object once the call resolves.
There is deliberately no error path: a failed request surfaces through the
event loop's exception handler, never through this module.
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import TextIO

import httpx

from glsearch.logging import logger

STARTUP_MARKER = "query api search"
SEARCH_PATH = "/api/search"
# Already JSON text; it is serialised a second time on the wire.
SEARCH_QUERY_TEXT = '{"query": "bind texture to buffer"}'
REQUEST_HEADERS = {"Content-Type": "application/json"}


def encode_payload(text: str) -> bytes:
    """Serialise ``text`` as a JSON string literal."""

    return json.dumps(text, ensure_ascii=False).encode("utf-8")


class SearchInvoker:
    """Issues the single probe request against a shared AsyncClient."""

    def __init__(self, http_client: httpx.AsyncClient, out: TextIO | None = None) -> None:
        self._client = http_client
        self._out = out

    def dispatch(self) -> asyncio.Task[httpx.Response]:
        self._write(STARTUP_MARKER)
        request = self._client.post(
            SEARCH_PATH,
            content=encode_payload(SEARCH_QUERY_TEXT),
            headers=dict(REQUEST_HEADERS),
        )
        task = asyncio.create_task(request, name="search-probe")
        task.add_done_callback(self._report)
        logger.debug("search_dispatched", path=SEARCH_PATH)
        return task

    def _report(self, task: asyncio.Task[httpx.Response]) -> None:
        if task.cancelled():
            return
        # result() re-raises a failed request into the loop's exception handler.
        response = task.result()
        self._write(str(response))

    def _write(self, line: str) -> None:
        out = self._out or sys.stdout
        print(line, file=out, flush=True)


__all__ = [
    "REQUEST_HEADERS",
    "SEARCH_PATH",
    "SEARCH_QUERY_TEXT",
    "STARTUP_MARKER",
    "SearchInvoker",
    "encode_payload",
]
