"""Factory for the AsyncClient shared by the probe and the search client."""

from __future__ import annotations

import httpx

from glsearch.config import ProbeSettings


def build_http_client(
    settings: ProbeSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return a client rooted at the configured origin.

    ``request_timeout_seconds`` of ``None`` disables httpx's default timeout,
    so a hung server keeps the request pending indefinitely.
    """

    return httpx.AsyncClient(
        base_url=settings.origin,
        timeout=settings.request_timeout_seconds,
        trust_env=False,
        transport=transport,
    )


__all__ = ["build_http_client"]
