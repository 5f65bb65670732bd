"""Probe entrypoint: one POST to /api/search, response printed to stdout."""

from __future__ import annotations

import asyncio

from glsearch.config import get_settings
from glsearch.logging import configure_logging, logger
from glsearch.services.http_client import build_http_client
from glsearch.services.invoker import SearchInvoker


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    async with build_http_client(settings) as client:
        invoker = SearchInvoker(client)
        task = invoker.dispatch()
        # Keep the loop alive until the request settles; wait() leaves any
        # failure unretrieved.
        await asyncio.wait({task})

    logger.debug("probe_finished", environment=settings.environment)


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
