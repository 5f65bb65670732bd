"""Command line entrypoint for the probe, the search client and the indexer."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from glsearch import main as probe
from glsearch.config import get_settings
from glsearch.indexing.term_index import (
    TermFreq,
    index_directory,
    load_index,
    save_index,
    top_terms,
)
from glsearch.logging import configure_logging
from glsearch.services.exceptions import IndexingError
from glsearch.services.http_client import build_http_client
from glsearch.services.search import SearchClient, report_outcome

app = typer.Typer(help="Search probe and term-frequency indexer.", no_args_is_help=True)


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


@app.command("probe")
def probe_command() -> None:
    """Send the fixed probe request to /api/search and print the response."""

    asyncio.run(probe.main())


@app.command("search")
def search_command(
    query: Annotated[str, typer.Argument(help="Text to search for.")],
) -> None:
    """Send a structured search request and report success or failure."""

    settings = get_settings()
    configure_logging(settings.log_level)

    async def _search() -> int:
        async with build_http_client(settings) as client:
            outcome = await SearchClient(client, settings=settings).search(query)
        return report_outcome(outcome)

    try:
        code = asyncio.run(_search())
    except ValueError as exc:
        raise _fail(exc) from exc
    raise typer.Exit(code=code)


@app.command("index")
def index_command(
    directory: Annotated[
        Optional[Path], typer.Argument(help="Directory of XML pages (default from settings).")
    ] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Index file to write.")] = None,
    top: Annotated[int, typer.Option("--top", min=0, help="Print the N most frequent terms per page.")] = 0,
    skip_invalid: Annotated[
        bool, typer.Option("--skip-invalid", help="Skip pages that fail to parse.")
    ] = False,
) -> None:
    """Build a term-frequency index and save it as JSON."""

    settings = get_settings()
    configure_logging(settings.log_level)
    directory = directory or Path(settings.index.docs_dir)
    output = output or Path(settings.index.index_path)

    def _on_document(path: Path, tf: TermFreq) -> None:
        typer.echo(f"Indexing {path}...")
        for term, count in top_terms(tf, top):
            typer.echo(f"    {term} => {count}")

    try:
        index = index_directory(directory, skip_invalid=skip_invalid, on_document=_on_document)
        typer.echo(f"Saving {output}...")
        save_index(index, output)
    except IndexingError as exc:
        raise _fail(exc) from exc


@app.command("stats")
def stats_command(
    index_path: Annotated[Optional[Path], typer.Option("--index", help="Index file to read.")] = None,
) -> None:
    """Report how many documents an index file contains."""

    settings = get_settings()
    configure_logging(settings.log_level)
    index_path = index_path or Path(settings.index.index_path)

    typer.echo(f"Reading {index_path} index file...")
    try:
        index = load_index(index_path)
    except IndexingError as exc:
        raise _fail(exc) from exc
    typer.echo(f"{index_path} contains {len(index)} files")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
