"""Per-document term-frequency index over a directory of XML pages."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Callable

from pydantic import TypeAdapter, ValidationError

from glsearch.indexing.lexer import tokenize
from glsearch.indexing.xml_text import read_xml_file
from glsearch.logging import logger
from glsearch.services.exceptions import DocumentParseError, IndexingError

TermFreq = dict[str, int]
TermFreqIndex = dict[str, TermFreq]

_INDEX_ADAPTER = TypeAdapter(TermFreqIndex)

DocumentCallback = Callable[[Path, TermFreq], None]


def count_terms(content: str) -> TermFreq:
    return dict(Counter(tokenize(content)))


def top_terms(tf: TermFreq, limit: int) -> list[tuple[str, int]]:
    """Most frequent terms first; ties resolved alphabetically."""

    if limit <= 0:
        return []
    ranked = sorted(tf.items(), key=lambda item: (-item[1], item[0]))
    return ranked[:limit]


def index_directory(
    directory: str | Path,
    *,
    skip_invalid: bool = False,
    on_document: DocumentCallback | None = None,
) -> TermFreqIndex:
    directory = Path(directory)
    if not directory.is_dir():
        raise IndexingError(f"Not a directory: {directory}")

    index: TermFreqIndex = {}
    for path in sorted(p for p in directory.iterdir() if p.is_file()):
        logger.info("indexing_document", path=str(path))
        try:
            content = read_xml_file(path)
        except DocumentParseError as exc:
            if not skip_invalid:
                raise
            logger.warning("document_skipped", path=str(path), error=str(exc))
            continue

        tf = count_terms(content)
        if on_document is not None:
            on_document(path, tf)
        index[str(path)] = tf

    logger.info("directory_indexed", directory=str(directory), documents=len(index))
    return index


def save_index(index: TermFreqIndex, path: str | Path) -> None:
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as handle:
            json.dump(index, handle, ensure_ascii=False)
    except OSError as exc:
        raise IndexingError(f"Could not write index {path}: {exc}") from exc
    logger.info("index_saved", path=str(path), documents=len(index))


def load_index(path: str | Path) -> TermFreqIndex:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise IndexingError(f"Could not read index {path}: {exc}") from exc
    try:
        return _INDEX_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise IndexingError(f"Invalid index file {path}: {exc.error_count()} error(s)") from exc


__all__ = [
    "TermFreq",
    "TermFreqIndex",
    "count_terms",
    "index_directory",
    "load_index",
    "save_index",
    "top_terms",
]
