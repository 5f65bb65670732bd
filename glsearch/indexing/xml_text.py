"""Extract the character data of an XML reference page."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml import ElementTree

from glsearch.services.exceptions import DocumentParseError


def _text_chunks(element: Element) -> Iterator[str]:
    if element.text:
        yield element.text
    for child in element:
        yield from _text_chunks(child)
        if child.tail:
            yield child.tail


def _join(root: Element) -> str:
    # Whitespace-only chunks are layout, not content.
    return "".join(f"{chunk} " for chunk in _text_chunks(root) if chunk.strip())


def extract_text(source: str | Path | IO[bytes], *, name: str | Path | None = None) -> str:
    """Return every text chunk of ``source`` in document order, space-separated."""

    if name is not None:
        label = name
    elif isinstance(source, (str, Path)):
        label = source
    else:
        label = getattr(source, "name", "<stream>")
    try:
        tree = ElementTree.parse(source)
    except (ParseError, DefusedXmlException) as exc:
        raise DocumentParseError(label, str(exc)) from exc
    return _join(tree.getroot())


def read_xml_file(path: str | Path) -> str:
    path = Path(path)
    try:
        with path.open("rb") as handle:
            return extract_text(handle, name=path)
    except OSError as exc:
        raise DocumentParseError(path, str(exc)) from exc


__all__ = ["extract_text", "read_xml_file"]
