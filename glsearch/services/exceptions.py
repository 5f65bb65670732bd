"""Domain-specific exceptions."""

from __future__ import annotations

from pathlib import Path


class ServiceError(Exception):
    pass


class SearchRequestError(ServiceError):
    """A search call that did not produce a successful response."""

    def __init__(self, message: str, *, status_code: int | None = None, detail: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class IndexingError(ServiceError):
    pass


class DocumentParseError(IndexingError):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = str(path)
