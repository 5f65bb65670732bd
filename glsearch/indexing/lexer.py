"""Tokenizer for reference-page text."""

from __future__ import annotations

import string
from typing import Iterator

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Lexer:
    """Splits text into numeric runs, alphabetic runs and single symbols."""

    def __init__(self, content: str) -> None:
        self._content = content
        self._pos = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> str | None:
        self._trim_left()
        if self._pos >= len(self._content):
            return None

        first = self._content[self._pos]
        if first.isnumeric():
            return self._chop_while(str.isnumeric)
        if first.isalpha():
            return self._chop_while(str.isalpha)
        return self._chop(1)

    def _trim_left(self) -> None:
        while self._pos < len(self._content) and self._content[self._pos].isspace():
            self._pos += 1

    def _chop(self, n: int) -> str:
        token = self._content[self._pos : self._pos + n]
        self._pos += n
        return token

    def _chop_while(self, predicate) -> str:
        end = self._pos
        while end < len(self._content) and predicate(self._content[end]):
            end += 1
        return self._chop(end - self._pos)


def normalize_term(token: str) -> str:
    """Upper-case ASCII letters only; other characters pass through."""

    return token.translate(_ASCII_UPPER)


def tokenize(content: str) -> list[str]:
    return [normalize_term(token) for token in Lexer(content)]


__all__ = ["Lexer", "normalize_term", "tokenize"]
