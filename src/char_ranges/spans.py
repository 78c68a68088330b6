"""Translate code point spans and pattern matches into byte spans."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import regex

from .errors import InvalidOffsetError
from .iterator import CharRanges
from .models import Span


@dataclass(slots=True)
class Match:
    span: Span
    value: str


class SpanMapper:
    """Map ``str`` indices onto UTF-8 byte positions of the same text.

    Lookups walk a single forward cursor, so a run of non-decreasing queries
    costs one pass over the text. Asking for an earlier index starts a fresh
    cursor from the beginning.
    """

    __slots__ = ("_text", "_offset", "_cursor", "_char_index", "_byte_index")

    def __init__(self, text: str, offset: int = 0) -> None:
        if offset < 0:
            raise InvalidOffsetError(f"offset must be non-negative, got {offset}")
        self._text = text
        self._offset = offset
        self._rewind()

    def _rewind(self) -> None:
        self._cursor = CharRanges(self._text)
        self._char_index = 0
        self._byte_index = 0

    def byte_position(self, char_index: int) -> int:
        if not 0 <= char_index <= len(self._text):
            raise InvalidOffsetError(
                f"Index {char_index} is outside text of length {len(self._text)}"
            )
        if char_index < self._char_index:
            self._rewind()
        skip = char_index - self._char_index
        if skip:
            span, _char = self._cursor.nth(skip - 1)
            self._byte_index = span.end
            self._char_index = char_index
        return self._byte_index + self._offset

    def to_byte_span(self, start: int, end: int) -> Span:
        if end < start:
            raise InvalidOffsetError(f"Span end {end} precedes start {start}")
        return Span(self.byte_position(start), self.byte_position(end))


def find_spans(
    pattern: Union[str, "regex.Pattern[str]"],
    text: str,
    *,
    offset: int = 0,
    flags: int = regex.UNICODE,
) -> List[Match]:
    """Return every non-overlapping match of ``pattern`` with its byte span."""
    compiled = regex.compile(pattern, flags) if isinstance(pattern, str) else pattern
    mapper = SpanMapper(text, offset=offset)
    matches: List[Match] = []
    for found in compiled.finditer(text):
        start, end = found.span()
        matches.append(Match(span=mapper.to_byte_span(start, end), value=found.group()))
    return matches


__all__ = ["Match", "SpanMapper", "find_spans"]
