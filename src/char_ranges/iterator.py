"""Bidirectional cursor over UTF-8 text yielding byte ranges."""
from __future__ import annotations

from typing import Iterator, Optional

from .errors import InvalidOffsetError
from .models import CharRange, SizeHint, Span
from .utils.text import Utf8Source, decode_char, is_continuation_byte, to_utf8_view, utf8_width


class CharRanges:
    """Iterate characters of UTF-8 text together with their byte ranges.

    The unconsumed text is the window ``[front, back)`` of a borrowed byte
    view. Forward steps advance ``front``, backward steps retreat ``back``;
    the cursor is exhausted once the two meet and stays exhausted.

    Every reported range is biased by ``offset`` so that a cursor built over a
    substring can report positions within the text it was sliced from.
    """

    __slots__ = ("_view", "_front", "_back", "_offset")

    def __init__(self, text: Utf8Source, offset: int = 0) -> None:
        self._view = to_utf8_view(text)
        self._front = 0
        self._back = len(self._view)
        self._offset = _check_non_negative(offset, "offset")

    @classmethod
    def new_offset(cls, text: Utf8Source, offset: int) -> "CharRanges":
        return cls(text, offset)

    @property
    def offset(self) -> int:
        return self._offset

    def set_offset(self, offset: int) -> None:
        """Change the bias applied to ranges emitted from now on."""
        self._offset = _check_non_negative(offset, "offset")

    def with_offset(self, offset: int) -> "CharRanges":
        self.set_offset(offset)
        return self

    def as_bytes(self) -> memoryview:
        """Return the unconsumed bytes without copying."""
        return self._view[self._front : self._back]

    def as_str(self) -> str:
        return str(self.as_bytes(), "utf-8", "surrogatepass")

    def __iter__(self) -> "CharRanges":
        return self

    def __next__(self) -> CharRange:
        item = self.next_char()
        if item is None:
            raise StopIteration
        return item

    def next_char(self) -> Optional[CharRange]:
        if self._front >= self._back:
            return None
        start = self._front
        width = utf8_width(self._view[start])
        self._front = start + width
        return self._emit(start, width)

    def next_back(self) -> Optional[CharRange]:
        if self._front >= self._back:
            return None
        start = self._char_start_before(self._back)
        width = self._back - start
        self._back = start
        return self._emit(start, width)

    def nth(self, n: int) -> Optional[CharRange]:
        """Skip ``n`` characters from the front and return the next one.

        Skipped characters are never decoded; only their lead bytes are read.
        When fewer than ``n + 1`` characters remain the cursor is exhausted
        and ``None`` is returned.
        """
        _check_non_negative(n, "n")
        view, cursor, back = self._view, self._front, self._back
        while n and cursor < back:
            cursor += utf8_width(view[cursor])
            n -= 1
        self._front = min(cursor, back)
        return self.next_char()

    def nth_back(self, n: int) -> Optional[CharRange]:
        """Skip ``n`` characters from the back and return the one before them."""
        _check_non_negative(n, "n")
        cursor = self._back
        while n and cursor > self._front:
            cursor = self._char_start_before(cursor)
            n -= 1
        self._back = cursor
        return self.next_back()

    def last(self) -> Optional[CharRange]:
        """Return the final remaining character and exhaust the cursor."""
        item = self.next_back()
        self._back = self._front
        return item

    def count(self) -> int:
        """Consume the cursor and return how many characters remained."""
        remaining = sum(
            1 for byte in self._view[self._front : self._back] if not is_continuation_byte(byte)
        )
        self._front = self._back
        return remaining

    def size_hint(self) -> SizeHint:
        size = self._back - self._front
        return SizeHint(lower=(size + 3) // 4, upper=size)

    def __length_hint__(self) -> int:
        return self.size_hint().lower

    def __bool__(self) -> bool:
        return self._front < self._back

    def rev(self) -> Iterator[CharRange]:
        """Iterate backwards, consuming this cursor from the back."""
        return iter(self.next_back, None)

    __reversed__ = rev

    def copy(self) -> "CharRanges":
        cls = type(self)
        clone = cls.__new__(cls)
        clone._view = self._view
        clone._front = self._front
        clone._back = self._back
        clone._offset = self._offset
        if hasattr(self, "__dict__"):
            clone.__dict__.update(self.__dict__)
        return clone

    __copy__ = copy

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.copy())!r})"

    def _char_start_before(self, end: int) -> int:
        view, start = self._view, end - 1
        while start > self._front and is_continuation_byte(view[start]):
            start -= 1
        return start

    def _emit(self, start: int, width: int) -> CharRange:
        char = decode_char(self._view, start, width)
        start += self._offset
        return Span(start, start + width), char


def _check_non_negative(value: int, name: str) -> int:
    if value < 0:
        raise InvalidOffsetError(f"{name} must be non-negative, got {value}")
    return value


__all__ = ["CharRanges"]
