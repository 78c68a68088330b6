"""Constructors that attach range-aware iteration to text values."""
from __future__ import annotations

from typing import Union

from .iterator import CharRanges
from .utils.text import Utf8Source


class CharRangesExt:
    """Mixin for text types that can hand out a UTF-8 view of themselves."""

    __slots__ = ()

    def _utf8_source(self) -> Utf8Source:  # pragma: no cover - protocol
        raise NotImplementedError

    def char_ranges(self) -> CharRanges:
        """Return a cursor over this text's characters and their byte ranges."""
        return CharRanges(self._utf8_source())

    def char_ranges_offset(self, offset: int) -> CharRanges:
        """Like :meth:`char_ranges`, with ``offset`` added to every position."""
        return self.char_ranges().with_offset(offset)


class RangedText(str, CharRangesExt):
    """``str`` with ``char_ranges()`` and ``char_ranges_offset()`` methods."""

    __slots__ = ()

    def _utf8_source(self) -> Utf8Source:
        return self


class RangedBytes(bytes, CharRangesExt):
    """UTF-8 ``bytes`` whose cursors borrow the buffer instead of re-encoding."""

    __slots__ = ()

    def _utf8_source(self) -> Utf8Source:
        return self


def char_ranges(text: Union[Utf8Source, CharRangesExt]) -> CharRanges:
    if isinstance(text, CharRangesExt):
        return text.char_ranges()
    return CharRanges(text)


def char_ranges_offset(text: Union[Utf8Source, CharRangesExt], offset: int) -> CharRanges:
    return char_ranges(text).with_offset(offset)


__all__ = ["CharRangesExt", "RangedText", "RangedBytes", "char_ranges", "char_ranges_offset"]
