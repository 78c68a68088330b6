"""Shared value types produced by the cursor."""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[start, end)``."""

    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start

    def to_slice(self) -> slice:
        return slice(self.start, self.end)


class SizeHint(NamedTuple):
    lower: int
    upper: int


CharRange = Tuple[Span, str]


__all__ = ["Span", "SizeHint", "CharRange"]
