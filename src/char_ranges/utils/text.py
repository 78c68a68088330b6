"""UTF-8 buffer helpers shared across modules."""
from __future__ import annotations

from typing import List, Union

Utf8Source = Union[str, bytes, bytearray, memoryview]

_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def to_utf8_view(data: Utf8Source) -> memoryview:
    """Return a flat byte view over ``data``.

    Byte-like inputs are borrowed as-is. ``str`` has no addressable UTF-8
    storage, so it is encoded once; lone surrogates survive the round trip.
    """
    if isinstance(data, str):
        return memoryview(data.encode("utf-8", errors="surrogatepass"))
    if isinstance(data, memoryview):
        if data.format != "B" or data.ndim != 1:
            return data.cast("B")
        return data
    if isinstance(data, (bytes, bytearray)):
        return memoryview(data)
    raise TypeError(f"Expected str or bytes-like text, got {type(data).__name__}")


def is_continuation_byte(byte: int) -> bool:
    return byte & _CONTINUATION_MASK == _CONTINUATION_TAG


def utf8_width(lead: int) -> int:
    """Encoded width of the character whose first byte is ``lead``."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def decode_char(view: memoryview, start: int, width: int) -> str:
    if width == 1:
        return chr(view[start])
    return str(view[start : start + width], "utf-8", "surrogatepass")


def byte_offsets(text: Utf8Source) -> List[int]:
    """Byte position of every character start, plus the total length.

    ``offsets[i]`` is where the ``i``-th character begins, so the ``str``
    span ``[i, j)`` covers bytes ``[offsets[i], offsets[j])``.
    """
    from ..iterator import CharRanges

    offsets: List[int] = [0]
    for span, _char in CharRanges(text):
        offsets.append(span.end)
    return offsets


__all__ = [
    "Utf8Source",
    "to_utf8_view",
    "is_continuation_byte",
    "utf8_width",
    "decode_char",
    "byte_offsets",
]
