"""Utility exports."""
from .text import Utf8Source, byte_offsets, decode_char, is_continuation_byte, to_utf8_view, utf8_width

__all__ = [
    "Utf8Source",
    "byte_offsets",
    "decode_char",
    "is_continuation_byte",
    "to_utf8_view",
    "utf8_width",
]
