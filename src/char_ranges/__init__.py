"""Iterate UTF-8 text as characters paired with their byte ranges."""
from .errors import CharRangesError, ConfigError, InvalidOffsetError
from .ext import CharRangesExt, RangedBytes, RangedText, char_ranges, char_ranges_offset
from .iterator import CharRanges
from .models import CharRange, SizeHint, Span
from .version import __version__

__all__ = [
    "CharRange",
    "CharRanges",
    "CharRangesError",
    "CharRangesExt",
    "ConfigError",
    "InvalidOffsetError",
    "RangedBytes",
    "RangedText",
    "SizeHint",
    "Span",
    "char_ranges",
    "char_ranges_offset",
    "__version__",
]
