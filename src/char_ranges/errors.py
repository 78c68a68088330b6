"""Central exception hierarchy."""
from __future__ import annotations


class CharRangesError(Exception):
    """Base exception for all char-ranges failures."""


class InvalidOffsetError(CharRangesError, ValueError):
    """Raised when a byte offset, bias or skip count is negative or out of range."""


class ConfigError(CharRangesError, ValueError):
    """Raised when a configuration file cannot be validated."""


__all__ = ["CharRangesError", "InvalidOffsetError", "ConfigError"]
