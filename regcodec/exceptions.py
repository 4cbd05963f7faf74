"""
Exceptions raised by the register codec.

Every error derives from ``CodecError`` so callers can catch the whole
family at once, while the mixed-in builtin bases keep ``except ValueError``
style handlers working.
"""
from __future__ import annotations

from typing import Optional


class CodecError(Exception):
    """Base class for any error raised by regcodec."""


class ConfigParseError(CodecError, ValueError):
    """The feature-map document could not be parsed or validated."""


class InvalidDigitsError(CodecError, ValueError):
    """A two-character chunk of a parameter value is not a decimal number."""

    def __init__(self, key: str, chunk: str, position: int, reason: Optional[str] = None) -> None:
        message = f"Invalid digits {chunk!r} at offset {position} of parameter {key!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.key = key
        self.chunk = chunk
        self.position = position


class NoMessagesError(CodecError, LookupError):
    """Nothing could be encoded, or there was no device message to decode."""

    def __init__(self, message: str = "No any messages.") -> None:
        super().__init__(message)


class InvalidMessageError(CodecError, ValueError):
    """A device message is not a byte string."""


class FeatureMapNotFoundError(CodecError, FileNotFoundError):
    pass


__all__ = [
    "CodecError",
    "ConfigParseError",
    "InvalidDigitsError",
    "NoMessagesError",
    "InvalidMessageError",
    "FeatureMapNotFoundError",
]
