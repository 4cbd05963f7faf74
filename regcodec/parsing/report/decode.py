"""
Decoder for device responses forwarded to the messaging layer.

Only the first response message is read. Its leading 16 bits, taken
big-endian, are rendered as lowercase hexadecimal without padding. A single
byte (a coil read) is widened to 16 bits first.
"""
from __future__ import annotations

from typing import Optional, Sequence

from regcodec.core.binary import ByteLike, as_bytes, pad_to_u16, read_u16_be, to_hex_text
from regcodec.exceptions import InvalidMessageError, NoMessagesError


def first_message(messages: Optional[Sequence[ByteLike]]) -> bytes:
    if not messages:
        raise NoMessagesError()
    try:
        data = as_bytes(messages[0])
    except ValueError as exc:
        raise InvalidMessageError(f"Invalid device message: {exc}") from exc
    if not data:
        raise NoMessagesError()
    return data


def decode_report_value(messages: Optional[Sequence[ByteLike]]) -> int:
    return read_u16_be(pad_to_u16(first_message(messages)))


def decode_report(messages: Optional[Sequence[ByteLike]]) -> str:
    """
    Convert raw device responses into report text.

    Args:
        messages: Raw response payloads; only the first one is consulted.

    Returns:
        The 16-bit value as lowercase hex, e.g. ``"7"``, ``"ff"``, ``"100"``.

    Raises:
        NoMessagesError: ``messages`` is empty or its first payload is empty.
    """
    return to_hex_text(decode_report_value(messages))
