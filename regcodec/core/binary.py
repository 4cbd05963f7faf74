from __future__ import annotations

from typing import Union

ByteLike = Union[bytes, bytearray, memoryview, str]

UINT16_MAX = 0xFFFF


def as_bytes(message: ByteLike) -> bytes:
    # Host transports hand payloads over as byte strings; one char per byte.
    if isinstance(message, str):
        try:
            return message.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"character {message[exc.start]!r} is not a byte") from exc
    return bytes(message)


def parse_decimal_chunk(chunk: str) -> int:
    if not chunk or not (chunk.isascii() and chunk.isdigit()):
        raise ValueError("not an unsigned base-10 number")
    value = int(chunk, 10)
    if value > UINT16_MAX:
        raise ValueError(f"value {value} out of range for 16 bits")
    return value


def low_byte(value: int) -> int:
    return value & 0xFF


def pad_to_u16(data: bytes) -> bytes:
    if len(data) == 1:
        return b"\x00" + data
    return data


def read_u16_be(data: bytes) -> int:
    if len(data) < 2:
        raise ValueError("need at least 2 bytes for a 16-bit value")
    return int.from_bytes(data[:2], byteorder="big", signed=False)


def to_hex_text(value: int) -> str:
    return format(value, "x")
