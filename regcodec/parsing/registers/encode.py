"""
Encoder for command parameters written to device registers.

Parameter values are strings of decimal digits read two characters at a
time, each pair giving one payload byte (``"07"`` -> ``0x07``). The payload
length is fixed by the register descriptor: short values are padded with
zero bytes and surplus characters are dropped.
"""
from __future__ import annotations

from typing import Callable, Iterator, Mapping, Optional

from regcodec.core.binary import low_byte, parse_decimal_chunk
from regcodec.exceptions import InvalidDigitsError, NoMessagesError
from regcodec.featuremap.model import DeviceFeatureMap, RegisterDescriptor
from regcodec.parsing.registers.layout import encoded_length

# Decimal characters consumed per payload byte.
CHUNK_SIZE = 2

EncodedCallback = Callable[[str, RegisterDescriptor, bytes], None]


def encode_register_value(key: str, value: str, descriptor: RegisterDescriptor) -> bytes:
    """
    Encode one parameter value into its register payload.

    Args:
        key: The parameter key, used for error reporting.
        value: Decimal-digit string, two characters per byte.
        descriptor: Register type and count of the parameter.

    Returns:
        A payload whose length depends only on ``descriptor``.

    Raises:
        InvalidDigitsError: A consumed chunk is not an unsigned decimal number.
        ValueError: The descriptor's register type cannot be encoded.
    """
    length = encoded_length(descriptor)
    if length is None:
        raise ValueError(f"Register type {descriptor.register_type!r} of {key!r} cannot be encoded")

    buf = bytearray(length)
    for i in range(length):
        start = CHUNK_SIZE * i
        if start + CHUNK_SIZE - 1 >= len(value):
            break
        chunk = value[start : start + CHUNK_SIZE]
        try:
            parsed = parse_decimal_chunk(chunk)
        except ValueError as exc:
            raise InvalidDigitsError(key, chunk, start, str(exc)) from exc
        # Lossy on purpose: only the low byte of each chunk reaches the wire.
        buf[i] = low_byte(parsed)
    return bytes(buf)


def iter_encodable(
    values: Mapping[str, str], feature_map: DeviceFeatureMap
) -> Iterator[tuple[str, str, RegisterDescriptor]]:
    """Yield ``(key, value, descriptor)`` for every key the encoder can handle."""
    for key, value in values.items():
        descriptor: Optional[RegisterDescriptor] = feature_map.descriptor(key)
        if descriptor is None or encoded_length(descriptor) is None:
            continue
        yield key, value, descriptor


def encode_params(
    values: Mapping[str, str],
    feature_map: DeviceFeatureMap,
    *,
    encode_all: bool = False,
    on_encoded: Optional[EncodedCallback] = None,
) -> list[bytes]:
    """
    Encode command parameters into device-bound payloads.

    Keys are scanned in the mapping's iteration order. By default only the
    first key backed by a holding register or coil is encoded; with
    ``encode_all`` every such key contributes one payload, in order.

    Args:
        values: Parameter key -> decimal-digit value.
        feature_map: Register descriptors per parameter key.
        encode_all: Encode every matching key instead of the first only.
        on_encoded: Called with ``(key, descriptor, payload)`` after each
            parameter is encoded.

    Returns:
        The list of payloads (exactly one unless ``encode_all`` is set).

    Raises:
        NoMessagesError: No key is backed by an encodable register type.
        InvalidDigitsError: A value contains non-decimal characters.
    """
    payloads: list[bytes] = []
    for key, value, descriptor in iter_encodable(values or {}, feature_map):
        payload = encode_register_value(key, value, descriptor)
        if on_encoded is not None:
            on_encoded(key, descriptor, payload)
        payloads.append(payload)
        if not encode_all:
            break
    if not payloads:
        raise NoMessagesError()
    return payloads
