"""
Register payload encoder.

Turns decimal-digit parameter values into fixed-length byte payloads laid
out according to each parameter's register type.
"""
from regcodec.parsing.registers.encode import (
    CHUNK_SIZE,
    EncodedCallback,
    encode_params,
    encode_register_value,
    iter_encodable,
)
from regcodec.parsing.registers.layout import REGISTER_WIDTHS, encoded_length, register_width

__all__ = [
    "CHUNK_SIZE",
    "EncodedCallback",
    "REGISTER_WIDTHS",
    "encode_params",
    "encode_register_value",
    "encoded_length",
    "iter_encodable",
    "register_width",
]
