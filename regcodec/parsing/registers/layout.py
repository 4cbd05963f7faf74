"""
Register-type dispatch for the encoder.

Holding registers are 16 bits wide, coils are addressed as single bytes.
Register types missing from ``REGISTER_WIDTHS`` are not writable through the
codec and resolve to ``None``.
"""
from __future__ import annotations

from typing import Optional

from regcodec.featuremap.model import RegisterDescriptor, RegisterType

# Bytes per register unit.
REGISTER_WIDTHS: dict[RegisterType, int] = {
    RegisterType.HOLDING: 2,
    RegisterType.COIL: 1,
}


def register_width(register_type: Optional[RegisterType]) -> Optional[int]:
    if register_type is None:
        return None
    return REGISTER_WIDTHS.get(register_type)


def encoded_length(descriptor: RegisterDescriptor) -> Optional[int]:
    """
    Number of payload bytes a parameter occupies on the device.

    Args:
        descriptor: The parameter's register descriptor.

    Returns:
        ``width * register_num``, or ``None`` when the register type is not
        one the encoder handles.
    """
    width = register_width(descriptor.register_type)
    if width is None:
        return None
    return width * descriptor.register_num
