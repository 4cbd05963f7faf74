"""
Data model of a device feature map.

A feature map tells the codec, for every command parameter key, which kind
of register backs it and how many registers it spans. Documents use the
camelCase keys of the device access service (``inputParamIdMap``,
``registerType``, ``registerNum``); the snake_case field names are accepted
as well.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterType(str, Enum):
    """Modbus data tables a parameter can be mapped onto."""

    HOLDING = "holding"
    COIL = "coil"
    INPUT = "input"
    DISCRETE_INPUT = "discrete_input"


_TYPE_ALIASES: dict[str, RegisterType] = {
    "holding_register": RegisterType.HOLDING,
    "holdingregister": RegisterType.HOLDING,
    "input_register": RegisterType.INPUT,
    "inputregister": RegisterType.INPUT,
    "discreteinput": RegisterType.DISCRETE_INPUT,
}


def normalize_register_type(raw: Any) -> Optional[RegisterType]:
    """
    Map a document value onto a ``RegisterType``.

    Matching is case-insensitive and tolerates the ``*_register`` spellings.
    Anything unrecognised yields ``None``, which the encoder treats as a
    parameter it has nothing to do with.
    """
    if raw is None or isinstance(raw, RegisterType):
        return raw
    text = str(raw).strip().lower()
    try:
        return RegisterType(text)
    except ValueError:
        return _TYPE_ALIASES.get(text)


class RegisterDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    register_type: Optional[RegisterType] = Field(None, validation_alias="registerType")
    register_num: int = Field(0, ge=0, validation_alias="registerNum")

    @field_validator("register_type", mode="before")
    @classmethod
    def _coerce_register_type(cls, value: Any) -> Optional[RegisterType]:
        return normalize_register_type(value)


class DeviceFeatureMap(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    input_param_id_map: Dict[str, RegisterDescriptor] = Field(
        default_factory=dict, validation_alias="inputParamIdMap"
    )

    def descriptor(self, key: str) -> Optional[RegisterDescriptor]:
        return self.input_param_id_map.get(key)

    def keys(self) -> list[str]:
        return list(self.input_param_id_map.keys())


__all__ = ["RegisterType", "RegisterDescriptor", "DeviceFeatureMap", "normalize_register_type"]
