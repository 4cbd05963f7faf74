"""
Feature-map documents: the per-parameter register descriptors consumed by
the encoder.

The device access service hands the map over as a YAML document. JSON
documents are read by the same parser.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from pydantic import ValidationError

from regcodec.exceptions import ConfigParseError
from regcodec.featuremap.model import (
    DeviceFeatureMap,
    RegisterDescriptor,
    RegisterType,
    normalize_register_type,
)

FeatureMapSource = Union[DeviceFeatureMap, Mapping[str, Any], str, bytes, bytearray]


def _load_document(document: Union[str, bytes, bytearray]) -> Any:
    if isinstance(document, bytearray):
        document = bytes(document)
    try:
        return yaml.safe_load(document)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Feature map document is not valid YAML: {exc}") from exc


def parse_feature_map(document: FeatureMapSource) -> DeviceFeatureMap:
    """
    Build a ``DeviceFeatureMap`` from an already-parsed mapping or document text.

    Args:
        document: A ``DeviceFeatureMap`` (returned as is), a mapping, or the
            raw YAML/JSON document as ``str``/``bytes``.

    Returns:
        The validated feature map.

    Raises:
        ConfigParseError: The document cannot be parsed, is not a mapping,
            or does not match the feature-map schema.
    """
    if isinstance(document, DeviceFeatureMap):
        return document
    data = _load_document(document) if isinstance(document, (str, bytes, bytearray)) else document
    if not isinstance(data, Mapping):
        raise ConfigParseError(f"Feature map document must be a mapping, got {type(data).__name__}")
    try:
        return DeviceFeatureMap.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigParseError(f"Invalid feature map document: {exc}") from exc


def load_feature_map(path: Union[str, Path]) -> DeviceFeatureMap:
    with open(path, "rb") as f:
        raw = f.read()
    try:
        return parse_feature_map(raw)
    except ConfigParseError as exc:
        raise ConfigParseError(f"Feature map {path}: {exc}") from exc


__all__ = [
    "DeviceFeatureMap",
    "FeatureMapSource",
    "RegisterDescriptor",
    "RegisterType",
    "normalize_register_type",
    "parse_feature_map",
    "load_feature_map",
]
