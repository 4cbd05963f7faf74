"""
Feature maps bundled with the package, one JSON document per device model.
"""
from __future__ import annotations

from importlib import resources
from typing import List

from regcodec.exceptions import FeatureMapNotFoundError
from regcodec.featuremap import DeviceFeatureMap, parse_feature_map

_SUFFIX = ".json"


def get_feature_maps() -> List[str]:
    base = resources.files(__name__)
    return sorted(
        entry.name[: -len(_SUFFIX)]
        for entry in base.iterdir()
        if entry.is_file() and entry.name.lower().endswith(_SUFFIX)
    )


def load_bundled_feature_map(model_id: str) -> DeviceFeatureMap:
    """
    Load the feature map shipped for ``model_id``.

    Raises:
        ValueError: ``model_id`` is blank.
        FeatureMapNotFoundError: No map is bundled for ``model_id``.
        ConfigParseError: The bundled document is invalid.
    """
    name = (model_id or "").strip()
    if not name:
        raise ValueError("load_bundled_feature_map(model_id) requires a non-empty model_id.")
    if name.lower().endswith(_SUFFIX):
        name = name[: -len(_SUFFIX)]

    res = resources.files(__name__).joinpath(f"{name}{_SUFFIX}")
    if not res.is_file():
        raise FeatureMapNotFoundError(
            f"Feature map '{name}' not found. Available: {get_feature_maps()}"
        )
    return parse_feature_map(res.read_bytes())


__all__ = ["FeatureMapNotFoundError", "get_feature_maps", "load_bundled_feature_map"]
