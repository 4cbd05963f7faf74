from regcodec.config import CodecSettings, get_settings
from regcodec.converter import Converter, IssueConversion, ReportConversion
from regcodec.exceptions import (
    CodecError,
    ConfigParseError,
    FeatureMapNotFoundError,
    InvalidDigitsError,
    InvalidMessageError,
    NoMessagesError,
)
from regcodec.featuremap import DeviceFeatureMap, RegisterDescriptor, RegisterType, load_feature_map, parse_feature_map
from regcodec.parsing.registers import encode_params, encode_register_value
from regcodec.parsing.report import decode_report
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "CodecSettings",
    "get_settings",
    "Converter",
    "IssueConversion",
    "ReportConversion",
    "CodecError",
    "ConfigParseError",
    "FeatureMapNotFoundError",
    "InvalidDigitsError",
    "InvalidMessageError",
    "NoMessagesError",
    "DeviceFeatureMap",
    "RegisterDescriptor",
    "RegisterType",
    "load_feature_map",
    "parse_feature_map",
    "encode_params",
    "encode_register_value",
    "decode_report",
]

try:
    __version__ = version("regcodec")
except PackageNotFoundError:
    __version__ = "0.0.0"
