"""
Converter exposed to the device access host.

The host calls ``convert_issue_message`` with the parameters of a command
and the device's feature map to obtain the payloads to write, and calls
``convert_device_messages`` with the raw responses it read back to obtain
the report data it publishes. Topic construction belongs to the host, so
every topic returned here is empty.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from regcodec.config import CodecSettings, get_settings
from regcodec.core.binary import ByteLike
from regcodec.featuremap import FeatureMapSource, RegisterDescriptor, parse_feature_map
from regcodec.logging import create_logger
from regcodec.parsing.registers import encode_params
from regcodec.parsing.report import decode_report
from regcodec.exceptions import NoMessagesError


@dataclass(frozen=True)
class IssueConversion:
    """
    Result of converting a command issue request.

    Attributes:
        input_messages: Device-bound payloads, one per encoded parameter.
        output_messages: Report payloads for output parameters (always empty).
        issue_topic: Topic for the issue request (always empty).
        issue_response_topic: Topic for the issue response (always empty).
    """
    input_messages: list[bytes] = field(default_factory=list)
    output_messages: list[bytes] = field(default_factory=list)
    issue_topic: str = ""
    issue_response_topic: str = ""


@dataclass(frozen=True)
class ReportConversion:
    topic: str
    data: bytes

    @property
    def text(self) -> str:
        return self.data.decode("ascii")


class Converter:
    def __init__(self, settings: Optional[CodecSettings] = None, logger: Optional[logging.Logger] = None):
        self.settings = settings or get_settings()
        self.logger = logger or create_logger(
            self.settings.logger_name,
            self.settings.log_ring_size,
            level=self.settings.log_level,
            json_output=self.settings.log_json,
        )

    def convert_issue_message(
        self,
        device_id: str,
        model_id: str,
        feature_id: str,
        values: Optional[Mapping[str, str]],
        feature_map: FeatureMapSource,
    ) -> IssueConversion:
        """
        Convert command parameters into the payloads written to the device.

        Args:
            device_id: Target device, used for logging only.
            model_id: Device model, used for logging only.
            feature_id: Invoked feature, used for logging only.
            values: Parameter key -> decimal-digit value.
            feature_map: The device feature map, parsed or as a YAML/JSON document.

        Returns:
            An ``IssueConversion`` carrying the device-bound payloads.

        Raises:
            ConfigParseError: ``feature_map`` could not be parsed.
            InvalidDigitsError: A parameter value is not decimal.
            NoMessagesError: No parameter maps onto a holding register or coil.
        """
        fmap = parse_feature_map(feature_map)
        context = {"device_id": device_id, "model_id": model_id, "feature_id": feature_id}
        self.logger.info("issue_received", extra={"details": {**context, "values": dict(values or {})}})
        self.logger.debug("feature_map", extra={"details": fmap.model_dump(mode="json")})

        try:
            payloads = encode_params(
                values or {}, fmap, encode_all=self.settings.encode_all_params, on_encoded=self._log_encoded
            )
        except NoMessagesError:
            self.logger.info("issue_no_messages", extra={"details": context})
            raise
        return IssueConversion(input_messages=payloads)

    def _log_encoded(self, key: str, descriptor: RegisterDescriptor, payload: bytes) -> None:
        self.logger.info(
            "param_resolved",
            extra={"details": {"key": key, "register_type": descriptor.register_type.value,
                               "register_num": descriptor.register_num}},
        )
        self.logger.info("param_encoded", extra={"details": {"key": key, "bytes": payload}})

    def convert_device_messages(
        self,
        messages: Optional[Sequence[ByteLike]],
        feature_map: Optional[FeatureMapSource] = None,
    ) -> ReportConversion:
        # The feature map is part of the host call but decoding does not need it.
        text = decode_report(messages)
        self.logger.info("report_decoded", extra={"details": {"data": text, "messages": len(messages or [])}})
        return ReportConversion(topic="", data=text.encode("ascii"))
