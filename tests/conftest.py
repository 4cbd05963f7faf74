import pytest

from regcodec.config import CodecSettings
from regcodec.converter import Converter
from regcodec.featuremap import parse_feature_map
from regcodec.logging import create_logger, ring_buffer


@pytest.fixture
def feature_map():
    return parse_feature_map(
        {
            "inputParamIdMap": {
                "temperature": {"registerType": "input", "registerNum": 1},
                "setpoint": {"registerType": "holding", "registerNum": 2},
                "fan": {"registerType": "coil", "registerNum": 1},
            }
        }
    )


@pytest.fixture
def logger(request):
    # One logger per test so ring buffers never leak between tests.
    return create_logger(f"regcodec.test.{request.node.nodeid}", ring_size=50, level="DEBUG")


@pytest.fixture
def events(logger):
    return ring_buffer(logger)


@pytest.fixture
def converter(logger):
    return Converter(settings=CodecSettings(), logger=logger)
