"""Tests for the register payload encoder."""
import pytest

from regcodec.exceptions import InvalidDigitsError, NoMessagesError
from regcodec.featuremap import RegisterDescriptor, RegisterType, parse_feature_map
from regcodec.parsing.registers import (
    REGISTER_WIDTHS,
    encode_params,
    encode_register_value,
    encoded_length,
)


def holding(n: int) -> RegisterDescriptor:
    return RegisterDescriptor(register_type=RegisterType.HOLDING, register_num=n)


def coil(n: int) -> RegisterDescriptor:
    return RegisterDescriptor(register_type=RegisterType.COIL, register_num=n)


def test_holding_zero_padding():
    assert encode_register_value("p", "07", holding(2)) == bytes([7, 0, 0, 0])


def test_holding_truncation():
    assert encode_register_value("p", "0799", holding(1)) == bytes([7, 99])


def test_holding_drops_trailing_characters():
    assert encode_register_value("p", "0102030405", holding(1)) == bytes([1, 2])


def test_coil_one_byte_per_register():
    assert encode_register_value("p", "010203", coil(2)) == bytes([1, 2])


def test_coil_padding():
    assert encode_register_value("p", "42", coil(3)) == bytes([42, 0, 0])


@pytest.mark.parametrize("value", ["", "1", "12", "1234", "123456789012"])
def test_length_depends_only_on_descriptor(value):
    assert len(encode_register_value("p", value, holding(3))) == 6
    assert len(encode_register_value("p", value, coil(3))) == 3


def test_odd_length_ignores_incomplete_chunk():
    assert encode_register_value("p", "071", holding(1)) == bytes([7, 0])


def test_zero_registers_gives_empty_payload():
    assert encode_register_value("p", "0707", holding(0)) == b""


def test_invalid_digits():
    with pytest.raises(InvalidDigitsError) as excinfo:
        encode_register_value("setpoint", "070a", holding(2))
    assert excinfo.value.key == "setpoint"
    assert excinfo.value.chunk == "0a"
    assert excinfo.value.position == 2


@pytest.mark.parametrize("value", ["+7", " 7", "-1", "1_", "١٢"])
def test_rejects_non_ascii_digit_chunks(value):
    with pytest.raises(InvalidDigitsError):
        encode_register_value("p", value, coil(1))


def test_invalid_digits_outside_consumed_range_are_ignored():
    assert encode_register_value("p", "0102zz", holding(1)) == bytes([1, 2])


def test_invalid_digits_is_a_value_error():
    with pytest.raises(ValueError):
        encode_register_value("p", "xx", coil(1))


def test_unencodable_register_type():
    descriptor = RegisterDescriptor(register_type=RegisterType.INPUT, register_num=1)
    with pytest.raises(ValueError):
        encode_register_value("p", "07", descriptor)


def test_register_widths():
    assert REGISTER_WIDTHS == {RegisterType.HOLDING: 2, RegisterType.COIL: 1}
    assert encoded_length(holding(4)) == 8
    assert encoded_length(coil(4)) == 4
    assert encoded_length(RegisterDescriptor(register_type=None, register_num=4)) is None


def test_encode_params_first_match_only(feature_map):
    values = {"temperature": "11", "setpoint": "0799", "fan": "01"}
    assert encode_params(values, feature_map) == [bytes([7, 99, 0, 0])]


def test_encode_params_all(feature_map):
    values = {"temperature": "11", "setpoint": "0799", "fan": "01"}
    assert encode_params(values, feature_map, encode_all=True) == [bytes([7, 99, 0, 0]), bytes([1])]


def test_encode_params_skips_unknown_keys(feature_map):
    assert encode_params({"missing": "01", "fan": "05"}, feature_map) == [bytes([5])]


def test_encode_params_no_match(feature_map):
    with pytest.raises(NoMessagesError):
        encode_params({"temperature": "11", "missing": "22"}, feature_map)


def test_encode_params_empty_values(feature_map):
    with pytest.raises(NoMessagesError):
        encode_params({}, feature_map)
    with pytest.raises(NoMessagesError):
        encode_params(None, feature_map)


def test_encode_params_unrecognised_register_type_is_skipped():
    fmap = parse_feature_map(
        {"inputParamIdMap": {"a": {"registerType": "analog", "registerNum": 1}, "b": {"registerType": "coil", "registerNum": 1}}}
    )
    assert encode_params({"a": "01", "b": "02"}, fmap) == [bytes([2])]


def test_encode_params_error_returns_no_partial_result(feature_map):
    with pytest.raises(InvalidDigitsError):
        encode_params({"setpoint": "0102", "fan": "zz"}, feature_map, encode_all=True)


def test_encode_is_repeatable(feature_map):
    values = {"setpoint": "1234"}
    assert encode_params(values, feature_map) == encode_params(values, feature_map)


def test_encode_params_reports_each_payload(feature_map):
    seen = []
    values = {"temperature": "11", "setpoint": "0799", "fan": "01"}
    payloads = encode_params(
        values, feature_map, encode_all=True, on_encoded=lambda key, descriptor, payload: seen.append(
            (key, descriptor.register_type, payload)
        )
    )
    assert seen == [
        ("setpoint", RegisterType.HOLDING, bytes([7, 99, 0, 0])),
        ("fan", RegisterType.COIL, bytes([1])),
    ]
    assert payloads == [payload for _, _, payload in seen]


def test_encode_params_callback_first_match_only(feature_map):
    seen = []
    encode_params({"setpoint": "01", "fan": "02"}, feature_map, on_encoded=lambda *args: seen.append(args[0]))
    assert seen == ["setpoint"]
