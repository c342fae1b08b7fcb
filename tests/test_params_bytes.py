import json

import pytest

from mqkit.params_bytes import (
    bool_to_bytes,
    bytes_to_bool,
    bytes_to_float32,
    bytes_to_float64,
    bytes_to_int32,
    bytes_to_int64,
    bytes_to_map,
    bytes_to_map_string,
    float32_to_bytes,
    float64_to_bytes,
    int32_to_bytes,
    int64_to_bytes,
    map_to_bytes,
    map_to_bytes_string,
)


def test_bool_round_trip():
    assert bytes_to_bool(bool_to_bytes(True)) is True
    assert bytes_to_bool(bool_to_bytes(False)) is False


def test_bool_wire_bytes():
    assert bool_to_bytes(True) == b"\x01"
    assert bool_to_bytes(False) == b"\x00"


def test_bytes_to_bool_empty_raises():
    with pytest.raises(ValueError):
        bytes_to_bool(b"")


def test_int32_round_trip():
    assert bytes_to_int32(int32_to_bytes(64)) == 64


def test_int32_is_big_endian():
    assert int32_to_bytes(64) == b"\x00\x00\x00\x40"
    assert bytes_to_int32(b"\xff\xff\xff\xff") == -1


def test_int64_round_trip():
    assert bytes_to_int64(int64_to_bytes(64)) == 64
    assert bytes_to_int64(int64_to_bytes(-(2**63))) == -(2**63)


def test_int64_is_big_endian():
    assert int64_to_bytes(64) == b"\x00" * 7 + b"\x40"


def test_float32_round_trip():
    buf = float32_to_bytes(64.043)
    value = bytes_to_float32(buf)
    assert len(buf) == 4
    assert value == pytest.approx(64.043, abs=1e-5)
    assert float32_to_bytes(value) == buf


def test_float64_round_trip():
    assert bytes_to_float64(float64_to_bytes(64.043)) == 64.043


def test_float64_is_little_endian():
    assert float64_to_bytes(1.0) == b"\x00" * 6 + b"\xf0\x3f"


def test_map_round_trip():
    original = {"b": 1, "a": [1, 2], "c": {"x": None}}
    data = map_to_bytes(original)
    assert bytes_to_map(data) == original
    assert json.loads(data) == original


def test_map_keys_sorted():
    assert map_to_bytes({"b": 1, "a": 2}) == b'{"a":2,"b":1}'


def test_bytes_to_map_rejects_non_object():
    with pytest.raises(ValueError):
        bytes_to_map(b"[1, 2]")


def test_bytes_to_map_rejects_bad_json():
    with pytest.raises(ValueError):
        bytes_to_map(b"{not json")


def test_map_string_round_trip():
    original = {"name": "mqant", "kind": "gate"}
    assert bytes_to_map_string(map_to_bytes_string(original)) == original


def test_map_string_rejects_non_string_values():
    with pytest.raises(ValueError):
        bytes_to_map_string(b'{"a": 1}')
    with pytest.raises(TypeError):
        map_to_bytes_string({"a": 1})