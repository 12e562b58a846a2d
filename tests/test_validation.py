import numpy as np
import pytest

from vecn import InvalidDimension
from vecn.validation import (
    KeyKind,
    check_dimension,
    classify_key,
    flatten_outer,
    is_component_sequence,
    is_number,
    parse_index,
    promote,
)

@pytest.mark.parametrize("key", ["0", "1", "100", 0, 1, np.int64(2)])
def test_parse_index_accepts(key):
    assert parse_index(key) == int(key)

@pytest.mark.parametrize("key", ["-1", "1.1", "", " ", "1e3", "-0", "01", "a", "undefined", 1.1, False, None, len, "٣"])
def test_parse_index_rejects(key):
    assert parse_index(key) is None

@pytest.mark.parametrize("value", [0, 1.5, -3, float("nan"), np.float32(1), np.int8(3)])
def test_is_number(value):
    assert is_number(value)

@pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, 1j, [1]])
def test_is_not_number(value):
    assert not is_number(value)

def test_is_component_sequence():
    assert is_component_sequence([1, 2])
    assert is_component_sequence((1, 2))
    assert is_component_sequence(np.zeros(3))
    assert not is_component_sequence(np.zeros((2, 2)))
    assert not is_component_sequence("xy")
    assert not is_component_sequence(3)

def test_classify_key():
    assert classify_key(1, 3) == (KeyKind.INDEX, 1)
    assert classify_key("2", 3) == (KeyKind.INDEX, 2)
    assert classify_key("length", 3) == (KeyKind.SHAPE, None)
    kind, symbol_set = classify_key("xy", 3)
    assert kind is KeyKind.SWIZZLE
    assert symbol_set["y"] == 1
    assert classify_key("xy", 5) == (KeyKind.OTHER, None)
    assert classify_key("foo", 3) == (KeyKind.OTHER, None)
    assert classify_key(1.5, 3) == (KeyKind.OTHER, None)

def test_check_dimension():
    assert check_dimension(3) == 3
    assert check_dimension(np.int32(4)) == 4
    assert check_dimension(5.0) == 5
    with pytest.raises(InvalidDimension):
        check_dimension(1, min_dimension=2)

def test_flatten_outer():
    assert flatten_outer(([1, 2],)) == [1, 2]
    assert flatten_outer([[[3]]]) == [3]
    assert flatten_outer((1, 2)) == (1, 2)
    assert flatten_outer(([[1], 2],)) == [[1], 2]

def test_promote():
    assert promote([1, 2], 4) == [1.0, 2.0, 0.0, 0.0]
    assert promote([1, 2], 2) == [1.0, 2.0]
