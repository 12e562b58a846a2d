import pytest

from vecn import ComponentTypeError, IncompleteSpliceError, VectorRegistry, is_vector

@pytest.fixture
def v(vec3):
    return vec3(1, 2, 3)

def test_concat_returns_vector(v, vec5):
    result = v.concat([1, 2])
    assert is_vector(result)
    assert result == vec5(1, 2, 3, 1, 2)

def test_concat_with_vectors_and_scalars(v, registry):
    result = v.concat(v, 7)
    assert result == registry.get(7)(1, 2, 3, 1, 2, 3, 7)

def test_concat_with_non_numbers_degrades(v):
    result = v.concat(["a"])
    assert not is_vector(result)
    assert result == [1.0, 2.0, 3.0, "a"]

def test_filter_to_lower_dimension(v, vec2):
    result = v.filter(lambda n: n > 1)
    assert is_vector(result)
    assert result == vec2(2, 3)

def test_filter_to_empty_is_a_list(v):
    result = v.filter(lambda n: n > 3)
    assert result == []
    assert not is_vector(result)

def test_filter_to_single_depends_on_min_dimension():
    strict = VectorRegistry(min_dimension=2)
    result = strict.get(3)(1, 2, 3).filter(lambda n: n > 2)
    assert result == [3.0]
    assert not is_vector(result)

def test_map_to_numbers_stays_vector(v, vec3):
    result = v.map(lambda n: n + 1)
    assert is_vector(result)
    assert result == vec3(2, 3, 4)

def test_map_to_non_numbers_degrades(v):
    result = v.map(lambda n: n if n > 1 else str(n))
    assert not is_vector(result)
    assert result == ["1.0", 2.0, 3.0]
    assert not is_vector(v.map(lambda n: n > 0))

def test_slicing(v, vec2):
    assert v[:] == v
    assert is_vector(v[:])
    assert v[1:] == v.yz
    assert isinstance(v[1:], vec2)
    assert v[3:3] == []
    assert not is_vector(v[3:3])

def test_slice_assignment(v, vec3):
    v[0:2] = [7, 8]
    assert v == vec3(7, 8, 3)
    with pytest.raises(IncompleteSpliceError):
        v[0:2] = [1]
    with pytest.raises(ComponentTypeError):
        v[0:2] = ["a", 1]
    assert v == vec3(7, 8, 3)

def test_splice_keeps_dimension(v, vec3):
    copy = vec3(v)
    removed = copy.splice(0, 1, 5)
    assert removed == [1.0]
    assert is_vector(copy)
    assert copy == vec3(5, 2, 3)

def test_splice_negative_start(v, vec3):
    v.splice(-2, 2, 8, 9)
    assert v == vec3(1, 8, 9)

def test_splice_changing_dimension_raises(v, vec3):
    with pytest.raises(IncompleteSpliceError):
        v.splice(0, 2, 5)
    assert v == vec3(1, 2, 3)

def test_splice_non_numbers_raise(v, vec3):
    with pytest.raises(ComponentTypeError):
        v.splice(0, 1, "a")
    assert v == vec3(1, 2, 3)
