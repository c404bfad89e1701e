"""
Tests for tensorbridge.shape — shape descriptors and typed lists.
"""
import pytest

import tensorbridge as tb


def test_shape_preserves_unset_positionally():
    out = tb.to_runtime(tb.shape(None, 784))
    assert out == [None, 784]
    assert type(out[1]) is int


def test_single_value_keeps_list_semantics():
    assert tb.to_runtime(tb.typed_list(10)) == [10]
    assert tb.to_runtime(tb.shape(10)) == [10]


def test_zero_values_is_empty_list():
    out = tb.to_runtime(tb.typed_list())
    assert out == []
    assert out is not None
    assert tb.to_runtime(tb.shape()) == []


def test_count_invariance():
    one = tb.to_runtime(tb.shape(3))
    two = tb.to_runtime(tb.shape(3, 4))
    assert type(one) is type(two) is list


def test_float_literals_become_integers():
    s = tb.shape(784.0, 10.0)
    assert s.values == (784, 10)
    assert all(type(v) is int for v in s)


def test_unset_markers_are_interchangeable():
    assert tb.shape(tb.UNSET, tb.NULL, None, 3).values == (None, None, None, 3)


def test_vector_arguments_are_splatted():
    assert tb.shape(tb.integer(2, 3)) == tb.shape(2, 3)
    assert tb.shape(tb.integer(5), None) == tb.shape(5, None)


@pytest.mark.parametrize('bad', [0, -1, 2.5, 'x', True])
def test_invalid_dimensions(bad):
    with pytest.raises(tb.ConversionError):
        tb.shape(None, bad)


def test_typed_list_other_dtype():
    tl = tb.typed_list(1, None, dtype=tb.float64)
    assert tl.to_list() == [1.0, None]
    assert tl.dtype is tb.float64


def test_typed_list_allows_non_positive_integers():
    assert tb.to_runtime(tb.typed_list(0, -1)) == [0, -1]


def test_fully_defined():
    assert tb.shape(2, 3).is_fully_defined
    assert not tb.shape(None, 3).is_fully_defined
    assert len(tb.shape(None, 3)) == 2
    assert tb.shape(None, 3)[1] == 3
