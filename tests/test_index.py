"""
Tests for tensorbridge.index — 1-based <-> 0-based translation.
"""
import numpy as np
import pytest

import tensorbridge as tb
from tensorbridge.index import span


def test_scalar_translation():
    assert tb.as_zero_based(1) == 0
    assert tb.as_zero_based(2) == 1


def test_sequence_translation_is_componentwise():
    assert tb.as_zero_based([1, 3, 2]) == [0, 2, 1]
    assert tb.as_zero_based((4, 1)) == (3, 0)
    assert tb.as_zero_based(tb.integer(1, 2)) == tb.integer(0, 1)


def test_negative_and_null_pass_through():
    assert tb.as_zero_based(-1) == -1
    assert tb.as_zero_based(None) is None
    assert tb.as_zero_based(tb.NULL) is None


def test_zero_is_not_a_one_based_index():
    with pytest.raises(tb.ConversionError):
        tb.as_zero_based(0)


@pytest.mark.parametrize('bad', [1.5, 'a', True])
def test_non_integers_rejected(bad):
    with pytest.raises(tb.ConversionError):
        tb.as_zero_based(bad)


def test_bijection():
    for i in range(1, 50):
        assert tb.as_one_based(tb.as_zero_based(i)) == i
        assert tb.as_zero_based(tb.as_one_based(i - 1)) == i - 1


def test_as_slice():
    assert tb.as_slice(span(2, 4)) == slice(1, 4, None)
    assert tb.as_slice(span(None, -1)) == slice(None, None, None)
    assert tb.as_slice(span(1, -2)) == slice(0, -1, None)
    with pytest.raises(tb.ConversionError):
        span(1, 5, 0)


def test_extract():
    x = np.arange(12).reshape(3, 4)
    assert tb.extract(x, 1, 1) == 0
    assert tb.extract(x, 2, span(2, 3)).tolist() == [5, 6]
    assert tb.extract(x, span(), -1).tolist() == [3, 7, 11]
    assert tb.extract(x, tb.all_dims(), 1).tolist() == [0, 4, 8]
    assert tb.extract(x, tb.integer(1, 3), 1).tolist() == [0, 8]
    assert tb.extract(x, span(2, -1)).shape == (2, 4)
    assert tb.extract(x, None, 1).shape == (1, 4)
    assert tb.extract(tb.ForeignHandle(x), 3, 4) == 11


def test_extract_rejects_python_slices():
    with pytest.raises(tb.ConversionError, match='span'):
        tb.extract(np.arange(3), slice(0, 2))


def test_extract_zero_based_mode():
    x = np.arange(12).reshape(3, 4)
    with tb.config.overrides(one_based_extract=False):
        assert tb.extract(x, 0, 0) == 0
        assert tb.extract(x, 1, span(0, 1)).tolist() == [4, 5]


def test_float_tagged_indices_come_out_integer():
    out = tb.as_zero_based(tb.double(2, 3))
    assert out == tb.integer(1, 2)
    assert out.dtype is tb.int64
    assert type(tb.to_runtime(tb.as_zero_based(tb.double(2)))) is int


def test_typed_list_translation():
    out = tb.as_zero_based(tb.typed_list(2))
    assert isinstance(out, tb.TypedList)
    assert tb.to_runtime(out) == [1]
    assert tb.to_runtime(tb.as_zero_based(tb.typed_list(3, None, -1))) == [2, None, -1]
    assert tb.as_one_based(tb.typed_list(0, 1)).to_list() == [1, 2]


def test_extract_vector_subscripts_agree_across_modes():
    x = np.arange(12).reshape(3, 4)
    one_based = tb.extract(x, tb.integer(2))
    with tb.config.overrides(one_based_extract=False):
        zero_based = tb.extract(x, tb.integer(1))
    assert one_based.shape == zero_based.shape == (4,)
    assert one_based.tolist() == zero_based.tolist()


def test_extract_typed_list_subscript_keeps_axis():
    x = np.arange(12).reshape(3, 4)
    assert tb.extract(x, tb.typed_list(2)).shape == (1, 4)
    with pytest.raises(tb.ConversionError):
        tb.extract(x, tb.typed_list(None))
