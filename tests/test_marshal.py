"""
Tests for tensorbridge.marshal — the host <-> runtime conversion table.
"""
import numpy as np
import pytest

import tensorbridge as tb
from tensorbridge.marshal import roundtrip


def test_single_element_vector_is_scalar():
    assert tb.to_runtime(tb.integer(10)) == 10
    assert type(tb.to_runtime(tb.integer(10))) is int
    assert type(tb.to_runtime(tb.double(1))) is float
    assert tb.to_runtime(tb.character('relu')) == 'relu'


def test_multi_element_vector_is_list():
    assert tb.to_runtime(tb.double(1, 2, 3)) == [1.0, 2.0, 3.0]
    assert tb.to_runtime(tb.integer()) == []


def test_mixed_sequence_is_tuple():
    v = tb.tuple_of(tb.integer(1), tb.character('a'), tb.NULL)
    assert tb.to_runtime(v) == (1, 'a', None)


def test_keyed_mapping_is_dict():
    m = tb.HostMap(units=tb.integer(64), activation=tb.character('relu'))
    assert tb.to_runtime(m) == {'units': 64, 'activation': 'relu'}


def test_keyed_mapping_rejects_non_string_keys():
    with pytest.raises(tb.ConversionError, match='strings'):
        tb.to_runtime(tb.HostMap({1: tb.integer(1)}))


def test_array_is_native_and_copied():
    data = np.arange(6, dtype=np.float32).reshape(2, 3)
    arr = tb.array(data)
    out = tb.to_runtime(arr)
    assert isinstance(out, np.ndarray)
    assert out.dtype == np.float32
    assert out.shape == (2, 3)
    out[0, 0] = 99
    assert arr.data[0, 0] == 0


def test_sentinels():
    assert tb.to_runtime(tb.NULL) is None
    assert tb.to_runtime(tb.TRUE) is True
    assert tb.to_runtime(tb.FALSE) is False
    assert tb.from_runtime(None) is tb.NULL
    assert tb.from_runtime(True) == tb.TRUE


def test_handle_passes_by_identity():
    obj = object()
    h = tb.ForeignHandle(obj)
    assert tb.to_runtime(h) is obj
    assert tb.from_runtime(obj) == h


def test_narrow_tags_use_numpy_scalars():
    out = tb.to_runtime(tb.vector(3, dtype=tb.int32))
    assert isinstance(out, np.int32)
    assert tb.from_runtime(np.float32(2.5)) == tb.vector(2.5, dtype=tb.float32)


def test_untagged_literals_rejected_when_strict():
    with pytest.raises(tb.ConversionError, match='untagged'):
        tb.to_runtime(3.0)
    with pytest.raises(tb.ConversionError, match='untagged'):
        tb.to_runtime([1, 2])


def test_untagged_literals_inferred_when_lenient():
    with tb.config.overrides(strict_literals=False):
        assert tb.to_runtime([1, 2.5, 'x']) == [1, 2.5, 'x']
        assert tb.to_runtime({'a': (1, 2)}) == {'a': (1, 2)}


def test_unsupported_shape_named_in_error():
    with pytest.raises(tb.ConversionError, match='set'):
        tb.to_runtime({1, 2})


def test_from_runtime_lists():
    assert tb.from_runtime([1, 2]) == tb.integer(1, 2)
    assert tb.from_runtime([5]) == tb.typed_list(5)
    assert tb.from_runtime([]) == tb.typed_list()
    assert tb.from_runtime([None, 3]) == tb.shape(None, 3)
    assert tb.from_runtime([1, 'a']) == tb.tuple_of(tb.integer(1), tb.character('a'))


def test_from_runtime_object_keyed_dict():
    k = object()
    out = tb.from_runtime({k: 1.5})
    assert isinstance(out, tb.IdentityDict)
    assert out[tb.ForeignHandle(k)] == tb.double(1.5)


def test_from_runtime_int_keyed_dict_stays_a_handle():
    d = {1: 'a'}
    out = tb.from_runtime(d)
    assert isinstance(out, tb.ForeignHandle)
    assert out.obj is d


@pytest.mark.parametrize('value', [
    tb.integer(7),
    tb.double(1.5, 2.5),
    tb.character('a', 'b'),
    tb.logical(True, False),
    tb.vector(3, dtype=tb.int32),
    tb.vector(1.0, 2.0, dtype=tb.float32),
    tb.tuple_of(tb.integer(1), tb.character('x')),
    tb.HostMap(a=tb.integer(1), b=tb.tuple_of(tb.double(2), tb.NULL)),
    tb.array(np.ones((2, 2), dtype=np.int32)),
    tb.shape(None, 784),
    tb.shape(2, 3),
    tb.typed_list(10),
    tb.typed_list(1.5, 2.5, dtype=tb.float64),
    tb.NULL,
    tb.TRUE,
])
def test_roundtrip(value):
    assert roundtrip(value) == value


def test_roundtrip_object_keyed_mapping():
    a, b = object(), object()
    feed = tb.dict_of((a, tb.double(1)), (b, tb.integer(2, 3)))
    assert roundtrip(feed) == feed


def test_defined_typed_list_equals_matching_vector():
    back = roundtrip(tb.shape(2, 3))
    assert isinstance(back, tb.Vector)
    assert back == tb.shape(2, 3)
    assert tb.shape(2, 3) == tb.integer(2, 3)
    assert hash(tb.shape(2, 3)) == hash(tb.integer(2, 3))
    assert tb.shape(2, 3) != tb.double(2, 3)
    assert tb.shape(None, 3) != tb.integer(3)
