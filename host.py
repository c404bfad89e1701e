# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Host-side value model.

The calling language has no scalars, only vectors; its numeric literals
are floating point unless tagged; its sequences are either atomic
(one element type) or generic lists; its keyed mappings only take string
keys.  These classes spell that model out so every value handed to the
marshaller carries an unambiguous source tag:

* :class:`Vector`    — homogeneous atomic vector (length 1 == scalar)
* :class:`HostList`  — heterogeneous sequence
* :class:`HostMap`   — string-keyed association
* :class:`HostArray` — multi-dimensional numeric array
* :data:`NULL`, :data:`TRUE`, :data:`FALSE` — sentinels
"""
from __future__ import annotations

from typing import Any, Iterator, Mapping, Sequence

import numpy as np

from .dtype import dtype as Dtype
from .errors import ConversionError


class _Null:
    """The host absence sentinel.  Also used as the "unset" marker."""

    __slots__ = ()
    _instance: '_Null | None' = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Null, ())

    def __repr__(self) -> str:
        return 'NULL'


NULL = _Null()
UNSET = NULL


def is_null(value) -> bool:
    return value is None or value is NULL


class Vector:
    """Homogeneous atomic vector with an explicit element tag.

    Elements are coerced through :meth:`dtype.coerce` on construction, so
    an integer vector never holds a non-integral value.
    """

    __slots__ = ('_dtype', '_values')

    def __init__(self, dtype: Dtype, values: Sequence[Any] = ()):
        if not isinstance(dtype, Dtype):
            raise ConversionError(f"vector element tag must be a dtype, got {dtype!r}")
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            values = (values,)
        self._dtype = dtype
        self._values = tuple(dtype.coerce(v) for v in values)

    @property
    def dtype(self) -> Dtype:
        return self._dtype

    @property
    def values(self) -> tuple:
        return self._values

    def is_scalar(self) -> bool:
        return len(self._values) == 1

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __getitem__(self, i):
        return self._values[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._dtype is other._dtype and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._dtype, self._values))

    def __repr__(self) -> str:
        body = ', '.join(repr(v) for v in self._values)
        return f"Vector({self._dtype.value}: {body})"


class HostList:
    """Heterogeneous host sequence; marshals to a tuple."""

    __slots__ = ('_items',)

    def __init__(self, items: Sequence[Any] = ()):
        self._items = tuple(items)

    @property
    def items(self) -> tuple:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __getitem__(self, i):
        return self._items[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, HostList):
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(_host_equal(a, b) for a, b in zip(self._items, other._items))

    __hash__ = None

    def __repr__(self) -> str:
        return f"HostList({list(self._items)!r})"


class HostMap:
    """String-keyed host association; marshals to a dict."""

    __slots__ = ('_items',)

    def __init__(self, items: Mapping[str, Any] | None = None, **named):
        merged = dict(items or {})
        merged.update(named)
        self._items = merged

    @property
    def items(self) -> dict:
        return self._items

    def keys(self):
        return self._items.keys()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __getitem__(self, key):
        return self._items[key]

    def __contains__(self, key) -> bool:
        return key in self._items

    def __eq__(self, other) -> bool:
        if not isinstance(other, HostMap):
            return NotImplemented
        if self._items.keys() != other._items.keys():
            return False
        return all(_host_equal(v, other._items[k]) for k, v in self._items.items())

    __hash__ = None

    def __repr__(self) -> str:
        return f"HostMap({self._items!r})"


class HostArray:
    """Multi-dimensional numeric host array backed by NumPy."""

    __slots__ = ('_data',)

    def __init__(self, data: Any, dtype: Dtype | None = None):
        arr = np.array(data, dtype=dtype.to_numpy() if dtype is not None else None)
        if arr.dtype == object:
            raise ConversionError("array elements must share one numeric type")
        Dtype.from_numpy(arr.dtype)
        self._data = arr

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def dtype(self) -> Dtype:
        return Dtype.from_numpy(self._data.dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HostArray):
            return NotImplemented
        return (self._data.dtype == other._data.dtype
                and np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"HostArray(shape={self._data.shape}, dtype={self.dtype.value})"


def _host_equal(a, b) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)
                and a.dtype == b.dtype and np.array_equal(a, b))
    return a == b


# ── Constructors ──

def vector(*values, dtype: Dtype) -> Vector:
    return Vector(dtype, values)


def integer(*values) -> Vector:
    """Integer vector (``int64``).  Integral floats are accepted."""
    return Vector(Dtype.int64, values)


def double(*values) -> Vector:
    """Floating-point vector (``float64``)."""
    return Vector(Dtype.float64, values)


def logical(*values) -> Vector:
    return Vector(Dtype.bool, values)


def character(*values) -> Vector:
    return Vector(Dtype.string, values)


def tuple_of(*values) -> HostList:
    return HostList(values)


def array(data, dtype: Dtype | None = None) -> HostArray:
    return HostArray(data, dtype=dtype)


TRUE = logical(True)
FALSE = logical(False)
