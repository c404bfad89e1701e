# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Shape descriptors and typed lists.

APIs that take a dimension list or a typed parameter list must receive a
real list, even with zero or one element, and may need ``None`` entries.
The generic host vector cannot express either: a length-1 vector
collapses to a scalar and it has no null element.  Build those arguments
with :func:`shape` or :func:`typed_list` instead::

    shape(None, 784)     # -> [None, 784]
    shape(10)            # -> [10], not 10
    typed_list()         # -> []
"""
from __future__ import annotations

from typing import Any, Iterator

from .dtype import dtype as Dtype
from .errors import ConversionError
from .host import Vector, is_null


class TypedList:
    """Sequence with forced list semantics and nullable elements."""

    __slots__ = ('_dtype', '_values')

    def __init__(self, dtype: Dtype, values=()):
        self._dtype = dtype
        self._values = tuple(None if is_null(v) else dtype.coerce(v)
                             for v in values)

    @property
    def dtype(self) -> Dtype:
        return self._dtype

    @property
    def values(self) -> tuple:
        return self._values

    @property
    def is_fully_defined(self) -> bool:
        return all(v is not None for v in self._values)

    def to_list(self) -> list:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __getitem__(self, i):
        return self._values[i]

    def __eq__(self, other) -> bool:
        # a list without nulls carries the same data as a vector of its tag
        if not isinstance(other, (TypedList, Vector)):
            return NotImplemented
        return self._dtype is other.dtype and self._values == other.values

    # same key as Vector.__hash__, so equal vectors and lists hash alike
    def __hash__(self) -> int:
        return hash((self._dtype, self._values))

    def __repr__(self) -> str:
        body = ', '.join('NULL' if v is None else repr(v) for v in self._values)
        return f"TypedList({self._dtype.value}: [{body}])"


def _flatten(values) -> Iterator[Any]:
    for v in values:
        if isinstance(v, (Vector, TypedList)):
            yield from v
        else:
            yield v


def typed_list(*values, dtype: Dtype = Dtype.int64) -> TypedList:
    """Build a list of *dtype* elements that never collapses to a scalar.

    ``None`` / ``NULL`` entries are kept in place; numeric entries are
    coerced to *dtype* (``784.0`` becomes ``784`` for integer tags).
    """
    return TypedList(dtype, _flatten(values))


def shape(*dims) -> TypedList:
    """Build a shape descriptor: a list of optional positive integers.

    An unset entry (``None`` / ``NULL``) means "any size" for that axis.
    Zero or negative sizes raise :class:`ConversionError`.
    """
    result = TypedList(Dtype.int64, _flatten(dims))
    for axis, d in enumerate(result):
        if d is not None and d < 1:
            raise ConversionError(
                f"shape dimension {axis + 1} must be a positive integer "
                f"or unset, got {d}")
    return result
