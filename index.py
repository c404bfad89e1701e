# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""1-based <-> 0-based index translation.

Host code counts axes and elements from 1; the wrapped runtime counts
from 0.  Every positional axis / dimension argument must pass through
:func:`as_zero_based` on its way across the bridge.

Negative indices count from the end and mean the same thing in both
conventions (``-1`` is the last element), so they pass through as-is.
``0`` has no meaning as a 1-based index and is rejected.
"""
from __future__ import annotations

import numbers

from .errors import ConversionError
from .handle import unwrap
from .dtype import dtype as Dtype
from .host import Vector, is_null
from .options import config
from .shape import TypedList


def _check_index(i) -> int:
    if isinstance(i, bool):
        raise ConversionError(f"index must be an integer, got {i!r}")
    if isinstance(i, numbers.Integral):
        return int(i)
    if isinstance(i, numbers.Real) and float(i).is_integer():
        return int(i)
    raise ConversionError(f"index must be an integer, got {i!r}")


def _zero(i) -> int:
    i = _check_index(i)
    if i == 0:
        raise ConversionError("0 is not a valid 1-based index")
    return i - 1 if i > 0 else i


def _one(i) -> int:
    i = _check_index(i)
    return i + 1 if i >= 0 else i


def _translate(index, fn):
    if is_null(index):
        return None
    if isinstance(index, Vector):
        if not index.dtype.is_integer and not index.dtype.is_floating:
            raise ConversionError(
                f"index vector must be numeric, got {index.dtype.value}")
        # every element is integral by now, so the result is integer-tagged
        return Vector(Dtype.int64, [fn(i) for i in index])
    if isinstance(index, TypedList):
        return TypedList(Dtype.int64,
                         [None if i is None else fn(i) for i in index])
    if isinstance(index, (list, tuple)):
        return type(index)(fn(i) for i in index)
    return fn(index)


def as_zero_based(index):
    """Translate a 1-based index (or sequence of indices) to 0-based.

    >>> as_zero_based(1)
    0
    >>> as_zero_based([1, 3, -1])
    [0, 2, -1]
    """
    return _translate(index, _zero)


def as_one_based(index):
    """Inverse of :func:`as_zero_based`."""
    return _translate(index, _one)


# ──────────────────────── 1-based extraction ──────────────────────────

class span:
    """Inclusive 1-based range ``start..stop``; either end may be omitted."""

    __slots__ = ('start', 'stop', 'step')

    def __init__(self, start=None, stop=None, step=None):
        self.start = None if is_null(start) else _check_index(start)
        self.stop = None if is_null(stop) else _check_index(stop)
        self.step = None if is_null(step) else _check_index(step)
        if self.step is not None and self.step < 1:
            raise ConversionError(f"span step must be positive, got {self.step}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, span):
            return NotImplemented
        return (self.start, self.stop, self.step) == (other.start, other.stop, other.step)

    def __hash__(self) -> int:
        return hash((self.start, self.stop, self.step))

    def __repr__(self) -> str:
        return f"span({self.start}, {self.stop}, {self.step})"


def as_slice(s: span, one_based: bool = True) -> slice:
    """Convert an inclusive :class:`span` into a half-open ``slice``."""
    if not one_based:
        stop = s.stop
        if stop is not None:
            stop = None if stop == -1 else stop + 1
        return slice(s.start, stop, s.step)
    start = None if s.start is None else _zero(s.start)
    if s.stop is None:
        stop = None
    elif s.stop > 0:
        stop = s.stop
    elif s.stop == 0:
        raise ConversionError("0 is not a valid 1-based index")
    else:
        # inclusive -k from the end is exclusive -k+1; -1 runs to the end
        stop = None if s.stop == -1 else s.stop + 1
    return slice(start, stop, s.step)


def all_dims():
    """Stand-in for "every remaining dimension" in :func:`extract`."""
    return Ellipsis


def _subscript(sub, one_based: bool):
    if sub is Ellipsis or sub is None:
        return sub
    if isinstance(sub, span):
        return as_slice(sub, one_based)
    if isinstance(sub, slice):
        raise ConversionError(
            "use span() for ranges; Python slices are ambiguous across "
            "indexing conventions")
    if isinstance(sub, (Vector, TypedList)):
        if None in sub.values:
            raise ConversionError("extract subscripts cannot hold NULL entries")
        picked = [_zero(i) if one_based else _check_index(i) for i in sub]
        # a length-1 vector is a host scalar; a typed list stays a list
        if isinstance(sub, Vector) and len(picked) == 1:
            return picked[0]
        return picked
    if not one_based:
        return _check_index(sub)
    return _zero(sub)


def extract(obj, *subscripts):
    """Index a runtime object with host subscripts.

    Integers are 1-based, :class:`span` ranges are inclusive,
    :func:`all_dims` fills the remaining axes and ``None`` inserts a new
    axis.  Set ``config.one_based_extract = False`` to pass integers
    through unchanged.
    """
    one_based = config.one_based_extract
    key = tuple(_subscript(s, one_based) for s in subscripts)
    target = unwrap(obj)
    if len(key) == 1:
        return target[key[0]]
    return target[key]
