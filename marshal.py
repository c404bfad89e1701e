# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Type marshaller — host values <-> runtime values.

Conversion table (both directions)::

    Vector, length 1            <->  scalar
    Vector, other lengths       <->  list
    TypedList                   <->  list  (forced, nullable elements)
    HostList                    <->  tuple
    HostMap (string keys)       <->  dict
    IdentityDict                <->  dict keyed by runtime objects
    HostArray                   <->  numpy.ndarray
    NULL / TRUE / FALSE         <->  None / True / False
    ForeignHandle               <->  the object itself

A value with no row in the table raises :class:`ConversionError`; it is
never coerced into something that happens to fit.
"""
from __future__ import annotations

import logging
import numpy as np

from .dtype import dtype as Dtype
from .errors import ConversionError
from .feed import IdentityDict
from .handle import ForeignHandle
from .host import HostArray, HostList, HostMap, Vector, _Null
from .options import config
from .shape import TypedList

logger = logging.getLogger(__name__)


def _shape_name(value) -> str:
    t = type(value)
    if t.__module__ == 'builtins':
        return t.__qualname__
    return f"{t.__module__}.{t.__qualname__}"


# ──────────────────────── host -> runtime ─────────────────────────────

def to_runtime(value):
    """Convert a host value into the wrapped runtime's representation."""
    if isinstance(value, ForeignHandle):
        return value.obj
    if isinstance(value, Vector):
        if len(value) == 1:
            return value[0]
        return list(value)
    if isinstance(value, TypedList):
        return value.to_list()
    if isinstance(value, HostList):
        return tuple(to_runtime(v) for v in value)
    if isinstance(value, HostMap):
        out = {}
        for k, v in value.items.items():
            if not isinstance(k, str):
                raise ConversionError(
                    f"keyed mapping keys must be strings, got "
                    f"{_shape_name(k)}; use dict_of() for object keys")
            out[k] = to_runtime(v)
        return out
    if isinstance(value, IdentityDict):
        return value.to_runtime()
    if isinstance(value, HostArray):
        return value.data.copy()
    if value is None or isinstance(value, _Null):
        return None
    if isinstance(value, (bool, str, np.ndarray)):
        return value
    if isinstance(value, np.generic) and Dtype.of_scalar(value) is not None:
        return value
    if isinstance(value, (int, float, list, tuple, dict)):
        if config.strict_literals:
            raise ConversionError(
                f"untagged {_shape_name(value)} cannot cross the bridge; "
                f"tag it with integer()/double()/typed_list()/tuple_of()/HostMap()")
        return _infer(value)
    raise ConversionError(f"no marshalling target for {_shape_name(value)}")


def _infer(value):
    """Marshal raw Python literals when strict literals are off."""
    if isinstance(value, int):
        return Dtype.int64.coerce(value)
    if isinstance(value, float):
        return value
    if isinstance(value, list):
        return [to_runtime(v) for v in value]
    if isinstance(value, tuple):
        return tuple(to_runtime(v) for v in value)
    out = {}
    for k, v in value.items():
        if not isinstance(k, str):
            raise ConversionError(
                f"keyed mapping keys must be strings, got {_shape_name(k)}")
        out[k] = to_runtime(v)
    return out


# ──────────────────────── runtime -> host ─────────────────────────────

def _common_tag(values) -> Dtype | None:
    tag = None
    for v in values:
        if v is None:
            continue
        t = Dtype.of_scalar(v)
        if t is None or (tag is not None and t is not tag):
            return None
        tag = t
    return tag


def from_runtime(value):
    """Convert a runtime value back into a host value.

    Objects that have no host representation come back as
    :class:`ForeignHandle` references.
    """
    if value is None:
        return _Null()
    tag = Dtype.of_scalar(value)
    if tag is not None:
        return Vector(tag, (value,))
    if isinstance(value, np.ndarray):
        try:
            return HostArray(value)
        except ConversionError:
            logger.debug("array of dtype %s kept as a handle", value.dtype)
            return ForeignHandle(value)
    if isinstance(value, list):
        return _from_list(value)
    if isinstance(value, tuple):
        return HostList(from_runtime(v) for v in value)
    if isinstance(value, dict):
        if all(isinstance(k, str) for k in value):
            return HostMap({k: from_runtime(v) for k, v in value.items()})
        try:
            return IdentityDict(
                (ForeignHandle(k), from_runtime(v)) for k, v in value.items())
        except ConversionError:
            # scalar keys mixed in; no host mapping can hold them
            return ForeignHandle(value)
    return ForeignHandle(value)


def _from_list(value: list):
    has_none = any(v is None for v in value)
    tag = _common_tag(value)
    if len(value) >= 2 and not has_none and tag is not None:
        return Vector(tag, value)
    if len(value) <= 1 or has_none:
        if not value or all(v is None for v in value):
            return TypedList(Dtype.int64, value)
        if tag is not None:
            return TypedList(tag, value)
    return HostList(from_runtime(v) for v in value)


def roundtrip(value):
    """``from_runtime(to_runtime(value))``; handy for checking conversions."""
    return from_runtime(to_runtime(value))
