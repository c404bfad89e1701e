# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Mappings keyed by runtime objects.

Feed and substitution arguments are keyed by graph-node handles, which
host mapping literals cannot express.  :func:`dict_of` builds them::

    feed = dict_of((x, array(batch_xs)), (y_, array(batch_ys)))
    bridge.invoke(sess, 'run', train_step, feed_dict=feed)

Lookup is by identity of the referenced object: a different object that
compares equal is a different key.
"""
from __future__ import annotations

import numbers
from collections.abc import MutableMapping
from typing import Any, Iterator

from .errors import ConversionError
from .handle import unwrap


class IdentityDict(MutableMapping):
    """Mapping from runtime objects to host values, compared by identity."""

    __slots__ = ('_items',)

    def __init__(self, pairs=()):
        # id(obj) -> (key as given, value); holding the key keeps the id stable
        self._items: dict[int, tuple[Any, Any]] = {}
        for key, value in pairs:
            self[key] = value

    @staticmethod
    def _ident(key) -> int:
        obj = unwrap(key)
        if isinstance(obj, (str, bytes, numbers.Number)) or obj is None:
            raise ConversionError(
                f"object-keyed mappings need object keys, got "
                f"{type(obj).__name__}; use HostMap for string keys")
        return id(obj)

    def __getitem__(self, key):
        try:
            return self._items[self._ident(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key, value) -> None:
        self._items[self._ident(key)] = (key, value)

    def __delitem__(self, key) -> None:
        try:
            del self._items[self._ident(key)]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator:
        return (k for k, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key) -> bool:
        try:
            return self._ident(key) in self._items
        except ConversionError:
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, IdentityDict):
            return NotImplemented
        if self._items.keys() != other._items.keys():
            return False
        return all(v == other._items[i][1] for i, (_, v) in self._items.items())

    __hash__ = None

    def to_runtime(self) -> dict:
        """Native dict keyed by the referenced objects, values marshalled."""
        from .marshal import to_runtime

        out = {}
        for key, value in self._items.values():
            obj = unwrap(key)
            value = to_runtime(value)
            try:
                out[obj] = value
            except TypeError as exc:
                raise ConversionError(
                    f"runtime object of type {type(obj).__name__} is not "
                    f"hashable and cannot key a runtime dict") from exc
        return out

    def __repr__(self) -> str:
        body = ', '.join(f"{k!r}: {v!r}" for k, v in self._items.values())
        return f"IdentityDict({{{body}}})"


def dict_of(*pairs) -> IdentityDict:
    """Build an :class:`IdentityDict` from ``(handle, value)`` pairs."""
    for pair in pairs:
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise ConversionError(
                f"dict_of expects (key, value) pairs, got {pair!r}")
    return IdentityDict(pairs)

