# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Opaque references to objects owned by the wrapped runtime."""
from __future__ import annotations


class ForeignHandle:
    """Reference to a runtime object (graph node, session, variable, ...).

    The handle never copies the object.  Two handles are equal only when
    they reference the very same object, whatever the object's own
    ``__eq__`` says.  Attribute access is deliberately not forwarded; go
    through :class:`tensorbridge.bridge.Bridge` instead.
    """

    __slots__ = ('_obj',)

    def __init__(self, obj):
        if isinstance(obj, ForeignHandle):
            obj = obj._obj
        self._obj = obj

    @property
    def obj(self):
        return self._obj

    @property
    def type_name(self) -> str:
        t = type(self._obj)
        return f"{t.__module__}.{t.__qualname__}"

    def is_context(self) -> bool:
        """True if the referenced object speaks the enter/exit protocol."""
        t = type(self._obj)
        return hasattr(t, '__enter__') and hasattr(t, '__exit__')

    def __eq__(self, other) -> bool:
        if not isinstance(other, ForeignHandle):
            return NotImplemented
        return self._obj is other._obj

    def __hash__(self) -> int:
        return id(self._obj)

    def __repr__(self) -> str:
        return f"<ForeignHandle {self.type_name} at {id(self._obj):#x}>"


def unwrap(value):
    """Return the referenced object for handles, *value* otherwise."""
    if isinstance(value, ForeignHandle):
        return value._obj
    return value
