# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Exception hierarchy for the bridge.

Every error raised by TensorBridge derives from :class:`BridgeError`.
The concrete kinds also derive from the matching builtin so that code
which already catches ``TypeError`` / ``RuntimeError`` keeps working.
"""
from __future__ import annotations


class BridgeError(Exception):
    """Base class for all TensorBridge errors."""


class ConversionError(BridgeError, TypeError):
    """A value has no defined marshalling target."""


class ForeignCallError(BridgeError, RuntimeError):
    """The wrapped runtime raised during a bridged call.

    ``str(err)`` is the wrapped runtime's message, unchanged.  The
    original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, name: str | None = None,
                 foreign_type: str | None = None):
        super().__init__(message)
        self.name = name
        self.foreign_type = foreign_type

    @classmethod
    def from_exception(cls, name: str, exc: BaseException) -> 'ForeignCallError':
        return cls(str(exc), name=name, foreign_type=type(exc).__name__)


class ContextProtocolError(BridgeError, RuntimeError):
    """``__enter__`` or ``__exit__`` of a scoped context failed."""
