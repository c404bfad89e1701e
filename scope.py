# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Scoped-context adapter.

Runtime objects such as name scopes, graphs, sessions and devices speak
the ``__enter__`` / ``__exit__`` protocol.  :func:`acquire` enters one and
hands back a :class:`ScopeGuard`; releasing the guard exits it, exactly
once, whether the work in between finished, returned early or raised.

Usage::

    guard = acquire(bridge.call('name_scope', 'layer1'))
    try:
        ...
    finally:
        guard.release()

or, with the entered value bound to a local name::

    def block(scope):
        ...
    with_scope(bridge.call('name_scope', 'layer1'), block, alias='scope')
"""
from __future__ import annotations

import logging
from typing import Any, Callable

from .errors import ContextProtocolError
from .handle import ForeignHandle, unwrap

logger = logging.getLogger(__name__)

_OPEN = 'open'
_RELEASED = 'released'


class ScopeGuard:
    """Holds an entered context and guarantees a single matching exit."""

    __slots__ = ('_target', '_value', '_state', 'exit_error')

    def __init__(self, target, value):
        self._target = target
        self._value = value
        self._state = _OPEN
        self.exit_error: BaseException | None = None

    @property
    def value(self) -> Any:
        """Whatever ``__enter__`` returned (after conversion, if any)."""
        return self._value

    @property
    def released(self) -> bool:
        return self._state == _RELEASED

    def release(self, exc: BaseException | None = None) -> bool:
        """Exit the context.  Returns True if the runtime suppressed *exc*.

        Only the first call reaches ``__exit__``.  If ``__exit__`` fails
        while *exc* is propagating, *exc* stays the reported error: the
        exit failure is kept on :attr:`exit_error`, added to *exc* as a
        note and logged.
        """
        if self._state == _RELEASED:
            return False
        self._state = _RELEASED
        if exc is None:
            args = (None, None, None)
        else:
            args = (type(exc), exc, exc.__traceback__)
        try:
            suppress = type(self._target).__exit__(self._target, *args)
        except Exception as err:
            self.exit_error = err
            if exc is None:
                raise ContextProtocolError(
                    f"exit of {type(self._target).__name__} failed: {err}") from err
            logger.warning("exit of %s failed while unwinding %s: %s",
                           type(self._target).__name__, type(exc).__name__, err)
            exc.add_note(f"additionally, exiting {type(self._target).__name__} "
                         f"raised {type(err).__name__}: {err}")
            return False
        return bool(suppress) and exc is not None

    # ── context-manager protocol ──
    def __enter__(self):
        return self._value

    def __exit__(self, exc_type, exc, tb):
        return self.release(exc)

    def __del__(self):
        if getattr(self, '_state', _RELEASED) == _RELEASED:
            return
        logger.warning("scope on %s was never released; exiting it now",
                       type(self._target).__name__)
        try:
            self.release()
        except ContextProtocolError as err:
            logger.error("%s", err)

    def __repr__(self) -> str:
        return f"<ScopeGuard {type(self._target).__name__} {self._state}>"


def acquire(handle, convert: Callable[[Any], Any] | None = None) -> ScopeGuard:
    """Enter *handle*'s context and return the guard that will exit it."""
    target = unwrap(handle)
    if not ForeignHandle(target).is_context():
        raise ContextProtocolError(
            f"{type(target).__name__} does not implement __enter__/__exit__")
    try:
        value = type(target).__enter__(target)
    except Exception as err:
        raise ContextProtocolError(
            f"enter of {type(target).__name__} failed: {err}") from err
    guard = ScopeGuard(target, value)
    if convert is not None:
        try:
            guard._value = convert(value)
        except BaseException as exc:
            guard.release(exc)
            raise
    return guard


def with_scope(handle, block: Callable[..., Any], alias: str | None = None,
               convert: Callable[[Any], Any] | None = None):
    """Run *block* inside *handle*'s context and return its result.

    With *alias*, the entered value is passed to *block* as the keyword
    argument of that name.  If the runtime's ``__exit__`` suppresses an
    error raised by *block*, ``None`` is returned.
    """
    guard = acquire(handle, convert=convert)
    try:
        result = block(**{alias: guard.value}) if alias else block()
    except BaseException as exc:
        if guard.release(exc):
            return None
        raise
    guard.release()
    return result
