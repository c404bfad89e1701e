# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Typed proxy over the wrapped framework.

:class:`FrameworkAPI` lists the operations host code performs across the
bridge; :class:`Bridge` is the one adapter that implements them.  Every
call goes the same way:

1.  host arguments are marshalled with :func:`~tensorbridge.marshal.to_runtime`
    (arguments named in ``_axes=`` go through the index translator first);
2.  the framework function / method runs;
3.  its exception, if any, is re-raised as :class:`ForeignCallError`
    with the message untouched;
4.  the result is converted back with
    :func:`~tensorbridge.marshal.from_runtime`, or wrapped in a
    :class:`ForeignHandle` when conversion is off.

Usage::

    tf = Bridge('tensorflow')
    x = tf.call('compat.v1.placeholder', tf.attr('float32', convert=False),
                shape(None, 784))
    total = tf.call('reduce_sum', x, axis=integer(2), _axes=('axis',))
"""
from __future__ import annotations

import importlib
import importlib.util
import logging
from types import ModuleType
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from .errors import ForeignCallError
from .handle import ForeignHandle, unwrap
from .host import Vector
from .index import as_zero_based
from .marshal import from_runtime, to_runtime
from .options import config
from .scope import ScopeGuard, acquire
from .shape import TypedList

logger = logging.getLogger(__name__)


@runtime_checkable
class FrameworkAPI(Protocol):
    """The subset of the wrapped framework that host code relies on."""

    def call(self, name: str, /, *args, _axes: Iterable[str | int] = (),
             _convert: bool | None = None, **kwargs) -> Any: ...

    def attr(self, name: str, convert: bool | None = None) -> Any: ...

    def getattr(self, handle, name: str, convert: bool | None = None) -> Any: ...

    def invoke(self, handle, method: str, /, *args, _axes: Iterable[str | int] = (),
               _convert: bool | None = None, **kwargs) -> Any: ...

    def scope(self, handle, convert: bool | None = None) -> ScopeGuard: ...


class Bridge:
    """Adapter implementing :class:`FrameworkAPI` for one Python module."""

    __slots__ = ('_module', '_module_name')

    def __init__(self, module: ModuleType | str):
        if isinstance(module, str):
            self._module = None
            self._module_name = module
        else:
            self._module = module
            self._module_name = getattr(module, '__name__', type(module).__name__)

    # ------------------------------------------------------------------ #
    #  Module access                                                     #
    # ------------------------------------------------------------------ #

    @property
    def module(self):
        """The wrapped module, imported on first use."""
        if self._module is None:
            try:
                self._module = importlib.import_module(self._module_name)
            except ImportError as exc:
                raise ForeignCallError.from_exception(self._module_name, exc) from exc
            logger.debug("bridge loaded %s", self._module_name)
        return self._module

    @property
    def name(self) -> str:
        return self._module_name

    @property
    def version(self) -> str | None:
        return getattr(self.module, '__version__', None)

    def is_available(self) -> bool:
        """True if the wrapped module can be imported."""
        if self._module is not None:
            return True
        return importlib.util.find_spec(self._module_name.split('.')[0]) is not None

    def _resolve(self, root, name: str):
        obj = root
        for part in name.split('.'):
            try:
                obj = getattr(obj, part)
            except AttributeError as exc:
                raise ForeignCallError.from_exception(name, exc) from exc
        return obj

    # ------------------------------------------------------------------ #
    #  Marshalling                                                       #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _axis(value):
        translated = as_zero_based(value)
        if isinstance(translated, (Vector, TypedList)):
            return to_runtime(translated)
        return translated

    def _marshal(self, args: tuple, kwargs: dict, axes) -> tuple[list, dict]:
        axes = {axes} if isinstance(axes, (str, int)) else set(axes)
        rargs = [self._axis(a) if i in axes else to_runtime(a)
                 for i, a in enumerate(args)]
        rkwargs = {k: self._axis(v) if k in axes else to_runtime(v)
                   for k, v in kwargs.items()}
        return rargs, rkwargs

    @staticmethod
    def _result(value, convert: bool | None):
        if convert is None:
            convert = config.convert_results
        if convert:
            return from_runtime(value)
        return ForeignHandle(value)

    def _run(self, name: str, fn: Callable, args, kwargs, axes, convert):
        rargs, rkwargs = self._marshal(args, kwargs, axes)
        logger.debug("bridge call %s.%s (%d args, %d kwargs)",
                     self._module_name, name, len(rargs), len(rkwargs))
        try:
            result = fn(*rargs, **rkwargs)
        except Exception as exc:
            raise ForeignCallError.from_exception(name, exc) from exc
        return self._result(result, convert)

    # ------------------------------------------------------------------ #
    #  FrameworkAPI                                                      #
    # ------------------------------------------------------------------ #

    def call(self, name: str, /, *args, _axes: Iterable[str | int] = (),
             _convert: bool | None = None, **kwargs) -> Any:
        """Call the module-level function *name* (dotted paths allowed).

        Every other keyword, ``name=`` and ``axes=`` included, goes to the
        framework function.  The proxy's own options carry a leading
        underscore: ``_axes`` lists the argument names / positions that
        are 1-based indices, ``_convert`` overrides result conversion.
        """
        fn = self._resolve(self.module, name)
        return self._run(name, fn, args, kwargs, _axes, _convert)

    def attr(self, name: str, convert: bool | None = None) -> Any:
        """Read a module-level attribute such as a dtype constant."""
        return self._result(self._resolve(self.module, name), convert)

    def getattr(self, handle, name: str, convert: bool | None = None) -> Any:
        """Read attribute *name* of a runtime object."""
        return self._result(self._resolve(unwrap(handle), name), convert)

    def invoke(self, handle, method: str, /, *args, _axes: Iterable[str | int] = (),
               _convert: bool | None = None, **kwargs) -> Any:
        """Call *method* on a runtime object; options as for :meth:`call`."""
        fn = self._resolve(unwrap(handle), method)
        return self._run(method, fn, args, kwargs, _axes, _convert)

    def scope(self, handle, convert: bool | None = None) -> ScopeGuard:
        """Enter a runtime context; the guard's value is converted like results."""
        return acquire(handle, convert=lambda v: self._result(v, convert))

    def __repr__(self) -> str:
        state = 'loaded' if self._module is not None else 'lazy'
        return f"<Bridge {self._module_name} ({state})>"
