# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""tensorbridge.options — Bridge-wide configuration.

Exposes the knobs that change how values cross the bridge:
``strict_literals``, ``convert_results``, ``one_based_extract`` and
``log_level``.  Defaults are read from the environment:

    TENSORBRIDGE_STRICT_LITERALS  — reject untagged int/float literals
                                    and raw containers (default: 1)
    TENSORBRIDGE_CONVERT          — convert call results back to host
                                    values (default: 1)
    TENSORBRIDGE_ONE_BASED        — ``extract`` subscripts are 1-based
                                    (default: 1)
    TENSORBRIDGE_LOG_LEVEL        — level of the ``tensorbridge`` logger
                                    (default: WARNING)
"""
from __future__ import annotations

import functools
import logging
import os

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    raw = raw.strip().lower()
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name}={raw!r} is not a boolean flag")


class _BridgeConfig:
    """Module-level bridge configuration singleton."""
    __slots__ = ('_strict_literals', '_convert_results', '_one_based_extract',
                 '_log_level')

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Re-read every setting from the environment."""
        self._strict_literals = _env_flag('TENSORBRIDGE_STRICT_LITERALS', True)
        self._convert_results = _env_flag('TENSORBRIDGE_CONVERT', True)
        self._one_based_extract = _env_flag('TENSORBRIDGE_ONE_BASED', True)
        self.log_level = os.environ.get('TENSORBRIDGE_LOG_LEVEL', 'WARNING')

    # ── strict_literals ──
    @property
    def strict_literals(self) -> bool:
        return self._strict_literals

    @strict_literals.setter
    def strict_literals(self, value: bool):
        self._strict_literals = bool(value)

    # ── convert_results ──
    @property
    def convert_results(self) -> bool:
        return self._convert_results

    @convert_results.setter
    def convert_results(self, value: bool):
        self._convert_results = bool(value)

    # ── one_based_extract ──
    @property
    def one_based_extract(self) -> bool:
        return self._one_based_extract

    @one_based_extract.setter
    def one_based_extract(self, value: bool):
        self._one_based_extract = bool(value)

    # ── log_level ──
    @property
    def log_level(self) -> int:
        return self._log_level

    @log_level.setter
    def log_level(self, value: int | str):
        if isinstance(value, str):
            level = logging.getLevelName(value.strip().upper())
            if not isinstance(level, int):
                raise ValueError(f"unknown log level {value!r}")
            value = level
        self._log_level = value
        logging.getLogger('tensorbridge').setLevel(value)

    def overrides(self, **settings) -> '_Overrides':
        """Temporarily change settings; usable as context manager or decorator."""
        for name in settings:
            if name not in ('strict_literals', 'convert_results',
                            'one_based_extract', 'log_level'):
                raise AttributeError(f"unknown bridge setting '{name}'")
        return _Overrides(self, settings)

    def __repr__(self) -> str:
        return (f"BridgeConfig(strict_literals={self._strict_literals}, "
                f"convert_results={self._convert_results}, "
                f"one_based_extract={self._one_based_extract}, "
                f"log_level={logging.getLevelName(self._log_level)})")


class _Overrides:
    """Context manager / decorator returned by ``config.overrides``."""

    def __init__(self, cfg: _BridgeConfig, settings: dict):
        self._cfg = cfg
        self._settings = settings
        self._prev: list[dict] = []

    def __enter__(self):
        self._prev.append({k: getattr(self._cfg, k) for k in self._settings})
        for k, v in self._settings.items():
            setattr(self._cfg, k, v)
        return self._cfg

    def __exit__(self, *args):
        for k, v in self._prev.pop().items():
            setattr(self._cfg, k, v)

    def __call__(self, fn):
        @functools.wraps(fn)
        def wrapper(*a, **kw):
            with self:
                return fn(*a, **kw)
        return wrapper


config = _BridgeConfig()

__all__ = ['config']
