# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""Element type tags for host values.

Every numeric literal that crosses the bridge carries one of these tags,
so integer-vs-float is never inferred from literal syntax.
"""
from __future__ import annotations

import enum
import numbers
import numpy as np

from .errors import ConversionError


class dtype(enum.Enum):
    """Element type of a host vector — mirrors the NumPy scalar types."""
    float16 = "float16"
    float32 = "float32"
    float64 = "float64"
    int8 = "int8"
    int16 = "int16"
    int32 = "int32"
    int64 = "int64"
    uint8 = "uint8"
    bool = "bool"
    string = "string"

    def to_numpy(self) -> np.dtype:
        """Convert to numpy dtype."""
        _map = {
            dtype.float16: np.float16,
            dtype.float32: np.float32,
            dtype.float64: np.float64,
            dtype.int8: np.int8,
            dtype.int16: np.int16,
            dtype.int32: np.int32,
            dtype.int64: np.int64,
            dtype.uint8: np.uint8,
            dtype.bool: np.bool_,
            dtype.string: np.str_,
        }
        return np.dtype(_map[self])

    @staticmethod
    def from_numpy(np_dtype: np.dtype) -> 'dtype':
        """Convert numpy dtype to a tag; unsupported dtypes raise."""
        np_dtype = np.dtype(np_dtype)
        if np_dtype.kind == 'U':
            return dtype.string
        _map = {
            np.dtype(np.float16): dtype.float16,
            np.dtype(np.float32): dtype.float32,
            np.dtype(np.float64): dtype.float64,
            np.dtype(np.int8): dtype.int8,
            np.dtype(np.int16): dtype.int16,
            np.dtype(np.int32): dtype.int32,
            np.dtype(np.int64): dtype.int64,
            np.dtype(np.uint8): dtype.uint8,
            np.dtype(np.bool_): dtype.bool,
        }
        try:
            return _map[np_dtype]
        except KeyError:
            raise ConversionError(
                f"no element tag for numpy dtype '{np_dtype}'") from None

    @staticmethod
    def of_scalar(value) -> 'dtype | None':
        """Tag of a runtime scalar, or None if *value* is not a scalar."""
        if isinstance(value, (bool, np.bool_)):
            return dtype.bool
        if isinstance(value, np.generic):
            try:
                return dtype.from_numpy(value.dtype)
            except ConversionError:
                return None
        if isinstance(value, int):
            return dtype.int64
        if isinstance(value, float):
            return dtype.float64
        if isinstance(value, str):
            return dtype.string
        return None

    @property
    def is_integer(self) -> bool:
        return self in (dtype.int8, dtype.int16, dtype.int32,
                        dtype.int64, dtype.uint8)

    @property
    def is_floating(self) -> bool:
        return self in (dtype.float16, dtype.float32, dtype.float64)

    def coerce(self, value):
        """Convert *value* to the runtime scalar for this tag.

        ``int64`` / ``float64`` / ``bool`` / ``string`` produce Python
        builtins; the narrower tags produce the matching NumPy scalar.
        """
        if self is dtype.bool:
            if not isinstance(value, (bool, np.bool_)):
                raise ConversionError(
                    f"expected a logical value, got {type(value).__name__}")
            return bool(value)
        if self is dtype.string:
            if not isinstance(value, str):
                raise ConversionError(
                    f"expected a character value, got {type(value).__name__}")
            return str(value)
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            raise ConversionError(
                f"expected a numeric value for {self.value}, "
                f"got {type(value).__name__}")
        if self.is_integer:
            if isinstance(value, numbers.Integral):
                v = int(value)
            elif float(value).is_integer():
                v = int(value)
            else:
                raise ConversionError(
                    f"{value!r} is not integral; cannot tag as {self.value}")
            info = np.iinfo(self.to_numpy())
            if not info.min <= v <= info.max:
                raise ConversionError(f"{v} is out of range for {self.value}")
            return v if self is dtype.int64 else self.to_numpy().type(v)
        v = float(value)
        return v if self is dtype.float64 else self.to_numpy().type(v)

    def __repr__(self) -> str:
        return f"tensorbridge.{self.name}"


# Convenience aliases
float16 = dtype.float16
float32 = dtype.float32
float64 = dtype.float64
half = dtype.float16
int8 = dtype.int8
int16 = dtype.int16
int32 = dtype.int32
int64 = dtype.int64
long = dtype.int64
uint8 = dtype.uint8
string = dtype.string
