# ╔══════════════════════════════════════════════════════════════════════╗
# ║  TensorBridge — Cross-Runtime Framework Binding                      ║
# ║  Copyright © 2026 Pictofeed, LLC. All rights reserved.               ║
# ╚══════════════════════════════════════════════════════════════════════╝
"""
TensorBridge — call a Python ML framework with host-language idioms.

Marshals host values (tagged vectors, generic lists, string-keyed maps,
arrays, sentinels) to the wrapped runtime and back, builds shape and
typed-list arguments, translates 1-based indices, builds object-keyed
feed mappings and adapts the runtime's context managers to scoped
acquire/release.

Usage::

    import tensorbridge as tb

    tf = tb.Bridge('tensorflow')
    x = tf.call('compat.v1.placeholder', tf.attr('float32', convert=False),
                tb.shape(None, 784))
    feed = tb.dict_of((x, tb.array(batch)))
    tb.with_scope(tf.call('name_scope', 'hidden'), build, alias='scope')
"""
from __future__ import annotations

import logging

__version__ = "0.1.0"
__author__ = "Pictofeed, LLC"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ── Errors ──
from .errors import (
    BridgeError,
    ConversionError,
    ForeignCallError,
    ContextProtocolError,
)

# ── Configuration ──
from .options import config

# ── Element tags ──
from .dtype import (
    dtype,
    float16, float32, float64, half,
    int8, int16, int32, int64, long,
    uint8, string,
)

# ── Host values ──
from .host import (
    Vector, HostList, HostMap, HostArray,
    NULL, UNSET, TRUE, FALSE, is_null,
    vector, integer, double, logical, character, tuple_of, array,
)
from .handle import ForeignHandle

# ── Conversion helpers ──
from .marshal import to_runtime, from_runtime
from .shape import TypedList, shape, typed_list
from .index import (
    as_zero_based, as_one_based,
    span, as_slice, all_dims, extract,
)
from .feed import IdentityDict, dict_of
from .scope import ScopeGuard, acquire, with_scope

# ── Proxy ──
from .bridge import Bridge, FrameworkAPI

__all__ = [
    "__version__",
    "__author__",

    # Errors
    'BridgeError', 'ConversionError', 'ForeignCallError', 'ContextProtocolError',
    # Configuration
    'config',
    # Element tags
    'dtype', 'float16', 'float32', 'float64', 'half',
    'int8', 'int16', 'int32', 'int64', 'long', 'uint8', 'string',
    # Host values
    'Vector', 'HostList', 'HostMap', 'HostArray',
    'NULL', 'UNSET', 'TRUE', 'FALSE', 'is_null',
    'vector', 'integer', 'double', 'logical', 'character', 'tuple_of', 'array',
    'ForeignHandle',
    # Conversion helpers
    'to_runtime', 'from_runtime',
    'TypedList', 'shape', 'typed_list',
    'as_zero_based', 'as_one_based', 'span', 'as_slice', 'all_dims', 'extract',
    'IdentityDict', 'dict_of',
    'ScopeGuard', 'acquire', 'with_scope',
    # Proxy
    'Bridge', 'FrameworkAPI',
]
