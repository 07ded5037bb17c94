"""Diagnostics and debugging utilities for qstep."""

from .core import (
    assert_normalized,
    is_normalized,
    qubit_norm,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "qubit_norm",
    "is_normalized",
    "assert_normalized",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
