"""Switch for the gate engine's normalization checks.

With debug mode on, `GateEngine.apply` verifies after every gate that each
qubit it touched still has α² + β² within 1e-6 of 1, and raises ValueError
naming the qubit if not. The flag starts from the QSTEP_DEBUG environment
variable ("1", "true", "yes" or "on") and is process-wide.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "QSTEP_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """Return True when the engine checks qubit norms after each gate."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the post-gate normalization check on or off for every engine.

    Useful when registering custom gates: a non-orthogonal matrix then
    fails on the first step that uses it instead of silently drifting
    probabilities away from 1.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the normalization check forced on (or off).

    The previous setting is restored on exit, even if the block raises.

    Example
    -------
    >>> with debug_context():
    ...     executor.run()  # ValueError if a gate denormalizes a qubit
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
