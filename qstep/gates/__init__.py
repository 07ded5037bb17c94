"""Gate matrices and the gate registry."""

from .registry import (
    Arity,
    ControlledNotGate,
    Gate,
    GateRegistry,
    SingleQubitGate,
    default_registry,
    lookup,
    standard_gates,
)
from .standard import H, I, S, X, Y, Z, is_orthogonal

__all__ = [
    "I",
    "X",
    "Y",
    "Z",
    "H",
    "S",
    "is_orthogonal",
    "Arity",
    "Gate",
    "SingleQubitGate",
    "ControlledNotGate",
    "GateRegistry",
    "default_registry",
    "standard_gates",
    "lookup",
]
