"""Circuit definition and step-wise execution."""

from .core import Circuit, CircuitOperation, initialize, sample_circuit
from .executor import CircuitExecutor, ExecutorState

__all__ = [
    "Circuit",
    "CircuitOperation",
    "CircuitExecutor",
    "ExecutorState",
    "initialize",
    "sample_circuit",
]
