"""qstep - a step-driven toy qubit circuit simulator.

Qubits are pairs of real amplitudes, CNOT is a threshold flip that records
an entanglement link, and measurement samples a bit and collapses the qubit.
"""

__version__ = "0.1.0"

from .circuit import (
    Circuit,
    CircuitExecutor,
    CircuitOperation,
    ExecutorState,
    initialize,
    sample_circuit,
)
from .config import PlaybackConfig
from .diagnostics import (
    assert_normalized,
    debug_context,
    is_debug_enabled,
    is_normalized,
    qubit_norm,
    set_debug_enabled,
)
from .engine import GateEngine, apply_gate
from .errors import (
    ArityMismatch,
    InvalidOperationInState,
    InvalidOperationsInState,
    QStepError,
    UnknownGate,
    UnknownQubit,
)
from .gates import (
    Arity,
    ControlledNotGate,
    Gate,
    GateRegistry,
    SingleQubitGate,
    default_registry,
    lookup,
)
from .logging import configure_logging, get_logger, set_log_level
from .measurement import MeasurementRecord, measure, measure_all, outcome_probabilities
from .sampling import counts_to_probs, measurement_counts, results_bitstring
from .state import Qubit, QubitStore

__all__ = [
    "__version__",
    # Circuit
    "Circuit",
    "CircuitOperation",
    "CircuitExecutor",
    "ExecutorState",
    "initialize",
    "sample_circuit",
    # Gates
    "Arity",
    "Gate",
    "SingleQubitGate",
    "ControlledNotGate",
    "GateRegistry",
    "default_registry",
    "lookup",
    # State and engine
    "Qubit",
    "QubitStore",
    "GateEngine",
    "apply_gate",
    # Measurement
    "MeasurementRecord",
    "measure",
    "measure_all",
    "outcome_probabilities",
    "measurement_counts",
    "counts_to_probs",
    "results_bitstring",
    # Errors
    "QStepError",
    "UnknownGate",
    "ArityMismatch",
    "UnknownQubit",
    "InvalidOperationInState",
    "InvalidOperationsInState",
    # Config, diagnostics, logging
    "PlaybackConfig",
    "qubit_norm",
    "is_normalized",
    "assert_normalized",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
