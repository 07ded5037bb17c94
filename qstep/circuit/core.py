"""Circuit definition: qubits, an ordered operation list, and a measurement log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from qstep.errors import ArityMismatch
from qstep.gates.registry import ControlledNotGate, Gate, GateRegistry, default_registry
from qstep.logging import get_logger
from qstep.measurement.record import MeasurementRecord
from qstep.state.store import QubitStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class CircuitOperation:
    """
    A single gate application in a circuit.

    Attributes
    ----------
    gate:
        The gate to apply.
    targets:
        Qubit ids; (control, target) for two-qubit gates.
    step:
        Zero-based position in the circuit's execution order.
    """

    gate: Gate
    targets: Tuple[str, ...]
    step: int


class Circuit:
    """
    Qubits plus the ordered gate operations that act on them.

    Operations are validated when they are added, so a circuit that builds
    will also execute. `current_step` is the executor's cursor: 0 before
    the first operation, len(circuit) once every operation has run.
    """

    def __init__(
        self,
        n_qubits: int,
        registry: Optional[GateRegistry] = None,
        qubit_ids: Optional[Sequence[str]] = None,
    ) -> None:
        """Create a circuit of `n_qubits` qubits in the ground state."""
        self._qubits = QubitStore.initialize(n_qubits, ids=qubit_ids)
        self._registry = registry if registry is not None else default_registry()
        self._ops: List[CircuitOperation] = []
        self._measurements: List[MeasurementRecord] = []
        self._current_step = 0

    @property
    def qubits(self) -> QubitStore:
        return self._qubits

    @property
    def current_step(self) -> int:
        """Index of the next operation to run. Only an executor moves it."""
        return self._current_step

    @property
    def registry(self) -> GateRegistry:
        return self._registry

    @property
    def n_qubits(self) -> int:
        return len(self._qubits)

    @property
    def operations(self) -> Tuple[CircuitOperation, ...]:
        """Return a read-only tuple of all operations."""
        return tuple(self._ops)

    @property
    def measurements(self) -> Tuple[MeasurementRecord, ...]:
        """Return a read-only tuple of the measurement log."""
        return tuple(self._measurements)

    def add_gate(self, gate_id: str, targets: Sequence[str]) -> CircuitOperation:
        """
        Append a gate application to the circuit.

        Parameters
        ----------
        gate_id:
            Registry id, name or symbol, e.g. "hadamard", "H" or "cnot".
        targets:
            Qubit ids. One for single-qubit gates, (control, target) for CNOT.

        Raises
        ------
        UnknownGate
            If the gate is not registered.
        ArityMismatch
            If the number of targets does not match the gate.
        UnknownQubit
            If a target id is not in this circuit.
        ValueError
            If the same qubit is named twice.
        """
        gate = self._registry.lookup(gate_id)
        t_tuple = tuple(str(t) for t in targets)

        if len(t_tuple) != gate.arity.n_targets:
            raise ArityMismatch(gate.id, gate.arity.n_targets, len(t_tuple))
        for t in t_tuple:
            self._qubits.index_of(t)
        if len(set(t_tuple)) != len(t_tuple):
            raise ValueError(f"Gate {gate.id!r} targets repeat a qubit: {t_tuple}.")

        op = CircuitOperation(gate=gate, targets=t_tuple, step=len(self._ops))
        self._ops.append(op)
        logger.debug("added step %d: %s %s", op.step, gate.id, ", ".join(t_tuple))
        return op

    def record_measurement(self, record: MeasurementRecord) -> None:
        """Append a record to the measurement log."""
        self._qubits.index_of(record.qubit_id)
        self._measurements.append(record)

    def reset_state(self) -> None:
        """Return qubits to |0⟩, clear measurements and rewind the cursor.

        Operations are kept.
        """
        self._qubits.reset()
        self._measurements.clear()
        self._rewind()

    def _rewind(self) -> None:
        self._current_step = 0

    def _advance(self) -> CircuitOperation:
        """Return the operation under the cursor and move past it."""
        if self._current_step >= len(self._ops):
            raise IndexError(
                f"Cursor is at step {self._current_step} of {len(self._ops)}; "
                "no operation left to run."
            )
        op = self._ops[self._current_step]
        self._current_step += 1
        return op

    def __len__(self) -> int:
        return len(self._ops)

    def gate_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping gate ids to their counts."""
        counts: Dict[str, int] = {}
        for op in self._ops:
            counts[op.gate.id] = counts.get(op.gate.id, 0) + 1
        return counts

    def depth(self) -> int:
        """
        Number of layers if operations on disjoint qubits shared a layer.

        Execution itself is always one operation per step.
        """
        qubit_layer = [0] * self.n_qubits
        max_layer = 0

        for op in self._ops:
            indices = [self._qubits.index_of(t) for t in op.targets]
            layer = max(qubit_layer[i] for i in indices) + 1
            for i in indices:
                qubit_layer[i] = layer
            max_layer = max(max_layer, layer)

        return max_layer

    def summary(self) -> Dict[str, object]:
        """Status-bar numbers for a driver: progress, qubits, measurements."""
        return {
            "current_step": self.current_step,
            "total_steps": len(self._ops),
            "n_qubits": self.n_qubits,
            "n_measurements": len(self._measurements),
            "gate_counts": self.gate_counts(),
        }

    def to_text_diagram(self) -> str:
        """
        Return a simple ASCII diagram of the circuit.

        Each qubit is a horizontal wire and each operation one column.
        CNOT draws '●' on the control and '⊕' on the target. While
        operations remain, a last row puts '^' under the next column to run.
        """
        ids = self._qubits.ids
        width = max(len(q) for q in ids)
        wires: Dict[str, List[str]] = {q: [] for q in ids}

        for op in self._ops:
            for q in ids:
                wires[q].append("───")
            if isinstance(op.gate, ControlledNotGate):
                control, target = op.targets
                wires[control][-1] = "─●─"
                wires[target][-1] = "─⊕─"
            else:
                wires[op.targets[0]][-1] = f"─{op.gate.symbol[0]}─"

        lines = [f"{q.ljust(width)}: " + "".join(wires[q]) for q in ids]
        if self.current_step < len(self._ops):
            lines.append(" " * (width + 2) + "   " * self.current_step + " ^")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Circuit(n_qubits={self.n_qubits}, operations={len(self._ops)}, "
            f"current_step={self.current_step})"
        )


def initialize(qubit_count: int, registry: Optional[GateRegistry] = None) -> Circuit:
    """Create an empty circuit with `qubit_count` ground-state qubits."""
    return Circuit(qubit_count, registry=registry)


def sample_circuit(registry: Optional[GateRegistry] = None) -> Circuit:
    """
    Build the four-qubit demo circuit: two Bell-style pairs, then X on q1.

    [H(q0), CNOT(q0, q1), H(q2), CNOT(q2, q3), X(q1)]
    """
    circuit = Circuit(4, registry=registry)
    circuit.add_gate("hadamard", ["q0"])
    circuit.add_gate("cnot", ["q0", "q1"])
    circuit.add_gate("hadamard", ["q2"])
    circuit.add_gate("cnot", ["q2", "q3"])
    circuit.add_gate("pauli-x", ["q1"])
    return circuit
