"""Apply gates to qubits held in a QubitStore.

Single-qubit gates are a real 2x2 matrix-vector product on the target's
amplitude pair. CNOT is procedural: the target's amplitudes are swapped
when the control leans towards |1⟩, and the two qubits are linked in the
entanglement graph on every application.
"""

from __future__ import annotations

from typing import Sequence

import torch

from qstep.diagnostics import assert_normalized, is_debug_enabled
from qstep.errors import ArityMismatch
from qstep.gates.registry import ControlledNotGate, Gate, SingleQubitGate
from qstep.logging import get_logger
from qstep.state.store import QubitStore

logger = get_logger(__name__)


class GateEngine:
    """Applies gates to the qubits of one store."""

    def __init__(self, store: QubitStore) -> None:
        self.store = store

    def apply(self, gate: Gate, targets: Sequence[str]) -> None:
        """
        Apply `gate` to the qubits named in `targets`.

        Parameters
        ----------
        gate:
            A SingleQubitGate or ControlledNotGate.
        targets:
            Qubit ids; one for single-qubit gates, (control, target) for CNOT.

        Raises
        ------
        ArityMismatch
            If the number of targets does not match the gate.
        UnknownQubit
            If a target id is not in the store. Nothing is mutated.
        """
        targets = tuple(targets)
        if len(targets) != gate.arity.n_targets:
            raise ArityMismatch(gate.id, gate.arity.n_targets, len(targets))

        if isinstance(gate, SingleQubitGate):
            self._apply_single(gate, targets[0])
        elif isinstance(gate, ControlledNotGate):
            self._apply_cnot(gate, targets[0], targets[1])
        else:
            raise TypeError(f"Unsupported gate type {type(gate).__name__}.")

        if is_debug_enabled():
            for qid in targets:
                assert_normalized(self.store.get(qid), atol=1e-6)

    def apply_to_all(self, gate: Gate) -> None:
        """Apply a single-qubit gate to every qubit, in store order."""
        if gate.arity.n_targets != 1:
            raise ArityMismatch(gate.id, 1, gate.arity.n_targets)
        for qid in self.store.ids:
            self.apply(gate, [qid])

    def _apply_single(self, gate: SingleQubitGate, qubit_id: str) -> None:
        qubit = self.store.get(qubit_id)
        new = torch.mv(gate.matrix, qubit.amplitudes)
        alpha, beta = new.tolist()

        self.store.set(qubit_id, alpha, beta)
        self.store.mark_active(qubit_id)
        logger.debug("%s on %s -> (%.6f, %.6f)", gate.symbol, qubit_id, alpha, beta)

    def _apply_cnot(self, gate: ControlledNotGate, control_id: str, target_id: str) -> None:
        control = self.store.get(control_id)
        target = self.store.get(target_id)
        if control_id == target_id:
            raise ValueError(f"CNOT control and target are both {control_id!r}.")

        flipped = abs(control.amplitude_one) > gate.threshold
        if flipped:
            self.store.set(target_id, target.amplitude_one, target.amplitude_zero)
            self.store.mark_active(target_id)

        self.store.add_entanglement(control_id, target_id)
        logger.debug(
            "CNOT %s -> %s (%s)", control_id, target_id, "flipped" if flipped else "no flip"
        )


def apply_gate(store: QubitStore, gate: Gate, targets: Sequence[str]) -> None:
    """Apply a gate to qubits of `store` without keeping an engine around."""
    GateEngine(store).apply(gate, targets)
