"""Exception types raised by the qstep simulator."""

from __future__ import annotations

from typing import Sequence


class QStepError(Exception):
    """Base class for all simulator errors."""


class UnknownGate(QStepError, ValueError):
    """Raised when a gate id is not present in a registry."""

    def __init__(self, gate_id: str, known: Sequence[str] = ()) -> None:
        self.gate_id = gate_id
        msg = f"Unknown gate {gate_id!r}."
        if known:
            msg += f" Registered gates: {', '.join(known)}."
        super().__init__(msg)


class ArityMismatch(QStepError, ValueError):
    """Raised when a gate is given the wrong number of target qubits."""

    def __init__(self, gate_id: str, expected: int, got: int) -> None:
        self.gate_id = gate_id
        self.expected = expected
        self.got = got
        super().__init__(
            f"Gate {gate_id!r} acts on {expected} qubit(s), got {got} target(s)."
        )


class UnknownQubit(QStepError, ValueError):
    """Raised when a qubit id is not present in the circuit."""

    def __init__(self, qubit_id: str) -> None:
        self.qubit_id = qubit_id
        super().__init__(f"Unknown qubit {qubit_id!r}.")


class InvalidOperationInState(QStepError, RuntimeError):
    """Raised when an executor operation is not allowed in its current state."""

    def __init__(self, operation: str, state: object) -> None:
        self.operation = operation
        self.state = state
        name = getattr(state, "value", state)
        super().__init__(f"Cannot call {operation}() while executor is {name}.")


InvalidOperationsInState = InvalidOperationInState
