"""Step-by-step execution of a circuit.

The executor never sleeps or schedules anything. A driver (UI timer, CLI
loop, test) calls `step()` at whatever pace it likes; each call runs the
next operation exactly once.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from qstep.circuit.core import Circuit, CircuitOperation
from qstep.engine import GateEngine
from qstep.errors import InvalidOperationInState
from qstep.logging import get_logger

logger = get_logger(__name__)


class ExecutorState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class CircuitExecutor:
    """
    Drives a circuit's operations through a GateEngine in order.

    States: IDLE -> RUNNING -> COMPLETED, with RUNNING <-> PAUSED.
    `reset()` returns to IDLE from anywhere.
    """

    def __init__(self, circuit: Circuit) -> None:
        self.circuit = circuit
        self.engine = GateEngine(circuit.qubits)
        self._state = ExecutorState.IDLE

    @property
    def state(self) -> ExecutorState:
        return self._state

    @property
    def current_step(self) -> int:
        return self.circuit.current_step

    @property
    def remaining(self) -> int:
        return len(self.circuit) - self.circuit.current_step

    @property
    def is_running(self) -> bool:
        return self._state is ExecutorState.RUNNING

    @property
    def is_completed(self) -> bool:
        return self._state is ExecutorState.COMPLETED

    def _transition(self, new_state: ExecutorState) -> None:
        logger.info("executor %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def start(self) -> None:
        """
        Begin a run from the first operation.

        Allowed from IDLE or COMPLETED. Restarting a completed run rewinds
        the cursor but keeps qubit state; call `reset()` first for a
        fresh run.
        """
        if self._state not in (ExecutorState.IDLE, ExecutorState.COMPLETED):
            raise InvalidOperationInState("start", self._state)
        self.circuit._rewind()
        self._transition(ExecutorState.RUNNING)
        if len(self.circuit) == 0:
            self._transition(ExecutorState.COMPLETED)

    def step(self) -> CircuitOperation:
        """
        Apply the next operation and advance the cursor.

        Returns
        -------
        CircuitOperation
            The operation that was applied.

        Raises
        ------
        InvalidOperationInState
            If the executor is not RUNNING.
        """
        if self._state is not ExecutorState.RUNNING:
            raise InvalidOperationInState("step", self._state)

        op = self.circuit._advance()
        self.engine.apply(op.gate, op.targets)
        logger.debug(
            "step %d/%d: %s %s",
            self.circuit.current_step,
            len(self.circuit),
            op.gate.id,
            ", ".join(op.targets),
        )

        if self.circuit.current_step >= len(self.circuit):
            self._transition(ExecutorState.COMPLETED)
        return op

    def run(self) -> List[CircuitOperation]:
        """Start unless already running, then step until the circuit completes."""
        if self._state is ExecutorState.PAUSED:
            raise InvalidOperationInState("run", self._state)
        if self._state is not ExecutorState.RUNNING:
            self.start()
        applied = []
        while self._state is ExecutorState.RUNNING:
            applied.append(self.step())
        return applied

    def pause(self) -> None:
        if self._state is not ExecutorState.RUNNING:
            raise InvalidOperationInState("pause", self._state)
        self._transition(ExecutorState.PAUSED)

    def resume(self) -> None:
        if self._state is not ExecutorState.PAUSED:
            raise InvalidOperationInState("resume", self._state)
        self._transition(ExecutorState.RUNNING)

    def reset(self) -> None:
        """Return qubits to |0⟩, clear measurements, rewind, and go IDLE."""
        self.circuit.reset_state()
        self._transition(ExecutorState.IDLE)
