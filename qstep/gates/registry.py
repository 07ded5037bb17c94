"""Gate definitions and the immutable gate catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Tuple, Union

import torch

from qstep.errors import UnknownGate
from qstep.gates import standard as stdgates
from qstep.logging import get_logger

logger = get_logger(__name__)


class Arity(Enum):
    """Number of target qubits a gate acts on."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def n_targets(self) -> int:
        return 1 if self is Arity.SINGLE else 2


class SingleQubitGate:
    """
    A gate that transforms one qubit through a real 2x2 matrix.

    Instances are immutable: attributes cannot be reassigned, and `matrix`
    returns a fresh copy on every access, so a gate shared through the
    default registry cannot be altered by any caller.

    Attributes
    ----------
    id:
        Registry key, e.g. "hadamard".
    name:
        Display name, e.g. "Hadamard".
    symbol:
        Short label drawn on the gate box, e.g. "H".
    matrix:
        Real (2, 2) float64 tensor. Row 0 produces the new |0⟩ amplitude,
        row 1 the new |1⟩ amplitude.
    """

    __slots__ = ("id", "name", "symbol", "description", "aliases", "_matrix")

    def __init__(
        self,
        id: str,
        name: str,
        symbol: str,
        matrix: torch.Tensor,
        description: str = "",
        aliases: Tuple[str, ...] = (),
    ) -> None:
        if tuple(matrix.shape) != (2, 2):
            raise ValueError(
                f"Gate {id!r} needs a (2, 2) matrix, got shape {tuple(matrix.shape)}."
            )
        if matrix.is_complex():
            raise ValueError(f"Gate {id!r} matrix must be real-valued.")

        setattr_ = object.__setattr__
        setattr_(self, "id", id)
        setattr_(self, "name", name)
        setattr_(self, "symbol", symbol)
        setattr_(self, "description", description)
        setattr_(self, "aliases", tuple(aliases))
        setattr_(self, "_matrix", matrix.detach().to(dtype=stdgates.DEFAULT_DTYPE).clone())

    def __setattr__(self, key: str, value: object) -> None:
        raise AttributeError(f"SingleQubitGate is immutable; cannot set {key!r}.")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"SingleQubitGate is immutable; cannot delete {key!r}.")

    @property
    def matrix(self) -> torch.Tensor:
        """Return a copy of the gate matrix."""
        return self._matrix.clone()

    @property
    def arity(self) -> Arity:
        return Arity.SINGLE

    def __repr__(self) -> str:
        return (
            f"SingleQubitGate(id={self.id!r}, name={self.name!r}, "
            f"symbol={self.symbol!r}, matrix={self._matrix.tolist()!r})"
        )


@dataclass(frozen=True)
class ControlledNotGate:
    """
    Two-qubit controlled-NOT with threshold semantics.

    Targets are ordered (control, target). The target's amplitudes are
    swapped when |control.amplitude_one| exceeds `threshold`; the pair is
    recorded as entangled either way. There is no 4x4 matrix: the joint
    state is never formed.
    """

    id: str = "cnot"
    name: str = "CNOT"
    symbol: str = "⊕"
    description: str = "Controlled NOT - flips target if control is |1⟩"
    aliases: Tuple[str, ...] = ("CX",)
    threshold: float = 0.5

    @property
    def arity(self) -> Arity:
        return Arity.DOUBLE


Gate = Union[SingleQubitGate, ControlledNotGate]


class GateRegistry:
    """
    Read-only catalog of gates keyed by id.

    Lookups are case-insensitive and also resolve a gate's symbol and
    aliases, so "hadamard", "Hadamard" and "H" all name the same gate.
    """

    def __init__(self, gates: Iterable[Gate]) -> None:
        self._gates: Dict[str, Gate] = {}
        self._keys: Dict[str, str] = {}

        for gate in gates:
            key = gate.id.lower()
            if key in self._gates:
                raise ValueError(f"Duplicate gate id {gate.id!r}.")
            self._gates[key] = gate

            if isinstance(gate, SingleQubitGate) and not stdgates.is_orthogonal(gate.matrix):
                logger.warning(
                    "Gate %r has a non-orthogonal matrix; qubits it touches "
                    "will drift from unit norm.",
                    gate.id,
                )

        # Ids win over symbols/aliases when they collide.
        for key in self._gates:
            self._keys[key] = key
        for key, gate in self._gates.items():
            for alt in (gate.symbol, gate.name, *gate.aliases):
                self._keys.setdefault(alt.lower(), key)

    def lookup(self, gate_id: str) -> Gate:
        """
        Return the gate registered under `gate_id`.

        Raises
        ------
        UnknownGate
            If no gate matches the id, name, symbol or alias.
        """
        key = self._keys.get(str(gate_id).lower())
        if key is None:
            raise UnknownGate(gate_id, known=self.ids())
        return self._gates[key]

    def ids(self) -> Tuple[str, ...]:
        return tuple(gate.id for gate in self._gates.values())

    def __contains__(self, gate_id: object) -> bool:
        return isinstance(gate_id, str) and gate_id.lower() in self._keys

    def __iter__(self) -> Iterator[Gate]:
        return iter(self._gates.values())

    def __len__(self) -> int:
        return len(self._gates)

    def __repr__(self) -> str:
        return f"GateRegistry({list(self.ids())!r})"


def standard_gates() -> Tuple[Gate, ...]:
    """Build the standard gate set shipped with the simulator."""
    return (
        SingleQubitGate(
            id="hadamard",
            name="Hadamard",
            symbol="H",
            matrix=stdgates.H(),
            description="Creates superposition - equal probability of |0⟩ and |1⟩",
        ),
        SingleQubitGate(
            id="pauli-x",
            name="Pauli-X",
            symbol="X",
            matrix=stdgates.X(),
            description="Quantum NOT gate - flips |0⟩ to |1⟩ and vice versa",
            aliases=("NOT",),
        ),
        SingleQubitGate(
            id="pauli-y",
            name="Pauli-Y",
            symbol="Y",
            matrix=stdgates.Y(),
            description="Rotation around Y-axis with phase flip",
        ),
        SingleQubitGate(
            id="pauli-z",
            name="Pauli-Z",
            symbol="Z",
            matrix=stdgates.Z(),
            description="Phase flip gate - adds π phase to |1⟩",
        ),
        ControlledNotGate(),
        SingleQubitGate(
            id="phase",
            name="Phase",
            symbol="S",
            matrix=stdgates.S(),
            description="Adds phase rotation to |1⟩ state",
        ),
    )


@lru_cache(maxsize=1)
def default_registry() -> GateRegistry:
    """Return the shared registry of standard gates."""
    return GateRegistry(standard_gates())


def lookup(gate_id: str) -> Gate:
    """Look up a gate in the default registry."""
    return default_registry().lookup(gate_id)
