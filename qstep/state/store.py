"""Qubit records and the ordered store that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

import torch

from qstep.errors import UnknownQubit
from qstep.gates.standard import DEFAULT_DTYPE


@dataclass
class Qubit:
    """
    A simulated qubit: two real amplitudes plus bookkeeping.

    Attributes
    ----------
    id:
        Identifier, unique within a circuit.
    amplitude_zero, amplitude_one:
        Real weights of |0⟩ and |1⟩. Their squares are the outcome
        probabilities.
    phase:
        Carried alongside the amplitudes; no gate reads or writes it.
    entangled_with:
        Ids of qubits linked to this one by a two-qubit gate.
    is_active:
        Set when a gate touches the qubit; a renderer clears it after
        flashing the qubit.
    """

    id: str
    amplitude_zero: float = 1.0
    amplitude_one: float = 0.0
    phase: float = 0.0
    entangled_with: Set[str] = field(default_factory=set)
    is_active: bool = False

    @property
    def probabilities(self) -> Tuple[float, float]:
        """Return (p0, p1) = (α², β²)."""
        return self.amplitude_zero ** 2, self.amplitude_one ** 2

    @property
    def amplitudes(self) -> torch.Tensor:
        """Return the amplitude pair as a (2,) float64 tensor."""
        return torch.tensor([self.amplitude_zero, self.amplitude_one], dtype=DEFAULT_DTYPE)

    def to_ground(self) -> None:
        self.amplitude_zero = 1.0
        self.amplitude_one = 0.0
        self.phase = 0.0
        self.entangled_with.clear()
        self.is_active = False


class QubitStore:
    """
    Ordered collection of qubits addressed by id.

    The store does no normalization checks; keeping α² + β² = 1 is the
    job of whoever writes amplitudes.
    """

    def __init__(self, qubits: Sequence[Qubit]) -> None:
        self._qubits: List[Qubit] = list(qubits)
        self._index: Dict[str, int] = {}
        for i, q in enumerate(self._qubits):
            if q.id in self._index:
                raise ValueError(f"Duplicate qubit id {q.id!r}.")
            self._index[q.id] = i

    @classmethod
    def initialize(cls, n_qubits: int, ids: Optional[Sequence[str]] = None) -> "QubitStore":
        """
        Create `n_qubits` qubits in the ground state |0⟩.

        Qubits are named q0, q1, ... unless explicit `ids` are given.
        """
        if n_qubits < 1:
            raise ValueError(f"n_qubits must be >= 1, got {n_qubits}")
        if ids is None:
            ids = [f"q{i}" for i in range(n_qubits)]
        elif len(ids) != n_qubits:
            raise ValueError(f"Expected {n_qubits} qubit ids, got {len(ids)}.")
        return cls([Qubit(id=str(qid)) for qid in ids])

    def get(self, qubit_id: str) -> Qubit:
        idx = self._index.get(qubit_id)
        if idx is None:
            raise UnknownQubit(qubit_id)
        return self._qubits[idx]

    def index_of(self, qubit_id: str) -> int:
        """Return the position of a qubit in store order."""
        if qubit_id not in self._index:
            raise UnknownQubit(qubit_id)
        return self._index[qubit_id]

    def set(self, qubit_id: str, amplitude_zero: float, amplitude_one: float) -> None:
        """Overwrite a qubit's amplitudes."""
        qubit = self.get(qubit_id)
        qubit.amplitude_zero = float(amplitude_zero)
        qubit.amplitude_one = float(amplitude_one)

    def mark_active(self, qubit_id: str) -> None:
        self.get(qubit_id).is_active = True

    def clear_active(self, qubit_id: str) -> None:
        self.get(qubit_id).is_active = False

    def clear_all_active(self) -> None:
        for q in self._qubits:
            q.is_active = False

    def add_entanglement(self, id_a: str, id_b: str) -> None:
        """Record a symmetric entanglement link between two qubits."""
        if id_a == id_b:
            raise ValueError(f"Cannot entangle qubit {id_a!r} with itself.")
        a = self.get(id_a)
        b = self.get(id_b)
        a.entangled_with.add(id_b)
        b.entangled_with.add(id_a)

    def reset(self) -> None:
        """Return every qubit to the ground state and drop all links."""
        for q in self._qubits:
            q.to_ground()

    def snapshot(self) -> List[dict]:
        """
        Return a plain-data copy of every qubit, in store order.

        Renderers poll this instead of holding references to live qubits.
        """
        out = []
        for q in self._qubits:
            p0, p1 = q.probabilities
            out.append(
                {
                    "id": q.id,
                    "amplitude_zero": q.amplitude_zero,
                    "amplitude_one": q.amplitude_one,
                    "phase": q.phase,
                    "p0": p0,
                    "p1": p1,
                    "entangled_with": sorted(q.entangled_with),
                    "is_active": q.is_active,
                }
            )
        return out

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(q.id for q in self._qubits)

    def __contains__(self, qubit_id: object) -> bool:
        return qubit_id in self._index

    def __iter__(self) -> Iterator[Qubit]:
        return iter(self._qubits)

    def __len__(self) -> int:
        return len(self._qubits)

    def __repr__(self) -> str:
        return f"QubitStore({list(self.ids)!r})"


def initialize(n_qubits: int) -> QubitStore:
    """Create a store of `n_qubits` ground-state qubits."""
    return QubitStore.initialize(n_qubits)
