"""Born-rule measurement with state collapse."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import torch

from qstep.logging import get_logger
from qstep.measurement.record import MeasurementRecord
from qstep.state.store import Qubit

if TYPE_CHECKING:
    from qstep.circuit.core import Circuit

logger = get_logger(__name__)


def outcome_probabilities(qubit: Qubit) -> Tuple[float, float]:
    """
    Return the measurement probabilities (p0, p1) of a qubit.

    p0 = α² and p1 = β². They sum to 1 only if the qubit is normalized.
    """
    return qubit.probabilities


def _uniform(generator: Optional[torch.Generator]) -> float:
    if generator is None:
        # Fresh generator so the global torch RNG is never consumed.
        generator = torch.Generator()
        generator.seed()
    return float(torch.rand(1, generator=generator, dtype=torch.float64).item())


def measure(
    circuit: "Circuit",
    qubit_id: str,
    generator: Optional[torch.Generator] = None,
) -> MeasurementRecord:
    """
    Measure one qubit, collapse it, and log the outcome on the circuit.

    A uniform u in [0, 1) is drawn; the outcome is 0 if u < p0, else 1.
    The qubit is then set to (1, 0) or (0, 1) to match, so measuring it
    again returns the same outcome.

    Parameters
    ----------
    circuit:
        Circuit owning the qubit. Measurement is allowed in any executor
        state, including mid-run.
    qubit_id:
        Id of the qubit to measure.
    generator:
        Optional torch.Generator for deterministic sampling. If None, a
        freshly seeded generator is used.

    Returns
    -------
    MeasurementRecord
        The appended record.

    Raises
    ------
    UnknownQubit
        If the qubit is not in the circuit.
    """
    qubit = circuit.qubits.get(qubit_id)
    p0, p1 = outcome_probabilities(qubit)

    u = _uniform(generator)
    result = 0 if u < p0 else 1
    probability = p0 if result == 0 else p1

    if result == 0:
        circuit.qubits.set(qubit_id, 1.0, 0.0)
    else:
        circuit.qubits.set(qubit_id, 0.0, 1.0)

    record = MeasurementRecord(qubit_id=qubit_id, result=result, probability=probability)
    circuit.record_measurement(record)
    logger.debug("measured %s = %d (p=%.6f, u=%.6f)", qubit_id, result, probability, u)
    return record


def measure_all(
    circuit: "Circuit",
    generator: Optional[torch.Generator] = None,
) -> List[MeasurementRecord]:
    """Measure every qubit of the circuit in order."""
    return [measure(circuit, qid, generator=generator) for qid in circuit.qubits.ids]
