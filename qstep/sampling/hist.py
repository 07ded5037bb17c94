"""Counts and frequencies over measurement logs."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Sequence

from qstep.measurement.record import MeasurementRecord


def measurement_counts(
    records: Iterable[MeasurementRecord],
    qubit_id: Optional[str] = None,
) -> Dict[str, int]:
    """
    Count "0" and "1" outcomes in a measurement log.

    Parameters
    ----------
    records:
        Measurement records, e.g. `circuit.measurements`.
    qubit_id:
        If given, only records for this qubit are counted.

    Returns
    -------
    Dict[str, int]
        Mapping with keys "0" and "1".
    """
    counts = {"0": 0, "1": 0}
    for rec in records:
        if qubit_id is not None and rec.qubit_id != qubit_id:
            continue
        counts[str(rec.result)] += 1
    return counts


def counts_to_probs(counts: Mapping[str, int]) -> Dict[str, float]:
    """
    Convert integer counts into a probability distribution.

    Raises
    ------
    ValueError
        If the counts sum to zero.
    """
    total = sum(counts.values())
    if total <= 0:
        raise ValueError("Total count must be positive.")
    return {k: v / float(total) for k, v in counts.items()}


def results_bitstring(
    records: Sequence[MeasurementRecord],
    qubit_ids: Sequence[str],
) -> str:
    """
    Latest outcome of each qubit, in `qubit_ids` order, as a bitstring.

    Qubits that were never measured show as "?".
    """
    latest: Dict[str, int] = {}
    for rec in records:
        latest[rec.qubit_id] = rec.result
    return "".join(str(latest[q]) if q in latest else "?" for q in qubit_ids)
