"""Measurement of qubits with state collapse."""

from .record import MeasurementRecord
from .sampling import measure, measure_all, outcome_probabilities

__all__ = [
    "MeasurementRecord",
    "measure",
    "measure_all",
    "outcome_probabilities",
]
