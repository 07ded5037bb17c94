"""Tests for measurement count summaries."""

from __future__ import annotations

import pytest

from qstep.measurement import MeasurementRecord
from qstep.sampling import counts_to_probs, measurement_counts, results_bitstring


RECORDS = [
    MeasurementRecord("q0", 0, 0.5),
    MeasurementRecord("q1", 1, 0.5),
    MeasurementRecord("q0", 1, 0.5),
    MeasurementRecord("q0", 1, 1.0),
]


def test_measurement_counts_all_and_filtered() -> None:
    assert measurement_counts(RECORDS) == {"0": 1, "1": 3}
    assert measurement_counts(RECORDS, qubit_id="q0") == {"0": 1, "1": 2}
    assert measurement_counts([], qubit_id="q0") == {"0": 0, "1": 0}


def test_counts_to_probs() -> None:
    probs = counts_to_probs({"0": 1, "1": 3})
    assert probs == pytest.approx({"0": 0.25, "1": 0.75})
    with pytest.raises(ValueError, match="positive"):
        counts_to_probs({"0": 0, "1": 0})


def test_results_bitstring_uses_latest_outcome() -> None:
    assert results_bitstring(RECORDS, ["q0", "q1", "q2"]) == "11?"
