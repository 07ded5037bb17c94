"""Measurement record type."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MeasurementRecord:
    """
    One classical read of a qubit.

    Attributes
    ----------
    qubit_id:
        The measured qubit.
    result:
        Sampled outcome, 0 or 1.
    probability:
        Probability the sampled outcome had at measurement time.
    """

    qubit_id: str
    result: int
    probability: float

    def __post_init__(self) -> None:
        if self.result not in (0, 1):
            raise ValueError(f"result must be 0 or 1, got {self.result!r}.")
