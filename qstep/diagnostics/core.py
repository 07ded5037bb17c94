"""Norm checks for two-amplitude qubit states."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qstep.state.store import Qubit


def qubit_norm(amplitude_zero: float, amplitude_one: float) -> float:
    """
    Return the L2 norm sqrt(α² + β²) of a real amplitude pair.

    Parameters
    ----------
    amplitude_zero:
        Weight of the |0⟩ basis state.
    amplitude_one:
        Weight of the |1⟩ basis state.
    """
    return math.sqrt(amplitude_zero * amplitude_zero + amplitude_one * amplitude_one)


def is_normalized(qubit: "Qubit", atol: float = 1e-9) -> bool:
    """Return True if the qubit's amplitudes have norm 1 within `atol`."""
    norm = qubit_norm(qubit.amplitude_zero, qubit.amplitude_one)
    return math.isfinite(norm) and abs(norm - 1.0) <= atol


def assert_normalized(qubit: "Qubit", atol: float = 1e-9) -> None:
    """
    Assert that a qubit's amplitude pair has norm ~1 within a tolerance.

    Parameters
    ----------
    qubit:
        Qubit record to check.
    atol:
        Absolute tolerance for |norm - 1|.

    Raises
    ------
    ValueError
        If the qubit is not normalized within the tolerance.
    """
    if not is_normalized(qubit, atol=atol):
        norm = qubit_norm(qubit.amplitude_zero, qubit.amplitude_one)
        raise ValueError(
            f"Qubit {qubit.id!r} is not normalized within tolerance {atol}. "
            f"Norm found: {norm}"
        )
