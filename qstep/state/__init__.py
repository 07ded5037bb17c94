"""Qubit state records."""

from .store import Qubit, QubitStore

__all__ = ["Qubit", "QubitStore"]
