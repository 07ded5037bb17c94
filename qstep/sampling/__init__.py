"""Summaries of measurement outcomes."""

from .hist import counts_to_probs, measurement_counts, results_bitstring

__all__ = ["measurement_counts", "counts_to_probs", "results_bitstring"]
