"""Pytest configuration and shared fixtures for qstep tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A debug-mode fixture so normalization checks run during gate tests
"""

import os

import numpy as np
import pytest
import torch

from qstep.diagnostics import set_debug_enabled, is_debug_enabled


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic torch RNG for measurement tests."""
    generator = torch.Generator()
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function")
def debug_mode():
    """Enable debug mode for the duration of a test."""
    original = is_debug_enabled()
    set_debug_enabled(True)
    try:
        yield
    finally:
        set_debug_enabled(original)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Seed the global generators so stray global draws are reproducible."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())
