"""Standard single-qubit gate matrices for the real-amplitude model.

Every qubit is a pair of real amplitudes, so every matrix here is a real
2x2 tensor. Gates whose textbook form is complex (Y, S) are given their
closest real counterpart.
"""

from __future__ import annotations

import math

import torch

DEFAULT_DTYPE = torch.float64


def I(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Identity gate (single-qubit).

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the identity gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    return torch.eye(2, dtype=dtype, device=device)


def X(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-X gate (bit-flip, NOT gate). Swaps the |0⟩ and |1⟩ amplitudes.

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the X gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    return torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Y(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-Y gate in real form.

    The textbook Y is [[0, -i], [i, 0]] = i·[[0, -1], [1, 0]]. Dropping the
    global factor i leaves a real rotation with the same measurement
    statistics.

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the Y gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    return torch.tensor([[0.0, -1.0], [1.0, 0.0]], dtype=dtype, device=device)


def Z(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Pauli-Z gate (phase-flip). Negates the |1⟩ amplitude.

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the Z gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    return torch.tensor([[1.0, 0.0], [0.0, -1.0]], dtype=dtype, device=device)


def H(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Hadamard gate. Takes |0⟩ to the equal-weight superposition.

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the H gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    sqrt2_inv = 1.0 / math.sqrt(2.0)
    return torch.tensor(
        [[sqrt2_inv, sqrt2_inv], [sqrt2_inv, -sqrt2_inv]], dtype=dtype, device=device
    )


def S(dtype: torch.dtype | None = None, device: torch.device | None = None) -> torch.Tensor:
    """
    Phase gate (S, √Z) projected onto real amplitudes.

    S multiplies the |1⟩ amplitude by e^{iπ/2}. A real amplitude can only
    carry the magnitude of that factor, which is 1, so on amplitudes this
    acts as the identity. Probabilities are unchanged, exactly as for the
    complex gate.

    Args:
        dtype: Real dtype for the gate matrix. Defaults to torch.float64.
        device: PyTorch device. Defaults to torch.device("cpu").

    Returns:
        A (2, 2) real tensor representing the S gate.
    """
    if dtype is None:
        dtype = DEFAULT_DTYPE
    if device is None:
        device = torch.device("cpu")

    return torch.tensor([[1.0, 0.0], [0.0, 1.0]], dtype=dtype, device=device)


def is_orthogonal(matrix: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check if a real matrix is orthogonal within a given tolerance.

    A real matrix M is orthogonal if MᵀM = I. Orthogonal gates keep
    α² + β² = 1, which is the only normalization guarantee the engine has.

    Args:
        matrix: Tensor of shape (n, n).
        atol: Absolute tolerance for the check.

    Returns:
        True if the matrix is orthogonal (within tolerance), False otherwise.
    """
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False

    product = torch.matmul(matrix.transpose(0, 1), matrix)
    identity = torch.eye(matrix.shape[0], dtype=matrix.dtype, device=matrix.device)
    return bool(torch.all(torch.abs(product - identity) < atol).item())
