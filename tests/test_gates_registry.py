"""Tests for the gate registry."""

import logging
import math

import pytest
import torch

from qstep.circuit import CircuitExecutor, initialize
from qstep.errors import UnknownGate
from qstep.gates import (
    Arity,
    ControlledNotGate,
    GateRegistry,
    SingleQubitGate,
    default_registry,
    lookup,
)
from qstep.gates import standard as stdgates


def test_default_registry_contents():
    registry = default_registry()
    assert set(registry.ids()) == {
        "hadamard",
        "pauli-x",
        "pauli-y",
        "pauli-z",
        "cnot",
        "phase",
    }
    assert len(registry) == 6


def test_default_registry_is_shared():
    assert default_registry() is default_registry()


@pytest.mark.parametrize(
    "name, expected_id",
    [
        ("hadamard", "hadamard"),
        ("Hadamard", "hadamard"),
        ("H", "hadamard"),
        ("x", "pauli-x"),
        ("CNOT", "cnot"),
        ("cx", "cnot"),
        ("S", "phase"),
    ],
)
def test_lookup_accepts_ids_names_and_symbols(name, expected_id):
    assert lookup(name).id == expected_id


def test_lookup_unknown_gate_raises():
    with pytest.raises(UnknownGate, match="toffoli") as excinfo:
        lookup("toffoli")
    assert excinfo.value.gate_id == "toffoli"


def test_gate_arity():
    assert lookup("hadamard").arity is Arity.SINGLE
    assert lookup("cnot").arity is Arity.DOUBLE
    assert Arity.SINGLE.n_targets == 1
    assert Arity.DOUBLE.n_targets == 2
    assert Arity.DOUBLE.value == "double"


def test_cnot_is_procedural():
    cnot = lookup("cnot")
    assert isinstance(cnot, ControlledNotGate)
    assert not hasattr(cnot, "matrix")
    assert cnot.threshold == 0.5


def test_gates_are_immutable():
    gate = lookup("hadamard")
    with pytest.raises(AttributeError):
        gate.name = "other"


def test_single_gate_copies_matrix():
    matrix = torch.eye(2, dtype=torch.float64)
    gate = SingleQubitGate(id="ident", name="Identity", symbol="I", matrix=matrix)
    matrix[0, 0] = 5.0
    assert gate.matrix[0, 0].item() == 1.0


def test_returned_matrix_cannot_mutate_registry():
    lookup("hadamard").matrix.mul_(2.0)
    assert torch.equal(lookup("hadamard").matrix, stdgates.H())

    circuit = initialize(1)
    circuit.add_gate("hadamard", ["q0"])
    CircuitExecutor(circuit).run()
    alpha, beta = circuit.qubits.get("q0").amplitudes.tolist()
    assert alpha == pytest.approx(1 / math.sqrt(2))
    assert beta == pytest.approx(1 / math.sqrt(2))


def test_single_gate_rejects_bad_matrices():
    with pytest.raises(ValueError, match=r"\(2, 2\)"):
        SingleQubitGate(id="bad", name="Bad", symbol="B", matrix=torch.eye(4))
    with pytest.raises(ValueError, match="real"):
        SingleQubitGate(
            id="bad", name="Bad", symbol="B", matrix=torch.eye(2, dtype=torch.complex64)
        )


def test_registry_rejects_duplicate_ids():
    gate = SingleQubitGate(id="ident", name="Identity", symbol="I", matrix=torch.eye(2))
    with pytest.raises(ValueError, match="Duplicate"):
        GateRegistry([gate, gate])


def test_registry_warns_on_non_orthogonal(caplog):
    scale = SingleQubitGate(
        id="scale", name="Scale", symbol="K", matrix=torch.tensor([[2.0, 0.0], [0.0, 1.0]])
    )
    logger = logging.getLogger("qstep.gates.registry")
    logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="qstep.gates.registry"):
            registry = GateRegistry([scale])
    finally:
        logger.removeHandler(caplog.handler)
    assert "scale" in registry
    assert any("non-orthogonal" in r.getMessage() for r in caplog.records)


def test_registry_contains_and_iter():
    registry = default_registry()
    assert "hadamard" in registry
    assert "H" in registry
    assert "toffoli" not in registry
    assert 42 not in registry
    assert [g.id for g in registry] == list(registry.ids())
