"""Tests for the gate application engine."""

import math

import pytest
import torch

from qstep.diagnostics import debug_context
from qstep.engine import GateEngine, apply_gate
from qstep.errors import ArityMismatch, UnknownQubit
from qstep.gates import SingleQubitGate, lookup
from qstep.state.store import initialize

ATOL = 1e-9


@pytest.fixture
def store():
    return initialize(3)


@pytest.fixture
def engine(store):
    return GateEngine(store)


def amps(store, qid):
    q = store.get(qid)
    return q.amplitude_zero, q.amplitude_one


def test_hadamard_creates_equal_superposition(engine, store):
    engine.apply(lookup("hadamard"), ["q0"])
    a, b = amps(store, "q0")
    assert a == pytest.approx(1 / math.sqrt(2), abs=ATOL)
    assert b == pytest.approx(1 / math.sqrt(2), abs=ATOL)
    assert store.get("q0").is_active


def test_hadamard_twice_returns_to_ground(engine, store):
    h = lookup("hadamard")
    engine.apply(h, ["q0"])
    engine.apply(h, ["q0"])
    a, b = amps(store, "q0")
    assert a == pytest.approx(1.0, abs=ATOL)
    assert b == pytest.approx(0.0, abs=ATOL)


@pytest.mark.parametrize("alpha, beta", [(1.0, 0.0), (0.0, 1.0), (0.6, 0.8), (-0.28, 0.96)])
def test_pauli_x_is_an_involution(engine, store, alpha, beta):
    store.set("q1", alpha, beta)
    x = lookup("pauli-x")
    engine.apply(x, ["q1"])
    assert amps(store, "q1") == pytest.approx((beta, alpha))
    engine.apply(x, ["q1"])
    assert amps(store, "q1") == pytest.approx((alpha, beta), abs=ATOL)


def test_pauli_z_negates_one_amplitude(engine, store):
    store.set("q0", 0.6, 0.8)
    engine.apply(lookup("pauli-z"), ["q0"])
    assert amps(store, "q0") == pytest.approx((0.6, -0.8))


def test_pauli_y_real_rotation(engine, store):
    engine.apply(lookup("pauli-y"), ["q0"])
    assert amps(store, "q0") == pytest.approx((0.0, 1.0))


def test_phase_keeps_probabilities(engine, store):
    store.set("q0", 0.6, 0.8)
    engine.apply(lookup("phase"), ["q0"])
    assert store.get("q0").probabilities == pytest.approx((0.36, 0.64))


def test_single_gate_general_matrix(engine, store):
    theta = 0.3
    rot = SingleQubitGate(
        id="ry",
        name="RY",
        symbol="R",
        matrix=torch.tensor(
            [[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]]
        ),
    )
    store.set("q2", 0.6, 0.8)
    engine.apply(rot, ["q2"])
    a0, a1 = math.cos(theta), -math.sin(theta)
    b0, b1 = math.sin(theta), math.cos(theta)
    assert amps(store, "q2") == pytest.approx((a0 * 0.6 + a1 * 0.8, b0 * 0.6 + b1 * 0.8))


def test_single_gate_arity_mismatch(engine, store):
    with pytest.raises(ArityMismatch) as excinfo:
        engine.apply(lookup("hadamard"), ["q0", "q1"])
    assert excinfo.value.expected == 1
    assert excinfo.value.got == 2
    assert amps(store, "q0") == (1.0, 0.0)


def test_cnot_flips_when_control_is_one(engine, store):
    store.set("q0", 0.0, 1.0)
    engine.apply(lookup("cnot"), ["q0", "q1"])
    assert amps(store, "q1") == (0.0, 1.0)
    assert store.get("q1").is_active


def test_cnot_leaves_target_when_control_is_zero(engine, store):
    engine.apply(lookup("cnot"), ["q0", "q1"])
    assert amps(store, "q1") == (1.0, 0.0)
    assert not store.get("q1").is_active


def test_cnot_threshold_is_strict(engine, store):
    store.set("q0", math.sqrt(0.75), 0.5)
    engine.apply(lookup("cnot"), ["q0", "q1"])
    assert amps(store, "q1") == (1.0, 0.0)


def test_cnot_uses_magnitude_of_control(engine, store):
    store.set("q0", 0.0, -1.0)
    engine.apply(lookup("cnot"), ["q0", "q1"])
    assert amps(store, "q1") == (0.0, 1.0)


def test_cnot_after_hadamard_flips(engine, store):
    # 1/sqrt(2) > 0.5, so a superposed control counts as "on".
    engine.apply(lookup("hadamard"), ["q0"])
    engine.apply(lookup("cnot"), ["q0", "q1"])
    assert amps(store, "q1") == (0.0, 1.0)


@pytest.mark.parametrize("control_beta", [0.0, 1.0])
def test_cnot_entangles_symmetrically_regardless_of_flip(engine, store, control_beta):
    store.set("q0", 1.0 - control_beta, control_beta)
    engine.apply(lookup("cnot"), ["q0", "q2"])
    assert "q2" in store.get("q0").entangled_with
    assert "q0" in store.get("q2").entangled_with
    assert store.get("q1").entangled_with == set()


def test_cnot_arity_mismatch(engine):
    with pytest.raises(ArityMismatch):
        engine.apply(lookup("cnot"), ["q0"])


def test_cnot_same_qubit_rejected(engine, store):
    with pytest.raises(ValueError, match="both"):
        engine.apply(lookup("cnot"), ["q0", "q0"])
    assert store.get("q0").entangled_with == set()


def test_unknown_qubit_does_not_mutate(engine, store):
    with pytest.raises(UnknownQubit):
        engine.apply(lookup("cnot"), ["q0", "q9"])
    assert store.get("q0").entangled_with == set()
    with pytest.raises(UnknownQubit):
        engine.apply(lookup("hadamard"), ["zz"])


def test_apply_to_all(engine, store):
    engine.apply_to_all(lookup("hadamard"))
    for q in store:
        assert q.probabilities == pytest.approx((0.5, 0.5))
        assert q.is_active
    with pytest.raises(ArityMismatch):
        engine.apply_to_all(lookup("cnot"))


def test_apply_gate_helper(store):
    apply_gate(store, lookup("pauli-x"), ["q2"])
    assert amps(store, "q2") == (0.0, 1.0)


def test_debug_mode_catches_non_orthogonal_gate(store, debug_mode):
    scale = SingleQubitGate(
        id="scale", name="Scale", symbol="K", matrix=torch.tensor([[2.0, 0.0], [0.0, 1.0]])
    )
    with pytest.raises(ValueError, match="not normalized"):
        GateEngine(store).apply(scale, ["q0"])


def test_without_debug_mode_no_renormalization(store):
    scale = SingleQubitGate(
        id="scale", name="Scale", symbol="K", matrix=torch.tensor([[2.0, 0.0], [0.0, 1.0]])
    )
    with debug_context(False):
        GateEngine(store).apply(scale, ["q0"])
    assert amps(store, "q0") == (2.0, 0.0)


def test_debug_context_checks_touched_qubits_then_restores(store):
    # 0.6 * |1⟩ has norm 0.6, outside the 1e-6 tolerance.
    shrink = SingleQubitGate(
        id="shrink", name="Shrink", symbol="K", matrix=torch.tensor([[0.6, 0.0], [0.0, 0.6]])
    )
    with debug_context(False):
        with pytest.raises(ValueError, match="'q1'"):
            with debug_context(True):
                GateEngine(store).apply(shrink, ["q1"])
        # Restored to off: the same gate now runs unchecked.
        GateEngine(store).apply(shrink, ["q2"])
    assert amps(store, "q2") == pytest.approx((0.6, 0.0))
