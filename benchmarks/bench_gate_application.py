"""Benchmark gate application and circuit stepping."""

import time
from typing import Dict

import qstep
from qstep.engine import GateEngine
from qstep.state import QubitStore


def benchmark_gate_application(n_qubits: int, n_gates: int = 10000) -> Dict[str, float]:
    """Benchmark raw engine throughput.

    Args:
        n_qubits: Number of qubits.
        n_gates: Number of gates to apply.

    Returns:
        Dictionary with timing results.
    """
    store = QubitStore.initialize(n_qubits)
    engine = GateEngine(store)
    ids = store.ids
    gates = [qstep.lookup(g) for g in ("H", "X", "Y", "Z")]
    cnot = qstep.lookup("cnot")

    # Warmup
    for _ in range(10):
        engine.apply(gates[0], [ids[0]])

    start = time.perf_counter()
    for i in range(n_gates):
        if n_qubits > 1 and i % 5 == 4:
            engine.apply(cnot, [ids[i % n_qubits], ids[(i + 1) % n_qubits]])
        else:
            engine.apply(gates[i % len(gates)], [ids[i % n_qubits]])
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_qubits": n_qubits,
        "n_gates": n_gates,
        "total_time_s": total_time,
        "time_per_gate_us": total_time / n_gates * 1e6,
    }


def benchmark_circuit_run(n_qubits: int, depth: int = 100) -> Dict[str, float]:
    """Benchmark building and stepping a layered circuit to completion."""
    circuit = qstep.initialize(n_qubits)
    ids = circuit.qubits.ids
    for layer in range(depth):
        for q in ids:
            circuit.add_gate("H", [q])
        for a, b in zip(ids[layer % 2::2], ids[layer % 2 + 1::2]):
            circuit.add_gate("cnot", [a, b])

    executor = qstep.CircuitExecutor(circuit)
    start = time.perf_counter()
    executor.run()
    end = time.perf_counter()

    return {
        "n_qubits": n_qubits,
        "n_ops": len(circuit),
        "total_time_s": end - start,
    }


if __name__ == "__main__":
    print("=" * 60)
    print("Gate application benchmark")
    print("=" * 60)
    for n in (1, 4, 16):
        r = benchmark_gate_application(n)
        print(f"n_qubits={n:3d}: {r['time_per_gate_us']:8.2f} us/gate")
    print()
    for n in (4, 16):
        r = benchmark_circuit_run(n)
        print(f"n_qubits={n:3d}, ops={r['n_ops']:6d}: {r['total_time_s']:.3f} s")
