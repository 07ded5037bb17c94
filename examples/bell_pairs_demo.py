"""Bell-pairs demo: step the four-qubit sample circuit and measure it.

Prints the circuit diagram and qubit probabilities after every step, then
measures all qubits. Pass --realtime to pace the steps like the visualizer
does; by default the demo runs without waiting.
"""

from __future__ import annotations

import argparse
import time

import torch

import qstep
from qstep.config import PlaybackConfig


def print_qubits(circuit: qstep.Circuit) -> None:
    for row in circuit.qubits.snapshot():
        links = ",".join(row["entangled_with"]) or "-"
        flag = "*" if row["is_active"] else " "
        print(
            f"  {flag}{row['id']}: |0⟩ {row['p0'] * 100:5.1f}%  "
            f"|1⟩ {row['p1'] * 100:5.1f}%  entangled: {links}"
        )


def main() -> None:
    """Run the sample circuit step by step."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=0, help="measurement RNG seed")
    parser.add_argument("--speed", type=float, default=1.0, help="playback speed (0.5-3.0)")
    parser.add_argument("--realtime", action="store_true", help="sleep between steps")
    args = parser.parse_args()

    config = PlaybackConfig(speed=args.speed)
    generator = torch.Generator()
    generator.manual_seed(args.seed)

    circuit = qstep.sample_circuit()
    executor = qstep.CircuitExecutor(circuit)

    print(circuit.to_text_diagram())
    print(f"Step interval: {config.step_interval:.2f}s")

    executor.start()
    while executor.is_running:
        op = executor.step()
        print(f"Step {circuit.current_step}/{len(circuit)}: {op.gate.name} on {', '.join(op.targets)}")
        print_qubits(circuit)
        circuit.qubits.clear_all_active()
        if args.realtime:
            time.sleep(config.step_interval)

    qstep.measure_all(circuit, generator=generator)
    for record in circuit.measurements:
        print(f"  {record.qubit_id} -> {record.result} (p={record.probability * 100:.1f}%)")
    print(f"Measured bits: {qstep.results_bitstring(circuit.measurements, circuit.qubits.ids)}")


if __name__ == "__main__":
    main()
