"""Command that solves the operating point of a small diode circuit."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .circuit import Circuit, CurrentDc, Diode, Resistor
from .op import simulate_op


def example_circuit() -> Circuit:
    """A current source driving two resistors and a diode over three nodes."""
    circuit = Circuit(3, 0)
    circuit.add_component(CurrentDc(anode=2, cathode=0, current=1.0))
    circuit.add_component(Resistor(pin1=0, pin2=1, r=5.0))
    circuit.add_component(Diode(anode=2, cathode=1, i_s=170e-9, n=2.0))
    circuit.add_component(Resistor(pin1=0, pin2=2, r=5.0))
    return circuit


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Simulate the example circuit and print its node voltages."""
    parser = argparse.ArgumentParser(
        prog="vcid-spice", description="Operating point of the example circuit."
    )
    parser.add_argument("--t-vir", type=float, default=0.05, help="scaling factor")
    parser.add_argument(
        "--tolerance", type=float, default=1e-3, help="convergence threshold in volts"
    )
    args = parser.parse_args(argv)

    voltages = simulate_op(example_circuit(), args.t_vir, args.tolerance, None)
    print("Node voltages:")
    for index, voltage in enumerate(voltages):
        print(f"  Node {index}: {voltage:.4f} V")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())