# vcid_spice

A small circuit simulation library. You describe a circuit as numbered nodes
joined by components. The solver then iterates the node voltages until the
DC operating point settles.

It has no dependencies outside the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install .[test]
```

## Components

The components are in `vcid_spice.circuit`. Each is a frozen dataclass:

- `CurrentDc(anode, cathode, current)` is a constant current source between two nodes.
- `Resistor(pin1, pin2, r)` is an ohmic resistor.
- `Diode(anode, cathode, i_s, n)` is an exponential diode. `i_s` is its saturation
  current and `n` its ideality factor. The thermal voltage is fixed at 0.025852 V.
  The voltage across the diode is clamped to ±5 V before the exponential is taken.
- `VoltageDc(anode, cathode, v)` is accepted in a circuit, but the solver ignores it.

`Circuit(nodes_count, ground_node)` holds the components in its `components`
list. Add components to it with `add_component`.

## Usage

```python
from vcid_spice.circuit import Circuit, CurrentDc, Diode, Resistor
from vcid_spice.op import simulate_op

circuit = Circuit(3, 0)  # three nodes, node 0 is ground
circuit.add_component(CurrentDc(anode=2, cathode=0, current=1.0))
circuit.add_component(Resistor(pin1=0, pin2=1, r=5.0))
circuit.add_component(Diode(anode=2, cathode=1, i_s=170e-9, n=2.0))
circuit.add_component(Resistor(pin1=0, pin2=2, r=5.0))

voltages = simulate_op(circuit, 0.05, 1e-3)
for node, voltage in enumerate(voltages):
    print(f"Node {node}: {voltage:.4f} V")
```

`simulate_op(circuit, t_vir, tolerance, initial_voltages=None)` returns a list of
node voltages measured relative to the ground node.

- `t_vir` scales the currents, conductances and diode saturation currents that
  feed each update step.
- `tolerance` is the convergence threshold. The solver stops once the largest
  voltage change in one iteration is smaller than this value.
- `initial_voltages` is an optional starting guess. With `None`, every node
  starts at 0 V.

The solver damps its steps adaptively. If a step makes the error larger, the
solver rolls it back and halves the damping factor. Otherwise it grows the damping
factor by 10%, up to 1.0.

The solver gives up after 10,000 iterations (`vcid_spice.op.MAX_ITERATIONS`) and
returns the voltages it has reached by then. Convergence is logged at INFO level
and a failure to converge at WARNING level, both through the `vcid_spice.op` logger.

`simulate_op` raises an error in these cases:

- `ValueError` if a component refers to a node outside the circuit.
- `ValueError` if the ground node is out of range.
- `ValueError` if fewer initial voltages are given than the circuit has nodes.
- `TypeError` for an object that is not one of the supported components.

`build_roles(circuit, t_vir)` in `vcid_spice.op` returns, for each node, the list
of contributions that the solver works from. You can use it to inspect how the
solver interprets a circuit. The contribution types are defined in `vcid_spice.role`:

- `ConstantCharge` for current sources.
- `Linear` for resistors.
- `Exponential` for diodes.

All three are subclasses of the abstract `Role`. Each provides
`q_vir_impact(voltages, target_node)` and
`delta_v_impact(charges, damper, target_node)`.

## Command line

The `vcid-spice` command solves the example circuit shown above and prints its
node voltages:

```
vcid-spice
vcid-spice --t-vir 0.05 --tolerance 1e-3
```

`--t-vir` defaults to 0.05 and `--tolerance` defaults to 1e-3.

## What it does not do

- Voltage sources are not enforced. A `VoltageDc` in a circuit has no effect on
  the result.
- There is no netlist reader. Circuits are built in Python only.
- The command solves only its built-in example circuit.
- Only the DC operating point is computed. There is no transient or AC analysis.