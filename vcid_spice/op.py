"""Operating-point simulation by iterative relaxation of node voltages."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from .circuit import Circuit, CurrentDc, Diode, Resistor, VoltageDc
from .role import ConstantCharge, Exponential, Linear, Role

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 10_000


def _check_nodes(circuit: Circuit, nodes: Iterable[int]) -> None:
    for node in nodes:
        if not 0 <= node < circuit.nodes_count:
            raise ValueError(
                f"node {node} is out of range for a circuit of {circuit.nodes_count} nodes"
            )


def build_roles(circuit: Circuit, t_vir: float) -> list[list[Role]]:
    """Build, for every node, the roles of the components attached to it."""
    roles: list[list[Role]] = [[] for _ in range(circuit.nodes_count)]
    for component in circuit.components:
        if isinstance(component, VoltageDc):
            # Voltage sources are not handled by the iterative update.
            continue
        if isinstance(component, CurrentDc):
            _check_nodes(circuit, (component.anode, component.cathode))
            scaled = component.current * t_vir
            roles[component.anode].append(ConstantCharge(scaled))
            roles[component.cathode].append(ConstantCharge(-scaled))
        elif isinstance(component, Resistor):
            _check_nodes(circuit, (component.pin1, component.pin2))
            conductance = t_vir / component.r
            roles[component.pin1].append(Linear(conductance, component.pin2))
            roles[component.pin2].append(Linear(conductance, component.pin1))
        elif isinstance(component, Diode):
            _check_nodes(circuit, (component.anode, component.cathode))
            i_s = component.i_s * t_vir
            roles[component.anode].append(
                Exponential(i_s, component.n, component.cathode,
                            component.anode, component.cathode, -1.0)
            )
            roles[component.cathode].append(
                Exponential(i_s, component.n, component.anode,
                            component.anode, component.cathode, 1.0)
            )
        else:
            raise TypeError(f"unsupported component: {component!r}")
    return roles


def simulate_op(
    circuit: Circuit,
    t_vir: float,
    tolerance: float,
    initial_voltages: Optional[Iterable[float]] = None,
) -> list[float]:
    """Find the operating point; return node voltages relative to the ground node."""
    count = circuit.nodes_count
    if initial_voltages is None:
        voltages = [0.0] * count
    else:
        voltages = [float(v) for v in initial_voltages]
        if len(voltages) < count:
            raise ValueError(
                f"expected at least {count} initial voltages, got {len(voltages)}"
            )
    if not 0 <= circuit.ground_node < len(voltages):
        raise ValueError(f"ground node {circuit.ground_node} is out of range")

    roles = build_roles(circuit, t_vir)

    damper = 1.0
    prev_voltages = list(voltages)
    prev_error = math.inf
    iteration = 0

    while True:
        charges = [
            sum(role.q_vir_impact(voltages, node) for role in node_roles)
            for node, node_roles in enumerate(roles)
        ]
        delta_vs = [
            sum(role.delta_v_impact(charges, damper, node) for role in node_roles)
            for node, node_roles in enumerate(roles)
        ]
        for node, dv in enumerate(delta_vs):
            voltages[node] += dv

        max_delta_v = max((abs(dv) for dv in delta_vs), default=0.0)

        if max_delta_v > prev_error:
            # The step overshot: go back and take smaller steps.
            voltages = list(prev_voltages)
            damper *= 0.5
        else:
            prev_voltages = list(voltages)
            prev_error = max_delta_v
            damper = min(damper * 1.1, 1.0)

        iteration += 1

        if max_delta_v < tolerance:
            logger.info(
                "Converged in %d iterations with final damper %s.", iteration, damper
            )
            break
        if iteration >= MAX_ITERATIONS:
            logger.warning(
                "Maximum iterations reached (%d iterations) without convergence.",
                iteration,
            )
            break

    ground_voltage = voltages[circuit.ground_node]
    return [v - ground_voltage for v in voltages]