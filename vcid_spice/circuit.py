"""Circuit description: nodes, a ground reference and the components between them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class VoltageDc:
    """DC voltage source. The iterative solver does not act on it."""

    anode: int
    cathode: int
    v: float


@dataclass(frozen=True)
class CurrentDc:
    """DC current source injecting a constant current into its nodes."""

    anode: int
    cathode: int
    current: float


@dataclass(frozen=True)
class Resistor:
    """Ohmic resistor between two pins."""

    pin1: int
    pin2: int
    r: float


@dataclass(frozen=True)
class Diode:
    """Diode with an exponential current-voltage characteristic."""

    anode: int
    cathode: int
    i_s: float
    n: float


Component = Union[VoltageDc, CurrentDc, Resistor, Diode]


@dataclass
class Circuit:
    """A set of components connected between numbered nodes."""

    nodes_count: int
    ground_node: int
    components: list[Component] = field(default_factory=list)

    def add_component(self, component: Component) -> None:
        """Append a component to the circuit."""
        self.components.append(component)