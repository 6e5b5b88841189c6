"""Per-node contributions of components to the iterative operating-point solver."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

THERMAL_VOLTAGE = 0.025852
_CLAMP = 5.0


class Role(ABC):
    """A single component's contribution at one node."""

    @abstractmethod
    def q_vir_impact(self, voltages: Sequence[float], target_node: int) -> float:
        """Contribution of this role to the virtual charge at ``target_node``."""

    @abstractmethod
    def delta_v_impact(
        self, charges: Sequence[float], damper: float, target_node: int
    ) -> float:
        """Contribution of this role to the voltage update at ``target_node``."""


@dataclass(frozen=True)
class ConstantCharge(Role):
    """Constant current injected into the node."""

    current: float

    def q_vir_impact(self, voltages: Sequence[float], target_node: int) -> float:
        return self.current

    def delta_v_impact(
        self, charges: Sequence[float], damper: float, target_node: int
    ) -> float:
        return 0.0


class _Branch(Role):
    """A role connecting the node to a neighbouring node."""

    neighbor: int

    def delta_v_impact(
        self, charges: Sequence[float], damper: float, target_node: int
    ) -> float:
        return damper * (charges[target_node] - charges[self.neighbor])


@dataclass(frozen=True)
class Linear(_Branch):
    """Ohmic contribution from a neighbouring node."""

    conductance: float
    neighbor: int

    def q_vir_impact(self, voltages: Sequence[float], target_node: int) -> float:
        return self.conductance * (voltages[self.neighbor] - voltages[target_node])

    def delta_v_impact(
        self, charges: Sequence[float], damper: float, target_node: int
    ) -> float:
        return _Branch.delta_v_impact(self, charges, damper, target_node)


@dataclass(frozen=True)
class Exponential(_Branch):
    """Diode contribution; ``flip`` gives the sign for the terminal it sits on."""

    i_s: float
    n: float
    neighbor: int
    anode: int
    cathode: int
    flip: float

    def q_vir_impact(self, voltages: Sequence[float], target_node: int) -> float:
        v_diff = voltages[self.anode] - voltages[self.cathode]
        v_diff = min(max(v_diff, -_CLAMP), _CLAMP)
        return self.flip * self.i_s * (math.exp(v_diff / (self.n * THERMAL_VOLTAGE)) - 1.0)

    def delta_v_impact(
        self, charges: Sequence[float], damper: float, target_node: int
    ) -> float:
        return _Branch.delta_v_impact(self, charges, damper, target_node)