import math

import pytest

from vcid_spice.role import ConstantCharge, Exponential, Linear, Role


def _diode_pair(i_s=1e-9, n=1.0):
    anode_role = Exponential(i_s=i_s, n=n, neighbor=1, anode=0, cathode=1, flip=-1.0)
    cathode_role = Exponential(i_s=i_s, n=n, neighbor=0, anode=0, cathode=1, flip=1.0)
    return anode_role, cathode_role


def test_role_is_abstract():
    with pytest.raises(TypeError):
        Role()  # type: ignore[abstract]


def test_constant_charge_returns_its_current():
    role = ConstantCharge(0.05)
    assert role.q_vir_impact([1.0, 2.0], 0) == 0.05
    assert role.q_vir_impact([], 5) == 0.05


def test_constant_charge_does_not_move_voltage():
    role = ConstantCharge(-0.7)
    assert role.delta_v_impact([3.0, -2.0], 1.0, 0) == 0.0


def test_linear_charge_follows_ohms_law():
    role = Linear(conductance=0.5, neighbor=1)
    voltages = [1.0, 3.0]
    assert role.q_vir_impact(voltages, 0) == pytest.approx(0.5 * (3.0 - 1.0))


def test_linear_charge_is_antisymmetric():
    voltages = [0.3, -1.7]
    at_zero = Linear(conductance=0.25, neighbor=1).q_vir_impact(voltages, 0)
    at_one = Linear(conductance=0.25, neighbor=0).q_vir_impact(voltages, 1)
    assert at_zero == pytest.approx(-at_one)


def test_branch_delta_is_damped_charge_difference():
    charges = [0.4, 0.1]
    linear = Linear(conductance=1.0, neighbor=1)
    assert linear.delta_v_impact(charges, 0.5, 0) == pytest.approx(0.5 * (0.4 - 0.1))
    diode, _ = _diode_pair()
    assert diode.delta_v_impact(charges, 0.25, 0) == pytest.approx(0.25 * (0.4 - 0.1))


def test_exponential_is_zero_without_bias():
    anode_role, cathode_role = _diode_pair()
    assert anode_role.q_vir_impact([0.6, 0.6], 0) == 0.0
    assert cathode_role.q_vir_impact([0.6, 0.6], 1) == 0.0


def test_exponential_terminals_are_opposite():
    anode_role, cathode_role = _diode_pair()
    voltages = [0.4, 0.1]
    assert anode_role.q_vir_impact(voltages, 0) == pytest.approx(
        -cathode_role.q_vir_impact(voltages, 1)
    )
    assert anode_role.q_vir_impact(voltages, 0) < 0.0


def test_exponential_forward_current_matches_diode_law():
    _, cathode_role = _diode_pair(i_s=2e-9, n=1.5)
    voltages = [0.3, 0.0]
    expected = 2e-9 * (math.exp(0.3 / (1.5 * 0.025852)) - 1.0)
    assert cathode_role.q_vir_impact(voltages, 1) == pytest.approx(expected)


def test_exponential_clamps_large_bias():
    _, cathode_role = _diode_pair(n=50.0)
    assert cathode_role.q_vir_impact([20.0, 0.0], 1) == cathode_role.q_vir_impact(
        [5.0, 0.0], 1
    )
    assert cathode_role.q_vir_impact([-20.0, 0.0], 1) == cathode_role.q_vir_impact(
        [-5.0, 0.0], 1
    )


def test_exponential_reverse_current_saturates():
    _, cathode_role = _diode_pair(i_s=1e-9)
    assert cathode_role.q_vir_impact([-3.0, 0.0], 1) == pytest.approx(-1e-9)