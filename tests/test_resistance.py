"""Tests for the per-kind resistance table."""

import math

import pytest

from circuitlab import ComponentKind
from circuitlab.components import OPEN, conductance, resistance
from conftest import make_component


@pytest.mark.parametrize(
    "kind, ohms",
    [
        (ComponentKind.RESISTOR, 100.0),
        (ComponentKind.LED, 50.0),
        (ComponentKind.AMMETER, 0.01),
        (ComponentKind.VOLTMETER, 1e9),
        (ComponentKind.MOTOR, 40.0),
        (ComponentKind.BUZZER, 80.0),
        (ComponentKind.BULB, 20.0),
        (ComponentKind.HEATER, 10.0),
        (ComponentKind.CAPACITOR, 1e9),
    ],
)
def test_fixed_resistances(kind, ohms):
    assert resistance(make_component("X", kind)) == ohms


class TestVariableKinds:
    def test_potentiometer_uses_value(self):
        assert resistance(make_component("P", ComponentKind.POTENTIOMETER, value=250.0)) == 250.0

    def test_potentiometer_floor(self):
        assert resistance(make_component("P", ComponentKind.POTENTIOMETER, value=0.0)) == 0.1
        assert resistance(make_component("P", ComponentKind.POTENTIOMETER)) == 0.1

    def test_potentiometer_ceiling(self):
        assert resistance(make_component("P", ComponentKind.POTENTIOMETER, value=5000.0)) == 1000.0

    def test_ldr_gets_lower_with_light(self):
        dark = resistance(make_component("L", ComponentKind.LDR, value=0.0))
        bright = resistance(make_component("L", ComponentKind.LDR, value=100.0))
        assert dark == pytest.approx(1000.0)
        assert bright == pytest.approx(1000.0 / 101.0)

    def test_ldr_default_light_level(self):
        assert resistance(make_component("L", ComponentKind.LDR)) == pytest.approx(1000.0 * (1 - 50 / 101))

    def test_switch(self):
        assert resistance(make_component("S", ComponentKind.SWITCH, state=True)) == 0.01
        assert resistance(make_component("S", ComponentKind.SWITCH, state=False)) == OPEN

    def test_fuse(self):
        assert resistance(make_component("F", ComponentKind.FUSE)) == 0.05
        assert resistance(make_component("F", ComponentKind.FUSE, is_blown=True)) == OPEN


class TestDiode:
    def test_optimistic_without_estimate(self):
        assert resistance(make_component("D", ComponentKind.DIODE)) == 0.5

    def test_forward(self):
        assert resistance(make_component("D", ComponentKind.DIODE), 2.0, 1.0) == 0.5

    def test_reverse(self):
        assert resistance(make_component("D", ComponentKind.DIODE), 1.0, 2.0) == 1e9

    def test_equal_potentials_are_reverse(self):
        assert resistance(make_component("D", ComponentKind.DIODE), 1.0, 1.0) == 1e9


class TestConductance:
    def test_open_is_zero(self):
        assert conductance(make_component("S", ComponentKind.SWITCH)) == 0.0

    def test_sources_have_no_conductance(self):
        assert math.isinf(resistance(make_component("B", ComponentKind.BATTERY)))
        assert conductance(make_component("B", ComponentKind.SOLAR_PANEL)) == 0.0

    def test_inverse(self):
        assert conductance(make_component("R", ComponentKind.RESISTOR)) == pytest.approx(0.01)
