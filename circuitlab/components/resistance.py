"""
Per-kind steady-state resistance model.

This is the only place that knows how a component conducts; both the matrix
assembly and the post-processing read it, so the two can never disagree.
``OPEN`` (infinity) means no conductance edge at all.
"""

from __future__ import annotations
import math
from typing import Callable, Dict

from .base import Component, ComponentKind

OPEN = math.inf

DIODE_FORWARD = 0.5
DIODE_REVERSE = 1e9
SWITCH_CLOSED = 0.01
FUSE_INTACT = 0.05

POT_MIN = 0.1
POT_MAX = 1000.0
LDR_DARK = 1000.0
DEFAULT_LIGHT_LEVEL = 50.0

FIXED_RESISTANCE: Dict[ComponentKind, float] = {
    ComponentKind.RESISTOR: 100.0,
    ComponentKind.LED: 50.0,
    ComponentKind.AMMETER: 0.01,
    ComponentKind.VOLTMETER: 1e9,
    ComponentKind.MOTOR: 40.0,
    ComponentKind.BUZZER: 80.0,
    ComponentKind.BULB: 20.0,
    ComponentKind.HEATER: 10.0,
    ComponentKind.CAPACITOR: 1e9,
}


def light_level(component: Component, default: float = DEFAULT_LIGHT_LEVEL) -> float:
    """
    Light level of an LDR or solar panel, clamped to 0..100 %.
    """
    level = default if component.value is None else float(component.value)
    return min(100.0, max(0.0, level))


def potentiometer_resistance(component: Component) -> float:
    return min(POT_MAX, max(POT_MIN, float(component.value or 0.0)))


def ldr_resistance(component: Component) -> float:
    return LDR_DARK * (1.0 - light_level(component) / 101.0)


def _switch(component: Component) -> float:
    return SWITCH_CLOSED if component.state else OPEN


def _fuse(component: Component) -> float:
    return OPEN if component.is_blown else FUSE_INTACT


_VARIABLE: Dict[ComponentKind, Callable[[Component], float]] = {
    ComponentKind.POTENTIOMETER: potentiometer_resistance,
    ComponentKind.LDR: ldr_resistance,
    ComponentKind.SWITCH: _switch,
    ComponentKind.FUSE: _fuse,
}


def diode_resistance(v0: float | None, v1: float | None) -> float:
    """
    Forward when terminal 0 sits above terminal 1; optimistic forward when no
    potential estimate exists yet.
    """
    if v0 is None or v1 is None:
        return DIODE_FORWARD
    return DIODE_FORWARD if v0 > v1 else DIODE_REVERSE


def resistance(component: Component, v0: float | None = None, v1: float | None = None) -> float:
    """
    Resistance of a component in ohms, or ``OPEN``.

    Args:
        component: The component.
        v0: Potential of terminal 0 (only used by diodes).
        v1: Potential of terminal 1 (only used by diodes).

    Returns:
        Resistance in Ω. Power sources return ``OPEN``: they are stamped as
        ideal sources with an auxiliary current, not as conductances.
    """
    kind = component.kind
    if kind in FIXED_RESISTANCE:
        return FIXED_RESISTANCE[kind]
    if kind in _VARIABLE:
        return _VARIABLE[kind](component)
    if kind == ComponentKind.DIODE:
        return diode_resistance(v0, v1)
    return OPEN


def conductance(component: Component, v0: float | None = None, v1: float | None = None) -> float:
    r = resistance(component, v0, v1)
    return 0.0 if math.isinf(r) else 1.0 / r
