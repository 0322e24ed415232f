"""
User edits on a single component.

Every helper returns a fresh copy and leaves the argument untouched. These are
the only way a fuse goes back from blown to intact: the solver never does it.
"""

from __future__ import annotations
from dataclasses import replace

from .base import Component, ComponentKind
from .resistance import POT_MAX, POT_MIN

FUSE_MIN_CURRENT = 0.05
FUSE_MAX_CURRENT = 2.0


def _expect(component: Component, *kinds: ComponentKind) -> None:
    if component.kind not in kinds:
        names = ", ".join(k.value for k in kinds)
        raise ValueError(f"Component '{component.id}' is a {component.kind.value}, expected {names}.")


def toggle_switch(component: Component) -> Component:
    _expect(component, ComponentKind.SWITCH)
    return replace(component, state=not component.state)


def flip(component: Component) -> Component:
    _expect(component, ComponentKind.BATTERY, ComponentKind.SOLAR_PANEL)
    return replace(component, flipped=not component.flipped)


def set_resistance(component: Component, ohms: float) -> Component:
    _expect(component, ComponentKind.POTENTIOMETER)
    return replace(component, value=min(POT_MAX, max(POT_MIN, float(ohms))))


def set_light_level(component: Component, percent: float) -> Component:
    _expect(component, ComponentKind.LDR, ComponentKind.SOLAR_PANEL)
    return replace(component, value=min(100.0, max(0.0, float(percent))))


def set_fuse_rating(component: Component, amps: float) -> Component:
    _expect(component, ComponentKind.FUSE)
    rating = min(FUSE_MAX_CURRENT, max(FUSE_MIN_CURRENT, float(amps)))
    return replace(component, max_current=rating)


def reset_fuse(component: Component) -> Component:
    _expect(component, ComponentKind.FUSE)
    return replace(component, is_blown=False, current=0.0)
