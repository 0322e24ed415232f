"""
Shared builders for the circuitlab test suite.

All fixtures build plain component/wire lists; nothing here touches numpy.
"""

import pytest

from circuitlab import Component, ComponentKind, Wire


def make_component(component_id, kind, **fields):
    """Helper to create a Component with minimal boilerplate."""
    return Component(id=component_id, kind=ComponentKind(kind), **fields)


def make_wire(wire_id, start_id, start_term, end_id, end_term):
    """Helper to create a Wire between two component terminals."""
    return Wire(wire_id, f"{start_id}-{start_term}", f"{end_id}-{end_term}")


def series_loop(*component_ids):
    """
    Wire components head to tail: terminal 1 of each to terminal 0 of the
    next, and the last one back to the first.
    """
    wires = []
    ids = list(component_ids)
    for k, (a, b) in enumerate(zip(ids, ids[1:] + ids[:1])):
        wires.append(make_wire(f"w{k}", a, 1, b, 0))
    return wires


@pytest.fixture
def battery_resistor():
    """B1 (9 V) across a single 100 Ω resistor."""
    components = [
        make_component("B1", ComponentKind.BATTERY),
        make_component("R1", ComponentKind.RESISTOR),
    ]
    return components, series_loop("B1", "R1")


@pytest.fixture
def switched_lamp():
    """B1 -> S1 (open) -> R1 loop."""
    components = [
        make_component("B1", ComponentKind.BATTERY),
        make_component("S1", ComponentKind.SWITCH, state=False),
        make_component("R1", ComponentKind.RESISTOR),
    ]
    return components, series_loop("B1", "S1", "R1")
