"""
DC example (battery, switch, fuse, LED and ammeter in series).

Circuit:
    B1 (9 V, 0.1 Ω internal) -> S1 -> F1 (0.3 A) -> R1 (100 Ω) -> LED1 (50 Ω) -> A1 -> back to B1.

The script solves the circuit with the switch open and closed, then reports the
LED state, the ammeter reading and the aggregate statistics.
"""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from circuitlab import Component, ComponentKind, Wire, simulate
from circuitlab.components import toggle_switch


def loop(*ids: str) -> list[Wire]:
    wires = []
    for k, (a, b) in enumerate(zip(ids, ids[1:] + ids[:1])):
        wires.append(Wire(f"w{k}", f"{a}-1", f"{b}-0"))
    return wires


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    components = [
        Component("B1", ComponentKind.BATTERY),
        Component("S1", ComponentKind.SWITCH, state=False),
        Component("F1", ComponentKind.FUSE, max_current=0.3),
        Component("R1", ComponentKind.RESISTOR),
        Component("LED1", ComponentKind.LED),
        Component("A1", ComponentKind.AMMETER),
    ]
    wires = loop("B1", "S1", "F1", "R1", "LED1", "A1")

    for label in ("open", "closed"):
        result = simulate(components, wires)
        led = result.component("LED1")
        meter = result.component("A1")
        stats = result.stats
        print(f"Switch {label}:")
        print(f"  LED lit = {led.state}, I = {led.current * 1e3:.2f} mA")
        print(f"  Ammeter reads {meter.value:.2f} mA")
        print(f"  V = {stats.total_voltage:.3f} V, I = {stats.total_current:.4f} A, R = {stats.total_resistance:.1f} Ω")
        print(f"  passes = {result.passes}, blown = {result.blown}")
        components = [toggle_switch(c) if c.id == "S1" else c for c in result.components]


if __name__ == "__main__":
    main()
