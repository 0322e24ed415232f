"""
Light sweep example (solar panel driving an LDR and a bulb).

Circuit:
    PV1 (light level L, 0.12 V per %) -> LDR1 -> BULB1 (20 Ω) -> back to PV1.

Both the panel and the LDR see the same light level. The sweep reports the
bulb current and whether it is lit, and plots the curve if matplotlib is
available.
"""

import sys
from pathlib import Path
import numpy as np

project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from circuitlab import Component, ComponentKind, Wire, simulate


def main() -> None:
    wires = [
        Wire("w0", "PV1-0", "LDR1-0"),
        Wire("w1", "LDR1-1", "BULB1-0"),
        Wire("w2", "BULB1-1", "PV1-1"),
    ]

    levels = np.linspace(0.0, 100.0, 21)
    currents = []
    for level in levels:
        components = [
            Component("PV1", ComponentKind.SOLAR_PANEL, value=float(level)),
            Component("LDR1", ComponentKind.LDR, value=float(level)),
            Component("BULB1", ComponentKind.BULB),
        ]
        bulb = simulate(components, wires).component("BULB1")
        currents.append(bulb.current)
        print(f"light {level:5.1f} %: I_bulb = {bulb.current * 1e3:8.3f} mA, lit = {bulb.state}")

    try:
        import matplotlib.pyplot as plt

        plt.figure(figsize=(7, 4))
        plt.plot(levels, np.asarray(currents) * 1e3)
        plt.xlabel("Light level [%]")
        plt.ylabel("Bulb current [mA]")
        plt.title("Solar panel + LDR light sweep")
        plt.grid(True)
        plt.tight_layout()
        plt.show()
    except ImportError:
        pass


if __name__ == "__main__":
    main()
