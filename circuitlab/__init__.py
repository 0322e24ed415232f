"""
Steady-state DC solver for a drag-and-drop circuit lab.

One call to ``simulate`` takes the components and wires of the editor, groups
terminals into nodes, solves the modified nodal system (with bounded re-solves
for diodes and fuses) and returns updated copies plus aggregate statistics.
"""

from .components import Component, ComponentKind, Terminal, Wire  # noqa: F401
from .config import DEFAULT_CONFIG, SolverConfig  # noqa: F401
from .circuit import LabStats, SimulationResult, simulate  # noqa: F401
from .summary import CircuitSummary, circuit_summary, explain_circuit  # noqa: F401
from . import components  # noqa: F401
from . import network  # noqa: F401
from . import solver  # noqa: F401

__all__ = [
    "Component",
    "ComponentKind",
    "Terminal",
    "Wire",
    "SolverConfig",
    "DEFAULT_CONFIG",
    "LabStats",
    "SimulationResult",
    "simulate",
    "CircuitSummary",
    "circuit_summary",
    "explain_circuit",
    "components",
    "network",
    "solver",
]
