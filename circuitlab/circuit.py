from __future__ import annotations
from dataclasses import dataclass, field, replace
import math
from typing import Dict, List, Sequence
import numpy as np

from .components.base import Component, ComponentKind, Wire
from .components.resistance import resistance
from .config import DEFAULT_CONFIG, SolverConfig
from .network.clusters import NodeMap, find_clusters
from .solver.assembler import component_nodes
from .solver.resolver import resolve


@dataclass
class LabStats:
    """
    Aggregate figures of the network.

    Attributes:
        total_voltage: Largest potential difference across any component (V).
        total_resistance: total_voltage / total_current, or 0 without current (Ω).
        total_current: Sum of power-source current magnitudes (A).
    """
    total_voltage: float = 0.0
    total_resistance: float = 0.0
    total_current: float = 0.0


@dataclass
class SimulationResult:
    components: List[Component]
    wires: List[Wire]
    stats: LabStats
    x: np.ndarray
    node_map: NodeMap
    ground: int
    passes: int
    blown: List[str] = field(default_factory=list)

    def node_potential(self, terminal_id: str) -> float:
        node = self.node_map.node(terminal_id)
        if node is None:
            raise KeyError(f"Unknown terminal '{terminal_id}'.")
        return float(self.x[node])

    def component(self, component_id: str) -> Component:
        for comp in self.components:
            if comp.id == component_id:
                return comp
        raise KeyError(f"Component '{component_id}' not present in the circuit.")

    def wire(self, wire_id: str) -> Wire:
        for w in self.wires:
            if w.id == wire_id:
                return w
        raise KeyError(f"Wire '{wire_id}' not present in the circuit.")


def _component_outputs(
    components: Sequence[Component],
    node_map: NodeMap,
    x: np.ndarray,
    config: SolverConfig,
) -> tuple[List[Component], float, float]:
    n = node_map.node_count
    source_rows: Dict[str, int] = {}
    for comp in components:
        if comp.is_source:
            source_rows[comp.id] = n + len(source_rows)

    updated: List[Component] = []
    max_dv = 0.0
    total_current = 0.0
    for comp in components:
        n0, n1 = component_nodes(comp, node_map)
        v0, v1 = float(x[n0]), float(x[n1])
        dv = abs(v0 - v1)
        max_dv = max(max_dv, dv)

        current = 0.0
        if comp.is_source:
            current = abs(float(x[source_rows[comp.id]]))
            total_current += current
        elif not comp.is_blown:
            r = resistance(comp, v0, v1)
            if not math.isinf(r):
                current = dv / r

        state = comp.state
        if comp.is_actuator:
            state = current > config.active_current
        value = comp.value
        if comp.kind == ComponentKind.AMMETER:
            value = current * 1000.0
        elif comp.kind == ComponentKind.VOLTMETER:
            value = dv

        updated.append(replace(comp, current=current, state=state, value=value))
    return updated, max_dv, total_current


def _wire_outputs(
    wires: Sequence[Wire],
    node_map: NodeMap,
    x: np.ndarray,
    config: SolverConfig,
) -> List[Wire]:
    updated: List[Wire] = []
    for wire in wires:
        nf = node_map.node(wire.from_terminal_id)
        nt = node_map.node(wire.to_terminal_id)
        if nf is None or nt is None:
            updated.append(replace(wire, is_active=False, has_flow=False, current=0.0, direction=1))
            continue
        dv = float(x[nf] - x[nt])
        magnitude = abs(dv) / config.wire_resistance
        updated.append(replace(
            wire,
            is_active=abs(dv) > config.wire_active_voltage,
            has_flow=magnitude > config.flow_threshold,
            current=magnitude,
            direction=1 if dv >= 0 else -1,
        ))
    return updated


def simulate(
    components: Sequence[Component],
    wires: Sequence[Wire],
    config: SolverConfig | None = None,
) -> SimulationResult:
    """
    Run one steady-state simulation step.

    The inputs are never modified; the result holds fresh copies with the
    derived fields (current, actuator state, meter readings, blown fuses and
    wire flow annotations) filled in.

    Args:
        components: Components in editing order. The first power source
            defines ground.
        wires: Wires in editing order.
        config: Numeric policy (DEFAULT_CONFIG when omitted).

    Returns:
        SimulationResult with updated components, wires and aggregate stats.
    """
    cfg = config or DEFAULT_CONFIG
    node_map = find_clusters(components, wires, strict=cfg.strict_terminals)
    resolution = resolve(components, node_map, cfg)

    new_components, total_voltage, total_current = _component_outputs(
        resolution.components, node_map, resolution.x, cfg,
    )
    new_wires = _wire_outputs(wires, node_map, resolution.x, cfg)

    total_resistance = total_voltage / total_current if total_current > cfg.stats_current_floor else 0.0
    stats = LabStats(
        total_voltage=total_voltage,
        total_resistance=total_resistance,
        total_current=total_current,
    )
    return SimulationResult(
        components=new_components,
        wires=new_wires,
        stats=stats,
        x=resolution.x,
        node_map=node_map,
        ground=resolution.ground,
        passes=resolution.passes,
        blown=resolution.blown,
    )
