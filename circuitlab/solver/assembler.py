from __future__ import annotations
from typing import Dict, List, Sequence
import numpy as np

from ..components.base import Component, ComponentKind
from ..components.resistance import conductance, light_level
from ..config import DEFAULT_CONFIG, SolverConfig
from ..network.clusters import NodeMap
from .stamps import (
    StampData,
    pin_ground,
    stamp_conductance,
    stamp_leak,
    stamp_voltage_source,
)

Array = np.ndarray


def power_sources(components: Sequence[Component]) -> List[Component]:
    return [c for c in components if c.is_source]


def source_emf(component: Component, config: SolverConfig = DEFAULT_CONFIG) -> float:
    if component.kind == ComponentKind.SOLAR_PANEL:
        return light_level(component) * config.solar_volts_per_percent
    return config.battery_emf


def component_nodes(component: Component, node_map: NodeMap) -> tuple[int, int]:
    t0, t1 = component.terminal_ids
    return node_map.node_index[t0], node_map.node_index[t1]


def ground_node(components: Sequence[Component], node_map: NodeMap) -> int:
    """
    Node of the negative terminal of the first power source, else node 0.
    """
    for comp in components:
        if comp.is_source:
            return node_map.node_index[comp.terminal(comp.negative_index).id]
    return 0


def assemble(
    components: Sequence[Component],
    node_map: NodeMap,
    prev_x: Array | None = None,
    config: SolverConfig = DEFAULT_CONFIG,
) -> StampData:
    """
    Build the modified nodal system A x = z for one pass.

    The unknown vector holds the node potentials followed by one branch
    current per power source, in input order.

    Args:
        components: Components of the step (fuse states as of this pass).
        node_map: Terminal -> node mapping of the step.
        prev_x: Unknowns of the previous pass, used to pick diode direction.
            None on the first pass (diodes assumed forward).
        config: Numeric policy.

    Returns:
        StampData with the assembled matrix and right-hand side.
    """
    sources = power_sources(components)
    n = node_map.node_count
    aux_map: Dict[str, int] = {c.id: n + k for k, c in enumerate(sources)}
    data = StampData.empty(n, aux_map, ground_node(components, node_map))

    stamp_leak(data, config.gmin)

    for comp in components:
        if comp.is_source:
            continue
        n0, n1 = component_nodes(comp, node_map)
        if n0 == n1:
            continue
        v0 = v1 = None
        if prev_x is not None:
            v0, v1 = float(prev_x[n0]), float(prev_x[n1])
        stamp_conductance(data, n0, n1, conductance(comp, v0, v1))

    for comp in sources:
        n_pos = node_map.node_index[comp.terminal(comp.positive_index).id]
        n_neg = node_map.node_index[comp.terminal(comp.negative_index).id]
        stamp_voltage_source(
            data,
            data.aux(comp.id),
            n_pos,
            n_neg,
            source_emf(comp, config),
            config.internal_resistance,
        )

    pin_ground(data)
    return data
