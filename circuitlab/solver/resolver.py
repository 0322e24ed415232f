from __future__ import annotations
from dataclasses import dataclass, field, replace
import logging
from typing import List, Sequence, Tuple
import numpy as np

from ..components.base import Component, ComponentKind
from ..components.resistance import FUSE_INTACT
from ..config import DEFAULT_CONFIG, SolverConfig
from ..network.clusters import NodeMap
from .assembler import assemble, component_nodes
from .gauss import gauss_solve

logger = logging.getLogger(__name__)

Array = np.ndarray


@dataclass
class Resolution:
    """
    Outcome of the bounded pass sequence of one step.

    Attributes:
        x: Final unknowns (node potentials, then source branch currents).
        components: Input components with fuse blow events applied.
        ground: Node pinned to 0 V.
        passes: Number of assemble-and-solve passes performed.
        blown: Ids of fuses that blew during this step.
    """
    x: Array
    components: List[Component]
    ground: int
    passes: int
    blown: List[str] = field(default_factory=list)


def solve_pass(
    components: Sequence[Component],
    node_map: NodeMap,
    prev_x: Array | None,
    config: SolverConfig,
    pass_no: int,
) -> Tuple[Array, int]:
    data = assemble(components, node_map, prev_x, config)
    logger.debug(
        "Pass %d: %d nodes, %d sources, ground node %d",
        pass_no, data.node_count, len(data.aux_map), data.ground,
    )
    x = gauss_solve(data.A, data.z, config.pivot_tol)
    if data.node_count:
        # pinned row; drop elimination round-off
        x[data.ground] = 0.0
    return x, data.ground


def diode_directions(
    components: Sequence[Component],
    node_map: NodeMap,
    x: Array | None,
) -> Tuple[bool, ...]:
    """
    Forward flag of every diode; all forward when no estimate exists.
    """
    flags = []
    for comp in components:
        if comp.kind != ComponentKind.DIODE:
            continue
        if x is None:
            flags.append(True)
            continue
        n0, n1 = component_nodes(comp, node_map)
        flags.append(bool(x[n0] > x[n1]))
    return tuple(flags)


def check_fuses(
    components: Sequence[Component],
    node_map: NodeMap,
    x: Array,
    config: SolverConfig,
) -> Tuple[List[Component], List[str]]:
    """
    Blow every intact fuse whose estimated current exceeds its rating.

    Returns:
        Updated copies of the components and the ids of the fuses that blew.
    """
    checked: List[Component] = []
    blown: List[str] = []
    for comp in components:
        if comp.kind == ComponentKind.FUSE and not comp.is_blown:
            n0, n1 = component_nodes(comp, node_map)
            current = abs(x[n0] - x[n1]) / FUSE_INTACT
            rating = comp.max_current or config.default_fuse_max_current
            if current > rating:
                logger.info("Fuse %s blown: %.3f A > %.3f A", comp.id, current, rating)
                blown.append(comp.id)
                comp = replace(comp, is_blown=True)
        checked.append(comp)
    return checked, blown


def resolve(
    components: Sequence[Component],
    node_map: NodeMap,
    config: SolverConfig = DEFAULT_CONFIG,
) -> Resolution:
    """
    Settle diode directions and fuse blow events with a bounded number of
    solves.

    With the default config this is exactly: one pass with diodes assumed
    forward, one pass with diode directions taken from the first, then one
    extra pass only if a fuse blew. Larger ``diode_passes`` keep re-solving
    while diode directions change, up to that many diode passes. Fuses are
    checked once; a fuse tripping because another one blew is left for the
    next step.
    """
    components = list(components)
    x, ground = solve_pass(components, node_map, None, config, 1)
    passes = 1
    used = diode_directions(components, node_map, None)
    while passes < config.diode_passes:
        implied = diode_directions(components, node_map, x)
        if implied == used:
            break
        passes += 1
        x, ground = solve_pass(components, node_map, x, config, passes)
        used = implied

    components, blown = check_fuses(components, node_map, x, config)
    if blown:
        passes += 1
        x, ground = solve_pass(components, node_map, x, config, passes)

    return Resolution(x=x, components=components, ground=ground, passes=passes, blown=blown)
