from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Dict, List, Sequence

from ..components.base import Component, Wire

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodeMap:
    """
    Electrical nodes of one simulation step.

    A node is the set of terminals held at the same potential by wires. The
    map is rebuilt on every step and never shared between steps.

    Attributes:
        node_index: Mapping terminal_id -> dense node index.
        clusters: Terminal ids of each node, indexed by node.
        ignored_wires: Ids of wires left out because an endpoint does not
            belong to any component.
    """
    node_index: Dict[str, int]
    clusters: List[List[str]]
    ignored_wires: tuple[str, ...] = ()

    @property
    def node_count(self) -> int:
        return len(self.clusters)

    def node(self, terminal_id: str) -> int | None:
        return self.node_index.get(terminal_id)

    def __contains__(self, terminal_id: str) -> bool:
        return terminal_id in self.node_index


def find_clusters(
    components: Sequence[Component],
    wires: Sequence[Wire],
    strict: bool = False,
) -> NodeMap:
    """
    Group terminals into electrical nodes.

    Terminals are visited in component order (terminal 0 then 1), and each
    unvisited terminal seeds a new node explored with an explicit stack, so
    deep wire chains cannot hit the recursion limit. Terminals without wires
    become singleton nodes.

    Args:
        components: Components, in input order.
        wires: Wires, in input order.
        strict: Raise instead of ignoring wires with an unknown endpoint.

    Returns:
        NodeMap for this step.

    Raises:
        ValueError: If two components share an id.
        KeyError: If ``strict`` and a wire names an unknown terminal.
    """
    all_terminals: List[str] = []
    seen_ids = set()
    for comp in components:
        if comp.id in seen_ids:
            raise ValueError(f"Component '{comp.id}' already exists.")
        seen_ids.add(comp.id)
        all_terminals.extend(comp.terminal_ids)
    known = set(all_terminals)

    adjacency: Dict[str, List[str]] = {}
    ignored: List[str] = []
    for wire in wires:
        a, b = wire.from_terminal_id, wire.to_terminal_id
        unknown = [t for t in (a, b) if t not in known]
        if unknown:
            if strict:
                raise KeyError(f"Wire '{wire.id}' references unknown terminal '{unknown[0]}'.")
            logger.warning("Ignoring wire %s: unknown terminal(s) %s", wire.id, ", ".join(unknown))
            ignored.append(wire.id)
            continue
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)

    visited = set()
    clusters: List[List[str]] = []
    for start in all_terminals:
        if start in visited:
            continue
        cluster: List[str] = []
        stack = [start]
        visited.add(start)
        while stack:
            current = stack.pop()
            cluster.append(current)
            for nxt in adjacency.get(current, ()):
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append(nxt)
        clusters.append(cluster)

    node_index = {t: idx for idx, cluster in enumerate(clusters) for t in cluster}
    return NodeMap(node_index=node_index, clusters=clusters, ignored_wires=tuple(ignored))
