from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
import numpy as np

Array = np.ndarray


@dataclass
class StampData:
    """
    Shared view of the MNA system during stamping.

    Attributes:
        A:   System matrix, shape (node_count + n_sources,) * 2.
        z:   Right-hand side vector.
        node_count: Number of electrical nodes; node rows come first.
        aux_map: Mapping source component id -> branch-current row/column.
        ground: Node pinned to 0 V.
    """
    A: Array
    z: Array
    node_count: int
    aux_map: Dict[str, int]
    ground: int

    @classmethod
    def empty(cls, node_count: int, aux_map: Dict[str, int], ground: int) -> "StampData":
        size = node_count + len(aux_map)
        return cls(
            A=np.zeros((size, size), dtype=float),
            z=np.zeros(size, dtype=float),
            node_count=node_count,
            aux_map=aux_map,
            ground=ground,
        )

    @property
    def size(self) -> int:
        return self.A.shape[0]

    def aux(self, component_id: str) -> int:
        return self.aux_map[component_id]


def stamp_leak(data: StampData, gmin: float) -> None:
    """
    Tiny conductance from every node to the reference, so an isolated node
    still has a non-zero diagonal.
    """
    idx = np.arange(data.node_count)
    data.A[idx, idx] += gmin


def stamp_conductance(data: StampData, n0: int, n1: int, g: float) -> None:
    if g == 0 or n0 == n1:
        return
    data.A[n0, n0] += g
    data.A[n1, n1] += g
    data.A[n0, n1] -= g
    data.A[n1, n0] -= g


def stamp_voltage_source(
    data: StampData,
    aux_idx: int,
    n_pos: int,
    n_neg: int,
    emf: float,
    r_internal: float,
) -> None:
    """
    Ideal EMF in series with ``r_internal``: V(pos) - V(neg) - r*I = emf.
    """
    data.A[n_pos, aux_idx] += 1.0
    data.A[aux_idx, n_pos] += 1.0
    data.A[n_neg, aux_idx] -= 1.0
    data.A[aux_idx, n_neg] -= 1.0
    data.A[aux_idx, aux_idx] = -r_internal
    data.z[aux_idx] += emf


def pin_ground(data: StampData) -> None:
    if data.node_count == 0:
        return
    g = data.ground
    data.A[g, :] = 0.0
    data.A[g, g] = 1.0
    data.z[g] = 0.0
