"""Tests for electrical node discovery."""

import pytest

from circuitlab import ComponentKind
from circuitlab.network import find_clusters
from conftest import make_component, make_wire, series_loop


class TestNodeDiscovery:
    def test_unwired_terminals_are_singleton_nodes(self):
        comps = [make_component("R1", ComponentKind.RESISTOR), make_component("R2", ComponentKind.RESISTOR)]
        node_map = find_clusters(comps, [])
        assert node_map.node_count == 4
        assert len(set(node_map.node_index.values())) == 4

    def test_wired_terminals_share_a_node(self):
        comps = [make_component("R1", ComponentKind.RESISTOR), make_component("R2", ComponentKind.RESISTOR)]
        node_map = find_clusters(comps, [make_wire("w0", "R1", 1, "R2", 0)])
        assert node_map.node_count == 3
        assert node_map.node("R1-1") == node_map.node("R2-0")
        assert node_map.node("R1-0") != node_map.node("R2-1")

    def test_transitive_wiring(self):
        comps = [make_component(f"R{k}", ComponentKind.RESISTOR) for k in range(3)]
        wires = [make_wire("a", "R0", 0, "R1", 0), make_wire("b", "R1", 0, "R2", 0)]
        node_map = find_clusters(comps, wires)
        assert node_map.node("R0-0") == node_map.node("R2-0")
        assert node_map.node_count == 4

    def test_node_count_of_series_loop(self):
        comps = [make_component(f"R{k}", ComponentKind.RESISTOR) for k in range(5)]
        node_map = find_clusters(comps, series_loop(*[c.id for c in comps]))
        assert node_map.node_count == 5

    def test_first_terminal_gets_node_zero(self):
        comps = [make_component("B1", ComponentKind.BATTERY), make_component("R1", ComponentKind.RESISTOR)]
        node_map = find_clusters(comps, series_loop("B1", "R1"))
        assert node_map.node("B1-0") == 0

    def test_every_terminal_belongs_to_exactly_one_node(self):
        comps = [make_component(f"R{k}", ComponentKind.RESISTOR) for k in range(4)]
        wires = [make_wire("a", "R0", 1, "R1", 0), make_wire("b", "R2", 1, "R3", 0)]
        node_map = find_clusters(comps, wires)
        flat = [t for cluster in node_map.clusters for t in cluster]
        assert sorted(flat) == sorted(node_map.node_index)
        assert len(flat) == 8

    def test_long_chain_does_not_recurse(self):
        n = 5000
        comps = [make_component(f"R{k}", ComponentKind.RESISTOR) for k in range(n)]
        wires = [make_wire(f"w{k}", f"R{k}", 1, f"R{k + 1}", 0) for k in range(n - 1)]
        wires += [make_wire(f"z{k}", f"R{k}", 0, f"R{k + 1}", 0) for k in range(n - 1)]
        node_map = find_clusters(comps, wires)
        assert node_map.node("R0-0") == node_map.node(f"R{n - 1}-0")


class TestContractViolations:
    def test_unknown_terminal_is_ignored(self):
        comps = [make_component("R1", ComponentKind.RESISTOR)]
        node_map = find_clusters(comps, [make_wire("ghost", "R1", 0, "X9", 1)])
        assert node_map.ignored_wires == ("ghost",)
        assert node_map.node_count == 2
        assert "X9-1" not in node_map

    def test_unknown_terminal_raises_in_strict_mode(self):
        comps = [make_component("R1", ComponentKind.RESISTOR)]
        with pytest.raises(KeyError):
            find_clusters(comps, [make_wire("ghost", "R1", 0, "X9", 1)], strict=True)

    def test_duplicate_component_id(self):
        comps = [make_component("R1", ComponentKind.RESISTOR), make_component("R1", ComponentKind.LED)]
        with pytest.raises(ValueError):
            find_clusters(comps, [])
