"""Tests for breadth-first depth mapping."""

import networkx as nx

from depimpact.graph.io import to_networkx
from depimpact.graph.ops import find_depth_map


def _edge(target, edge_type: str = "runtime") -> dict:
    return {"id": target, "type": edge_type}


def test_depths_follow_hop_count() -> None:
    graph = {
        "A": [_edge("B", "compile")],
        "B": [_edge("C", "runtime")],
        "C": [],
    }

    assert find_depth_map(graph, "A") == {"A": 0, "B": 1, "C": 2}


def test_minimum_depth_wins_over_longer_route() -> None:
    graph = {
        "A": [_edge("B"), _edge("D", "export")],
        "B": [_edge("C")],
        "C": [_edge("D", "compile")],
    }

    assert find_depth_map(graph, "A") == {"A": 0, "B": 1, "D": 1, "C": 2}


def test_cycles_and_self_loops_keep_root_at_zero() -> None:
    graph = {
        "A": [_edge("A", "compile"), _edge("B")],
        "B": [_edge("A")],
    }

    assert find_depth_map(graph, "A") == {"A": 0, "B": 1}


def test_unknown_root_maps_to_itself() -> None:
    assert find_depth_map({"A": [_edge("B")]}, "Z") == {"Z": 0}


def test_unreachable_units_are_absent() -> None:
    graph = {"A": [_edge("B")], "C": [_edge("A")]}

    assert "C" not in find_depth_map(graph, "A")


def test_matches_networkx_shortest_path_lengths() -> None:
    graph = {
        1: [_edge(2, "compile"), _edge(3, "export")],
        2: [_edge(4), _edge(5, "compile")],
        3: [_edge(5), _edge(6, "export")],
        4: [_edge(7, "compile"), _edge(1)],
        5: [_edge(7), _edge(8, "compile")],
        6: [_edge(8)],
        7: [_edge(9, "export")],
        8: [_edge(9), _edge(3)],
        9: [_edge(9, "compile")],
    }

    expected = nx.single_source_shortest_path_length(to_networkx(graph), 1)

    assert find_depth_map(graph, 1) == dict(expected)
