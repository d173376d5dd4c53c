"""Tests for compile-impact resolution."""

import networkx as nx
import pytest

from depimpact.graph.models.schema import Edge, EdgeType, UnrecognizedEdgeTypeError
from depimpact.graph.ops import find_compile_impact


def _edge(target: str, edge_type: str) -> dict:
    return {"id": target, "type": edge_type}


def test_compile_then_runtime_chain_is_inherited() -> None:
    """Runtime edges reached inside a compile dependency propagate."""
    graph = {
        "A": [_edge("B", "compile")],
        "B": [_edge("C", "runtime")],
        "C": [],
    }

    assert find_compile_impact(graph, "A") == {"A", "B", "C"}


def test_root_is_always_included() -> None:
    assert find_compile_impact({}, "missing") == {"missing"}
    assert find_compile_impact({"A": []}, "A") == {"A"}


def test_export_dependency_counts_for_one_hop_only() -> None:
    graph = {
        "A": [_edge("B", "export")],
        "B": [_edge("C", "compile")],
    }

    assert find_compile_impact(graph, "A") == {"A", "B"}


def test_runtime_edge_from_root_is_ignored() -> None:
    graph = {
        "A": [_edge("B", "runtime")],
        "B": [_edge("C", "compile")],
    }

    assert find_compile_impact(graph, "A") == {"A"}


def test_runtime_edges_propagate_transitively_inside_compile_chain() -> None:
    graph = {
        "A": [_edge("B", "compile")],
        "B": [_edge("C", "runtime")],
        "C": [_edge("D", "runtime"), _edge("E", "export")],
        "E": [_edge("F", "compile")],
    }

    # E is an export of C: matched, but its own dependencies are not followed.
    assert find_compile_impact(graph, "A") == {"A", "B", "C", "D", "E"}


def test_cycles_terminate() -> None:
    graph = {
        "A": [_edge("B", "compile")],
        "B": [_edge("C", "compile")],
        "C": [_edge("A", "compile"), _edge("C", "runtime")],
    }

    assert find_compile_impact(graph, "A") == {"A", "B", "C"}


def test_export_match_is_not_expanded_again_via_compile_path() -> None:
    """First match wins: a unit matched as an export is never expanded."""
    graph = {
        "A": [_edge("X", "export"), _edge("B", "compile")],
        "B": [_edge("X", "compile")],
        "X": [_edge("Y", "compile")],
    }

    assert find_compile_impact(graph, "A") == {"A", "B", "X"}


def test_unrecognized_edge_type_is_fatal() -> None:
    graph = {"A": [_edge("B", "compile")], "B": [_edge("C", "link")]}

    with pytest.raises(UnrecognizedEdgeTypeError) as excinfo:
        find_compile_impact(graph, "A")

    assert excinfo.value.edge_type == "link"
    assert "link" in str(excinfo.value)


def test_accepts_edge_objects_and_networkx_graphs() -> None:
    graph = {
        "A": [Edge("B", EdgeType.COMPILE)],
        "B": [Edge("C", EdgeType.RUNTIME)],
    }
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_edge("A", "B", type="compile")
    nx_graph.add_edge("B", "C", kind="runtime")

    assert find_compile_impact(graph, "A") == {"A", "B", "C"}
    assert find_compile_impact(nx_graph, "A") == {"A", "B", "C"}


def test_long_chains_do_not_hit_recursion_limit() -> None:
    size = 5000
    graph = {index: [{"id": index + 1, "type": "compile"}] for index in range(size)}

    impact = find_compile_impact(graph, 0)

    assert len(impact) == size + 1


def test_graph_is_not_mutated_and_result_is_deterministic() -> None:
    graph = {
        "A": [_edge("B", "compile"), _edge("D", "export")],
        "B": [_edge("C", "runtime")],
    }
    snapshot = {key: [dict(edge) for edge in edges] for key, edges in graph.items()}

    first = find_compile_impact(graph, "A")
    second = find_compile_impact(graph, "A")

    assert first == second
    assert graph == snapshot
