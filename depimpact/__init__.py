"""Depimpact: compile-impact and dependency-path analysis over typed graphs."""

from depimpact.graph import (
    DependencyKind,
    Edge,
    EdgeType,
    GraphFormatError,
    UnrecognizedEdgeTypeError,
    find_compile_gated_shortest_path,
    find_compile_impact,
    find_depth_map,
    find_shortest_path,
    find_typed_closure,
    load_graph,
    parse_graph,
)

__version__ = "0.1.0"

__all__ = [
    "DependencyKind",
    "Edge",
    "EdgeType",
    "GraphFormatError",
    "UnrecognizedEdgeTypeError",
    "find_compile_gated_shortest_path",
    "find_compile_impact",
    "find_depth_map",
    "find_shortest_path",
    "find_typed_closure",
    "load_graph",
    "parse_graph",
]
