"""Public graph API surface."""

from depimpact.graph.io import (
    GraphFormatError,
    from_networkx,
    load_graph,
    parse_graph,
    to_networkx,
)
from depimpact.graph.models import (
    DependencyKind,
    Edge,
    EdgeSpec,
    EdgeType,
    GraphSpec,
    UnrecognizedEdgeTypeError,
)
from depimpact.graph.ops import (
    GraphLike,
    PathRecord,
    find_compile_gated_shortest_path,
    find_compile_impact,
    find_depth_map,
    find_shortest_path,
    find_typed_closure,
    iter_units,
)

__all__ = [
    "DependencyKind",
    "Edge",
    "EdgeSpec",
    "EdgeType",
    "GraphFormatError",
    "GraphLike",
    "GraphSpec",
    "PathRecord",
    "UnrecognizedEdgeTypeError",
    "find_compile_gated_shortest_path",
    "find_compile_impact",
    "find_depth_map",
    "find_shortest_path",
    "find_typed_closure",
    "from_networkx",
    "iter_units",
    "load_graph",
    "parse_graph",
    "to_networkx",
]
