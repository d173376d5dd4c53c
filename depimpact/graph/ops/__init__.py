"""Analysis operations over dependency graph snapshots."""

from .compile_impact import find_compile_impact
from .depth_map import find_depth_map
from .paths import PathRecord, find_compile_gated_shortest_path, find_shortest_path
from .traversal import FrontierEntry, GraphLike, iter_edges, iter_units, walk_frontiers
from .typed_closure import find_typed_closure

__all__ = [
    "FrontierEntry",
    "GraphLike",
    "PathRecord",
    "find_compile_gated_shortest_path",
    "find_compile_impact",
    "find_depth_map",
    "find_shortest_path",
    "find_typed_closure",
    "iter_edges",
    "iter_units",
    "walk_frontiers",
]
