"""Data models used by the graph package."""

from .schema import (
    DependencyKind,
    Edge,
    EdgeLike,
    EdgeSpec,
    EdgeType,
    GraphSpec,
    UnitId,
    UnrecognizedEdgeTypeError,
)

__all__ = [
    "DependencyKind",
    "Edge",
    "EdgeLike",
    "EdgeSpec",
    "EdgeType",
    "GraphSpec",
    "UnitId",
    "UnrecognizedEdgeTypeError",
]
