"""Canonical edge and dependency-kind models.

The analysis core accepts edges either as :class:`Edge` instances or as plain
``{"id": ..., "type": ...}`` mappings (the wire format produced by build
tooling). :class:`EdgeSpec` and :class:`GraphSpec` add a pydantic validation
layer for graphs loaded from documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, Hashable, List, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

logger = logging.getLogger("depimpact.graph.models.schema")

UnitId = Hashable


class UnrecognizedEdgeTypeError(ValueError):
    """Raised when an edge carries a type outside compile/export/runtime.

    The analysis never skips or guesses such edges; the whole call aborts.
    """

    def __init__(self, edge_type: Any) -> None:
        self.edge_type = edge_type
        super().__init__(f"Unhandled edge type {edge_type!r}")


class EdgeType(str, Enum):
    """Relationship carried by a dependency edge."""

    COMPILE = "compile"
    EXPORT = "export"
    RUNTIME = "runtime"

    @classmethod
    def parse(cls, value: Any) -> "EdgeType":
        """Return the EdgeType for ``value`` or raise UnrecognizedEdgeTypeError.

        Matching is exact; ``"Compile"`` is not ``"compile"``.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnrecognizedEdgeTypeError(value) from None


class DependencyKind(str, Enum):
    """Strongest relationship a unit has to a traversal root."""

    COMPILE = "compile"
    EXPORT = "export"
    RUNTIME = "runtime"


@dataclass(frozen=True)
class Edge:
    """Outgoing edge of a unit.

    Attributes:
        id: Target unit identifier.
        type: Edge type.
    """

    id: UnitId
    type: EdgeType


class EdgeSpec(BaseModel):
    """Structured representation of an edge read from a graph document.

    The type is kept as the raw string so that :meth:`to_edge` can raise
    :class:`UnrecognizedEdgeTypeError` instead of a generic validation error.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Annotated[str, Field(..., description="Target unit identifier")]
    type: Annotated[str, Field(..., description="compile / export / runtime")]

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # JSON object keys are always strings; keep edge targets comparable.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("id")
    @classmethod
    def _check_id_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("Edge target id must be a non-empty string")
        return value

    def to_edge(self) -> Edge:
        """Convert this spec into a core Edge, validating its type."""
        return Edge(id=self.id, type=EdgeType.parse(self.type))


class GraphSpec(RootModel[Dict[str, List[EdgeSpec]]]):
    """Adjacency document: unit id -> ordered outgoing edges."""

    def to_adjacency(self) -> Dict[str, List[Edge]]:
        """Convert to the adjacency mapping consumed by the analysis core."""
        adjacency: Dict[str, List[Edge]] = {}
        for unit_id, edges in self.root.items():
            adjacency[unit_id] = [spec.to_edge() for spec in edges]
        logger.debug("Validated graph document with %d units", len(adjacency))
        return adjacency


EdgeLike = Union[Edge, Dict[str, Any]]
