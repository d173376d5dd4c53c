"""Shared traversal primitives for the dependency graph engine.

Breadth-first operations (depth map, both path finders) run on a single
two-frontier routine: the current frontier is drained in depth order while
newly discovered units accumulate in the next frontier, and the two swap when
the current one is exhausted. Call sites differ only in what they record and
which edges they follow.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

import networkx as nx

from depimpact.graph.models.schema import EdgeLike, UnitId

# Adjacency mappings are the native form; networkx graphs are converted once
# per call so callers holding an nx graph need no extra step.
GraphLike = Union[Mapping, nx.DiGraph, nx.MultiDiGraph]
Adjacency = Mapping[UnitId, Sequence[EdgeLike]]


@dataclass(frozen=True)
class FrontierEntry:
    """A unit popped from the frontier.

    Attributes:
        depth: Hop count from the traversal source.
        node: Unit identifier.
        parent: Unit this entry was discovered from; None for the source.
    """

    depth: int
    node: UnitId
    parent: Optional[UnitId] = None


VisitCallback = Callable[[FrontierEntry], bool]
AdmitCallback = Callable[[UnitId], bool]
EdgeFilter = Callable[[FrontierEntry, Any], bool]


def as_adjacency(graph: GraphLike) -> Adjacency:
    """Return ``graph`` as an adjacency mapping."""
    if isinstance(graph, nx.DiGraph):
        from depimpact.graph.io import from_networkx

        return from_networkx(graph)
    return graph


def _edge_parts(edge: EdgeLike) -> Tuple[UnitId, Any]:
    if isinstance(edge, Mapping):
        return edge["id"], edge.get("type")
    return edge.id, edge.type


def iter_edges(graph: Adjacency, unit_id: UnitId) -> Iterator[Tuple[UnitId, Any]]:
    """Yield ``(target, raw_type)`` for each outgoing edge of ``unit_id``.

    Units absent from the mapping are leaves.
    """
    for edge in graph.get(unit_id) or ():
        yield _edge_parts(edge)


def iter_units(graph: Adjacency) -> Iterator[UnitId]:
    """Yield every unit mentioned in ``graph`` once, in first-seen order."""
    seen = set()
    for unit_id in graph:
        if unit_id not in seen:
            seen.add(unit_id)
            yield unit_id
        for target, _ in iter_edges(graph, unit_id):
            if target not in seen:
                seen.add(target)
                yield target


def walk_frontiers(
    graph: Adjacency,
    source_id: UnitId,
    *,
    visit: VisitCallback,
    admit: AdmitCallback,
    edge_filter: Optional[EdgeFilter] = None,
) -> None:
    """Breadth-first walk from ``source_id`` using alternating frontiers.

    Frontiers are heaps keyed by ``(depth, discovery sequence)`` so entries
    leave in depth order and, within a depth, in the order they were found.

    Args:
        graph: Adjacency mapping.
        source_id: Start unit, visited at depth 0.
        visit: Called for every popped entry; returns whether to expand it.
        admit: Called for every discovered child; returns whether to enqueue it.
        edge_filter: Optional ``(entry, raw_type) -> bool`` restricting which
            outgoing edges are followed.
    """
    sequence = itertools.count()
    source = FrontierEntry(depth=0, node=source_id)
    current: List[Tuple[int, int, FrontierEntry]] = [(0, next(sequence), source)]
    upcoming: List[Tuple[int, int, FrontierEntry]] = []

    while current:
        _, _, entry = heapq.heappop(current)

        if visit(entry):
            for target, edge_type in iter_edges(graph, entry.node):
                if edge_filter is not None and not edge_filter(entry, edge_type):
                    continue
                if admit(target):
                    child = FrontierEntry(
                        depth=entry.depth + 1, node=target, parent=entry.node
                    )
                    heapq.heappush(upcoming, (child.depth, next(sequence), child))

        if not current:
            current, upcoming = upcoming, []


__all__ = [
    "Adjacency",
    "FrontierEntry",
    "GraphLike",
    "as_adjacency",
    "iter_edges",
    "iter_units",
    "walk_frontiers",
]
