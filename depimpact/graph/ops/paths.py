"""Shortest dependency paths between two units.

Two policies share one breadth-first search:

* unrestricted: every edge may be followed;
* compile-gated: the first hop out of the source must be a compile edge.

The gated search does not record the source at depth 0, so a compile
self-loop (or a cycle back to the source) yields a path through it. The
unrestricted search records the source eagerly and never does; the asymmetry
is intentional since self paths only mean something for compile chains.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from depimpact.graph.models.schema import EdgeType, UnitId
from depimpact.graph.ops.traversal import (
    Adjacency,
    FrontierEntry,
    GraphLike,
    as_adjacency,
    walk_frontiers,
)

logger = logging.getLogger("depimpact.graph.ops.paths")


@dataclass(frozen=True)
class PathRecord:
    """Shortest known distance to ``node`` and its predecessor."""

    depth: int
    node: UnitId
    parent: Optional[UnitId]


def _collect_records(
    graph: Adjacency, source_id: UnitId, *, compile_gated: bool
) -> Dict[UnitId, PathRecord]:
    records: Dict[UnitId, PathRecord] = {}

    def visit(entry: FrontierEntry) -> bool:
        known = records.get(entry.node)
        if known is not None:
            # Duplicates of a finalized unit only matter if strictly closer.
            if entry.depth < known.depth:
                records[entry.node] = PathRecord(entry.depth, entry.node, entry.parent)
                return True
            return False
        if compile_gated and entry.depth == 0:
            return True
        records[entry.node] = PathRecord(entry.depth, entry.node, entry.parent)
        return True

    def admit(target: UnitId) -> bool:
        return target not in records

    def first_hop_compile(entry: FrontierEntry, raw_type: Any) -> bool:
        if entry.depth > 0:
            return True
        return EdgeType.parse(raw_type) is EdgeType.COMPILE

    walk_frontiers(
        graph,
        source_id,
        visit=visit,
        admit=admit,
        edge_filter=first_hop_compile if compile_gated else None,
    )
    return records


def reconstruct_path(
    records: Dict[UnitId, PathRecord], target_id: UnitId
) -> Optional[List[UnitId]]:
    """Walk parent pointers back from ``target_id``.

    The walk continues while recorded depth strictly decreases and stops at a
    unit without a parent or without a record.

    Returns:
        Optional[List[UnitId]]: Units from source to target, or None when the
        target was never reached.
    """
    record = records.get(target_id)
    if record is None:
        return None

    path = [target_id]
    depth = record.depth + 1
    while record is not None and record.depth < depth:
        if record.parent is None:
            break
        path.append(record.parent)
        depth = record.depth
        record = records.get(record.parent)

    path.reverse()
    return path


def find_shortest_path(
    graph: GraphLike, source_id: UnitId, target_id: UnitId
) -> Optional[List[UnitId]]:
    """Return the shortest path from ``source_id`` to ``target_id``.

    Args:
        graph: Adjacency mapping or networkx graph.
        source_id: Start unit.
        target_id: Destination unit.

    Returns:
        Optional[List[UnitId]]: Path including both ends, or None if the
        target is unreachable.
    """
    records = _collect_records(as_adjacency(graph), source_id, compile_gated=False)
    path = reconstruct_path(records, target_id)
    logger.debug("Shortest path %s -> %s: %s", source_id, target_id, path)
    return path


def find_compile_gated_shortest_path(
    graph: GraphLike, source_id: UnitId, target_id: UnitId
) -> Optional[List[UnitId]]:
    """Return the shortest path whose first hop is a compile edge.

    Only the first hop is restricted; later hops follow any edge type.

    Raises:
        UnrecognizedEdgeTypeError: A source edge has an unknown type.
    """
    records = _collect_records(as_adjacency(graph), source_id, compile_gated=True)
    path = reconstruct_path(records, target_id)
    logger.debug("Compile-gated path %s -> %s: %s", source_id, target_id, path)
    return path
