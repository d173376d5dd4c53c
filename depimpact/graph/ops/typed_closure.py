"""Typed-closure resolution.

Every unit reachable from a root is annotated with the strongest relationship
it has to that root: compile beats export and runtime, and a unit classified
as a compile dependency is never downgraded. Two rules keep that true:

* Children are visited compile edges first, then export, then runtime, so a
  unit reachable both ways is first met on its compile path.
* A compile chain that leads back to the root re-expands the root once as a
  compile dependency; otherwise the root's own runtime dependencies would keep
  the weaker kind they got before the chain was discovered.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from depimpact.graph.models.schema import DependencyKind, EdgeType, UnitId
from depimpact.graph.ops.traversal import Adjacency, GraphLike, as_adjacency, iter_edges

logger = logging.getLogger("depimpact.graph.ops.typed_closure")


@dataclass
class _Frame:
    """Traversal state for one expanded unit."""

    children: Iterator[Tuple[UnitId, EdgeType]]
    top_level: bool
    is_compile_dep: bool
    self_visit_id: Optional[UnitId]


def bucket_children(
    graph: Adjacency, unit_id: UnitId
) -> List[Tuple[UnitId, EdgeType]]:
    """Return the outgoing edges of ``unit_id`` as compile, export, runtime.

    Insertion order is kept within each bucket.

    Raises:
        UnrecognizedEdgeTypeError: An edge type is not recognized.
    """
    buckets: Dict[EdgeType, List[Tuple[UnitId, EdgeType]]] = {
        EdgeType.COMPILE: [],
        EdgeType.EXPORT: [],
        EdgeType.RUNTIME: [],
    }
    for target, raw_type in iter_edges(graph, unit_id):
        edge_type = EdgeType.parse(raw_type)
        buckets[edge_type].append((target, edge_type))

    return (
        buckets[EdgeType.COMPILE]
        + buckets[EdgeType.EXPORT]
        + buckets[EdgeType.RUNTIME]
    )


def find_typed_closure(graph: GraphLike, root_id: UnitId) -> Dict[UnitId, DependencyKind]:
    """Classify every unit reachable from ``root_id``.

    Args:
        graph: Adjacency mapping or networkx graph.
        root_id: Traversal root; always classified as compile.

    Returns:
        Dict[UnitId, DependencyKind]: Kind per reachable unit.

    Raises:
        UnrecognizedEdgeTypeError: An expanded unit has an unknown edge type.
    """
    adjacency = as_adjacency(graph)
    matched: Dict[UnitId, DependencyKind] = {root_id: DependencyKind.COMPILE}

    def descend(unit_id: UnitId, is_compile_dep: bool, self_visit_id: Optional[UnitId]) -> _Frame:
        return _Frame(
            children=iter(bucket_children(adjacency, unit_id)),
            top_level=False,
            is_compile_dep=is_compile_dep,
            self_visit_id=self_visit_id,
        )

    stack: List[_Frame] = [
        _Frame(
            children=iter(bucket_children(adjacency, root_id)),
            top_level=True,
            is_compile_dep=False,
            self_visit_id=root_id,
        )
    ]

    while stack:
        frame = stack[-1]
        step = next(frame.children, None)
        if step is None:
            stack.pop()
            continue

        target, edge_type = step

        # A direct compile edge from the root enters a compile chain just like
        # an edge inside one, so it may trigger the root's re-expansion too.
        entering_as_compile = frame.is_compile_dep or (
            frame.top_level and edge_type is EdgeType.COMPILE
        )
        needs_self_visit = entering_as_compile and frame.self_visit_id == target

        if target in matched and not needs_self_visit:
            continue
        if needs_self_visit:
            frame.self_visit_id = None

        if frame.is_compile_dep:
            matched[target] = DependencyKind.COMPILE
            stack.append(descend(target, True, frame.self_visit_id))
            continue

        if edge_type is EdgeType.COMPILE:
            if frame.top_level:
                matched[target] = DependencyKind.COMPILE
                stack.append(descend(target, True, frame.self_visit_id))
            else:
                matched[target] = DependencyKind.RUNTIME
                stack.append(descend(target, False, None))
        elif edge_type is EdgeType.EXPORT:
            matched[target] = (
                DependencyKind.EXPORT if frame.top_level else DependencyKind.RUNTIME
            )
            stack.append(descend(target, False, None))
        else:
            matched[target] = DependencyKind.RUNTIME
            stack.append(descend(target, False, None))

    logger.debug("Typed closure of %s: %d unit(s)", root_id, len(matched))
    return matched
