"""Compile-impact resolution.

Collects every unit that forces ``root_id`` to recompile: direct compile and
export dependencies, plus everything reachable through compile dependencies
(including their runtime edges). Export dependencies count for one hop only.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Set, Tuple

from depimpact.graph.models.schema import EdgeType, UnitId
from depimpact.graph.ops.traversal import GraphLike, as_adjacency, iter_edges

logger = logging.getLogger("depimpact.graph.ops.compile_impact")


def find_compile_impact(graph: GraphLike, root_id: UnitId) -> Set[UnitId]:
    """Return the compile-impact set of ``root_id`` (always including it).

    Args:
        graph: Adjacency mapping or networkx graph.
        root_id: Unit whose compile-time dependencies are collected.

    Returns:
        Set[UnitId]: Matched units.

    Raises:
        UnrecognizedEdgeTypeError: An expanded unit has an edge whose type is
            not compile, export or runtime.
    """
    adjacency = as_adjacency(graph)
    matched: Set[UnitId] = {root_id}

    # Explicit stack of (edge iterator, is_compile_dep) frames mirrors the
    # recursive descent without touching the interpreter recursion limit.
    stack: List[Tuple[Iterator, bool]] = [(iter_edges(adjacency, root_id), False)]

    while stack:
        edges, is_compile_dep = stack[-1]
        step = next(edges, None)
        if step is None:
            stack.pop()
            continue

        target, raw_type = step
        edge_type = EdgeType.parse(raw_type)

        if edge_type is EdgeType.COMPILE:
            if target not in matched:
                matched.add(target)
                stack.append((iter_edges(adjacency, target), True))
        elif edge_type is EdgeType.EXPORT:
            matched.add(target)
        elif is_compile_dep and target not in matched:
            matched.add(target)
            stack.append((iter_edges(adjacency, target), True))

    logger.debug("Compile impact of %s: %d unit(s)", root_id, len(matched))
    return matched
