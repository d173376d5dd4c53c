"""Breadth-first depth mapping, ignoring edge types."""

from __future__ import annotations

import logging
from typing import Dict, Set

from depimpact.graph.models.schema import UnitId
from depimpact.graph.ops.traversal import FrontierEntry, GraphLike, as_adjacency, walk_frontiers

logger = logging.getLogger("depimpact.graph.ops.depth_map")


def find_depth_map(graph: GraphLike, root_id: UnitId) -> Dict[UnitId, int]:
    """Return the hop count from ``root_id`` to every reachable unit.

    Args:
        graph: Adjacency mapping or networkx graph.
        root_id: Traversal root (depth 0).

    Returns:
        Dict[UnitId, int]: Minimum depth per reachable unit.
    """
    adjacency = as_adjacency(graph)
    depths: Dict[UnitId, int] = {}
    discovered: Set[UnitId] = {root_id}

    def visit(entry: FrontierEntry) -> bool:
        depths[entry.node] = entry.depth
        return True

    def admit(target: UnitId) -> bool:
        if target in discovered:
            return False
        discovered.add(target)
        return True

    walk_frontiers(adjacency, root_id, visit=visit, admit=admit)

    logger.debug("Depth map of %s: %d unit(s)", root_id, len(depths))
    return depths
