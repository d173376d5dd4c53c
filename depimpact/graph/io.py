"""Graph loading and networkx conversion.

Two document shapes are accepted:

* adjacency: ``{"a.js": [{"id": "b.js", "type": "compile"}], ...}``
* node-link, as written by ``networkx.node_link_data``: a mapping with
  ``nodes`` and ``edges`` (or ``links``) lists whose edges carry a ``type``
  (or ``kind``) attribute.

Identifiers read from documents are strings, matching JSON object keys.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Union

import networkx as nx
from networkx.exception import NetworkXError
from networkx.readwrite import node_link_graph
from pydantic import ValidationError

from depimpact.graph.models.schema import Edge, EdgeType, GraphSpec, UnitId

logger = logging.getLogger("depimpact.graph.io")


class GraphFormatError(ValueError):
    """Raised when a graph document cannot be interpreted."""


def _is_node_link(data: Mapping) -> bool:
    """Tell a node-link document from an adjacency document.

    Adjacency documents may name units ``nodes`` and ``edges``; their entries
    are ``{"id", "type"}`` edges rather than ``source``/``target`` links.
    """
    nodes = data.get("nodes")
    edges = data["edges"] if "edges" in data else data.get("links")
    if not isinstance(nodes, list) or not isinstance(edges, list):
        return False
    if not all(
        isinstance(edge, Mapping) and "source" in edge and "target" in edge
        for edge in edges
    ):
        return False
    if edges or isinstance(data.get("directed"), bool):
        return True
    # No links to inspect: node entries carrying an edge type are adjacency edges.
    return not any(isinstance(node, Mapping) and "type" in node for node in nodes)


def from_networkx(graph: nx.DiGraph) -> Dict[UnitId, List[Edge]]:
    """Convert a networkx graph to an adjacency mapping.

    Each edge must carry a ``type`` (or ``kind``) attribute. Outgoing edge
    order follows networkx insertion order; every node gets an entry.

    Raises:
        UnrecognizedEdgeTypeError: An edge type is missing or unknown.
    """
    adjacency: Dict[UnitId, List[Edge]] = {}
    for node in graph.nodes:
        edges = []
        for _, target, attrs in graph.out_edges(node, data=True):
            raw_type = attrs.get("type", attrs.get("kind"))
            edges.append(Edge(id=target, type=EdgeType.parse(raw_type)))
        adjacency[node] = edges
    return adjacency


def to_networkx(graph: Mapping) -> nx.MultiDiGraph:
    """Convert an adjacency mapping to a MultiDiGraph with ``type`` edge attrs."""
    # Imported here: the ops package depends on this module for conversion.
    from depimpact.graph.ops.traversal import iter_edges, iter_units

    nx_graph = nx.MultiDiGraph()
    for unit_id in iter_units(graph):
        nx_graph.add_node(unit_id)
    for unit_id in graph:
        for target, raw_type in iter_edges(graph, unit_id):
            nx_graph.add_edge(unit_id, target, type=EdgeType.parse(raw_type).value)
    return nx_graph


def parse_graph(data: Any) -> Dict[UnitId, List[Edge]]:
    """Validate a decoded graph document into an adjacency mapping.

    Args:
        data: Decoded JSON (adjacency or node-link document).

    Returns:
        Dict[UnitId, List[Edge]]: Adjacency mapping with string ids.

    Raises:
        GraphFormatError: The document is structurally invalid.
        UnrecognizedEdgeTypeError: An edge has an unknown type.
    """
    if not isinstance(data, Mapping):
        raise GraphFormatError(
            f"Graph document must be a JSON object, got {type(data).__name__}"
        )

    if _is_node_link(data):
        edges_key = "edges" if "edges" in data else "links"
        try:
            nx_graph = node_link_graph(
                dict(data), directed=True, multigraph=True, edges=edges_key
            )
        except (NetworkXError, KeyError, TypeError) as exc:
            raise GraphFormatError(f"Invalid node-link graph: {exc}") from exc
        if not nx_graph.is_directed():
            raise GraphFormatError("Dependency graphs must be directed")
        nx_graph = nx.relabel_nodes(nx_graph, str, copy=True)
        adjacency = from_networkx(nx_graph)
        logger.debug("Loaded node-link graph with %d units", len(adjacency))
        return adjacency

    try:
        spec = GraphSpec.model_validate(dict(data))
    except ValidationError as exc:
        raise GraphFormatError(f"Invalid adjacency graph: {exc}") from exc
    return spec.to_adjacency()


def load_graph(path: Union[str, Path]) -> Dict[UnitId, List[Edge]]:
    """Read and validate a graph JSON file.

    Raises:
        GraphFormatError: The file is not valid JSON or not a graph.
        UnrecognizedEdgeTypeError: An edge has an unknown type.
    """
    graph_path = Path(path)
    logger.info("Loading graph: %s", graph_path)
    try:
        with open(graph_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{graph_path} is not valid JSON: {exc}") from exc

    adjacency = parse_graph(data)
    logger.info("Loaded %d unit(s) from %s", len(adjacency), graph_path)
    return adjacency


__all__ = [
    "GraphFormatError",
    "from_networkx",
    "load_graph",
    "parse_graph",
    "to_networkx",
]
