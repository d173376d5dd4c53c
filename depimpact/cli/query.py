"""Single-root query commands: impact, closure, depth and path."""

import logging

from depimpact.cli.common import COMMAND_ERRORS, emit_result, load_inputs
from depimpact.graph.ops import (
    find_compile_gated_shortest_path,
    find_compile_impact,
    find_depth_map,
    find_shortest_path,
    find_typed_closure,
)

logger = logging.getLogger("depimpact.cli.query")

_ROOT_RESOLVERS = {
    "impact": find_compile_impact,
    "closure": find_typed_closure,
    "depth": find_depth_map,
}


def root_query_command(args) -> int:
    """Execute a root-based query (impact, closure or depth).

    Args:
        args: Parsed command-line arguments containing:
            - command: One of impact / closure / depth
            - graph: Graph JSON file
            - root: Root unit id
            - output: Optional output file

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    resolver = _ROOT_RESOLVERS[args.command]
    try:
        graph, config = load_inputs(args)
        result = resolver(graph, args.root)
        logger.info("%s of %s: %d unit(s)", args.command, args.root, len(result))
        emit_result(result, args, config)
        return 0
    except COMMAND_ERRORS as e:
        logger.error("%s command failed: %s", args.command, e)
        return 1


def path_command(args) -> int:
    """Execute the shortest path query.

    Prints ``null`` and returns 1 when the target is unreachable.

    Args:
        args: Parsed command-line arguments containing:
            - graph: Graph JSON file
            - source / target: Unit ids
            - compile_only: Restrict the first hop to compile edges
            - output: Optional output file

    Returns:
        int: Exit code.
    """
    finder = find_compile_gated_shortest_path if args.compile_only else find_shortest_path
    try:
        graph, config = load_inputs(args)
        path = finder(graph, args.source, args.target)
        emit_result(path, args, config)
    except COMMAND_ERRORS as e:
        logger.error("path command failed: %s", e)
        return 1

    if path is None:
        logger.warning("No path from %s to %s", args.source, args.target)
        return 1

    logger.info("Path of %d hop(s) from %s to %s", len(path) - 1, args.source, args.target)
    return 0
