"""Recompile map command implementation."""

import logging

from depimpact.analysis.recompile import RecompileAnalyzer
from depimpact.cli.common import COMMAND_ERRORS, emit_result, load_inputs
from depimpact.config.schema import AnalysisConfig

logger = logging.getLogger("depimpact.cli.recompile")


def recompile_map_command(args) -> int:
    """Execute the recompile map command.

    Args:
        args: Parsed command-line arguments containing:
            - graph: Graph JSON file
            - roots: Optional root ids (all units when omitted)
            - kinds: Annotate dependents with their dependency kind
            - workers: Optional worker count overriding the configuration
            - output: Optional output file

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    try:
        graph, config = load_inputs(args)

        analysis_config = config.analysis
        workers = getattr(args, "workers", None)
        if workers is not None:
            analysis_config = AnalysisConfig(max_workers=workers)

        analyzer = RecompileAnalyzer(graph, analysis_config)
        roots = getattr(args, "roots", None) or None
        if getattr(args, "kinds", False):
            result = analyzer.analyze_kinds(roots)
        else:
            result = analyzer.analyze(roots)

        emit_result(result, args, config)
        return 0
    except COMMAND_ERRORS as e:
        logger.error("recompile-map command failed: %s", e)
        return 1
