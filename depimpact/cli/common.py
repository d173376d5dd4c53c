"""Helpers shared by CLI commands: loading inputs and emitting results."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError
from rich.console import Console

from depimpact.config.schema import EngineConfig
from depimpact.export.json import dumps_result, export_json
from depimpact.graph.io import GraphFormatError, load_graph
from depimpact.graph.models.schema import Edge, UnrecognizedEdgeTypeError
from depimpact.runtime.config_loader import load_engine_config

logger = logging.getLogger("depimpact.cli.common")

# Failures reported at the command boundary as exit code 1.
COMMAND_ERRORS = (
    OSError,
    GraphFormatError,
    UnrecognizedEdgeTypeError,
    ValidationError,
    ValueError,
    TypeError,
)


def load_inputs(args) -> Tuple[Dict[str, List[Edge]], EngineConfig]:
    """Load the graph and configuration named by parsed arguments."""
    config = load_engine_config(getattr(args, "config", None))
    graph = load_graph(args.graph)
    return graph, config


def emit_result(result: Any, args, config: EngineConfig) -> None:
    """Write ``result`` to ``args.output`` or print it to stdout."""
    output = getattr(args, "output", None)
    if output:
        export_json(
            result,
            output,
            indent=config.output.indent,
            sort_keys=config.output.sort_keys,
        )
        return

    text = dumps_result(
        result, indent=config.output.indent, sort_keys=config.output.sort_keys
    )
    # Unit ids are printed verbatim: no wrapping, markup or emoji codes.
    Console().print(text, soft_wrap=True, markup=False, highlight=False, emoji=False)
