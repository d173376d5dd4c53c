"""Main CLI entry point for depimpact.

Provides commands: impact, closure, depth, path, recompile-map
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from depimpact.cli.query import path_command, root_query_command
from depimpact.cli.recompile import recompile_map_command

logger = logging.getLogger("depimpact.cli")


def setup_logging(
    verbose: bool = False,
    console: Optional[Console] = None,
    log_file: Optional[str] = None,
) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
        log_file: Also write log records to this file (optional).
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handlers = [handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def _add_output_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o",
        "--output",
        help="Write the JSON result to this file instead of stdout",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="Depimpact - Compile Impact and Dependency Path Analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional engine configuration. Can be a path to a TOML/JSON file "
            "or an inline TOML/JSON string. Built-in defaults are used when omitted."
        ),
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    impact_parser = subparsers.add_parser(
        "impact",
        help="Units that force ROOT to recompile when they change",
    )
    closure_parser = subparsers.add_parser(
        "closure",
        help="Every unit reachable from ROOT with its strongest dependency kind",
    )
    depth_parser = subparsers.add_parser(
        "depth",
        help="Breadth-first hop count from ROOT to every reachable unit",
    )
    for sub in (impact_parser, closure_parser, depth_parser):
        sub.add_argument("graph", help="Graph JSON file (adjacency or node-link)")
        sub.add_argument("root", help="Root unit id")
        _add_output_argument(sub)

    path_parser = subparsers.add_parser(
        "path",
        help="Shortest dependency path between two units",
    )
    path_parser.add_argument("graph", help="Graph JSON file (adjacency or node-link)")
    path_parser.add_argument("source", help="Source unit id")
    path_parser.add_argument("target", help="Target unit id")
    path_parser.add_argument(
        "--compile-only",
        action="store_true",
        help="Require the first hop out of SOURCE to be a compile edge",
    )
    _add_output_argument(path_parser)

    recompile_parser = subparsers.add_parser(
        "recompile-map",
        help="Map every unit to the roots it forces to recompile",
    )
    recompile_parser.add_argument("graph", help="Graph JSON file (adjacency or node-link)")
    recompile_parser.add_argument(
        "-r",
        "--root",
        dest="roots",
        action="append",
        help="Root unit id (repeatable; defaults to every unit in the graph)",
    )
    recompile_parser.add_argument(
        "--kinds",
        action="store_true",
        help="Annotate each dependent root with its dependency kind",
    )
    recompile_parser.add_argument(
        "-w",
        "--workers",
        type=int,
        help="Worker threads (overrides analysis.max_workers)",
    )
    _add_output_argument(recompile_parser)

    return parser


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args()

    try:
        setup_logging(args.verbose, log_file=args.log_file)
    except OSError as e:
        logger.error("Cannot open log file %s: %s", args.log_file, e)
        return 1

    if args.command in ("impact", "closure", "depth"):
        return root_query_command(args)
    elif args.command == "path":
        return path_command(args)
    elif args.command == "recompile-map":
        return recompile_map_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
