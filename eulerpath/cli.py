"""Command-line interface for eulerpath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from eulerpath.algorithms.eulerian import analyze
from eulerpath.algorithms.types import EulerianPathReport
from eulerpath.config import EulerianPathConfig
from eulerpath.errors import EulerPathError
from eulerpath.io import load_graph_file, result_to_dict
from eulerpath.logging import get_logger, set_global_log_level

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def _format_trail(trail: List[int]) -> str:
    return " ".join(str(node) for node in trail)


def _print_check(report: EulerianPathReport) -> None:
    print(f"Nodes: {report.num_nodes}")
    print(f"Edges: {report.num_edges}")
    print(f"Kind:  {report.kind.name.lower()}")
    if report.has_path:
        if report.num_edges:
            print(f"Start: {report.start}")
            print(f"End:   {report.end}")
    else:
        print(f"Reason: {report.reason}")


def _run(path: Path, command: str, as_json: bool, verify: bool) -> int:
    """Load a graph document, run the query and print the outcome.

    Args:
        path: Graph document (YAML or JSON).
        command: ``find`` prints the trail, ``check`` prints the analysis.
        as_json: Print a JSON object instead of plain text.
        verify: Re-check the trail against the edge multiset.

    Returns:
        Process exit code.
    """
    try:
        graph = load_graph_file(path)
        report = analyze(graph, EulerianPathConfig(verify_edges=verify))
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        return EXIT_INVALID
    except OSError as e:
        logger.error(f"Cannot read graph file {path}: {e}")
        return EXIT_INVALID
    except EulerPathError as e:
        logger.error(f"Failed to analyze graph: {type(e).__name__}: {e}")
        return EXIT_INVALID

    if as_json:
        payload = result_to_dict(report)
        if command == "check":
            payload.pop("trail")
        print(json.dumps(payload, indent=2))
    elif command == "check":
        _print_check(report)
    elif report.trail is not None:
        print(_format_trail(report.trail))
    else:
        print("no eulerian path")
        logger.debug(f"No Eulerian path: {report.reason}")

    return EXIT_OK if report.has_path else EXIT_NO_PATH


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``eulerpath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="eulerpath",
        description="Find Eulerian paths in directed multigraphs.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{find,check}",
        help="Available commands",
    )

    find_parser = subparsers.add_parser(
        "find", help="Print an Eulerian path of a graph"
    )
    find_parser.add_argument(
        "--verify",
        action="store_true",
        help="Re-check the trail against the graph's edge multiset",
    )
    check_parser = subparsers.add_parser(
        "check", help="Report whether a graph has an Eulerian path and why"
    )
    for p in (find_parser, check_parser):
        p.add_argument("graph", type=Path, help="Path to graph YAML or JSON")
        p.add_argument(
            "--json", action="store_true", help="Print the result as JSON"
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    code = _run(
        path=args.graph,
        command=args.command,
        as_json=args.json,
        verify=getattr(args, "verify", False),
    )
    if code != EXIT_OK:
        sys.exit(code)


if __name__ == "__main__":
    main()
