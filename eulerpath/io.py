"""Graph documents: YAML/JSON loading with schema validation, dict export.

Documents describe a graph either as adjacency lists or as an edge list::

    nodes: 3
    adjacency:
      0: [1]
      1: [2]
      2: [0]

    # or
    edges: [[0, 1], [1, 2], [2, 0]]

JSON is a subset of YAML, so the same loader reads both.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from numbers import Integral
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from eulerpath.algorithms.types import EulerianPathReport
from eulerpath.errors import MalformedGraphError
from eulerpath.graph.adjacency import AdjacencyGraph
from eulerpath.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def graph_schema() -> Dict[str, Any]:
    """Return the packaged graph document schema."""
    with (
        resources.files("eulerpath.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _node_key(key: Any) -> int:
    """Return the node index named by an adjacency mapping key.

    JSON object keys are strings; YAML keeps integer keys as ints. Anything
    else (null, floats, booleans) is rejected instead of coerced.
    """
    if isinstance(key, Integral) and not isinstance(key, bool):
        return int(key)
    if isinstance(key, str) and key.isascii() and key.isdigit():
        return int(key)
    raise MalformedGraphError(f"Adjacency key must be a node index, got {key!r}.")


def graph_from_dict(data: Any) -> AdjacencyGraph:
    """Build an AdjacencyGraph from a parsed graph document.

    Args:
        data: Mapping with ``adjacency`` or ``edges`` and an optional ``nodes``
            count.

    Returns:
        AdjacencyGraph described by the document.

    Raises:
        MalformedGraphError: If the document does not match the schema or
            references nodes outside ``[0, nodes)``.
    """
    if not isinstance(data, dict):
        raise MalformedGraphError(
            "A graph document must map to a dictionary at top-level."
        )
    try:
        jsonschema.validate(data, graph_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise MalformedGraphError(
            f"Invalid graph document at {location}: {exc.message}"
        ) from exc

    num_nodes = data.get("nodes")

    if "edges" in data:
        edges = [(int(u), int(v)) for u, v in data["edges"]]
        if num_nodes is None:
            num_nodes = max((max(u, v) for u, v in edges), default=-1) + 1
        return AdjacencyGraph.from_edges(num_nodes, edges)

    adjacency = data["adjacency"]
    if isinstance(adjacency, dict):
        rows = {_node_key(key): targets for key, targets in adjacency.items()}
        if num_nodes is None:
            referenced = [key for key in rows]
            referenced.extend(t for targets in rows.values() for t in targets)
            num_nodes = max(referenced, default=-1) + 1
        return AdjacencyGraph.from_mapping(rows, num_nodes=num_nodes)

    return AdjacencyGraph(adjacency, num_nodes=num_nodes)


def load_graph_yaml(text: str) -> AdjacencyGraph:
    """Parse a YAML or JSON graph document.

    Raises:
        MalformedGraphError: If the text is not valid YAML or not a valid
            graph document.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedGraphError(f"Graph document is not valid YAML: {exc}") from exc
    return graph_from_dict(data)


def load_graph_file(path: Union[str, Path]) -> AdjacencyGraph:
    """Read and parse a graph document from ``path``.

    Raises:
        OSError: If the file cannot be read.
        MalformedGraphError: If the file is not UTF-8 text or not a valid
            graph document.
    """
    path = Path(path)
    logger.debug(f"Loading graph from: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedGraphError(
            f"Graph file {path} is not valid UTF-8: {exc}"
        ) from exc
    graph = load_graph_yaml(text)
    logger.debug(
        f"Loaded graph with {graph.num_nodes} nodes and {graph.num_edges} edges"
    )
    return graph


def graph_to_dict(graph: AdjacencyGraph) -> Dict[str, Any]:
    """Return a JSON-ready document that ``graph_from_dict`` reads back."""
    return {"nodes": graph.num_nodes, "adjacency": graph.to_lists()}


def result_to_dict(report: EulerianPathReport) -> Dict[str, Any]:
    """Return a JSON-ready dictionary describing an Eulerian path report."""
    return {
        "kind": report.kind.name.lower(),
        "has_path": report.has_path,
        "nodes": report.num_nodes,
        "edges": report.num_edges,
        "start": report.start,
        "end": report.end,
        "trail": report.trail,
        "reason": report.reason or None,
    }
