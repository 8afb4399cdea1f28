"""eulerpath: Eulerian paths in directed multigraphs.

eulerpath decides whether a directed multigraph (parallel edges and
self-loops allowed) has a trail using every edge exactly once, and builds one
with an iterative Hierholzer traversal in ``O(n + m)``.

Primary API:
    AdjacencyGraph - Immutable graph over node indices 0..n-1
    find_eulerian_path() - Return a trail or the NO_PATH sentinel
    analyze() - Return an EulerianPathReport with kind, endpoints and reason
    EulerianPathFinder - Re-entrant query object bound to one graph
    verify_trail() - Check a trail against a graph's edge multiset
    from_networkx() - Convert a directed NetworkX graph to AdjacencyGraph

Example:
    from eulerpath import AdjacencyGraph, NO_PATH, find_eulerian_path

    graph = AdjacencyGraph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
    trail = find_eulerian_path(graph)   # [0, 1, 2, 0]

    if find_eulerian_path([[1, 1], []]) is NO_PATH:
        ...
"""

from __future__ import annotations

from eulerpath import cli, logging
from eulerpath._version import __version__
from eulerpath.algorithms.eulerian import (
    EulerianPathFinder,
    analyze,
    find_eulerian_path,
)
from eulerpath.algorithms.types import (
    NO_PATH,
    EulerianPathReport,
    NoPath,
    PathKind,
    Trail,
)
from eulerpath.config import EulerianPathConfig
from eulerpath.errors import EulerPathError, MalformedGraphError, TrailInvariantError
from eulerpath.graph.adjacency import AdjacencyGraph
from eulerpath.graph.convert import NodeMap, from_networkx, to_networkx
from eulerpath.io import graph_from_dict, load_graph_file, load_graph_yaml
from eulerpath.validation import verify_trail

__all__ = [
    # Version
    "__version__",
    # Model
    "AdjacencyGraph",
    # Queries
    "find_eulerian_path",
    "analyze",
    "EulerianPathFinder",
    "EulerianPathConfig",
    "verify_trail",
    # Results
    "NO_PATH",
    "NoPath",
    "PathKind",
    "Trail",
    "EulerianPathReport",
    # Errors
    "EulerPathError",
    "MalformedGraphError",
    "TrailInvariantError",
    # Documents
    "graph_from_dict",
    "load_graph_yaml",
    "load_graph_file",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
