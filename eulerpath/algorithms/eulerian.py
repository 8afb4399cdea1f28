"""Eulerian path queries for directed multigraphs.

Runs the degree and connectivity gates, builds the trail with Hierholzer's
algorithm and checks that every edge was consumed before returning it.

Example:
    >>> from eulerpath import AdjacencyGraph, find_eulerian_path
    >>> graph = AdjacencyGraph([[1], [2, 0], [1]])
    >>> find_eulerian_path(graph)
    [0, 1, 2, 1, 0]
"""

from __future__ import annotations

from typing import Optional, Union

from eulerpath.algorithms.connectivity import unreached_nodes
from eulerpath.algorithms.degree import classify_degrees, compute_degrees
from eulerpath.algorithms.hierholzer import build_trail
from eulerpath.algorithms.types import (
    NO_PATH,
    EulerianPathReport,
    NoPath,
    PathKind,
    Trail,
)
from eulerpath.config import DEFAULT_CONFIG, EulerianPathConfig
from eulerpath.errors import TrailInvariantError
from eulerpath.graph.adjacency import AdjacencyGraph, AdjacencyInput
from eulerpath.logging import get_logger
from eulerpath.validation import trail_problems

logger = get_logger(__name__)

GraphLike = Union[AdjacencyGraph, AdjacencyInput]


def _as_graph(graph: Optional[GraphLike]) -> AdjacencyGraph:
    if isinstance(graph, AdjacencyGraph):
        return graph
    return AdjacencyGraph(graph)


def _check_trail(
    graph: AdjacencyGraph, trail: Trail, config: EulerianPathConfig
) -> None:
    """Raise TrailInvariantError unless ``trail`` consumed every edge."""
    expected = graph.num_edges + 1
    if len(trail) != expected:
        logger.error(
            f"Trail has {len(trail)} nodes after passing existence checks, "
            f"expected {expected}: {config.preview(trail)}"
        )
        raise TrailInvariantError(
            f"Trail length {len(trail)} does not match edge count "
            f"{graph.num_edges} + 1."
        )
    if config.verify_edges:
        problems = trail_problems(graph, trail)
        if problems:
            logger.error(f"Trail failed edge verification: {'; '.join(problems)}")
            raise TrailInvariantError(
                f"Trail does not consume the edge multiset: {problems[0]}"
            )


def analyze(
    graph: GraphLike, config: Optional[EulerianPathConfig] = None
) -> EulerianPathReport:
    """Decide whether ``graph`` has an Eulerian path and build one if it does.

    Args:
        graph: An AdjacencyGraph, or a sequence/mapping of outgoing edge targets
            that is turned into one.
        config: Query options; ``DEFAULT_CONFIG`` when omitted.

    Returns:
        EulerianPathReport with the trail on success, or ``trail=None`` and a
        reason when the degree or connectivity gate rejects the graph.

    Raises:
        MalformedGraphError: If ``graph`` is not a valid graph description.
        TrailInvariantError: If the trail misses edges despite passing the gates.
    """
    graph = _as_graph(graph)
    config = config or DEFAULT_CONFIG
    n, m = graph.num_nodes, graph.num_edges

    profile = compute_degrees(graph)
    classification = classify_degrees(profile)

    if classification.kind == PathKind.EMPTY:
        return EulerianPathReport(
            kind=PathKind.EMPTY, num_nodes=n, num_edges=m, trail=[]
        )

    if classification.kind == PathKind.NONE:
        logger.debug(f"No Eulerian path: {classification.reason}")
        return EulerianPathReport(
            kind=PathKind.NONE, num_nodes=n, num_edges=m, reason=classification.reason
        )

    start = classification.start
    if start is None:
        raise TrailInvariantError(
            f"Degree classification {classification.kind.name} gave no start node"
        )
    missing = unreached_nodes(graph, start, profile)
    if missing:
        reason = f"nodes {missing} carry edges but are not connected to node {start}"
        logger.debug(f"No Eulerian path: {reason}")
        return EulerianPathReport(
            kind=PathKind.NONE, num_nodes=n, num_edges=m, reason=reason
        )

    trail = build_trail(graph, start)
    _check_trail(graph, trail, config)
    logger.debug(
        f"Eulerian {classification.kind.name.lower()} over {m} edges: "
        f"{config.preview(trail)}"
    )
    return EulerianPathReport(
        kind=classification.kind,
        num_nodes=n,
        num_edges=m,
        start=trail[0],
        end=trail[-1],
        trail=trail,
    )


def find_eulerian_path(
    graph: GraphLike, config: Optional[EulerianPathConfig] = None
) -> Union[Trail, NoPath]:
    """Return an Eulerian path of ``graph``, or ``NO_PATH`` if none exists.

    The empty list is a successful result for graphs without edges, including
    the graph with no nodes.
    """
    report = analyze(graph, config)
    if report.trail is None:
        return NO_PATH
    return report.trail


class EulerianPathFinder:
    """Eulerian path queries bound to one graph.

    The graph is validated once at construction. Every query allocates its own
    traversal state, so an instance may be queried repeatedly and shared
    between threads.
    """

    def __init__(
        self, graph: GraphLike, config: Optional[EulerianPathConfig] = None
    ) -> None:
        """Initialize the finder.

        Args:
            graph: An AdjacencyGraph, or a sequence/mapping of outgoing edge
                targets.
            config: Query options; ``DEFAULT_CONFIG`` when omitted.

        Raises:
            MalformedGraphError: If ``graph`` is not a valid graph description.
        """
        self.graph = _as_graph(graph)
        self.config = config or DEFAULT_CONFIG

    def find_path(self) -> Union[Trail, NoPath]:
        """Return an Eulerian path, or ``NO_PATH`` if none exists."""
        return find_eulerian_path(self.graph, self.config)

    def analyze(self) -> EulerianPathReport:
        """Return the full EulerianPathReport for the bound graph."""
        return analyze(self.graph, self.config)
