"""Trail verification against a graph's edge multiset.

A trail is an Eulerian path of a graph exactly when walking its consecutive
node pairs consumes every edge of the graph once: no pair may use an edge the
graph lacks (or has already given up), and no edge may be left over.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from eulerpath.graph.adjacency import AdjacencyGraph, Edge


def edge_multiplicity(graph: AdjacencyGraph) -> Counter:
    """Return how many parallel copies of each ``(source, target)`` edge exist."""
    return Counter(graph.edges())


def remaining_edges(graph: AdjacencyGraph, trail: Sequence[int]) -> Dict[Edge, int]:
    """Subtract the edges consumed by ``trail`` from the graph's edge multiset.

    Args:
        graph: Graph the trail claims to cover.
        trail: Node sequence; pair ``(trail[i-1], trail[i])`` consumes one edge.

    Returns:
        Mapping of every edge key to its remaining count. For an Eulerian path
        all counts are zero. Negative counts mark edges used more often than
        they exist.
    """
    remaining = edge_multiplicity(graph)
    for source, target in zip(trail, trail[1:]):
        remaining[(source, target)] -= 1
    return dict(remaining)


def trail_problems(graph: AdjacencyGraph, trail: Sequence[int]) -> List[str]:
    """Describe every way ``trail`` fails to be an Eulerian path of ``graph``.

    Returns:
        Human-readable problem descriptions; empty when the trail is valid.
    """
    if graph.num_edges == 0:
        if len(trail) == 0:
            return []
        return [f"graph has no edges but trail has {len(trail)} nodes"]

    problems: List[str] = []
    if len(trail) != graph.num_edges + 1:
        problems.append(
            f"trail has {len(trail)} nodes, expected {graph.num_edges + 1}"
        )
    for (source, target), count in sorted(remaining_edges(graph, trail).items()):
        if count < 0:
            problems.append(f"edge {source}->{target} used {-count} extra time(s)")
        elif count > 0:
            problems.append(f"edge {source}->{target} left unused {count} time(s)")
    return problems


def verify_trail(graph: AdjacencyGraph, trail: Sequence[int]) -> bool:
    """Check that ``trail`` uses every edge of ``graph`` exactly once."""
    return not trail_problems(graph, trail)
