"""Direction-agnostic connectivity gate.

Every node that carries an edge must be reachable from the start candidate
when edge direction is ignored. Nodes without edges are irrelevant.
"""

from __future__ import annotations

from collections import deque
from typing import List

from eulerpath.algorithms.types import DegreeProfile
from eulerpath.graph.adjacency import AdjacencyGraph


def _undirected_neighbors(graph: AdjacencyGraph) -> List[List[int]]:
    """Return, per node, the union of successors and predecessors (with repeats)."""
    neighbors: List[List[int]] = [[] for _ in range(graph.num_nodes)]
    for source, targets in enumerate(graph.adjacency):
        for target in targets:
            neighbors[source].append(target)
            neighbors[target].append(source)
    return neighbors


def unreached_nodes(
    graph: AdjacencyGraph, start: int, profile: DegreeProfile
) -> List[int]:
    """Return edge-bearing nodes not weakly reachable from ``start``.

    Breadth-first search over the graph with every edge usable in both
    directions.

    Args:
        graph: Graph under analysis.
        start: Start candidate from degree analysis.
        profile: Degrees of ``graph``.

    Returns:
        Sorted list of nodes with nonzero degree that were not visited.
    """
    neighbors = _undirected_neighbors(graph)
    visited = [False] * graph.num_nodes
    visited[start] = True
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in neighbors[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)

    return [
        node
        for node in range(graph.num_nodes)
        if not visited[node] and profile.total_degree(node) > 0
    ]


def weakly_connected_from(
    graph: AdjacencyGraph, start: int, profile: DegreeProfile
) -> bool:
    """Check that all edge-bearing nodes are weakly reachable from ``start``."""
    return not unreached_nodes(graph, start, profile)
