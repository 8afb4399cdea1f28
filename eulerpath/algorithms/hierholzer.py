"""Iterative Hierholzer trail construction for directed multigraphs."""

from __future__ import annotations

from typing import List

from eulerpath.algorithms.types import Trail
from eulerpath.graph.adjacency import AdjacencyGraph


def build_trail(graph: AdjacencyGraph, start: int) -> Trail:
    """Walk unused edges from ``start`` and splice sub-circuits into one trail.

    Uses an explicit stack instead of recursion, so trail length is not bound
    by the interpreter recursion limit. The per-node cursor list is allocated
    here and counts consumed outgoing edges; each node's edges are taken in
    adjacency order, so the result is fully determined by the input order.

    The caller is responsible for the existence gates. On a graph that fails
    them the returned trail is shorter than ``num_edges + 1``.

    Args:
        graph: Graph to traverse.
        start: Node to start from.

    Returns:
        Node indices in trail order.
    """
    adjacency = graph.adjacency
    cursor: List[int] = [0] * graph.num_nodes
    stack: List[int] = [start]
    trail: Trail = []

    while stack:
        node = stack[-1]
        targets = adjacency[node]
        position = cursor[node]
        if position < len(targets):
            cursor[node] = position + 1
            stack.append(targets[position])
        else:
            trail.append(stack.pop())

    trail.reverse()
    return trail
