"""Degree analysis for Eulerian path existence.

`compute_degrees` counts in- and out-degrees in a single pass over the
adjacency. `classify_degrees` turns the counts into a start/end decision.
"""

from __future__ import annotations

from typing import List

from eulerpath.algorithms.types import DegreeClassification, DegreeProfile, PathKind
from eulerpath.graph.adjacency import AdjacencyGraph
from eulerpath.logging import get_logger

logger = get_logger(__name__)


def compute_degrees(graph: AdjacencyGraph) -> DegreeProfile:
    """Return in- and out-degree for every node of ``graph``."""
    out_degree: List[int] = []
    in_degree: List[int] = [0] * graph.num_nodes
    for targets in graph.adjacency:
        out_degree.append(len(targets))
        for target in targets:
            in_degree[target] += 1
    return DegreeProfile(out_degree=tuple(out_degree), in_degree=tuple(in_degree))


def classify_degrees(profile: DegreeProfile) -> DegreeClassification:
    """Classify a degree profile into EMPTY, CIRCUIT, OPEN or NONE.

    A path exists only if every node is balanced (circuit), or exactly one node
    has one surplus outgoing edge and exactly one node has one surplus incoming
    edge (open path). Connectivity is not considered here.

    Args:
        profile: Degrees of the graph under analysis.

    Returns:
        DegreeClassification with the start/end candidates, or kind NONE and a
        reason naming the offending nodes.
    """
    if profile.num_edges == 0:
        return DegreeClassification(kind=PathKind.EMPTY)

    start_nodes: List[int] = []
    end_nodes: List[int] = []
    for node in range(len(profile.out_degree)):
        diff = profile.imbalance(node)
        if diff == 0:
            continue
        if diff == 1:
            start_nodes.append(node)
        elif diff == -1:
            end_nodes.append(node)
        else:
            return DegreeClassification(
                kind=PathKind.NONE,
                reason=(
                    f"node {node} has out-degree {profile.out_degree[node]} and "
                    f"in-degree {profile.in_degree[node]}; imbalance exceeds 1"
                ),
            )

    if len(start_nodes) > 1:
        return DegreeClassification(
            kind=PathKind.NONE,
            reason=f"more than one node with a surplus outgoing edge: {start_nodes}",
        )
    if len(end_nodes) > 1:
        return DegreeClassification(
            kind=PathKind.NONE,
            reason=f"more than one node with a surplus incoming edge: {end_nodes}",
        )
    if len(start_nodes) != len(end_nodes):
        # Unreachable while sum(out) == sum(in); kept for hand-built profiles.
        return DegreeClassification(
            kind=PathKind.NONE,
            reason="surplus outgoing and incoming edges do not pair up",
        )

    if start_nodes:
        logger.debug(f"Open path candidate: start={start_nodes[0]} end={end_nodes[0]}")
        return DegreeClassification(
            kind=PathKind.OPEN, start=start_nodes[0], end=end_nodes[0]
        )

    start = next(node for node, out in enumerate(profile.out_degree) if out > 0)
    logger.debug(f"Circuit candidate: start={start}")
    return DegreeClassification(kind=PathKind.CIRCUIT, start=start, end=start)
