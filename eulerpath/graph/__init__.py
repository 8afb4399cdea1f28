"""Graph primitives and helpers.

This package provides the immutable index-based multigraph `AdjacencyGraph`
and a helper module for conversion to and from NetworkX (`convert`).
"""

from eulerpath.graph.adjacency import AdjacencyGraph, Edge, NodeIndex

__all__ = ["AdjacencyGraph", "Edge", "NodeIndex"]
