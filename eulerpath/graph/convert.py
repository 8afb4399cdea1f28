"""Graph conversion utilities between AdjacencyGraph and NetworkX graphs.

Node names of a NetworkX graph (any hashable) are mapped to contiguous
integer indices; the returned `NodeMap` translates trails back to names.

Example:
    >>> import networkx as nx
    >>> from eulerpath.graph.convert import from_networkx
    >>> G = nx.MultiDiGraph()
    >>> G.add_edges_from([("a", "b"), ("b", "c"), ("c", "a")])
    [0, 0, 0]
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["b"]
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Tuple, Union

import networkx as nx

from eulerpath.graph.adjacency import AdjacencyGraph

NxDirectedGraph = Union[nx.DiGraph, nx.MultiDiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable]) -> NodeMap:
        """Create a NodeMap from node names in index order."""
        names = list(names)
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, trail: Iterable[int]) -> List[Hashable]:
        """Translate a sequence of node indices into node names."""
        return [self.to_name[index] for index in trail]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(G: NxDirectedGraph) -> Tuple[AdjacencyGraph, NodeMap]:
    """Convert a directed NetworkX graph to an AdjacencyGraph.

    Nodes are indexed in ``str`` sort order for deterministic results. Outgoing
    edges of each node keep the order reported by ``G.edges``; parallel edges
    of a MultiDiGraph become repeated targets.

    Args:
        G: NetworkX DiGraph or MultiDiGraph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a directed NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph)):
        raise TypeError(
            f"Expected a directed NetworkX graph (DiGraph or MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    rows: List[List[int]] = [[] for _ in range(len(node_map))]
    for u, v in G.edges():
        rows[node_map.to_index[u]].append(node_map.to_index[v])
    return AdjacencyGraph(rows), node_map


def to_networkx(
    graph: AdjacencyGraph, node_map: Optional[NodeMap] = None
) -> nx.MultiDiGraph:
    """Convert an AdjacencyGraph to a NetworkX MultiDiGraph.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...

    Returns:
        nx.MultiDiGraph with one edge per adjacency entry, added in adjacency
        order.
    """
    G = nx.MultiDiGraph()
    if node_map is None:
        G.add_nodes_from(range(graph.num_nodes))
        G.add_edges_from(graph.edges())
        return G

    G.add_nodes_from(node_map.to_name.get(i, i) for i in range(graph.num_nodes))
    for u, v in graph.edges():
        G.add_edge(node_map.to_name.get(u, u), node_map.to_name.get(v, v))
    return G
