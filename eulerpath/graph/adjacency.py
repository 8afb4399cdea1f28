"""Immutable directed multigraph over integer node indices.

`AdjacencyGraph` stores, for every node ``0..n-1``, the ordered tuple of
targets of its outgoing edges. Duplicate targets are parallel edges and a
target equal to its own node is a self-loop. The order of each tuple is the
order in which the trail builder consumes edges.
"""

from __future__ import annotations

from numbers import Integral
from typing import (
    Any,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from eulerpath.errors import MalformedGraphError

NodeIndex = int
Edge = Tuple[NodeIndex, NodeIndex]
AdjacencyInput = Union[Sequence[Iterable[Any]], Mapping[Any, Iterable[Any]]]


def _as_index(value: Any, num_nodes: int, what: str) -> int:
    """Validate ``value`` as a node index in ``[0, num_nodes)``.

    Raises:
        MalformedGraphError: If the value is not an integer or is out of range.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise MalformedGraphError(
            f"{what} must be an integer node index, got {value!r}."
        )
    index = int(value)
    if not 0 <= index < num_nodes:
        raise MalformedGraphError(
            f"{what} {index} is out of range for a graph with {num_nodes} nodes."
        )
    return index


def _as_targets(row: Any, node: int, num_nodes: int) -> Tuple[int, ...]:
    if row is None or isinstance(row, (str, bytes)):
        raise MalformedGraphError(
            f"Outgoing edges of node {node} must be a sequence of node indices, "
            f"got {row!r}."
        )
    try:
        items = list(row)
    except TypeError:
        raise MalformedGraphError(
            f"Outgoing edges of node {node} must be a sequence of node indices, "
            f"got {row!r}."
        ) from None
    return tuple(
        _as_index(target, num_nodes, f"Edge target of node {node}") for target in items
    )


def _check_num_nodes(num_nodes: Any) -> int:
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, Integral):
        raise MalformedGraphError(
            f"Node count must be an integer, got {num_nodes!r}."
        )
    if num_nodes < 0:
        raise MalformedGraphError(f"Node count must be non-negative, got {num_nodes}.")
    return int(num_nodes)


class AdjacencyGraph:
    """A directed multigraph with per-node ordered edge lists.

    This class enforces:
      - Node indices are the integers ``0..n-1``.
      - Every edge target is a valid node index (raises MalformedGraphError).
      - No mutation after construction; instances may be shared between
        concurrent read-only queries.

    The constructor accepts either a sequence of target sequences (position is
    the source node) or a mapping from source node index to target sequence.
    Nodes missing from a mapping have no outgoing edges.
    """

    __slots__ = ("_adjacency", "_num_edges")

    def __init__(
        self,
        adjacency: Optional[AdjacencyInput],
        num_nodes: Optional[int] = None,
    ) -> None:
        """Initialize an AdjacencyGraph.

        Args:
            adjacency: Sequence or mapping of outgoing edge targets per node.
            num_nodes: Total node count. Defaults to the sequence length, or to
                the largest mapping key plus one. Must not be smaller than that.

        Raises:
            MalformedGraphError: If the graph is missing, the node count is
                negative, or any node index or edge target is invalid.
        """
        if adjacency is None:
            raise MalformedGraphError("Graph reference is missing.")

        if isinstance(adjacency, Mapping):
            rows = self._rows_from_mapping(adjacency, num_nodes)
        elif isinstance(adjacency, (str, bytes)) or not isinstance(
            adjacency, Sequence
        ):
            raise MalformedGraphError(
                "Graph must be a sequence or mapping of outgoing edge targets, "
                f"got {type(adjacency).__name__}."
            )
        else:
            rows = list(adjacency)
            if num_nodes is not None:
                n = _check_num_nodes(num_nodes)
                if n < len(rows):
                    raise MalformedGraphError(
                        f"Node count {n} is smaller than the {len(rows)} "
                        "adjacency rows provided."
                    )
                rows.extend([] for _ in range(n - len(rows)))

        n = len(rows)
        self._adjacency: Tuple[Tuple[int, ...], ...] = tuple(
            _as_targets(row, node, n) for node, row in enumerate(rows)
        )
        self._num_edges: int = sum(len(targets) for targets in self._adjacency)

    @staticmethod
    def _rows_from_mapping(
        mapping: Mapping[Any, Iterable[Any]], num_nodes: Optional[int]
    ) -> List[Any]:
        if num_nodes is None:
            keys = list(mapping)
            for key in keys:
                if isinstance(key, bool) or not isinstance(key, Integral):
                    raise MalformedGraphError(
                        f"Source node must be an integer node index, got {key!r}."
                    )
                if key < 0:
                    raise MalformedGraphError(
                        f"Source node {key} is out of range: indices are non-negative."
                    )
            n = max(keys) + 1 if keys else 0
        else:
            n = _check_num_nodes(num_nodes)

        rows: List[Any] = [() for _ in range(n)]
        for key, row in mapping.items():
            rows[_as_index(key, n, "Source node")] = row
        return rows

    @classmethod
    def from_edges(cls, num_nodes: int, edges: Iterable[Edge]) -> AdjacencyGraph:
        """Build a graph from ``(source, target)`` pairs.

        Edges keep their relative order per source node.

        Args:
            num_nodes: Total node count.
            edges: Iterable of ``(source, target)`` pairs.

        Returns:
            AdjacencyGraph: The constructed graph.

        Raises:
            MalformedGraphError: If the node count or any endpoint is invalid.
        """
        n = _check_num_nodes(num_nodes)
        rows: List[List[int]] = [[] for _ in range(n)]
        for edge in edges:
            try:
                source, target = edge
            except (TypeError, ValueError):
                raise MalformedGraphError(
                    f"Edge must be a (source, target) pair, got {edge!r}."
                ) from None
            rows[_as_index(source, n, "Edge source")].append(target)
        return cls(rows)

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[Any, Iterable[Any]], num_nodes: Optional[int] = None
    ) -> AdjacencyGraph:
        """Build a graph from a mapping of source node index to edge targets."""
        if not isinstance(mapping, Mapping):
            raise MalformedGraphError(
                f"Expected a mapping of node index to targets, got {type(mapping).__name__}."
            )
        return cls(mapping, num_nodes=num_nodes)

    @property
    def num_nodes(self) -> int:
        """Number of nodes ``n``."""
        return len(self._adjacency)

    @property
    def num_edges(self) -> int:
        """Number of edges ``m``, counting parallel edges and self-loops."""
        return self._num_edges

    @property
    def adjacency(self) -> Tuple[Tuple[int, ...], ...]:
        """Outgoing edge targets for every node, indexed by node."""
        return self._adjacency

    def successors(self, node: int) -> Tuple[int, ...]:
        """Return the ordered outgoing edge targets of ``node``.

        Raises:
            MalformedGraphError: If ``node`` is not a node of this graph.
        """
        return self._adjacency[_as_index(node, self.num_nodes, "Node")]

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(source, target)`` in adjacency order."""
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                yield source, target

    def to_lists(self) -> List[List[int]]:
        """Return a mutable copy of the adjacency as a list of lists."""
        return [list(targets) for targets in self._adjacency]

    def __len__(self) -> int:
        return self.num_nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyGraph):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash(self._adjacency)

    def __repr__(self) -> str:
        return f"AdjacencyGraph(num_nodes={self.num_nodes}, num_edges={self.num_edges})"
