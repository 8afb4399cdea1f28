"""Types and data structures for Eulerian path analysis.

Defines the degree summaries, the result classification enum and the
``NO_PATH`` sentinel returned when a graph admits no Eulerian path.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

# Ordered node indices; consecutive pairs are consumed edges.
Trail = List[int]


class PathKind(IntEnum):
    """Outcome of degree analysis for a directed multigraph."""

    #: No edges at all; the Eulerian path is the empty trail.
    EMPTY = 0
    #: Every node balanced; the trail starts and ends at the same node.
    CIRCUIT = 1
    #: One node with one surplus outgoing edge and one with one surplus incoming edge.
    OPEN = 2
    #: Degree pattern rules out any Eulerian path.
    NONE = 3


class NoPath:
    """Sentinel type for "this graph has no Eulerian path".

    There is a single instance, ``NO_PATH``. It is falsy, like an empty trail,
    so compare with ``is NO_PATH`` to tell the two apart.
    """

    _instance: Optional[NoPath] = None

    def __new__(cls) -> NoPath:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_PATH"

    def __reduce__(self) -> str:
        return "NO_PATH"


NO_PATH = NoPath()


@dataclass(frozen=True)
class DegreeProfile:
    """In- and out-degree of every node.

    Attributes:
        out_degree: Number of outgoing edges per node.
        in_degree: Number of incoming edges per node.
    """

    out_degree: Tuple[int, ...]
    in_degree: Tuple[int, ...]

    @property
    def num_edges(self) -> int:
        return sum(self.out_degree)

    def total_degree(self, node: int) -> int:
        """Return ``in + out`` degree of ``node``; self-loops count twice."""
        return self.out_degree[node] + self.in_degree[node]

    def imbalance(self, node: int) -> int:
        """Return ``out - in`` degree of ``node``."""
        return self.out_degree[node] - self.in_degree[node]


@dataclass(frozen=True)
class DegreeClassification:
    """Start/end candidates derived from a DegreeProfile.

    Attributes:
        kind: Classification of the degree pattern.
        start: Node the trail must start at, or None for EMPTY and NONE.
        end: Node the trail must end at, or None for EMPTY and NONE.
        reason: Why the pattern was rejected; empty unless ``kind`` is NONE.
    """

    kind: PathKind
    start: Optional[int] = None
    end: Optional[int] = None
    reason: str = ""


@dataclass(frozen=True)
class EulerianPathReport:
    """Full outcome of an Eulerian path query.

    Attributes:
        kind: Degree classification. NONE whenever no path exists, including
            when the degree pattern was fine but connectivity failed.
        num_nodes: Node count of the analyzed graph.
        num_edges: Edge count of the analyzed graph.
        start: First node of the trail, if a path exists and has edges.
        end: Last node of the trail, if a path exists and has edges.
        trail: The Eulerian path, or None when no path exists.
        reason: Why no path exists; empty on success.
    """

    kind: PathKind
    num_nodes: int
    num_edges: int
    start: Optional[int] = None
    end: Optional[int] = None
    trail: Optional[Trail] = None
    reason: str = ""

    @property
    def has_path(self) -> bool:
        return self.trail is not None

    @property
    def is_circuit(self) -> bool:
        return self.kind == PathKind.CIRCUIT and self.trail is not None
