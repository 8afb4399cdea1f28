"""Eulerian path algorithms: degree gate, connectivity gate, trail builder."""

from eulerpath.algorithms.eulerian import (
    EulerianPathFinder,
    analyze,
    find_eulerian_path,
)
from eulerpath.algorithms.types import (
    NO_PATH,
    DegreeClassification,
    DegreeProfile,
    EulerianPathReport,
    NoPath,
    PathKind,
    Trail,
)

__all__ = [
    "EulerianPathFinder",
    "analyze",
    "find_eulerian_path",
    "NO_PATH",
    "NoPath",
    "PathKind",
    "Trail",
    "DegreeProfile",
    "DegreeClassification",
    "EulerianPathReport",
]
