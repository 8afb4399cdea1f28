"""Exception types raised by eulerpath.

A graph without an Eulerian path is a normal outcome and is reported with the
``NO_PATH`` sentinel, never with an exception from this module.
"""


class EulerPathError(Exception):
    """Base class for all eulerpath errors."""


class MalformedGraphError(EulerPathError, ValueError):
    """Raised when a graph description is invalid.

    Covers negative node counts, out-of-range or non-integer node indices and
    missing graph references, both for in-memory construction and for
    documents loaded from YAML or JSON.
    """


class TrailInvariantError(EulerPathError, AssertionError):
    """Raised when a constructed trail does not consume every edge exactly once.

    Only reachable through a defect in trail construction: the degree and
    connectivity gates guarantee a complete trail otherwise.
    """
