"""Exception types raised by graph construction and graph algorithms.

All errors derive from `GraphError` and also from the built-in exception a
caller would otherwise expect (`KeyError` for lookups, `ValueError` for bad
input), so hosts may catch either.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all aocgraph errors."""


class UnknownVertexError(GraphError, KeyError):
    """A lookup referenced a vertex label that is not in the graph."""

    def __init__(self, label: object, message: str = "") -> None:
        self.label = label
        super().__init__(message or f"Vertex '{label}' does not exist.")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class InvalidEdgeError(GraphError, ValueError):
    """An edge is malformed: missing endpoint, disallowed self-loop or duplicate."""


class EmptyGraphError(GraphError, ValueError):
    """An algorithm was asked to run on a graph without vertices."""


class DisconnectedGraphError(GraphError, ValueError):
    """A spanning tree was requested for a graph that cannot be fully spanned.

    Attributes:
        reached: Number of vertices in the component of the tree's root
            (Prim's start vertex, or the first vertex inserted for Kruskal).
        total: Number of vertices in the graph.
    """

    def __init__(self, message: str, reached: int = 0, total: int = 0) -> None:
        self.reached = reached
        self.total = total
        super().__init__(message)
