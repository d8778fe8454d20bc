"""Result containers and control enums shared by the graph algorithms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterator, Tuple

from aocgraph.graph.graph import Cost, Edge, Label


class PathfinderStatus(IntEnum):
    """Value returned by a result callback to steer the search."""

    #: Keep exploring the remaining branches.
    CONTINUE = 1
    #: Abort the whole search immediately.
    STOP = 2


class MstAlgorithm(IntEnum):
    """Minimum spanning tree construction algorithms."""

    KRUSKAL = 1
    PRIM = 2


@dataclass(frozen=True)
class PathfinderResult:
    """One Hamiltonian path or cycle found by the search.

    Attributes:
        vertices: Vertex labels in visiting order. For a cycle the origin
            appears only once, at the front.
        edges: Traversed edges in order, including the closing edge of a cycle.
        cost: Sum of edge weights in sum-path mode, otherwise the edge count.
    """

    vertices: Tuple[Label, ...]
    edges: Tuple[Edge, ...]
    cost: Cost

    @property
    def start(self) -> Label:
        return self.vertices[0]

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class SpanningTree:
    """Edges accepted by a minimum spanning tree builder.

    Attributes:
        vertices: Labels of the spanned vertices, in graph insertion order.
        edges: Accepted edges, in the order the builder accepted them.
    """

    vertices: Tuple[Label, ...]
    edges: Tuple[Edge, ...]

    @property
    def weight(self) -> Cost:
        """Total weight of the tree; unweighted edges count as 0."""
        return sum(edge.cost for edge in self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


#: Result callback: receives each result and says whether to go on.
ResultCallback = Callable[[PathfinderResult], PathfinderStatus]

#: Observer for individual vertex visits during the search.
VisitCallback = Callable[[Label], None]
