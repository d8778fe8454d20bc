"""Labeled-vertex graph with optional edge weights.

`Graph` holds vertices in insertion order and edges keyed by their ordered
``(source, target)`` pair. Edges may be directed or undirected; an undirected
edge is a single record registered in the adjacency of both endpoints, so
``get_edge("A", "B")`` and ``get_edge("B", "A")`` return the same object.

Insertion order is preserved everywhere (vertices, edges, adjacency) so that
exhaustive searches and tie-breaking are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Union

from aocgraph.exceptions import InvalidEdgeError, UnknownVertexError

Label = Hashable
Cost = Union[int, float]
EdgeKey = Tuple[Label, Label]


@dataclass(frozen=True)
class Edge:
    """A connection between two vertices.

    Attributes:
        source: Label of the source vertex.
        target: Label of the target vertex.
        weight: Optional numeric weight; ``None`` for unweighted edges.
        directed: If False, the edge is traversable in both directions.
    """

    source: Label
    target: Label
    weight: Optional[Cost] = None
    directed: bool = False

    @property
    def key(self) -> EdgeKey:
        return (self.source, self.target)

    @property
    def cost(self) -> Cost:
        """Weight used in sums and orderings; an absent weight counts as 0."""
        return 0 if self.weight is None else self.weight

    def other(self, label: Label) -> Label:
        """Return the endpoint opposite to `label`.

        Raises:
            UnknownVertexError: If `label` is not an endpoint of this edge.
        """
        if label == self.source:
            return self.target
        if label == self.target:
            return self.source
        raise UnknownVertexError(
            label, f"Vertex '{label}' is not an endpoint of edge {self.key}."
        )

    def connects(self, u: Label, v: Label) -> bool:
        """True if this edge can be traversed from `u` to `v`."""
        if self.directed:
            return self.source == u and self.target == v
        return {self.source, self.target} == {u, v}

    def __str__(self) -> str:
        arrow = "->" if self.directed else "--"
        weight = "" if self.weight is None else f" ({self.weight})"
        return f"{self.source} {arrow} {self.target}{weight}"


@dataclass
class Vertex:
    """A vertex and the edges traversable from it, keyed by edge key."""

    label: Label
    edges: Dict[EdgeKey, Edge] = field(default_factory=dict)


class Graph:
    """A graph of uniquely labeled vertices and optionally weighted edges.

    This class enforces:
      - Adding an existing vertex is a no-op.
      - Both endpoints must exist before an edge is added.
      - No duplicate edges between the same endpoints in the same direction;
        an undirected edge occupies both directions.
      - Self-loops are rejected unless `allow_self_loops` is set.

    Args:
        name: Optional descriptive name, used in messages and ``repr``.
        allow_self_loops: Accept edges whose source equals their target.
    """

    def __init__(self, name: str = "", allow_self_loops: bool = False) -> None:
        self.name = name
        self.allow_self_loops = allow_self_loops
        self._vertices: Dict[Label, Vertex] = {}
        self._edges: Dict[EdgeKey, Edge] = {}
        # Lookup for both directions of undirected edges
        self._index: Dict[EdgeKey, Edge] = {}

    #
    # Vertex management
    #
    def add_vertex(self, label: Label) -> Vertex:
        """Insert a vertex if absent and return it."""
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices[label] = vertex
        return vertex

    def add_vertices_from(self, labels) -> None:
        for label in labels:
            self.add_vertex(label)

    def get_vertex(self, label: Label) -> Vertex:
        try:
            return self._vertices[label]
        except KeyError:
            raise UnknownVertexError(label) from None

    def get_vertices(self) -> List[Label]:
        """Return vertex labels in insertion order."""
        return list(self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    #
    # Edge management
    #
    def add_edge(
        self,
        source: Label,
        target: Label,
        weight: Optional[Cost] = None,
        directed: bool = False,
    ) -> Edge:
        """Add an edge between two existing vertices.

        Args:
            source: Source vertex label.
            target: Target vertex label.
            weight: Optional numeric weight.
            directed: If False, the edge is registered on both endpoints.

        Returns:
            The new edge record.

        Raises:
            InvalidEdgeError: If an endpoint is missing, the edge is a
                disallowed self-loop, the weight is not numeric, or an edge
                already occupies the same endpoints and direction.
        """
        for label in (source, target):
            if label not in self._vertices:
                raise InvalidEdgeError(
                    f"Cannot add edge {source!r} -> {target!r}: "
                    f"vertex '{label}' does not exist."
                )
        if source == target and not self.allow_self_loops:
            raise InvalidEdgeError(f"Self-loop on vertex '{source}' is not allowed.")
        if weight is not None and (
            isinstance(weight, bool) or not isinstance(weight, Real)
        ):
            raise InvalidEdgeError(
                f"Edge {source!r} -> {target!r} has non-numeric weight {weight!r}."
            )

        edge = Edge(source, target, weight, directed)
        keys = [edge.key] if directed else [edge.key, (target, source)]
        for key in keys:
            if key in self._index:
                raise InvalidEdgeError(
                    f"Edge between '{source}' and '{target}' already exists: "
                    f"{self._index[key]}."
                )

        self._edges[edge.key] = edge
        for key in keys:
            self._index[key] = edge
        self._vertices[source].edges[edge.key] = edge
        if not directed:
            self._vertices[target].edges[edge.key] = edge
        return edge

    def get_edge(self, source: Label, target: Label) -> Edge:
        """Return the edge traversable from `source` to `target`.

        Raises:
            UnknownVertexError: If either vertex does not exist.
            KeyError: If the vertices exist but are not connected that way.
        """
        self.get_vertex(source)
        self.get_vertex(target)
        try:
            return self._index[(source, target)]
        except KeyError:
            raise KeyError(f"No edge from '{source}' to '{target}'.") from None

    def has_edge(self, source: Label, target: Label) -> bool:
        return (source, target) in self._index

    def neighbors_of(self, label: Label) -> List[Edge]:
        """Return the edges traversable from `label`, in insertion order.

        Raises:
            UnknownVertexError: If the vertex does not exist.
        """
        return list(self.get_vertex(label).edges.values())

    @property
    def edges(self) -> List[Edge]:
        """All edges in insertion order; each undirected edge appears once."""
        return list(self._edges.values())

    def number_of_edges(self) -> int:
        return len(self._edges)

    #
    # Container protocol
    #
    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __iter__(self) -> Iterator[Label]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        name = f" '{self.name}'" if self.name else ""
        return (
            f"<Graph{name} with {len(self._vertices)} vertices "
            f"and {len(self._edges)} edges>"
        )
