"""Exhaustive Hamiltonian path and cycle search.

The search is a depth-first backtracking walk: from the last vertex of the
partial path it only extends to unvisited vertices reachable over an existing
edge, in adjacency insertion order. Every completed path (and, in cycle mode,
every path that closes back onto its origin) is handed to a result callback
whose return value decides whether the search goes on.

The cost is factorial in the number of vertices; use it on small graphs.
"""

from __future__ import annotations

import operator
from time import perf_counter
from typing import Callable, List, Optional, Set

from aocgraph.algorithms.types import (
    PathfinderResult,
    PathfinderStatus,
    ResultCallback,
    VisitCallback,
)
from aocgraph.config import DEFAULT_PATHFINDER_CONFIG, PathfinderConfig
from aocgraph.exceptions import EmptyGraphError, UnknownVertexError
from aocgraph.graph.graph import Cost, Edge, Graph, Label
from aocgraph.logging import get_logger

logger = get_logger(__name__)

CONTINUE = PathfinderStatus.CONTINUE
STOP = PathfinderStatus.STOP


class _HamiltonianSearch:
    """Mutable state of one search; discarded when the search returns."""

    def __init__(
        self,
        graph: Graph,
        config: PathfinderConfig,
        on_result: ResultCallback,
        on_visit: Optional[VisitCallback],
    ) -> None:
        self.graph = graph
        self.config = config
        self.on_result = on_result
        self.on_visit = on_visit
        self.total = len(graph)
        self.reported = 0
        self.origin: Label = None
        self.vertices: List[Label] = []
        self.edges: List[Edge] = []
        self.visited: Set[Label] = set()

    def run(self, origin: Label) -> PathfinderStatus:
        self.origin = origin
        self.vertices = [origin]
        self.edges = []
        self.visited = {origin}
        self._visit(origin)
        return self._extend(origin)

    def _visit(self, label: Label) -> None:
        if self.on_visit is not None:
            self.on_visit(label)

    def _extend(self, current: Label) -> PathfinderStatus:
        if len(self.visited) == self.total:
            return self._complete(current)

        for edge in self.graph.neighbors_of(current):
            neighbor = edge.other(current)
            if neighbor in self.visited:
                continue
            self.visited.add(neighbor)
            self.vertices.append(neighbor)
            self.edges.append(edge)
            self._visit(neighbor)

            status = self._extend(neighbor)

            self.edges.pop()
            self.vertices.pop()
            self.visited.discard(neighbor)
            if status == STOP:
                return STOP
        return CONTINUE

    def _complete(self, current: Label) -> PathfinderStatus:
        if not self.config.detect_cycles or self.total == 1:
            # A lone vertex is its own trivial cycle
            return self._report(self.edges)

        for edge in self.graph.neighbors_of(current):
            if edge.other(current) != self.origin:
                continue
            # An undirected edge cannot be walked back to close a cycle
            if self.edges and edge is self.edges[-1]:
                continue
            if self._report(self.edges + [edge]) == STOP:
                return STOP
        return CONTINUE

    def _report(self, edges: List[Edge]) -> PathfinderStatus:
        if self.config.sum_path:
            cost: Cost = sum(edge.cost for edge in edges)
        else:
            cost = len(edges)
        result = PathfinderResult(tuple(self.vertices), tuple(edges), cost)
        self.reported += 1

        status = self.on_result(result)
        try:
            status = PathfinderStatus(status)
        except ValueError:
            raise TypeError(
                f"Result callback must return a PathfinderStatus, got {status!r}"
            ) from None

        if status == STOP:
            return STOP
        if self.config.max_results is not None and self.reported >= self.config.max_results:
            logger.debug("Result limit of %d reached", self.config.max_results)
            return STOP
        return CONTINUE


def _resolve_origins(graph: Graph, config: PathfinderConfig) -> List[Label]:
    vertices = graph.get_vertices()
    if config.starting_vertices is None:
        return vertices
    for label in config.starting_vertices:
        if label not in graph:
            raise UnknownVertexError(
                label, f"Starting vertex '{label}' does not exist in {graph!r}."
            )
    wanted = set(config.starting_vertices)
    return [label for label in vertices if label in wanted]


def find_hamiltonian_paths(
    graph: Graph,
    config: Optional[PathfinderConfig],
    on_result: ResultCallback,
    on_visit: Optional[VisitCallback] = None,
) -> int:
    """Enumerate Hamiltonian paths (or cycles) of `graph`.

    Origins are tried in graph insertion order and branches in adjacency
    insertion order, so the order of reported results is reproducible.
    `on_result` runs synchronously inside the search and must not mutate the
    graph. Returning `PathfinderStatus.STOP` from it ends the whole search.

    Args:
        graph: Graph to search.
        config: Search options; None uses `DEFAULT_PATHFINDER_CONFIG`.
        on_result: Called with each `PathfinderResult`; returns a
            `PathfinderStatus`.
        on_visit: Optional observer called with each vertex label as it is
            appended to the current partial path.

    Returns:
        Number of results reported to `on_result`.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        UnknownVertexError: If a configured starting vertex is not in the graph.
        TypeError: If `on_result` returns something other than a status.
    """
    if config is None:
        config = DEFAULT_PATHFINDER_CONFIG
    if graph.is_empty():
        raise EmptyGraphError(f"Hamiltonian search: graph {graph!r} has no vertices.")

    started = perf_counter()
    origins = _resolve_origins(graph, config)
    search = _HamiltonianSearch(graph, config, on_result, on_visit)

    stopped = False
    for origin in origins:
        if search.run(origin) == STOP:
            stopped = True
            break

    logger.debug(
        "Hamiltonian %s search over %d vertices from %d origins: "
        "%d results%s in %.6fs",
        "cycle" if config.detect_cycles else "path",
        len(graph),
        len(origins),
        search.reported,
        " (stopped early)" if stopped else "",
        perf_counter() - started,
    )
    return search.reported


def collect_paths(
    graph: Graph, config: Optional[PathfinderConfig] = None
) -> List[PathfinderResult]:
    """Return every result of the search, in discovery order."""
    results: List[PathfinderResult] = []

    def keep(result: PathfinderResult) -> PathfinderStatus:
        results.append(result)
        return CONTINUE

    find_hamiltonian_paths(graph, config, keep)
    return results


def _best_path(
    graph: Graph,
    config: Optional[PathfinderConfig],
    better: Callable[[Cost, Cost], bool],
) -> Optional[PathfinderResult]:
    best: List[PathfinderResult] = []

    def keep_best(result: PathfinderResult) -> PathfinderStatus:
        if not best or better(result.cost, best[0].cost):
            best[:] = [result]
        return CONTINUE

    find_hamiltonian_paths(graph, config, keep_best)
    return best[0] if best else None


def min_cost_path(
    graph: Graph, config: Optional[PathfinderConfig] = None
) -> Optional[PathfinderResult]:
    """Return the cheapest result, or None if there is none.

    Among equally cheap results the first one found wins.
    """
    return _best_path(graph, config, operator.lt)


def max_cost_path(
    graph: Graph, config: Optional[PathfinderConfig] = None
) -> Optional[PathfinderResult]:
    """Return the most expensive result, or None if there is none.

    Among equally expensive results the first one found wins.
    """
    return _best_path(graph, config, operator.gt)
