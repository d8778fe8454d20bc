"""Minimum spanning tree builders (Kruskal and Prim).

Both builders treat every edge as undirected, count a missing weight as 0 and
break weight ties deterministically: Kruskal by edge insertion order, Prim by
vertex insertion order. A graph that cannot be fully spanned raises
`DisconnectedGraphError` instead of returning a partial forest.
"""

from __future__ import annotations

import math
from heapq import heappop, heappush
from time import perf_counter
from typing import Dict, List, Optional, Tuple

from aocgraph.algorithms.types import MstAlgorithm, SpanningTree
from aocgraph.algorithms.union_find import UnionFind
from aocgraph.exceptions import DisconnectedGraphError, EmptyGraphError
from aocgraph.graph.graph import Cost, Edge, Graph, Label
from aocgraph.logging import get_logger

logger = get_logger(__name__)


def _require_vertices(graph: Graph, algorithm: str) -> List[Label]:
    vertices = graph.get_vertices()
    if not vertices:
        raise EmptyGraphError(f"{algorithm}: graph {graph!r} has no vertices.")
    return vertices


def kruskal(graph: Graph) -> SpanningTree:
    """Build a minimum spanning tree with Kruskal's algorithm.

    Edges are sorted ascending by weight (stable, so equal weights keep their
    insertion order) and accepted whenever they join two components.

    Args:
        graph: A weighted graph; edge direction is ignored.

    Returns:
        The spanning tree, edges in acceptance order.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        DisconnectedGraphError: If fewer than ``|V| - 1`` edges could be accepted.
    """
    started = perf_counter()
    vertices = _require_vertices(graph, "Kruskal")
    needed = len(vertices) - 1

    components = UnionFind(vertices)
    accepted: List[Edge] = []
    for edge in sorted(graph.edges, key=lambda e: e.cost):
        if len(accepted) == needed:
            break
        if components.union(edge.source, edge.target):
            accepted.append(edge)

    if len(accepted) < needed:
        first = components.find(vertices[0])
        reached = sum(1 for label in vertices if components.find(label) == first)
        raise DisconnectedGraphError(
            f"Kruskal: graph {graph!r} is not connected "
            f"({components.component_count} components); reached {reached} "
            f"of {len(vertices)} vertices from '{vertices[0]}'.",
            reached=reached,
            total=len(vertices),
        )

    tree = SpanningTree(tuple(vertices), tuple(accepted))
    logger.debug(
        "Kruskal MST over %d vertices: weight=%s in %.6fs",
        len(vertices),
        tree.weight,
        perf_counter() - started,
    )
    return tree


def prim(
    graph: Graph,
    start: Optional[Label] = None,
    no_edge: Cost = math.inf,
) -> SpanningTree:
    """Build a minimum spanning tree with Prim's algorithm.

    The tree grows from `start`. Each unreached vertex keeps the weight of the
    cheapest known edge connecting it to the tree (its frontier weight),
    seeded with `no_edge`. The unreached vertex with the smallest frontier
    weight joins next; ties go to the vertex inserted first.

    Args:
        graph: A weighted graph; edge direction is ignored.
        start: Root vertex. Defaults to the first vertex inserted.
        no_edge: Frontier weight of vertices without a connecting edge. Edges
            weighing `no_edge` or more never improve a frontier entry.

    Returns:
        The spanning tree, edges in the order their vertices joined.

    Raises:
        EmptyGraphError: If the graph has no vertices.
        UnknownVertexError: If `start` is not in the graph.
        DisconnectedGraphError: If some vertex is never reached.
    """
    started = perf_counter()
    vertices = _require_vertices(graph, "Prim")
    if start is None:
        start = vertices[0]
    else:
        graph.get_vertex(start)

    order: Dict[Label, int] = {label: i for i, label in enumerate(vertices)}
    incident: Dict[Label, List[Edge]] = {label: [] for label in vertices}
    for edge in graph.edges:
        incident[edge.source].append(edge)
        if edge.target != edge.source:
            incident[edge.target].append(edge)

    frontier: Dict[Label, Cost] = {label: no_edge for label in vertices}
    best_edge: Dict[Label, Optional[Edge]] = {label: None for label in vertices}
    frontier[start] = 0
    in_tree = set()
    accepted: List[Edge] = []
    # Heap entries: (frontier weight, vertex insertion index, label)
    queue: List[Tuple[Cost, int, Label]] = [(0, order[start], start)]

    while queue:
        weight, _, label = heappop(queue)
        if label in in_tree or weight > frontier[label]:
            continue
        in_tree.add(label)
        if best_edge[label] is not None:
            accepted.append(best_edge[label])

        for edge in incident[label]:
            neighbor = edge.other(label)
            if neighbor in in_tree:
                continue
            if edge.cost < frontier[neighbor]:
                frontier[neighbor] = edge.cost
                best_edge[neighbor] = edge
                heappush(queue, (edge.cost, order[neighbor], neighbor))

    if len(in_tree) < len(vertices):
        raise DisconnectedGraphError(
            f"Prim: graph {graph!r} is not connected; reached {len(in_tree)} "
            f"of {len(vertices)} vertices from '{start}'.",
            reached=len(in_tree),
            total=len(vertices),
        )

    tree = SpanningTree(tuple(vertices), tuple(accepted))
    logger.debug(
        "Prim MST over %d vertices from %r: weight=%s in %.6fs",
        len(vertices),
        start,
        tree.weight,
        perf_counter() - started,
    )
    return tree


def minimum_spanning_tree(
    graph: Graph, algorithm: MstAlgorithm = MstAlgorithm.KRUSKAL
) -> SpanningTree:
    """Build a minimum spanning tree with the selected algorithm."""
    if algorithm == MstAlgorithm.KRUSKAL:
        return kruskal(graph)
    if algorithm == MstAlgorithm.PRIM:
        return prim(graph)
    raise ValueError(f"Unsupported MST algorithm: {algorithm!r}")
