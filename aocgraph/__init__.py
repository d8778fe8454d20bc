"""aocgraph: a small embeddable graph library.

aocgraph provides a labeled-vertex graph with optional edge weights and the
algorithms puzzle solvers keep reaching for: minimum spanning trees
(Kruskal, Prim) and an exhaustive Hamiltonian path/cycle search driven by a
result callback.

Primary API:
    Graph, Edge - Graph model
    kruskal(), prim() - Minimum spanning tree builders
    find_hamiltonian_paths() - Callback-driven Hamiltonian search
    PathfinderConfig - Search options
    to_networkx(), from_networkx() - NetworkX interop

Example:
    from aocgraph import Graph, PathfinderConfig, min_cost_path

    graph = Graph(name="routes")
    for city in ("London", "Dublin", "Belfast"):
        graph.add_vertex(city)
    graph.add_edge("London", "Dublin", 464)
    graph.add_edge("London", "Belfast", 518)
    graph.add_edge("Dublin", "Belfast", 141)

    shortest = min_cost_path(graph, PathfinderConfig(sum_path=True))
    assert shortest.cost == 605
"""

from __future__ import annotations

from aocgraph import logging
from aocgraph.algorithms import (
    MstAlgorithm,
    PathfinderResult,
    PathfinderStatus,
    SpanningTree,
    UnionFind,
    collect_paths,
    find_hamiltonian_paths,
    kruskal,
    max_cost_path,
    min_cost_path,
    minimum_spanning_tree,
    prim,
)
from aocgraph.config import DEFAULT_PATHFINDER_CONFIG, PathfinderConfig
from aocgraph.exceptions import (
    DisconnectedGraphError,
    EmptyGraphError,
    GraphError,
    InvalidEdgeError,
    UnknownVertexError,
)
from aocgraph.graph import Edge, Graph, Vertex
from aocgraph.graph.convert import from_networkx, to_networkx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Edge",
    "Vertex",
    # Algorithms
    "kruskal",
    "prim",
    "minimum_spanning_tree",
    "find_hamiltonian_paths",
    "collect_paths",
    "min_cost_path",
    "max_cost_path",
    "UnionFind",
    # Types
    "MstAlgorithm",
    "PathfinderConfig",
    "PathfinderResult",
    "PathfinderStatus",
    "SpanningTree",
    "DEFAULT_PATHFINDER_CONFIG",
    # Errors
    "GraphError",
    "UnknownVertexError",
    "InvalidEdgeError",
    "EmptyGraphError",
    "DisconnectedGraphError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
