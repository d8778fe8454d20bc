"""Graph algorithms: union-find, minimum spanning trees, Hamiltonian search."""

from aocgraph.algorithms.hamiltonian import (
    collect_paths,
    find_hamiltonian_paths,
    max_cost_path,
    min_cost_path,
)
from aocgraph.algorithms.mst import kruskal, minimum_spanning_tree, prim
from aocgraph.algorithms.types import (
    MstAlgorithm,
    PathfinderResult,
    PathfinderStatus,
    SpanningTree,
)
from aocgraph.algorithms.union_find import UnionFind

__all__ = [
    "MstAlgorithm",
    "PathfinderResult",
    "PathfinderStatus",
    "SpanningTree",
    "UnionFind",
    "collect_paths",
    "find_hamiltonian_paths",
    "kruskal",
    "max_cost_path",
    "min_cost_path",
    "minimum_spanning_tree",
    "prim",
]
