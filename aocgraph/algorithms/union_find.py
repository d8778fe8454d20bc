"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator

from aocgraph.exceptions import UnknownVertexError
from aocgraph.graph.graph import Label


class UnionFind:
    """Tracks which labels belong to the same connected component.

    Labels must be registered with `make_set` before they can be queried;
    `find` and `union` on an unknown label raise `UnknownVertexError`.

    Example:
        >>> uf = UnionFind(["A", "B", "C"])
        >>> uf.union("A", "B")
        True
        >>> uf.union("B", "A")
        False
        >>> uf.connected("A", "C")
        False
    """

    def __init__(self, labels: Iterable[Label] = ()) -> None:
        self._parent: Dict[Label, Label] = {}
        self._rank: Dict[Label, int] = {}
        self._components = 0
        for label in labels:
            self.make_set(label)

    def make_set(self, label: Label) -> None:
        """Create a singleton component; no-op if `label` is already known."""
        if label in self._parent:
            return
        self._parent[label] = label
        self._rank[label] = 0
        self._components += 1

    def find(self, label: Label) -> Label:
        """Return the representative of the component containing `label`.

        Every node on the walked chain is rewired directly to the root.
        """
        if label not in self._parent:
            raise UnknownVertexError(label, f"'{label}' was never added to the set.")

        root = label
        while self._parent[root] != root:
            root = self._parent[root]

        while self._parent[label] != root:
            self._parent[label], label = root, self._parent[label]
        return root

    def union(self, a: Label, b: Label) -> bool:
        """Merge the components of `a` and `b`.

        Returns:
            True if two components were merged, False if `a` and `b` were
            already connected.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        self._components -= 1
        return True

    def connected(self, a: Label, b: Label) -> bool:
        return self.find(a) == self.find(b)

    def rank(self, label: Label) -> int:
        """Rank of the root of `label`'s component."""
        return self._rank[self.find(label)]

    @property
    def component_count(self) -> int:
        return self._components

    def __contains__(self, label: object) -> bool:
        return label in self._parent

    def __iter__(self) -> Iterator[Label]:
        return iter(self._parent)

    def __len__(self) -> int:
        return len(self._parent)
