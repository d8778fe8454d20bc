"""Shared graph fixtures for the test suite."""

from __future__ import annotations

import pytest

from aocgraph.graph import Graph


def build_graph(edges, directed=False, name=""):
    """Build a graph from ``(source, target, weight)`` tuples.

    Vertices are added in the order they first appear.
    """
    g = Graph(name=name)
    for source, target, _ in edges:
        g.add_vertex(source)
        g.add_vertex(target)
    for source, target, weight in edges:
        g.add_edge(source, target, weight, directed=directed)
    return g


@pytest.fixture
def cities():
    #            [464]
    #   London ────────── Dublin
    #      │                │
    #      │ [518]          │ [141]
    #      │                │
    #      └───── Belfast ──┘
    return build_graph(
        [
            ("London", "Dublin", 464),
            ("London", "Belfast", 518),
            ("Dublin", "Belfast", 141),
        ],
        name="cities",
    )


@pytest.fixture
def triangle():
    #     [1]       [3]
    #   A──────B───────C
    #   │              │
    #   └──────────────┘
    #          [2]
    return build_graph([("A", "B", 1), ("A", "C", 2), ("B", "C", 3)])


@pytest.fixture
def square_with_diagonal():
    #       [1]
    #   A────────B
    #   │ ╲      │
    #   │  ╲[5]  │ [2]
    #   │[4] ╲   │
    #   D────────C
    #       [3]
    return build_graph(
        [
            ("A", "B", 1),
            ("B", "C", 2),
            ("C", "D", 3),
            ("D", "A", 4),
            ("A", "C", 5),
        ]
    )


@pytest.fixture
def dinner_table():
    # Seating happiness: each undirected edge carries the sum of both
    # guests' happiness changes for sitting next to each other.
    return build_graph(
        [
            ("Alice", "Bob", 54 + 83),
            ("Alice", "Carol", -79 - 62),
            ("Alice", "David", -2 + 46),
            ("Bob", "Carol", -7 + 60),
            ("Bob", "David", -63 - 7),
            ("Carol", "David", 55 + 41),
        ],
        name="dinner",
    )


@pytest.fixture
def two_islands():
    #   A───B      C───D
    #    [1]        [2]
    return build_graph([("A", "B", 1), ("C", "D", 2)])
