from fractions import Fraction

import pytest

from aocgraph.exceptions import GraphError, InvalidEdgeError, UnknownVertexError
from aocgraph.graph import Edge, Graph


def test_graph_init_empty():
    g = Graph()
    assert g.is_empty()
    assert len(g) == 0
    assert g.get_vertices() == []
    assert g.edges == []


def test_graph_add_vertex_idempotent():
    g = Graph()
    first = g.add_vertex("A")
    second = g.add_vertex("A")
    assert first is second
    assert len(g) == 1
    assert not g.is_empty()


def test_graph_vertices_insertion_order():
    g = Graph()
    for label in ["C", "A", "B", "A"]:
        g.add_vertex(label)
    assert g.get_vertices() == ["C", "A", "B"]
    assert list(g) == ["C", "A", "B"]


def test_graph_contains():
    g = Graph()
    g.add_vertex("A")
    assert "A" in g
    assert "B" not in g


def test_graph_add_edge_undirected_shared_record():
    g = Graph()
    g.add_vertices_from(["A", "B"])
    edge = g.add_edge("A", "B", 7)

    assert edge == Edge("A", "B", 7, directed=False)
    assert g.get_edge("A", "B") is edge
    assert g.get_edge("B", "A") is edge
    assert g.neighbors_of("A") == [edge]
    assert g.neighbors_of("B") == [edge]
    assert g.edges == [edge]
    assert g.number_of_edges() == 1


def test_graph_add_edge_directed_one_way():
    g = Graph()
    g.add_vertices_from(["A", "B"])
    edge = g.add_edge("A", "B", 3, directed=True)

    assert g.neighbors_of("A") == [edge]
    assert g.neighbors_of("B") == []
    assert g.has_edge("A", "B")
    assert not g.has_edge("B", "A")
    with pytest.raises(KeyError):
        g.get_edge("B", "A")


def test_graph_directed_edges_both_ways_are_distinct():
    g = Graph()
    g.add_vertices_from(["A", "B"])
    ab = g.add_edge("A", "B", 1, directed=True)
    ba = g.add_edge("B", "A", 2, directed=True)
    assert ab is not ba
    assert g.get_edge("B", "A").weight == 2
    assert g.edges == [ab, ba]


def test_graph_add_edge_missing_endpoint():
    g = Graph()
    g.add_vertex("A")
    with pytest.raises(InvalidEdgeError, match="'B' does not exist"):
        g.add_edge("A", "B")
    with pytest.raises(InvalidEdgeError):
        g.add_edge("Z", "A")
    assert g.edges == []


def test_graph_self_loop_rejected_by_default():
    g = Graph()
    g.add_vertex("A")
    with pytest.raises(InvalidEdgeError, match="Self-loop"):
        g.add_edge("A", "A", 1)


def test_graph_self_loop_allowed():
    g = Graph(allow_self_loops=True)
    g.add_vertex("A")
    edge = g.add_edge("A", "A", 1)
    assert g.neighbors_of("A") == [edge]


def test_graph_duplicate_edge_rejected():
    g = Graph()
    g.add_vertices_from(["A", "B"])
    g.add_edge("A", "B", 1)
    with pytest.raises(InvalidEdgeError, match="already exists"):
        g.add_edge("A", "B", 2)
    # The reverse direction is occupied by the undirected edge as well
    with pytest.raises(InvalidEdgeError):
        g.add_edge("B", "A", 2, directed=True)


def test_graph_non_numeric_weight_rejected():
    g = Graph()
    g.add_vertices_from(["A", "B"])
    with pytest.raises(InvalidEdgeError, match="non-numeric"):
        g.add_edge("A", "B", "10")
    with pytest.raises(InvalidEdgeError):
        g.add_edge("A", "B", True)


def test_graph_neighbors_of_unknown_vertex():
    g = Graph()
    with pytest.raises(UnknownVertexError) as exc_info:
        g.neighbors_of("Nowhere")
    assert exc_info.value.label == "Nowhere"
    assert "Nowhere" in str(exc_info.value)
    # Still catchable as the built-in lookup error and the library base class
    assert isinstance(exc_info.value, KeyError)
    assert isinstance(exc_info.value, GraphError)


def test_graph_get_edge_unknown_vertex():
    g = Graph()
    g.add_vertex("A")
    with pytest.raises(UnknownVertexError):
        g.get_edge("A", "B")


def test_graph_neighbors_insertion_order(square_with_diagonal):
    edges = square_with_diagonal.neighbors_of("A")
    assert [e.other("A") for e in edges] == ["B", "D", "C"]


def test_edge_other_and_cost():
    weighted = Edge("A", "B", 4)
    unweighted = Edge("A", "B")
    assert weighted.other("A") == "B"
    assert weighted.other("B") == "A"
    assert weighted.cost == 4
    assert unweighted.weight is None
    assert unweighted.cost == 0
    with pytest.raises(UnknownVertexError):
        weighted.other("C")


def test_edge_connects():
    assert Edge("A", "B").connects("B", "A")
    assert Edge("A", "B", directed=True).connects("A", "B")
    assert not Edge("A", "B", directed=True).connects("B", "A")


def test_edge_str():
    assert str(Edge("A", "B", 2)) == "A -- B (2)"
    assert str(Edge("A", "B", directed=True)) == "A -> B"


def test_graph_repr(cities):
    assert repr(cities) == "<Graph 'cities' with 3 vertices and 3 edges>"


def test_graph_accepts_any_real_weight():
    g = Graph()
    g.add_vertices_from(["A", "B", "C"])
    half = g.add_edge("A", "B", Fraction(1, 2))
    third = g.add_edge("B", "C", Fraction(1, 3))
    assert half.weight == Fraction(1, 2)
    assert half.cost + third.cost == Fraction(5, 6)
