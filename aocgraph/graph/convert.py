"""Graph conversion utilities between `Graph` and NetworkX graphs.

Graphs made only of undirected edges convert to `networkx.Graph`. As soon as
one directed edge is present the result is a `networkx.DiGraph` in which each
undirected edge is expanded into a pair of opposite arcs.
"""

from typing import Optional, Union

import networkx as nx

from aocgraph.graph.graph import Graph

NxGraph = Union[nx.Graph, nx.DiGraph]


def to_networkx(graph: Graph, weight_attr: str = "weight") -> NxGraph:
    """Convert a `Graph` to a NetworkX graph.

    Vertex insertion order is preserved. Edges without a weight carry no
    weight attribute.

    Args:
        graph: The graph to convert.
        weight_attr: Name of the NetworkX edge attribute receiving the weight.

    Returns:
        A `networkx.Graph` or `networkx.DiGraph`.
    """
    edges = graph.edges
    directed = any(edge.directed for edge in edges)
    nx_graph: NxGraph = nx.DiGraph() if directed else nx.Graph()
    nx_graph.graph["name"] = graph.name
    nx_graph.add_nodes_from(graph.get_vertices())

    for edge in edges:
        attrs = {} if edge.weight is None else {weight_attr: edge.weight}
        nx_graph.add_edge(edge.source, edge.target, **attrs)
        if directed and not edge.directed:
            nx_graph.add_edge(edge.target, edge.source, **attrs)
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    weight_attr: Optional[str] = "weight",
    name: Optional[str] = None,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Undirected NetworkX graphs produce undirected edges and directed ones
    produce directed edges. Multi-edges are not supported.

    Args:
        nx_graph: Source graph.
        weight_attr: Edge attribute to read weights from; None ignores weights.
        name: Name for the new graph; defaults to ``nx_graph.graph["name"]``.

    Returns:
        A new `Graph`.

    Raises:
        TypeError: If `nx_graph` is a multigraph.
        InvalidEdgeError: If the source graph has self-loops.
    """
    if nx_graph.is_multigraph():
        raise TypeError("Multigraphs are not supported.")

    if name is None:
        name = nx_graph.graph.get("name", "")
    graph = Graph(name=name)
    graph.add_vertices_from(nx_graph.nodes)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        weight = data.get(weight_attr) if weight_attr is not None else None
        graph.add_edge(u, v, weight=weight, directed=directed)
    return graph
