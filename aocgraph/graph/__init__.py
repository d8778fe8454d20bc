"""Graph primitives and helpers.

This package provides the labeled-vertex `Graph` type with its `Edge` and
`Vertex` records, and a helper module for NetworkX conversion (`convert`).
"""

from aocgraph.graph.graph import Cost, Edge, EdgeKey, Graph, Label, Vertex

__all__ = ["Cost", "Edge", "EdgeKey", "Graph", "Label", "Vertex"]
