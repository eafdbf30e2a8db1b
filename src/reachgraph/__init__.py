"""
reachgraph: an immutable undirected graph with depth-first connected
components and reachability queries.
"""

from .errors import GraphError, MalformedInputError, InvalidVertexError, InvalidEdgeError
from .graph import (
    Graph,
    TupleSource,
    UNKNOWN_VERTEX_POLICIES,
)
from .io.tuples import TupleReader, read_graph
from .io.convert import to_nx, from_nx
from .viz.draw import component_layout, draw_components

__all__ = [
    # Graph
    "Graph",
    "TupleSource",
    "UNKNOWN_VERTEX_POLICIES",
    # Errors
    "GraphError",
    "MalformedInputError",
    "InvalidVertexError",
    "InvalidEdgeError",
    # IO
    "TupleReader",
    "read_graph",
    "to_nx",
    "from_nx",
    # Viz
    "component_layout",
    "draw_components",
]
