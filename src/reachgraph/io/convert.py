from __future__ import annotations

from typing import Optional

import networkx as nx

from reachgraph.graph import Graph


def to_nx(graph: Graph) -> nx.Graph:
    """
    Convert to a simple undirected NetworkX Graph.

    Isolated vertices are kept; duplicate edges collapse.
    """
    G = nx.Graph()
    G.add_nodes_from(sorted(graph.vertices))
    G.add_edges_from(graph.edges)
    return G


def from_nx(G: nx.Graph, *, unknown_vertices: Optional[str] = None) -> Graph:
    """
    Build a Graph from a NetworkX graph with non-negative int nodes.

    Multigraph edges are kept with their multiplicity.
    """
    if G.is_directed():
        raise ValueError("reachgraph graphs are undirected; got a directed NetworkX graph")
    return Graph(G.nodes(), ((u, v) for u, v in G.edges()), unknown_vertices=unknown_vertices)
