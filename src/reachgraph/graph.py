from __future__ import annotations

import logging
import os
from functools import cached_property
from typing import Dict, FrozenSet, Iterable, List, Optional, Protocol, Set, Tuple

from reachgraph.errors import InvalidEdgeError, InvalidVertexError

logger = logging.getLogger(__name__)

Vertex = int
Edge = Tuple[Vertex, Vertex]
Adjacencies = Dict[Vertex, Set[Vertex]]
ConnectedComponents = List[List[Vertex]]

UNKNOWN_VERTEX_POLICIES = ("reject", "add", "ignore")

REACHGRAPH_UNKNOWN_VERTICES = os.environ.get("REACHGRAPH_UNKNOWN_VERTICES", "reject")


class TupleSource(Protocol):
    """Anything that yields the next pair of integers from an input stream."""

    def next_tuple(self) -> Tuple[int, int]: ...


def _resolve_policy(policy: Optional[str]) -> str:
    if policy is None:
        policy = REACHGRAPH_UNKNOWN_VERTICES
    if policy not in UNKNOWN_VERTEX_POLICIES:
        raise ValueError(
            f"unknown_vertices must be one of {UNKNOWN_VERTEX_POLICIES}, got {policy!r}"
        )
    return policy


def _check_vertex(v) -> Vertex:
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidVertexError(f"vertex must be an int, got {v!r}", vertex=v)
    if v < 0:
        raise InvalidVertexError(f"vertex must be non-negative, got {v}", vertex=v)
    return v


def _check_edge(edge) -> Edge:
    try:
        u, v = edge
    except (TypeError, ValueError):
        raise InvalidEdgeError(f"edge must be a pair of vertices, got {edge!r}") from None
    return _check_vertex(u), _check_vertex(v)


class Graph:
    """
    Immutable undirected graph over integer vertices.

    vertices: frozenset of non-negative ints.
    edges:    tuple of (u, v) pairs in insertion order. Duplicates and
              self-loops are kept; (u, v) and (v, u) mean the same edge.

    Edge endpoints missing from *vertices* are handled according to
    *unknown_vertices*:
      - "reject": raise InvalidVertexError (default)
      - "add":    register the endpoint as a vertex
      - "ignore": drop the edge
    None falls back to $REACHGRAPH_UNKNOWN_VERTICES.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        edges: Iterable[Edge],
        *,
        unknown_vertices: Optional[str] = None,
    ):
        policy = _resolve_policy(unknown_vertices)
        verts = {_check_vertex(v) for v in vertices}

        kept: List[Edge] = []
        for edge in edges:
            u, v = _check_edge(edge)
            missing = [x for x in (u, v) if x not in verts]
            if missing:
                if policy == "reject":
                    raise InvalidVertexError(
                        f"edge {(u, v)} references vertex {missing[0]} not in the graph",
                        vertex=missing[0],
                    )
                if policy == "ignore":
                    logger.warning("Dropping edge %s: endpoint(s) %s not in the graph", (u, v), missing)
                    continue
                verts.update(missing)
            kept.append((u, v))

        self._vertices: FrozenSet[Vertex] = frozenset(verts)
        self._edges: Tuple[Edge, ...] = tuple(kept)

    @classmethod
    def load(cls, source: TupleSource, *, unknown_vertices: Optional[str] = None) -> Graph:
        """
        Build a graph from a tuple source.

        The first tuple is (V, E); the next E tuples are edges. Vertices are
        1..V. Errors raised by the source propagate unchanged.
        """
        n_vertices, n_edges = source.next_tuple()
        vertices = range(1, n_vertices + 1)
        edges: List[Edge] = []
        for _ in range(n_edges):
            edges.append(source.next_tuple())
        logger.debug("Loaded graph header V=%d E=%d", n_vertices, n_edges)
        return cls(vertices, edges, unknown_vertices=unknown_vertices)

    @property
    def vertices(self) -> FrozenSet[Vertex]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, v) -> bool:
        return v in self._vertices

    def __repr__(self) -> str:
        return f"Graph(|V|={len(self._vertices)}, |E|={len(self._edges)})"

    def adjacencies(self) -> Adjacencies:
        """
        Build a fresh vertex -> neighbour set map from the edge list.

        Complexity: O(|V| + |E|).
        """
        adj: Adjacencies = {v: set() for v in self._vertices}
        for u, v in self._edges:
            adj[u].add(v)
            adj[v].add(u)
        return adj

    @cached_property
    def _ordered_adjacency(self) -> Dict[Vertex, Tuple[Vertex, ...]]:
        # neighbours in descending order, ready to push onto the DFS stack
        return {v: tuple(sorted(nbrs, reverse=True)) for v, nbrs in self.adjacencies().items()}

    def _require_vertex(self, v) -> None:
        _check_vertex(v)
        if v not in self._vertices:
            raise InvalidVertexError(f"vertex {v!r} is not in the graph", vertex=v)

    def explore(self, origin: Vertex, visited: Optional[Set[Vertex]] = None) -> List[Vertex]:
        """
        Depth-first traversal from *origin* using an explicit stack.

        Neighbours are visited in ascending order. *visited* is updated in
        place and may be shared across calls; vertices already in it are not
        revisited. Returns the newly discovered vertices in discovery order.
        """
        self._require_vertex(origin)
        if visited is None:
            visited = set()

        adj = self._ordered_adjacency
        order: List[Vertex] = []
        stack = [origin]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            for nbr in adj[node]:
                if nbr not in visited:
                    stack.append(nbr)
        return order

    def depth_first_search(self) -> ConnectedComponents:
        """
        Partition all vertices into connected components.

        Vertices are scanned in ascending order with one shared visited set,
        so components come out ordered by their smallest vertex and each
        starts with it.
        """
        visited: Set[Vertex] = set()
        components: ConnectedComponents = []
        for v in sorted(self._vertices):
            if v not in visited:
                components.append(self.explore(v, visited))
        return components

    def connected_components(self) -> ConnectedComponents:
        return self.depth_first_search()

    def is_reachable(self, v: Vertex, w: Vertex) -> bool:
        """True iff *w* can be reached from *v*."""
        self._require_vertex(w)
        visited: Set[Vertex] = set()
        self.explore(v, visited)
        return w in visited

    def component_of(self, v: Vertex) -> List[Vertex]:
        """The component containing *v*, in discovery order."""
        return self.explore(v)

    def is_connected(self) -> bool:
        """The empty graph counts as connected."""
        if not self._vertices:
            return True
        return len(self.explore(min(self._vertices))) == len(self._vertices)
