from __future__ import annotations


class GraphError(Exception):
    """Base exception for reachgraph errors."""


class MalformedInputError(GraphError, ValueError):
    """Raised when a tuple source cannot supply a well-formed pair of integers."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class InvalidVertexError(GraphError, ValueError):
    """Raised for a vertex that is ill-typed or not part of the graph."""

    def __init__(self, message: str, vertex=None):
        super().__init__(message)
        self.vertex = vertex


class InvalidEdgeError(GraphError, ValueError):
    """Raised for an edge that is not a pair of vertices."""
