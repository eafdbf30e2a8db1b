from __future__ import annotations

import io
import logging
import os
from typing import Iterator, Optional, TextIO, Tuple, Union

from reachgraph.errors import MalformedInputError
from reachgraph.graph import Graph

logger = logging.getLogger(__name__)


def _parse_uint(token: str, line: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedInputError(f"expected a non-negative integer, got {token!r}", line=line)
    return int(token)


class TupleReader:
    """
    Line-based source of integer pairs.

    Each non-blank line that does not start with '#' must hold exactly two
    whitespace-separated non-negative integers:

        3 2
        1 2
        2 3
    """

    def __init__(self, stream: TextIO):
        self._lines: Iterator[str] = iter(stream)
        self.line = 0

    @classmethod
    def from_string(cls, text: str) -> TupleReader:
        return cls(io.StringIO(text))

    def next_tuple(self) -> Tuple[int, int]:
        for raw in self._lines:
            self.line += 1
            s = raw.strip()
            if not s or s.startswith("#"):
                continue
            parts = s.split()
            if len(parts) != 2:
                raise MalformedInputError(
                    f"expected a pair of integers, got {len(parts)} field(s): {s!r}",
                    line=self.line,
                )
            return _parse_uint(parts[0], self.line), _parse_uint(parts[1], self.line)
        raise MalformedInputError("expected a pair of integers, got end of input", line=self.line + 1)


def read_graph(
    path: Union[str, os.PathLike],
    *,
    unknown_vertices: Optional[str] = None,
) -> Graph:
    """
    Read a graph file: a 'V E' header line followed by E edge lines.
    """
    logger.debug("Reading graph from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        return Graph.load(TupleReader(f), unknown_vertices=unknown_vertices)
