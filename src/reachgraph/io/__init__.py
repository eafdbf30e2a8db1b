from .tuples import TupleReader, read_graph
from .convert import to_nx, from_nx

__all__ = [
    "TupleReader",
    "read_graph",
    "to_nx",
    "from_nx",
]
