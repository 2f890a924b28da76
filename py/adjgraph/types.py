"""Type definitions and errors for the adjacency-list graph library."""
from dataclasses import dataclass
from enum import Enum


# Sentinel returned by Graph.get_index for an absent value
NOT_FOUND = -1

# Parent slot for the root and for vertices a traversal never reached
NO_PARENT = -1


@dataclass(frozen=True)
class Edge:
    """Directed edge between two vertex indices."""
    u: int
    v: int


class VertexStatus(Enum):
    """Where a vertex sits relative to a traversal tree."""
    ROOT = "root"
    REACHED = "reached"
    UNREACHED = "unreached"


# Errors
class GraphError(Exception):
    """Base error for graph operations."""
    pass


class GraphFormatError(GraphError):
    """A graph document does not have the expected shape."""
    pass


class VertexIndexError(GraphError, IndexError):
    """A vertex index outside [0, size) was passed to the graph or a tree."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Vertex index out of bounds: {index} (size {size})")


def check_index(index: int, size: int) -> int:
    """Return index unchanged, or raise VertexIndexError if it is out of range.

    Negative indices are rejected rather than counted from the end.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise VertexIndexError(index, size)
    if index < 0 or index >= size:
        raise VertexIndexError(index, size)
    return index
