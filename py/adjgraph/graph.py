"""Graph creation, mutation and lookup over index-addressed adjacency lists."""
import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .types import Edge, NOT_FOUND, check_index
from .traversal import bfs as _bfs, dfs as _dfs
from .tree import Tree

logger = logging.getLogger(__name__)

EdgeLike = Union[Edge, Tuple[int, int], Sequence[int]]


class Graph:
    """Mutable graph of opaque vertex values addressed by dense indices.

    Vertices are unique by equality. Edges are directed and stored per
    source vertex in insertion order; an undirected edge is two calls to
    add_edge.
    """

    def __init__(self, vertices: Optional[Iterable[Any]] = None,
                 edges: Optional[Iterable[EdgeLike]] = None):
        self._vertices: List[Any] = []
        self._adj: List[List[Edge]] = []

        for vertex in vertices or ():
            self.add_vertex(vertex)
        if edges is not None:
            self._add_edges(edges)

    @classmethod
    def from_edge_pairs(cls, edges: Iterable[EdgeLike], number_of_vertices: int) -> "Graph":
        """Build a graph whose vertices are the integers 0..number_of_vertices-1."""
        return cls(range(number_of_vertices), edges)

    def _add_edges(self, edges: Iterable[EdgeLike]) -> None:
        added = 0
        for edge in edges:
            if isinstance(edge, Edge):
                u, v = edge.u, edge.v
            else:
                u, v = edge
            if self.add_edge(u, v):
                added += 1
        logger.debug("Built graph with %d vertices and %d edges", len(self._vertices), added)

    def get_size(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def get_vertices(self) -> List[Any]:
        """Copy of the vertex values in index order."""
        return list(self._vertices)

    def get_vertex(self, index: int) -> Any:
        """Vertex value at index."""
        check_index(index, len(self._vertices))
        return self._vertices[index]

    def get_index(self, vertex: Any) -> int:
        """First index holding a value equal to vertex, or NOT_FOUND."""
        for i, value in enumerate(self._vertices):
            if value == vertex:
                return i
        return NOT_FOUND

    def get_neighbors(self, index: int) -> List[int]:
        """Target indices of the edges leaving index, in insertion order."""
        check_index(index, len(self._vertices))
        return [edge.v for edge in self._adj[index]]

    def get_edges(self, index: int) -> List[Edge]:
        """Copy of the edges stored under index, in insertion order."""
        check_index(index, len(self._vertices))
        return list(self._adj[index])

    def get_degree(self, index: int) -> int:
        """Number of outgoing edges stored under index."""
        check_index(index, len(self._vertices))
        return len(self._adj[index])

    def add_vertex(self, vertex: Any) -> bool:
        """Append vertex with an empty adjacency list.

        Returns False, leaving the graph untouched, if an equal value is
        already present.
        """
        if self.get_index(vertex) != NOT_FOUND:
            return False
        self._vertices.append(vertex)
        self._adj.append([])
        return True

    def add_edge(self, u: int, v: int) -> bool:
        """Add the directed edge u -> v.

        Raises VertexIndexError if either endpoint is out of range. Returns
        False if the same edge is already stored under u.
        """
        size = len(self._vertices)
        check_index(u, size)
        check_index(v, size)

        edge = Edge(u, v)
        if edge in self._adj[u]:
            return False
        self._adj[u].append(edge)
        return True

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._vertices.clear()
        self._adj.clear()

    def bfs(self, start: int) -> Tree:
        """Breadth-first search tree rooted at start."""
        return _bfs(self, start)

    def dfs(self, start: int) -> Tree:
        """Depth-first search tree rooted at start."""
        return _dfs(self, start)

    def __repr__(self) -> str:
        edge_count = sum(len(edges) for edges in self._adj)
        return f"Graph(vertices={len(self._vertices)}, edges={edge_count})"
