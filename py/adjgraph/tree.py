"""Spanning tree produced by a traversal, with path reconstruction."""
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple

from .types import NO_PARENT, VertexStatus, check_index


class Tree:
    """Parent-pointer tree rooted at the traversal's start vertex.

    The tree keeps a snapshot of the graph's vertex values taken when the
    traversal finished. Mutating the graph afterwards does not update it.

    The parent array uses NO_PARENT for both the root and vertices the
    traversal never reached. Use get_status or is_reached to tell them apart.
    """

    def __init__(self, root: int, parent: Sequence[int], search_order: Sequence[int],
                 vertices: Sequence[Any]):
        self._root = root
        self._parent: Tuple[int, ...] = tuple(parent)
        self._search_order: Tuple[int, ...] = tuple(search_order)
        self._vertices: Tuple[Any, ...] = tuple(vertices)
        self._reached: FrozenSet[int] = frozenset(self._search_order)

    @property
    def root(self) -> int:
        """Index of the start vertex."""
        return self._root

    @property
    def parent(self) -> Tuple[int, ...]:
        """Raw parent array, NO_PARENT for the root and unreached vertices."""
        return self._parent

    @property
    def vertices(self) -> Tuple[Any, ...]:
        """Vertex values as they were when the traversal finished."""
        return self._vertices

    def get_root(self) -> int:
        return self._root

    def get_parent(self, index: int) -> Optional[int]:
        """Index of the vertex that discovered index, or None if there is none."""
        check_index(index, len(self._parent))
        p = self._parent[index]
        return None if p == NO_PARENT else p

    def get_search_order(self) -> Tuple[int, ...]:
        return self._search_order

    def get_number_of_vertices_found(self) -> int:
        return len(self._search_order)

    def is_reached(self, index: int) -> bool:
        check_index(index, len(self._parent))
        return index in self._reached

    def get_status(self, index: int) -> VertexStatus:
        """Classify index as the root, a reached vertex, or unreached."""
        check_index(index, len(self._parent))
        if index == self._root:
            return VertexStatus.ROOT
        if index in self._reached:
            return VertexStatus.REACHED
        return VertexStatus.UNREACHED

    def get_path(self, index: int) -> List[Any]:
        """Vertex values from index back up to the root, target first.

        Reverse the result for root-to-target order. Returns an empty list
        when index was not reached, since no path to it exists.
        """
        return [self._vertices[i] for i in self.get_path_indices(index)]

    def get_path_indices(self, index: int) -> List[int]:
        """Same walk as get_path, returning indices instead of values."""
        check_index(index, len(self._parent))
        if index not in self._reached:
            return []

        path = []
        while index != NO_PARENT:
            path.append(index)
            index = self._parent[index]
        return path

    def __repr__(self) -> str:
        return f"Tree(root={self._root}, found={len(self._search_order)})"
