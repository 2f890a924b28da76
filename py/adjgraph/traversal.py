"""Graph traversal algorithms: BFS and DFS."""
import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, List

from .types import NO_PARENT, check_index
from .tree import Tree

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


def bfs(graph: "Graph", start: int) -> Tree:
    """Breadth-first search traversal.

    Vertices are marked visited when they are enqueued, so each one enters
    the queue at most once and its parent is the first vertex to see it.
    """
    size = graph.get_size()
    check_index(start, size)

    search_order: List[int] = []
    parent = [NO_PARENT] * size
    visited = [False] * size

    queue: Deque[int] = deque([start])
    visited[start] = True

    while queue:
        u = queue.popleft()
        search_order.append(u)
        for v in graph.get_neighbors(u):
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                queue.append(v)

    logger.debug("bfs from %d reached %d of %d vertices", start, len(search_order), size)
    return Tree(start, parent, search_order, graph.get_vertices())


def dfs(graph: "Graph", start: int) -> Tree:
    """Depth-first search traversal.

    Uses an explicit stack with visited marking at push time. Neighbors are
    pushed in reverse adjacency order so the first neighbor is expanded first.
    """
    size = graph.get_size()
    check_index(start, size)

    search_order: List[int] = []
    parent = [NO_PARENT] * size
    visited = [False] * size

    stack: List[int] = [start]
    visited[start] = True

    while stack:
        u = stack.pop()
        search_order.append(u)
        for v in reversed(graph.get_neighbors(u)):
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                stack.append(v)

    logger.debug("dfs from %d reached %d of %d vertices", start, len(search_order), size)
    return Tree(start, parent, search_order, graph.get_vertices())
