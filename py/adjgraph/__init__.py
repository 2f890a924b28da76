"""Adjacency-list graph library - public API."""
from .types import Edge, GraphError, GraphFormatError, VertexIndexError, VertexStatus, NOT_FOUND, NO_PARENT
from .graph import Graph
from .traversal import bfs, dfs
from .tree import Tree
from .display import format_edges, format_path, format_tree, tree_to_dict

__all__ = [
    'Graph', 'Tree', 'Edge', 'VertexStatus',
    'GraphError', 'GraphFormatError', 'VertexIndexError', 'NOT_FOUND', 'NO_PARENT',
    'bfs', 'dfs',
    'format_edges', 'format_path', 'format_tree', 'tree_to_dict',
]
