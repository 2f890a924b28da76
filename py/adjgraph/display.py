"""Read-only text and dict renderings of graphs and traversal trees."""
from typing import Any, Dict

from .graph import Graph
from .tree import Tree


def format_edges(graph: Graph) -> str:
    """One line per vertex listing its outgoing edges by value."""
    vertices = graph.get_vertices()
    lines = []
    for u, value in enumerate(vertices):
        edges = " ".join(
            f"({vertices[e.u]}, {vertices[e.v]})" for e in graph.get_edges(u)
        )
        lines.append(f"{value} ({u}): {edges}".rstrip())
    return "\n".join(lines)


def format_path(tree: Tree, index: int) -> str:
    """Path from the root to index, root first."""
    path = tree.get_path(index)
    root_value = tree.vertices[tree.root]
    target_value = tree.vertices[index]
    if not path:
        return f"No path from {root_value} to {target_value}"
    steps = " ".join(str(value) for value in reversed(path))
    return f"A path from {root_value} to {target_value}: {steps}"


def format_tree(tree: Tree) -> str:
    """Root and parent -> child edges of the tree."""
    vertices = tree.vertices
    edges = " ".join(
        f"({vertices[p]}, {vertices[child]})"
        for child, p in enumerate(tree.parent)
        if tree.get_parent(child) is not None
    )
    return f"Root is: {vertices[tree.root]}\nEdges: {edges}".rstrip()


def tree_to_dict(tree: Tree) -> Dict[str, Any]:
    """JSON-friendly summary of a traversal tree."""
    vertices = tree.vertices
    return {
        "root": tree.root,
        "order": list(tree.get_search_order()),
        "parent": list(tree.parent),
        "found": tree.get_number_of_vertices_found(),
        "paths": {
            str(i): tree.get_path(i) for i in tree.get_search_order()
        },
        "vertices": list(vertices),
    }
