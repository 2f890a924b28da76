"""Command-line wrapper: read a graph as JSON on stdin, traverse or print it."""
import argparse
import json
import logging
import os
import sys
from typing import Any

from .display import format_edges, format_tree, tree_to_dict
from .graph import Graph
from .types import GraphError, GraphFormatError

logger = logging.getLogger(__name__)


def load_graph(doc: Any) -> Graph:
    """Build a graph from {"vertices": [...], "edges": [...]} or
    {"number_of_vertices": n, "edges": [...]}.

    Raises GraphFormatError when the document does not have that shape.
    """
    if not isinstance(doc, dict):
        raise GraphFormatError(f"Graph document must be an object, got {type(doc).__name__}")

    raw_edges = doc.get("edges", [])
    if not isinstance(raw_edges, list):
        raise GraphFormatError("'edges' must be a list of [u, v] pairs")
    edges = []
    for edge in raw_edges:
        if not isinstance(edge, list) or len(edge) != 2:
            raise GraphFormatError(f"Edge must be a [u, v] pair, got {json.dumps(edge)}")
        edges.append((edge[0], edge[1]))

    if "number_of_vertices" in doc:
        n = doc["number_of_vertices"]
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise GraphFormatError(f"'number_of_vertices' must be a non-negative integer, got {json.dumps(n)}")
        return Graph.from_edge_pairs(edges, n)

    vertices = doc.get("vertices", [])
    if not isinstance(vertices, list):
        raise GraphFormatError("'vertices' must be a list")
    return Graph(vertices, edges)


def _run_traversal(graph: Graph, args: argparse.Namespace) -> Any:
    tree = graph.bfs(args.start) if args.command == "bfs" else graph.dfs(args.start)
    if args.format == "text":
        return format_tree(tree)
    return tree_to_dict(tree)


def _run_edges(graph: Graph, args: argparse.Namespace) -> Any:
    if args.format == "text":
        return format_edges(graph)
    return {
        "vertices": graph.get_vertices(),
        "edges": [[e.u, e.v] for u in range(graph.get_size()) for e in graph.get_edges(u)],
    }


COMMANDS = {
    'bfs': _run_traversal,
    'dfs': _run_traversal,
    'edges': _run_edges,
}


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='adjgraph',
        description='Traverse a graph read as JSON from stdin')
    parser.add_argument('command', choices=sorted(COMMANDS))
    parser.add_argument('--start', type=int, default=0,
                        help='Start vertex index for bfs/dfs (default: 0)')
    parser.add_argument('--format', choices=['json', 'text'], default=None,
                        help='Output format (default: from ADJGRAPH_FORMAT env or json)')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS, default=None,
                        help='Logging level (default: from ADJGRAPH_LOG_LEVEL env or WARNING)')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.format = args.format or os.environ.get('ADJGRAPH_FORMAT', 'json')
    log_level = args.log_level or os.environ.get('ADJGRAPH_LOG_LEVEL', 'WARNING').upper()
    if log_level not in LOG_LEVELS:
        parser.error(f"invalid ADJGRAPH_LOG_LEVEL: {log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    _setup_logging(log_level)

    try:
        doc = json.loads(sys.stdin.read() or "{}")
        graph = load_graph(doc)
        logger.debug("Loaded %r", graph)
        result = COMMANDS[args.command](graph, args)
    except (json.JSONDecodeError, GraphError) as e:
        print(json.dumps({"error": str(e)}))
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
