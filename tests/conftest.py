"""
Pytest configuration for adjgraph tests.

Library tests use the package directly; CLI tests go through a subprocess
bridge that feeds JSON on stdin, the same way a caller would.
"""
import json
import os
import subprocess
import sys

import pytest

from adjgraph import Graph

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")


@pytest.fixture
def graph():
    """Empty graph."""
    return Graph()


@pytest.fixture
def reference_graph():
    """Vertices 0..3 with edges 0->1, 0->2, 1->3."""
    return Graph.from_edge_pairs([(0, 1), (0, 2), (1, 3)], 4)


@pytest.fixture
def city_graph():
    """Undirected graph of named vertices, both directions inserted."""
    cities = ["Seattle", "San Francisco", "Los Angeles", "Denver", "Chicago"]
    pairs = [(0, 1), (0, 3), (1, 2), (1, 3), (2, 3), (3, 4)]
    edges = []
    for u, v in pairs:
        edges.append((u, v))
        edges.append((v, u))
    return Graph(cities, edges)


@pytest.fixture
def disconnected_graph():
    """Two components: {A, B, C} and {D, E}."""
    g = Graph(["A", "B", "C", "D", "E"])
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(3, 4)
    return g


@pytest.fixture
def cli():
    """Run the command line with a JSON document on stdin."""

    class CliBridge:
        def __init__(self):
            self.env = os.environ.copy()
            self.env["PYTHONPATH"] = os.pathsep.join(
                p for p in [PY_DIR, self.env.get("PYTHONPATH", "")] if p
            )
            self.env.pop("ADJGRAPH_FORMAT", None)
            self.env.pop("ADJGRAPH_LOG_LEVEL", None)

        def run(self, doc, *args, env=None):
            run_env = dict(self.env, **(env or {}))
            return subprocess.run(
                [sys.executable, "-m", "adjgraph", *args],
                input=json.dumps(doc),
                capture_output=True,
                text=True,
                env=run_env,
            )

        def call(self, doc, *args):
            result = self.run(doc, *args)
            if result.returncode != 0:
                raise RuntimeError(result.stdout + result.stderr)
            return json.loads(result.stdout)

    return CliBridge()
