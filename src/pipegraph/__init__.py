"""pipegraph — connected components of undirected adjacency-list graphs.

The two top-level helpers are pure functions of their text input: they
build an :class:`Adjacency`, wrap it in a :class:`GraphEngine`, and run a
single query. Nothing here reads files or writes output.
"""

from __future__ import annotations

from pipegraph.domain.adjacency import Adjacency, build_adjacency, parse_line
from pipegraph.domain.errors import AdjacencyParseError, GraphError, InvalidNodeError
from pipegraph.infrastructure.graph.engine import GraphEngine

__version__ = "0.1.0"

__all__ = [
    "Adjacency",
    "AdjacencyParseError",
    "GraphEngine",
    "GraphError",
    "InvalidNodeError",
    "__version__",
    "build_adjacency",
    "connected_nodes",
    "disconnected_graphs",
    "parse_line",
]


def connected_nodes(text: str, node: int) -> list[int]:
    """Return the sorted ids of every node connected to *node*.

    >>> connected_nodes("0 <-> 1\\n1 <-> 0\\n2 <-> 2", 0)
    [0, 1]
    """
    return GraphEngine(build_adjacency(text)).connected_nodes(node)


def disconnected_graphs(text: str) -> list[list[int]]:
    """Return every connected component of *text*, ordered by smallest member.

    >>> disconnected_graphs("0 <-> 1\\n1 <-> 0\\n2 <-> 2")
    [[0, 1], [2]]
    """
    return GraphEngine(build_adjacency(text)).disconnected_graphs()
