"""GraphEngine — reachability and component decomposition over an Adjacency.

Built once per invocation from parsed text, read-only afterwards.
Each public query allocates its own visited markers, so independent
queries never interfere.

The NetworkX view is lazy: only export needs it, and the traversal
algorithms never touch it.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from typing import TYPE_CHECKING

import networkx as nx

from pipegraph.domain.errors import InvalidNodeError

if TYPE_CHECKING:
    from pipegraph.domain.adjacency import Adjacency

logger = logging.getLogger(__name__)

type _Graph = nx.Graph


class GraphEngine:
    """Query engine over a dense, undirected adjacency table."""

    def __init__(self, adjacency: Adjacency) -> None:
        self._adjacency = adjacency
        self._graph: _Graph | None = None

    def __len__(self) -> int:
        return len(self._adjacency)

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def adjacency(self) -> Adjacency:
        return self._adjacency

    @property
    def graph(self) -> _Graph:
        """Return the NetworkX view, building it on first access."""
        if self._graph is None:
            self._graph = self._build_nx()
        return self._graph

    def _build_nx(self) -> _Graph:
        """Build an undirected NetworkX graph.

        Adds every node first so isolated nodes survive, then one edge
        per neighbour pair (self-loops included).
        """
        g: _Graph = nx.Graph()
        g.add_nodes_from(range(self.node_count))
        g.add_edges_from(self.edges())
        return g

    def _check_node(self, node: int) -> int:
        """Return *node* as a plain int, or raise InvalidNodeError.

        Accepts any integer-like value (``numpy.int64`` included) but not
        ``bool``.
        """
        if isinstance(node, bool):
            raise InvalidNodeError(node, self.node_count)
        try:
            index = operator.index(node)
        except TypeError:
            raise InvalidNodeError(node, self.node_count) from None
        if not 0 <= index < self.node_count:
            raise InvalidNodeError(node, self.node_count)
        return index

    def neighbors(self, node: int) -> tuple[int, ...]:
        """Return the adjacency entry of *node*."""
        return self._adjacency[self._check_node(node)]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield each undirected edge once as ``(low, high)``."""
        seen: set[tuple[int, int]] = set()
        for node, entry in enumerate(self._adjacency):
            for neighbor in entry:
                edge = (node, neighbor) if node <= neighbor else (neighbor, node)
                if edge not in seen:
                    seen.add(edge)
                    yield edge

    def asymmetric_edges(self) -> list[tuple[int, int]]:
        """Return ``(a, b)`` pairs where *b* lists no link back to *a*."""
        return sorted(
            (node, neighbor)
            for node, entry in enumerate(self._adjacency)
            for neighbor in entry
            if node not in self._adjacency[neighbor]
        )

    def connected_nodes(self, node: int) -> list[int]:
        """Return the ascending ids of every node reachable from *node*.

        Iterative depth-first search. Each stack frame keeps its own
        neighbour iterator, so scanning a node resumes where it stopped
        once the branch above it is exhausted. *node* itself is always
        part of the result.

        Raises:
            InvalidNodeError: *node* is outside ``0..node_count-1``.
        """
        start = self._check_node(node)
        return self._search(start, [False] * self.node_count)

    def _search(self, start: int, marked: list[bool]) -> list[int]:
        """Mark everything reachable from *start*; return the new marks sorted.

        Nodes already marked on entry are treated as visited and left out
        of the result, so one marker list can serve many searches.
        """
        adjacency = self._adjacency
        marked[start] = True
        found = [start]
        stack: list[Iterator[int]] = [iter(adjacency[start])]

        while stack:
            for neighbor in stack[-1]:
                if not marked[neighbor]:
                    marked[neighbor] = True
                    found.append(neighbor)
                    stack.append(iter(adjacency[neighbor]))
                    break
            else:
                stack.pop()

        found.sort()
        return found

    def disconnected_graphs(self) -> list[list[int]]:
        """Partition every node into connected components.

        Components come back ordered by their smallest member. All
        searches share one marker list, so each node and each link is
        visited once overall.
        """
        components: list[list[int]] = []
        known = [False] * self.node_count
        for node in range(self.node_count):
            if known[node]:
                continue
            components.append(self._search(node, known))

        logger.debug(
            "Decomposed %d nodes into %d components",
            self.node_count,
            len(components),
        )
        return components
