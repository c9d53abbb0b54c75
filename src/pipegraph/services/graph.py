"""GraphService — reachability, components, consistency checks, export.

The traversal itself lives in :class:`GraphEngine`; this layer turns
its answers (and its errors) into ServiceResults for the CLI.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import networkx as nx

from pipegraph.domain.adjacency import build_adjacency
from pipegraph.domain.errors import AdjacencyParseError, InvalidNodeError
from pipegraph.infrastructure.graph.engine import GraphEngine
from pipegraph.services.base import BaseService
from pipegraph.services.result import ServiceResult
from pipegraph.services.timing import timed

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("dot", "json")


def parse_error_result(op: str, exc: AdjacencyParseError) -> ServiceResult:
    """Return a failed result describing an adjacency parse failure."""
    detail: dict[str, Any] = {}
    if exc.line_no is not None:
        detail["line_no"] = exc.line_no
    if exc.line is not None:
        detail["line"] = exc.line
    return ServiceResult.failure(op, "PARSE_ERROR", str(exc), **detail)


def load_service(text: str, *, op: str) -> GraphService | ServiceResult:
    """Build a GraphService from *text*, or a failed result for *op*."""
    try:
        return GraphService.from_text(text)
    except AdjacencyParseError as exc:
        logger.debug("Rejected adjacency text for %s: %s", op, exc)
        return parse_error_result(op, exc)


class GraphService(BaseService):
    """Handles graph queries over a single parsed adjacency list."""

    @classmethod
    def from_text(cls, text: str) -> GraphService:
        """Parse *text* and wrap it. Raises AdjacencyParseError."""
        return cls(GraphEngine(build_adjacency(text)))

    # ------------------------------------------------------------------
    # reach — single-source reachability
    # ------------------------------------------------------------------

    @timed
    def reach(self, node: int) -> ServiceResult:
        """Find every node connected to *node*."""
        try:
            nodes = self._engine.connected_nodes(node)
        except InvalidNodeError as exc:
            return ServiceResult.failure(
                "reach", "INVALID_NODE", str(exc), node=node, node_count=exc.node_count
            )
        return ServiceResult(
            ok=True,
            op="reach",
            data={"node": node, "count": len(nodes), "nodes": nodes},
        )

    # ------------------------------------------------------------------
    # groups — connected-component decomposition
    # ------------------------------------------------------------------

    @timed
    def groups(self) -> ServiceResult:
        """Partition the graph into connected components."""
        components = self._engine.disconnected_graphs()
        items = [
            {"id": idx, "size": len(component), "nodes": component}
            for idx, component in enumerate(components)
        ]
        return ServiceResult(
            ok=True,
            op="groups",
            data={
                "count": len(items),
                "node_count": self._engine.node_count,
                "groups": items,
            },
        )

    # ------------------------------------------------------------------
    # check — input consistency report
    # ------------------------------------------------------------------

    @timed
    def check(self) -> ServiceResult:
        """Report edge counts, self-loops, isolated nodes, and one-way links.

        One-way links are not errors: traversal follows them as written.
        Each one is reported as a warning.
        """
        engine = self._engine
        asymmetric = engine.asymmetric_edges()
        edges = list(engine.edges())
        self_loops = sorted(a for a, b in edges if a == b)
        isolated = [
            node
            for node, entry in enumerate(engine.adjacency)
            if all(neighbor == node for neighbor in entry)
        ]
        warnings = [f"Node {a} links to {b} but {b} does not link back" for a, b in asymmetric]

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "node_count": engine.node_count,
                "edge_count": len(edges),
                "self_loops": self_loops,
                "isolated": isolated,
                "asymmetric": [list(pair) for pair in asymmetric],
            },
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # export — DOT / node-link JSON
    # ------------------------------------------------------------------

    @timed
    def export(self, fmt: str = "dot") -> ServiceResult:
        """Export the graph.

        Formats:
        - ``dot`` — Graphviz DOT language (undirected)
        - ``json`` — NetworkX node-link data

        Returns the content as a string in ``data["content"]``.
        """
        if fmt not in EXPORT_FORMATS:
            return ServiceResult.failure(
                "export",
                "INVALID_FORMAT",
                f"Unknown export format: {fmt}",
                format=fmt,
                valid=list(EXPORT_FORMATS),
            )

        g = self._engine.graph
        content = self._to_dot(g) if fmt == "dot" else self._to_json(g)
        return ServiceResult(
            ok=True,
            op="export",
            data={"format": fmt, "content": content},
        )

    @staticmethod
    def _to_dot(g: nx.Graph) -> str:
        """Generate Graphviz DOT notation from an undirected NetworkX graph."""
        lines = ["graph pipes {", "  node [shape=circle];"]
        for node in g.nodes:
            lines.append(f"  {node};")
        for a, b in sorted(g.edges):
            lines.append(f"  {a} -- {b};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    @staticmethod
    def _to_json(g: nx.Graph) -> str:
        """Generate node-link JSON from an undirected NetworkX graph."""
        return json.dumps(nx.node_link_data(g, edges="links"), indent=2)
