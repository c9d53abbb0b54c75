"""Error taxonomy for graph construction and queries.

Both categories are fatal: they surface immediately and are never
retried or recovered inside the core. The service layer converts them
into failed ServiceResults.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for every error raised by the graph core."""


class AdjacencyParseError(GraphError):
    """Adjacency text could not be turned into a dense graph.

    Attributes:
        line_no: 1-based line number of the offending line, or None when
            the problem is not tied to a single line (e.g. a gap).
        line: The offending line, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        line_no: int | None = None,
        line: str | None = None,
    ) -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class InvalidNodeError(GraphError, IndexError):
    """A query named a node id outside the built adjacency range."""

    def __init__(self, node: object, node_count: int) -> None:
        self.node = node
        self.node_count = node_count
        if node_count:
            bounds = f"valid ids are 0..{node_count - 1}"
        else:
            bounds = "the graph is empty"
        super().__init__(f"Node {node!r} is not in the graph ({bounds})")
