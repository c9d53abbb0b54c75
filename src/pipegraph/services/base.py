"""BaseService — abstract foundation for all pipegraph services.

Every service receives a :class:`GraphEngine` at construction time. The
engine is read-only, so services never own any state of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pipegraph.infrastructure.graph.engine import GraphEngine


class BaseService:
    """Abstract base for all service-layer classes.

    Subclasses implement graph operations (reach, groups, check, export)
    on top of the engine and wrap every outcome in a ServiceResult.

    Usage::

        class GraphService(BaseService):
            def reach(self, node: int) -> ServiceResult:
                nodes = self._engine.connected_nodes(node)
                ...
    """

    def __init__(self, engine: GraphEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> GraphEngine:
        return self._engine
