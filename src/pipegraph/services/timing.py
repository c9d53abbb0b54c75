"""Wall-clock timing for GraphService operations.

Off by default. ``pipegraph -v`` switches it on for the invocation, and
every ``@timed`` method then reports how long it took over how many
nodes in ``ServiceResult.meta["timing"]`` and in a debug log event.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import TYPE_CHECKING, Concatenate, ParamSpec, TypeVar

import structlog

if TYPE_CHECKING:
    from pipegraph.services.base import BaseService
    from pipegraph.services.result import ServiceResult

logger = structlog.get_logger(__name__)

_timing_enabled: ContextVar[bool] = ContextVar("_timing_enabled", default=False)

_S = TypeVar("_S", bound="BaseService")
_P = ParamSpec("_P")


def enable_timing(enabled: bool = True) -> None:
    """Switch timing on (or off) for the current context."""
    _timing_enabled.set(enabled)


def timed(  # noqa: UP047
    method: Callable[Concatenate[_S, _P], ServiceResult],
) -> Callable[Concatenate[_S, _P], ServiceResult]:
    """Time a service method and attach the figures to its result."""

    @functools.wraps(method)
    def wrapper(service: _S, *args: _P.args, **kwargs: _P.kwargs) -> ServiceResult:
        if not _timing_enabled.get():
            return method(service, *args, **kwargs)

        started = time.perf_counter()
        result = method(service, *args, **kwargs)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        timing = {
            "op": result.op,
            "elapsed_ms": elapsed_ms,
            "node_count": service.engine.node_count,
        }
        logger.debug("service.timed", ok=result.ok, **timing)
        return result.model_copy(update={"meta": {**(result.meta or {}), "timing": timing}})

    return wrapper
