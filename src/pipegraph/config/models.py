"""The three optional pipegraph.toml tables and their defaults.

Every key may be omitted; a missing file means all defaults.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ReachConfig(BaseModel):
    """[reach]: ``start_node`` is used when ``reach`` gets no NODE."""

    model_config = ConfigDict(frozen=True)

    start_node: int = Field(default=0, ge=0)


class ExportConfig(BaseModel):
    """[export]: default ``--format`` for ``export``."""

    model_config = ConfigDict(frozen=True)

    format: Literal["dot", "json"] = "dot"


class OutputConfig(BaseModel):
    """[output]: ``show_nodes = false`` prints sizes without member ids."""

    model_config = ConfigDict(frozen=True)

    show_nodes: bool = True
