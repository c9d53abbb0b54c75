"""Graph commands: reachability, component groups, consistency, export.

Every command reads adjacency-list text from SOURCE (a path, or ``-``
for stdin). Parse failures exit with code 1 before any query runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from pipegraph.commands._base import PipeCommand
from pipegraph.services.graph import EXPORT_FORMATS

if TYPE_CHECKING:
    from pipegraph.commands._context import AppContext

_SOURCE = click.argument("source", type=click.File("r", encoding="utf-8"))


@click.command(
    cls=PipeCommand,
    examples="""\
  pipegraph reach pipes.txt
  pipegraph reach pipes.txt 42
  cat pipes.txt | pipegraph --json reach - 0""",
)
@_SOURCE
@click.argument("node", type=click.IntRange(min=0), required=False)
@click.pass_obj
def reach(app: AppContext, source: TextIO, node: int | None) -> None:
    """List every node connected to NODE (default: [reach] start_node)."""
    service = app.load(source.read(), op="reach")
    start = app.settings.reach.start_node if node is None else node
    app.emit(service.reach(start))


@click.command(
    cls=PipeCommand,
    examples="""\
  pipegraph groups pipes.txt
  pipegraph -q groups pipes.txt
  pipegraph --json groups pipes.txt"""
)
@_SOURCE
@click.pass_obj
def groups(app: AppContext, source: TextIO) -> None:
    """Partition all nodes into connected groups."""
    service = app.load(source.read(), op="groups")
    app.emit(service.groups())


@click.command(
    cls=PipeCommand,
    examples="""\
  pipegraph check pipes.txt
  pipegraph --json check pipes.txt"""
)
@_SOURCE
@click.pass_obj
def check(app: AppContext, source: TextIO) -> None:
    """Report edge counts, self-loops, isolated nodes, and one-way links."""
    service = app.load(source.read(), op="check")
    app.emit(service.check())


@click.command(
    cls=PipeCommand,
    examples="""\
  pipegraph export pipes.txt > pipes.dot
  pipegraph export pipes.txt --format json"""
)
@_SOURCE
@click.option(
    "--format",
    "fmt",
    type=click.Choice(EXPORT_FORMATS),
    default=None,
    help="Output format (default: [export] format).",
)
@click.pass_obj
def export(app: AppContext, source: TextIO, fmt: str | None) -> None:
    """Export the graph as Graphviz DOT or node-link JSON."""
    service = app.load(source.read(), op="export")
    app.emit(service.export(fmt or app.settings.export.format))
