"""Subcommand modules for pipegraph.

Provides register_commands() which uses deferred imports to keep
``pipegraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone graph commands on the root CLI group."""
    from pipegraph.commands.graph import check, export, groups, reach

    cli.add_command(reach)
    cli.add_command(groups)
    cli.add_command(check)
    cli.add_command(export)
