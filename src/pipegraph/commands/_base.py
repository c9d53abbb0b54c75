"""Click classes that take an ``examples=`` string and expose ``--examples``."""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Appends an eager ``--examples`` flag that prints ``self.examples``."""

    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show example invocations and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit()


class PipeCommand(_ExamplesMixin, click.Command):
    """A pipegraph subcommand."""


class PipeGroup(_ExamplesMixin, click.Group):
    """The pipegraph root group."""
