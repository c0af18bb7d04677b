"""Click base classes for rosterctl commands.

Every command and group, the root included, takes an optional ``examples``
string. When one is given the command grows an eager ``--examples`` flag
that prints it and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class _ExamplesMixin:
    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class RosterCommand(_ExamplesMixin, click.Command):
    """A leaf command (``profile show``, ``friends add``, ``serve``)."""


class RosterGroup(_ExamplesMixin, click.Group):
    """A command group; subcommands it declares are RosterCommands."""

    command_class = RosterCommand
