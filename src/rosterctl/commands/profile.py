"""Command group: show and rename the local profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterGroup

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext

_PROFILE_EXAMPLES = """\
  rosterctl profile rename "Ada Lovelace"
  rosterctl --json profile show
  rosterctl profile show"""


@click.group(cls=RosterGroup, examples=_PROFILE_EXAMPLES)
def profile() -> None:
    """Show or change the local user profile."""


@profile.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Print the current profile."""
    app.emit(app.dispatcher.dispatch("get_profile"))


@profile.command(
    examples="""\
  rosterctl profile rename ""
  rosterctl profile rename Ada"""
)
@click.argument("name")
@click.pass_obj
def rename(app: AppContext, name: str) -> None:
    """Set the profile display name (the email never changes)."""
    app.emit(app.dispatcher.dispatch("set_profile_name", {"name": name}))
