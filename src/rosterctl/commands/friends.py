"""Command group: list, add, and update roster entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterGroup
from rosterctl.domain.types import Availability

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext

_AVAILABILITY_CHOICE = click.Choice([a.value for a in Availability], case_sensitive=False)

_FRIENDS_EXAMPLES = """\
  rosterctl friends list
  rosterctl friends add "Ann" ann@example.com --availability Away
  rosterctl friends update bob@example.com --status "in a meeting"
  rosterctl -q friends list"""


@click.group(cls=RosterGroup, examples=_FRIENDS_EXAMPLES)
def friends() -> None:
    """Inspect and edit the friend roster."""


@friends.command(
    "list",
    examples="""\
  rosterctl friends list
  rosterctl --json friends list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List friends: online (Online/Away/Busy) then offline, each by email."""
    app.emit(app.dispatcher.dispatch("list_roster_partitioned"))


@friends.command(
    examples="""\
  rosterctl friends add Zoe zoe@example.com
  rosterctl friends add Bob bob@example.com --status "brb" --availability Busy""",
)
@click.argument("name")
@click.argument("email")
@click.option("--status", default=None, help="Status text (default: empty).")
@click.option(
    "--availability",
    type=_AVAILABILITY_CHOICE,
    default=None,
    help="Availability (default: Online).",
)
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    email: str,
    status: str | None,
    availability: str | None,
) -> None:
    """Add a friend to the roster."""
    params = {"name": name, "email": email, "status": status, "availability": availability}
    app.emit(app.dispatcher.dispatch("add_friend", params))


@friends.command(
    examples="""\
  rosterctl friends update ann@example.com --name "Ann B."
  rosterctl friends update ann@example.com --availability Offline""",
)
@click.argument("email")
@click.option("--name", default=None, help="New display name.")
@click.option("--status", default=None, help="New status text.")
@click.option("--availability", type=_AVAILABILITY_CHOICE, default=None, help="New availability.")
@click.pass_obj
def update(
    app: AppContext,
    email: str,
    name: str | None,
    status: str | None,
    availability: str | None,
) -> None:
    """Change some fields of a friend; fields not given are kept."""
    if name is None and status is None and availability is None:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)

    params = {"email": email, "name": name, "status": status, "availability": availability}
    app.emit(app.dispatcher.dispatch("update_friend", params))
