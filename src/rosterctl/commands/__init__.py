"""Subcommand modules for rosterctl.

Provides register_commands() which uses deferred imports to keep
``rosterctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    from rosterctl.commands.friends import friends
    from rosterctl.commands.profile import profile
    from rosterctl.commands.serve import serve

    cli.add_command(profile)
    cli.add_command(friends)
    cli.add_command(serve)
