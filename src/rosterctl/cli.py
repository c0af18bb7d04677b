"""Root CLI group for rosterctl with global flags and command registration."""

from __future__ import annotations

import click

from rosterctl import __version__
from rosterctl.commands import register_commands
from rosterctl.commands._base import RosterGroup
from rosterctl.commands._context import AppContext
from rosterctl.config.settings import RosterSettings

_ROOT_EXAMPLES = """\
  # Who am I, and who is around?
  rosterctl profile show
  rosterctl friends list

  # Script against the JSON envelope
  rosterctl --json friends update bob@example.com --availability Away

  # Point at bootstrap files outside the current directory
  rosterctl --profile-file ~/chat/user.json --roster-file ~/chat/friends.json friends list

  # Expose the same operations to an MCP client
  rosterctl serve"""


@click.group(
    cls=RosterGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples=_ROOT_EXAMPLES,
)
@click.version_option(version=__version__, prog_name="rosterctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--profile-file", default=None, help="Profile JSON document (default: user.json).")
@click.option("--roster-file", default=None, help="Roster JSON document (default: friends.json).")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    profile_file: str | None,
    roster_file: str | None,
) -> None:
    """rosterctl — profile and friend roster state for the chat client."""
    settings = RosterSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        profile_file=profile_file,
        roster_file=roster_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
