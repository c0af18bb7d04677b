"""serve — start the MCP server (requires rosterctl[mcp] extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rosterctl.commands._base import RosterCommand

if TYPE_CHECKING:
    from rosterctl.commands._context import AppContext


@click.command(
    cls=RosterCommand,
    examples="""\
  # Start the MCP server (stdio transport, default)
  rosterctl serve

  # Streamable HTTP on custom host/port
  rosterctl serve --transport streamable-http --host 0.0.0.0 --port 9000

  # Serve a roster kept somewhere else
  rosterctl --roster-file ~/chat/friends.json serve""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option(
    "--port",
    default=None,
    type=click.IntRange(1, 65535),
    help="Listen port (HTTP transports only).",
)
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the MCP server; state is kept for the server's lifetime."""
    from rosterctl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install rosterctl[mcp]", err=True)
        raise SystemExit(1)

    from rosterctl.config.logging import configure_logging
    from rosterctl.domain.errors import LoadError

    configure_logging(
        verbose=app.settings.verbose, log_json=app.settings.log_json, serving=True
    )
    try:
        server = create_server(settings=app.settings, host=host, port=port)
    except LoadError as exc:
        raise click.ClickException(exc.message) from exc
    server.run(transport=transport or app.settings.mcp.transport)
