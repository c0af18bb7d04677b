"""FastMCP server setup.

Optional extra, guarded behind try/except ImportError.
Transport: stdio default, sse and streamable HTTP optional. Logging stays on
stderr so the stdio transport owns stdout.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rosterctl.config.settings import RosterSettings

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]

logger = logging.getLogger(__name__)


def create_server(
    *,
    settings: RosterSettings | None = None,
    host: str | None = None,
    port: int | None = None,
) -> Any:
    """Create and configure the MCP server.

    Loads the bootstrap documents named by *settings* (discovered from the
    CWD when omitted), builds one state store for the server's lifetime,
    and registers a tool per operation. Returns the FastMCP instance.

    *host* and *port* default to the ``[mcp]`` section and only matter for
    HTTP transports (sse, streamable-http).

    Raises RuntimeError if the mcp extra is not installed, and
    :class:`~rosterctl.domain.errors.LoadError` if bootstrap fails.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install rosterctl[mcp]"
        raise RuntimeError(msg)

    from rosterctl.config.settings import RosterSettings
    from rosterctl.infrastructure.loader import load_state
    from rosterctl.infrastructure.store import StateStore
    from rosterctl.mcp.tools import register_tools
    from rosterctl.services.dispatcher import CommandDispatcher

    if settings is None:
        settings = RosterSettings.from_cli()

    state = load_state(settings.profile_path, settings.roster_path)
    store = StateStore(state, unique_emails=settings.roster.unique_emails)
    dispatcher = CommandDispatcher(store)

    server = _FastMCP(
        "rosterctl",
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )
    register_tools(server, dispatcher)
    logger.info("MCP server ready: %s", store.summary())

    return server
