"""MCP tool definitions — one tool per named operation.

Profile (2): get_profile, set_profile_name.
Roster (3): list_roster_partitioned, update_friend, add_friend.

Each tool has a ``<name>_impl`` function testable without the mcp package.
The impls go through :class:`CommandDispatcher`, so tool arguments get the
same validation and error codes as any other caller. ``register_tools()``
wraps them with FastMCP decorators.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rosterctl.services.dispatcher import CommandDispatcher
    from rosterctl.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
        }
    return response


def _present(**fields: Any) -> dict[str, Any]:
    """Keep only the arguments the caller actually supplied."""
    return {key: value for key, value in fields.items() if value is not None}


# ---------------------------------------------------------------------------
# Profile tools (2)
# ---------------------------------------------------------------------------


def get_profile_impl(dispatcher: CommandDispatcher) -> dict[str, Any]:
    """Read the local user's profile."""
    return _to_mcp_response(dispatcher.dispatch("get_profile"))


def set_profile_name_impl(dispatcher: CommandDispatcher, name: str) -> dict[str, Any]:
    """Change the profile display name."""
    return _to_mcp_response(dispatcher.dispatch("set_profile_name", {"name": name}))


# ---------------------------------------------------------------------------
# Roster tools (3)
# ---------------------------------------------------------------------------


def list_roster_partitioned_impl(dispatcher: CommandDispatcher) -> dict[str, Any]:
    """List friends split into online and offline, each sorted by email."""
    return _to_mcp_response(dispatcher.dispatch("list_roster_partitioned"))


def update_friend_impl(
    dispatcher: CommandDispatcher,
    email: str,
    *,
    name: str | None = None,
    status: str | None = None,
    availability: str | None = None,
) -> dict[str, Any]:
    """Merge the given fields into the friend with *email*."""
    params = {"email": email, **_present(name=name, status=status, availability=availability)}
    return _to_mcp_response(dispatcher.dispatch("update_friend", params))


def add_friend_impl(
    dispatcher: CommandDispatcher,
    name: str,
    email: str,
    *,
    status: str | None = None,
    availability: str | None = None,
) -> dict[str, Any]:
    """Append a friend (status defaults to empty, availability to Online)."""
    params = {"name": name, "email": email, **_present(status=status, availability=availability)}
    return _to_mcp_response(dispatcher.dispatch("add_friend", params))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_tools(server: Any, dispatcher: CommandDispatcher) -> None:
    """Register all 5 MCP tools on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def get_profile() -> dict[str, Any]:
        """Read the local user's profile (name, email, status, availability)."""
        return get_profile_impl(dispatcher)

    @server.tool()  # type: ignore[untyped-decorator]
    def set_profile_name(name: str) -> dict[str, Any]:
        """Change the local user's display name."""
        return set_profile_name_impl(dispatcher, name)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_roster_partitioned() -> dict[str, Any]:
        """List friends as online (Online/Away/Busy) and offline, sorted by email."""
        return list_roster_partitioned_impl(dispatcher)

    @server.tool()  # type: ignore[untyped-decorator]
    def update_friend(
        email: str,
        name: str | None = None,
        status: str | None = None,
        availability: str | None = None,
    ) -> dict[str, Any]:
        """Update a friend's name, status, or availability; omitted fields are kept."""
        return update_friend_impl(
            dispatcher, email, name=name, status=status, availability=availability
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def add_friend(
        name: str,
        email: str,
        status: str | None = None,
        availability: str | None = None,
    ) -> dict[str, Any]:
        """Add a friend to the roster."""
        return add_friend_impl(
            dispatcher, name, email, status=status, availability=availability
        )
