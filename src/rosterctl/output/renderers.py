"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rosterctl.domain.types import Availability
from rosterctl.output.console import create_console, get_output, style_for_availability

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from rosterctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: emails for roster listings, else a status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_roster_partitioned":
        friends = [*result.data.get("online", []), *result.data.get("offline", [])]
        return "\n".join(str(f.get("email", "")) for f in friends)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(
        Text("OK", style="roster.ok"), Text(f"  {result.op}", style="roster.op"), sep=""
    )


def _field(
    console: Console, key: str, value: Text | str, *, key_style: str = "roster.key"
) -> None:
    """Print a single indented key-value field. Plain strings are never read as markup."""
    text = value if isinstance(value, Text) else Text(value)
    console.print(Text(f"  {key}: ", style=key_style), text, sep="")


def _availability_text(value: str) -> Text:
    availability = Availability.parse(value)
    return Text(f"{availability.icon} {availability.value}", style=style_for_availability(value))


_CONTACT_FIELDS = (("name", "roster.name"), ("email", "roster.email"), ("status", "roster.status"))


def _contact_lines(console: Console, contact: dict[str, Any]) -> None:
    """Print one profile/friend as indented fields."""
    for key, style in _CONTACT_FIELDS:
        value = Text(str(contact.get(key, "")), style=style)
        _field(console, key, value)
    _field(console, "availability", _availability_text(str(contact.get("availability", ""))))


def _friend_table(title: str, friends: list[dict[str, Any]]) -> Table:
    table = Table(title=title, title_justify="left", show_edge=False, pad_edge=False)
    table.add_column("Name", style="roster.name")
    table.add_column("Email", style="roster.email")
    table.add_column("Availability")
    table.add_column("Status", style="roster.status")
    for friend in friends:
        table.add_row(
            str(friend.get("name", "")),
            str(friend.get("email", "")),
            _availability_text(str(friend.get("availability", ""))),
            str(friend.get("status", "")),
        )
    return table


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {value}"))


# ── Per-op renderers ──────────────────────────────────────────────────


def _render_profile(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _contact_lines(console, result.data.get("profile", {}))


def _render_friend(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _contact_lines(console, result.data.get("friend", {}))
    changed = result.data.get("fields_changed")
    if changed:
        _field(console, "changed", ", ".join(changed))


def _render_roster(result: ServiceResult, console: Console) -> None:
    online = result.data.get("online", [])
    offline = result.data.get("offline", [])
    _status_line(console, result)
    console.print(_friend_table(f"Online ({len(online)})", online))
    console.print(_friend_table(f"Offline ({len(offline)})", offline))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, str(value))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    code = result.error.code if result.error else "ERROR"
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="roster.error"),
        Text(f"  {result.op}", style="roster.op"),
        Text(f"  [{code}] {msg}"),
        sep="",
    )
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, str(value))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "get_profile": _render_profile,
    "set_profile_name": _render_profile,
    "update_friend": _render_friend,
    "add_friend": _render_friend,
    "list_roster_partitioned": _render_roster,
}
