"""Rich Console factory and theme for rosterctl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich leaves
out color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from rosterctl.domain.types import Availability

ROSTER_THEME = Theme(
    {
        "roster.ok": "bold green",
        "roster.error": "bold red",
        "roster.op": "bold cyan",
        "roster.key": "dim",
        "roster.email": "bold blue",
        "roster.name": "bold",
        "roster.status": "italic",
        "roster.avail.online": "green",
        "roster.avail.away": "yellow",
        "roster.avail.busy": "red",
        "roster.avail.offline": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_availability(value: str) -> str:
    return f"roster.avail.{Availability.parse(value).value.lower()}"
