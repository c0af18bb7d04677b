"""Availability — the closed set of presence states for a profile or friend.

Only ``Offline`` is treated specially (roster partitioning). Decoding from
text never fails: anything that is not one of the four exact names is
read as ``Offline``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class Availability(StrEnum):
    """Presence state of a user or friend."""

    ONLINE = "Online"
    AWAY = "Away"
    BUSY = "Busy"
    OFFLINE = "Offline"

    @classmethod
    def parse(cls, value: Any) -> Availability:
        """Decode *value* into a member, falling back to ``OFFLINE``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        return cls.OFFLINE

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def is_offline(self) -> bool:
        return self is Availability.OFFLINE


_ICONS: dict[Availability, str] = {
    Availability.ONLINE: "👤",
    Availability.AWAY: "⏳",
    Availability.BUSY: "⛔",
    Availability.OFFLINE: "📴",
}
