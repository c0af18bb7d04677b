"""RosterService — list, update, and add friends.

Each method is one store operation: the store's lock is held only for the
duration of that call, and every payload is a JSON-mode dump so nothing
returned aliases store-owned models.
"""

from __future__ import annotations

import logging

from rosterctl.domain.errors import DuplicateFriend, FriendNotFound
from rosterctl.domain.models import FriendPatch
from rosterctl.domain.types import Availability
from rosterctl.services.base import BaseService
from rosterctl.services.result import ServiceResult
from rosterctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class RosterService(BaseService):
    """Operations on the friend roster."""

    @traced
    def list_roster_partitioned(self) -> ServiceResult:
        """Friends split into online (anything but Offline) and offline, by email."""
        logger.info("Getting friends list")
        online, offline = self._store.partition_roster()
        return ServiceResult(
            ok=True,
            op="list_roster_partitioned",
            data={
                "online": [f.model_dump(mode="json") for f in online],
                "offline": [f.model_dump(mode="json") for f in offline],
                "counts": {"online": len(online), "offline": len(offline)},
            },
        )

    @traced
    def update_friend(
        self,
        email: str,
        *,
        name: str | None = None,
        status: str | None = None,
        availability: str | Availability | None = None,
    ) -> ServiceResult:
        """Merge the given fields into the friend keyed by *email*.

        Fields left as ``None`` keep their current value.
        """
        op = "update_friend"
        logger.info("Updating friend %s", email)
        patch = FriendPatch(name=name, status=status, availability=availability)
        warnings: list[str] = []
        if patch.is_empty():
            warnings.append("No fields to change")

        try:
            friend = self._store.update_friend(email, patch)
        except FriendNotFound as exc:
            return self._error(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "friend": friend.model_dump(mode="json"),
                "fields_changed": patch.present_fields(),
            },
            warnings=warnings,
        )

    @traced
    def add_friend(
        self,
        name: str,
        email: str,
        *,
        status: str | None = None,
        availability: str | Availability | None = None,
    ) -> ServiceResult:
        """Append a friend; status defaults to ``""`` and availability to Online."""
        op = "add_friend"
        logger.info("Adding new friend %s <%s>", name, email)
        parsed = None if availability is None else Availability.parse(availability)
        try:
            friend = self._store.add_friend(name, email, status, parsed)
        except DuplicateFriend as exc:
            return self._error(op, exc)
        return ServiceResult(ok=True, op=op, data={"friend": friend.model_dump(mode="json")})
