"""CommandDispatcher — the named-operation surface used by external callers.

Maps each operation name to exactly one service method. ``dispatch`` never
raises for a bad request or a domain failure: unknown names, invalid
parameters, and store errors all come back as failed ServiceResults. It is
safe to call from many threads at once; the store serializes the work.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from rosterctl.domain.errors import RosterError
from rosterctl.services.contracts import (
    AddFriendParams,
    NoParams,
    SetProfileNameParams,
    UpdateFriendParams,
)
from rosterctl.services.profile import ProfileService
from rosterctl.services.result import ServiceResult
from rosterctl.services.roster import RosterService

if TYPE_CHECKING:
    from rosterctl.infrastructure.store import StateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Operation:
    """One named operation: its parameter model and handler."""

    params: type[BaseModel]
    handler: Callable[[Any], ServiceResult]


class CommandDispatcher:
    """Routes ``(op, params)`` requests to the profile and roster services."""

    def __init__(self, store: StateStore) -> None:
        profile = ProfileService(store)
        roster = RosterService(store)
        self._ops: dict[str, Operation] = {
            "get_profile": Operation(NoParams, lambda p: profile.get_profile()),
            "set_profile_name": Operation(
                SetProfileNameParams, lambda p: profile.set_profile_name(p.name)
            ),
            "list_roster_partitioned": Operation(
                NoParams, lambda p: roster.list_roster_partitioned()
            ),
            "update_friend": Operation(
                UpdateFriendParams,
                lambda p: roster.update_friend(
                    p.email, name=p.name, status=p.status, availability=p.availability
                ),
            ),
            "add_friend": Operation(
                AddFriendParams,
                lambda p: roster.add_friend(
                    p.name, p.email, status=p.status, availability=p.availability
                ),
            ),
        }

    @property
    def operations(self) -> list[str]:
        return sorted(self._ops)

    def dispatch(self, op: str, params: Mapping[str, Any] | None = None) -> ServiceResult:
        """Run *op* with *params* and return its result."""
        operation = self._ops.get(op) if isinstance(op, str) else None
        if operation is None:
            return ServiceResult.failure(
                str(op), "UNKNOWN_OP", f"Unknown operation: {op!r}", known=self.operations
            )

        if params is not None and not isinstance(params, Mapping):
            return ServiceResult.failure(op, "INVALID_PARAMS", "params must be an object")

        try:
            parsed = operation.params.model_validate(dict(params or {}))
        except ValidationError as exc:
            problems = [
                f"{'.'.join(str(p) for p in err['loc']) or '<params>'}: {err['msg']}"
                for err in exc.errors()
            ]
            return ServiceResult.failure(
                op, "INVALID_PARAMS", "; ".join(problems), errors=problems
            )

        try:
            return operation.handler(parsed)
        except RosterError as exc:
            logger.info("%s failed: %s", op, exc.message)
            return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)
