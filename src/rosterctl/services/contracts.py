"""Typed request contracts for the named-operation boundary.

Callers outside Python (the MCP tools) send loosely typed ``params``
dicts; each operation validates them against its model here before the
store is touched, so a bad request never takes the lock.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class NoParams(_Params):
    """Operations that take no input."""


class SetProfileNameParams(_Params):
    name: str


class UpdateFriendParams(_Params):
    email: str
    name: str | None = None
    status: str | None = None
    # Kept as text; the service decodes it with the Offline fallback.
    availability: str | None = None


class AddFriendParams(_Params):
    name: str
    email: str
    status: str | None = None
    availability: str | None = None
