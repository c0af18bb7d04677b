"""Profile, Friend, and patch models.

``Profile`` and ``Friend`` share the bootstrap document shape
(name, email, status, availability). Availability is decoded with the
``Offline`` fallback at validation time, so a model can never hold an
unrecognised value.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from rosterctl.domain.types import Availability


def _parse_optional(value: Any) -> Availability | None:
    return None if value is None else Availability.parse(value)


AvailabilityField = Annotated[Availability, BeforeValidator(Availability.parse)]
OptionalAvailabilityField = Annotated[Availability | None, BeforeValidator(_parse_optional)]


class Contact(BaseModel):
    """Fields common to the local profile and roster entries."""

    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    status: str
    availability: AvailabilityField


class Profile(Contact):
    """The single local user. ``email`` is the identity key and never changes."""

    email: str = Field(frozen=True)


class Friend(Contact):
    """One roster entry, keyed by email."""


class FriendPatch(BaseModel):
    """Partial update for a :class:`Friend`.

    A field left as ``None`` is absent and keeps its current value.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    status: str | None = None
    availability: OptionalAvailabilityField = None

    def is_empty(self) -> bool:
        return not self.present_fields()

    def present_fields(self) -> list[str]:
        """Names of the fields this patch will overwrite, in declaration order."""
        return [name for name in type(self).model_fields if getattr(self, name) is not None]

    def apply(self, friend: Friend) -> Friend:
        """Return a copy of *friend* with the present fields overwritten."""
        return friend.model_copy(
            update={name: getattr(self, name) for name in self.present_fields()}
        )


def new_friend(
    name: str,
    email: str,
    status: str | None = None,
    availability: Availability | None = None,
) -> Friend:
    """Build a roster entry; status defaults to ``""`` and availability to Online."""
    return Friend(
        name=name,
        email=email,
        status=status if status is not None else "",
        availability=availability if availability is not None else Availability.ONLINE,
    )


class AppState(BaseModel):
    """The aggregate: the local profile plus the ordered friend roster."""

    profile: Profile
    friends: list[Friend] = Field(default_factory=list)

    def summary(self) -> str:
        return f"User: {self.profile.name}, Friends: {len(self.friends)}"
