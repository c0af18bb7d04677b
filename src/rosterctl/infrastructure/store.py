"""StateStore — the single owner of the in-memory aggregate.

Every public method is one critical section under ``self._lock``: the lock
is taken on entry and released on exit (including when an error is raised),
and nothing inside it performs I/O or waits on anything else. Values handed
out are always copies, so callers can never mutate store-owned models.

Mutations build the replacement model first and only then swap it into the
roster, so an exception part-way through leaves the previous entry intact.
"""

from __future__ import annotations

import logging
import threading

from rosterctl.domain.errors import DuplicateFriend, FriendNotFound
from rosterctl.domain.models import AppState, Friend, FriendPatch, Profile, new_friend
from rosterctl.domain.types import Availability

logger = logging.getLogger(__name__)


def partition_friends(friends: list[Friend]) -> tuple[list[Friend], list[Friend]]:
    """Split *friends* into ``(online, offline)``, each sorted by email.

    Online, Away, and Busy all land in the first list; ordering inside it
    depends only on email. ``sorted`` is stable, so duplicate emails keep
    their roster order.
    """
    online: list[Friend] = []
    offline: list[Friend] = []
    for friend in friends:
        (offline if friend.availability.is_offline else online).append(friend)
    online.sort(key=lambda f: f.email)
    offline.sort(key=lambda f: f.email)
    return online, offline


class StateStore:
    """Guarded access to the profile and friend roster.

    Args:
        state: The aggregate produced by the bootstrap loader. The store
            takes ownership; the caller must not keep using it.
        unique_emails: Reject ``add_friend`` when the email is already on
            the roster. With ``False`` duplicates are appended and lookups
            resolve to the first match.
    """

    def __init__(self, state: AppState, *, unique_emails: bool = True) -> None:
        self._state = state
        self._lock = threading.Lock()
        self.unique_emails = unique_emails

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    def read_profile(self) -> Profile:
        with self._lock:
            return self._state.profile.model_copy()

    def set_profile_name(self, new_name: str) -> Profile:
        """Replace the profile's display name; every other field is kept."""
        with self._lock:
            self._state.profile = self._state.profile.model_copy(update={"name": new_name})
            logger.debug("Profile name set to %r", new_name)
            return self._state.profile.model_copy()

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def partition_roster(self) -> tuple[list[Friend], list[Friend]]:
        with self._lock:
            online, offline = partition_friends(self._state.friends)
            return [f.model_copy() for f in online], [f.model_copy() for f in offline]

    def find_friend_index(self, email: str) -> int | None:
        """Index of the first entry with *email*. Caller must hold the lock."""
        for index, friend in enumerate(self._state.friends):
            if friend.email == email:
                return index
        return None

    def friend_index(self, email: str) -> int | None:
        """Locked variant of :meth:`find_friend_index` for outside callers."""
        with self._lock:
            return self.find_friend_index(email)

    def update_friend(self, email: str, patch: FriendPatch) -> Friend:
        """Merge *patch* into the friend keyed by *email*.

        Raises:
            FriendNotFound: No entry has that email; the roster is unchanged.
        """
        with self._lock:
            index = self.find_friend_index(email)
            if index is None:
                raise FriendNotFound(email)
            updated = patch.apply(self._state.friends[index])
            self._state.friends[index] = updated
            logger.debug("Updated friend %s: %s", email, patch.present_fields())
            return updated.model_copy()

    def add_friend(
        self,
        name: str,
        email: str,
        status: str | None = None,
        availability: Availability | None = None,
    ) -> Friend:
        """Append a new friend and return a copy of it.

        Raises:
            DuplicateFriend: ``unique_emails`` is on and *email* is taken.
        """
        friend = new_friend(name, email, status, availability)
        with self._lock:
            if self.unique_emails and self.find_friend_index(email) is not None:
                raise DuplicateFriend(email)
            self._state.friends.append(friend)
            logger.debug("Added friend %s <%s>", name, email)
            return friend.model_copy()

    # ------------------------------------------------------------------
    # Whole-state views
    # ------------------------------------------------------------------

    def snapshot(self) -> AppState:
        """Deep copy of the aggregate."""
        with self._lock:
            return self._state.model_copy(deep=True)

    def summary(self) -> str:
        with self._lock:
            return self._state.summary()

    def __len__(self) -> int:
        with self._lock:
            return len(self._state.friends)
