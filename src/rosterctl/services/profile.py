"""ProfileService — read and rename the local user profile."""

from __future__ import annotations

import logging

from rosterctl.services.base import BaseService
from rosterctl.services.result import ServiceResult
from rosterctl.services.telemetry import traced

logger = logging.getLogger(__name__)


class ProfileService(BaseService):
    """Operations on the single local profile."""

    @traced
    def get_profile(self) -> ServiceResult:
        logger.info("Getting user profile")
        profile = self._store.read_profile()
        return ServiceResult(
            ok=True,
            op="get_profile",
            data={"profile": profile.model_dump(mode="json")},
        )

    @traced
    def set_profile_name(self, name: str) -> ServiceResult:
        """Replace the display name. Any string is accepted, including ``""``."""
        logger.info("Updating profile name to %r", name)
        profile = self._store.set_profile_name(name)
        return ServiceResult(
            ok=True,
            op="set_profile_name",
            data={"profile": profile.model_dump(mode="json")},
        )
