"""BaseService — shared foundation for the command services.

Every service receives the :class:`StateStore` at construction time. The
store is created once at startup and passed by reference; services never
reach for a global.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rosterctl.domain.errors import RosterError
from rosterctl.services.result import ServiceResult

if TYPE_CHECKING:
    from rosterctl.infrastructure.store import StateStore

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProfileService(BaseService):
            def get_profile(self) -> ServiceResult:
                profile = self._store.read_profile()
                ...
    """

    def __init__(self, store: StateStore) -> None:
        self._store = store

    @staticmethod
    def _error(op: str, exc: RosterError) -> ServiceResult:
        """Turn a domain error into a failed result."""
        logger.info("%s failed: %s", op, exc.message)
        return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)
