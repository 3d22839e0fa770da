from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..activities.model import Activity
from ..core.exceptions import DomainError
from ..gateway.protocol import AttendanceGateway
from .notifications import Notifier

logger = logging.getLogger(__name__)


class ActivityCatalogClient:
    """Active activities for one session, plus the deep-link lock."""

    def __init__(self, gateway: AttendanceGateway):
        self._gateway = gateway
        self._activities: list[Activity] = []
        self._loaded = False
        self._locked: Optional[Activity] = None

    @property
    def activities(self) -> list[Activity]:
        return list(self._activities)

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def locked_activity(self) -> Optional[Activity]:
        return self._locked

    @property
    def is_locked(self) -> bool:
        return self._locked is not None

    def find(self, activity_id) -> Optional[Activity]:
        try:
            wanted = int(activity_id)
        except (TypeError, ValueError):
            return None
        for activity in self._activities:
            if activity.activity_id == wanted:
                return activity
        return None

    async def load(self, notifier: Notifier, *, preselect_id=None) -> Sequence[Activity]:
        try:
            activities = await self._gateway.list_active_activities()
        except DomainError as e:
            logger.warning("Gagal memuat kegiatan: %s", e)
            notifier.error("Gagal memuat kegiatan", str(e))
            activities = []

        self._activities = sorted((a for a in activities if a.is_active), key=lambda a: a.name.lower())
        self._loaded = True

        if preselect_id not in (None, ""):
            activity = self.find(preselect_id)
            if activity is None:
                notifier.warning("Kegiatan tidak tersedia", "Kegiatan pada tautan tidak ditemukan atau sudah tidak aktif.")
            else:
                self._locked = activity
                logger.info("Kegiatan %s dikunci dari tautan", activity.name)

        return self.activities
