from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import ActivityMode, ActivityStatus
from .model import Activity


class ActivityRepository(Protocol):
    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Activity]:
        raise NotImplementedError

    def list_by_status(self, status: ActivityStatus) -> Sequence[Activity]:
        raise NotImplementedError

    def create(self, *, name: str, mode: ActivityMode, status: ActivityStatus) -> int:
        raise NotImplementedError

    def update(self, *, activity_id: int, name: str, mode: ActivityMode, status: ActivityStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, activity_id: int) -> bool:
        raise NotImplementedError
