from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, NewAttendanceRecord


class AttendanceRepository(Protocol):
    def create_record(self, command: NewAttendanceRecord, *, recorded_at: datetime) -> int:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_recent(self) -> Sequence[AttendanceRecord]:
        """All records, newest first."""

        raise NotImplementedError
