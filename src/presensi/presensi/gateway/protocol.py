from __future__ import annotations

from typing import Protocol, Sequence

from ..activities.model import Activity
from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..employees.model import Employee


class AttendanceGateway(Protocol):
    """Async collaborator the wizard talks to.

    lookup_employee raises NotFoundError or TransportError; create_attendance_record
    raises ValidationError (rejected by the server, human readable message) or
    TransportError. list_active_activities raises TransportError.
    """

    async def lookup_employee(self, nip: str) -> Employee:
        raise NotImplementedError

    async def list_active_activities(self) -> Sequence[Activity]:
        raise NotImplementedError

    async def create_attendance_record(self, command: NewAttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError
