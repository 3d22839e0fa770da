from __future__ import annotations

import asyncio
from typing import Sequence

from ..activities.model import Activity
from ..activities.service import ActivityService
from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..attendance.service import AttendanceService
from ..core.exceptions import DomainError, TransportError
from ..employees.model import Employee
from ..employees.service import EmployeeDirectoryService


class LocalGateway:
    """In-process gateway: calls the services directly, off the event loop.

    Domain errors pass through unchanged; anything else (e.g. the database being down)
    surfaces as TransportError, as it would through the REST API.
    """

    def __init__(
        self,
        employees: EmployeeDirectoryService,
        activities: ActivityService,
        attendance: AttendanceService,
    ):
        self._employees = employees
        self._activities = activities
        self._attendance = attendance

    @staticmethod
    async def _call(fn, *args, **kwargs):
        try:
            return await asyncio.to_thread(fn, *args, **kwargs)
        except DomainError:
            raise
        except Exception as e:
            raise TransportError(str(e) or "Server Error") from e

    async def lookup_employee(self, nip: str) -> Employee:
        return await self._call(self._employees.lookup, nip)

    async def list_active_activities(self) -> Sequence[Activity]:
        return await self._call(self._activities.list_active)

    async def create_attendance_record(self, command: NewAttendanceRecord) -> AttendanceRecord:
        return await self._call(self._attendance.create_record, command)
