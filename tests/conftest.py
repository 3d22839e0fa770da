from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.presensi.presensi.activities.model import Activity
from src.presensi.presensi.attendance.model import AttendanceRecord, NewAttendanceRecord
from src.presensi.presensi.container import wire
from src.presensi.presensi.core.enums import ActivityMode, ActivityStatus
from src.presensi.presensi.core.exceptions import NotFoundError
from src.presensi.presensi.employees.model import Employee

FIXED_NOW = datetime(2026, 3, 2, 9, 30)

AHMAD = Employee(nip="123456789", name="Ahmad Wijaya", unit="Dinas Kominfo", contact="0812345678901")

RAPAT = Activity(activity_id=1, name="Rapat Koordinasi", mode=ActivityMode.IN_PERSON)
WEBINAR = Activity(activity_id=2, name="Webinar Literasi Digital", mode=ActivityMode.REMOTE)
ARSIP = Activity(activity_id=3, name="Arsip Lama", mode=ActivityMode.IN_PERSON, status=ActivityStatus.INACTIVE)


class FakeGateway:
    """Scriptable gateway: canned directory, activities and submission outcomes.

    ``lookup_errors`` / ``submit_errors`` map to an exception to raise instead of answering.
    """

    def __init__(self, employees=None, activities=None):
        self.employees = {e.nip: e for e in (employees if employees is not None else [AHMAD])}
        self.activities = list(activities if activities is not None else [RAPAT, WEBINAR, ARSIP])
        self.lookup_calls: list[str] = []
        self.lookup_errors: dict[str, Exception] = {}
        self.activities_error: Optional[Exception] = None
        self.submit_error: Optional[Exception] = None
        self.submitted: list[NewAttendanceRecord] = []
        self._next_id = 100

    async def lookup_employee(self, nip: str) -> Employee:
        self.lookup_calls.append(nip)
        if nip in self.lookup_errors:
            raise self.lookup_errors[nip]
        employee = self.employees.get(nip)
        if employee is None:
            raise NotFoundError("Pegawai tidak ditemukan")
        return employee

    async def list_active_activities(self):
        if self.activities_error is not None:
            raise self.activities_error
        return list(self.activities)

    async def create_attendance_record(self, command: NewAttendanceRecord) -> AttendanceRecord:
        self.submitted.append(command)
        if self.submit_error is not None:
            raise self.submit_error
        self._next_id += 1
        return AttendanceRecord.from_command(command, record_id=self._next_id, recorded_at=FIXED_NOW)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def ahmad() -> Employee:
    return AHMAD


@pytest.fixture
def rapat() -> Activity:
    return RAPAT


@pytest.fixture
def webinar() -> Activity:
    return WEBINAR


@pytest.fixture
def inactive_activity() -> Activity:
    return ARSIP


class InMemoryEmployees:
    def __init__(self, employees):
        self.by_nip = {e.nip: e for e in employees}
        self.contact_updates: list[tuple[str, str]] = []
        self.fail_updates = False

    def get_by_nip(self, nip: str) -> Optional[Employee]:
        return self.by_nip.get(nip.strip())

    def update_contact(self, *, nip: str, contact: str) -> bool:
        if self.fail_updates:
            raise RuntimeError("database is down")
        self.contact_updates.append((nip, contact))
        employee = self.by_nip.get(nip)
        if employee is None:
            return False
        self.by_nip[nip] = replace(employee, contact=contact)
        return True


class InMemoryActivities:
    def __init__(self, activities):
        self.by_id = {a.activity_id: a for a in activities}
        self._id = max(self.by_id, default=0)

    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        return self.by_id.get(activity_id)

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda a: a.activity_id, reverse=True)

    def list_by_status(self, status: ActivityStatus):
        return sorted((a for a in self.by_id.values() if a.status == status), key=lambda a: a.name)

    def create(self, *, name: str, mode: ActivityMode, status: ActivityStatus) -> int:
        self._id += 1
        self.by_id[self._id] = Activity(activity_id=self._id, name=name, mode=mode, status=status)
        return self._id

    def update(self, *, activity_id: int, name: str, mode: ActivityMode, status: ActivityStatus) -> bool:
        if activity_id not in self.by_id:
            return False
        self.by_id[activity_id] = Activity(activity_id=activity_id, name=name, mode=mode, status=status)
        return True

    def delete_by_id(self, activity_id: int) -> bool:
        return self.by_id.pop(activity_id, None) is not None


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0

    def create_record(self, command: NewAttendanceRecord, *, recorded_at: datetime) -> int:
        self._id += 1
        self.records[self._id] = AttendanceRecord.from_command(command, record_id=self._id, recorded_at=recorded_at)
        return self._id

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(record_id)

    def list_recent(self):
        return sorted(self.records.values(), key=lambda r: r.recorded_at, reverse=True)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees([AHMAD])


@pytest.fixture
def activities_repo() -> InMemoryActivities:
    return InMemoryActivities([RAPAT, WEBINAR, ARSIP])


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(employees_repo, activities_repo, attendance_repo):
    return wire(
        employees_repo=employees_repo,
        activities_repo=activities_repo,
        attendance_repo=attendance_repo,
        form_base_url="http://form.test",
    )
