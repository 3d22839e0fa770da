from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .activities.mysql_activity_repository import MySQLActivityRepository
from .activities.repository import ActivityRepository
from .activities.service import ActivityService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeDirectoryService
from .gateway.local_gateway import LocalGateway


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    activities_repo: ActivityRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeDirectoryService
    activity_service: ActivityService
    attendance_service: AttendanceService

    def local_gateway(self) -> LocalGateway:
        """Gateway for wizard sessions running in the same process as the services."""
        return LocalGateway(self.employee_service, self.activity_service, self.attendance_service)


def wire(
    *,
    employees_repo: EmployeeRepository,
    activities_repo: ActivityRepository,
    attendance_repo: AttendanceRepository,
    form_base_url: str = "",
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    employee_service = EmployeeDirectoryService(employees_repo)
    activity_service = ActivityService(activities_repo, form_base_url=form_base_url)
    attendance_service = AttendanceService(attendance_repo, employee_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        activities_repo=activities_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        activity_service=activity_service,
        attendance_service=attendance_service,
    )


def build_container(*, db_config: dict, form_base_url: str = "") -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        activities_repo=MySQLActivityRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        form_base_url=form_base_url,
        conn=conn,
    )
