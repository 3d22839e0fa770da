from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute_write, query_one
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_nip(self, nip: str) -> Optional[Employee]:
        # NIP di data lama kadang tersimpan dengan spasi di ujung.
        row = query_one(
            self._conn_factory,
            """
            SELECT nip, full_name, unit_kerja, nomor_kontak
            FROM employees
            WHERE TRIM(nip)=%s
            """,
            (nip,),
        )
        if not row:
            return None
        return Employee(
            nip=str(row["nip"]).strip(),
            name=row["full_name"],
            unit=row.get("unit_kerja"),
            contact=row.get("nomor_kontak"),
        )

    def update_contact(self, *, nip: str, contact: str) -> bool:
        result = execute_write(
            self._conn_factory,
            "UPDATE employees SET nomor_kontak=%s WHERE TRIM(nip)=%s",
            (contact, nip),
        )
        return result.rowcount > 0
