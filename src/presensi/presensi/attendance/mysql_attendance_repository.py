from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import parse_timestamp
from ..core.enums import UserType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute_write, query_all, query_one
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    id, tipe_user, nip, nama, unit_kerja, instansi, nomor_kontak, email,
    orang_dituju, tujuan, kegiatan, activity_id, tanda_tangan, waktu_presensi
"""


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(row["id"]),
        recorded_at=parse_timestamp(row["waktu_presensi"]),
        user_type=UserType(row["tipe_user"]),
        name=row["nama"],
        activity_name=row["kegiatan"],
        activity_id=row.get("activity_id"),
        nip=row.get("nip"),
        unit=row.get("unit_kerja"),
        organization=row.get("instansi"),
        contact=row.get("nomor_kontak"),
        email=row.get("email"),
        target_person=row.get("orang_dituju"),
        purpose=row.get("tujuan"),
        signature=row.get("tanda_tangan"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record(self, command: NewAttendanceRecord, *, recorded_at: datetime) -> int:
        result = execute_write(
            self._conn_factory,
            """
            INSERT INTO attendance_records(
                tipe_user, nip, nama, unit_kerja, instansi, nomor_kontak, email,
                orang_dituju, tujuan, kegiatan, activity_id, tanda_tangan, waktu_presensi
            )
            VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                command.user_type.value,
                command.nip,
                command.name,
                command.unit,
                command.organization,
                command.contact,
                command.email,
                command.target_person,
                command.purpose,
                command.activity_name,
                command.activity_id,
                command.signature,
                recorded_at,
            ),
        )
        return int(result.lastrowid)

    def get_by_id(self, record_id: int) -> Optional[AttendanceRecord]:
        row = query_one(self._conn_factory, f"SELECT {_COLUMNS} FROM attendance_records WHERE id=%s", (record_id,))
        return _to_record(row) if row else None

    def list_recent(self) -> Sequence[AttendanceRecord]:
        rows = query_all(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM attendance_records ORDER BY waktu_presensi DESC, id DESC",
        )
        return [_to_record(r) for r in rows]
