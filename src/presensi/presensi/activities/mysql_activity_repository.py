from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ActivityMode, ActivityStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute_write, query_all, query_one
from .model import Activity
from .repository import ActivityRepository

_COLUMNS = "id, nama_kegiatan, tipe_kegiatan, status"


def _to_activity(row: dict) -> Activity:
    return Activity(
        activity_id=int(row["id"]),
        name=row["nama_kegiatan"],
        mode=ActivityMode(row["tipe_kegiatan"]),
        status=ActivityStatus(row["status"]),
    )


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, activity_id: int) -> Optional[Activity]:
        row = query_one(self._conn_factory, f"SELECT {_COLUMNS} FROM activities WHERE id=%s", (activity_id,))
        return _to_activity(row) if row else None

    def list_all(self) -> Sequence[Activity]:
        rows = query_all(self._conn_factory, f"SELECT {_COLUMNS} FROM activities ORDER BY nama_kegiatan")
        return [_to_activity(r) for r in rows]

    def list_by_status(self, status: ActivityStatus) -> Sequence[Activity]:
        rows = query_all(
            self._conn_factory,
            f"SELECT {_COLUMNS} FROM activities WHERE status=%s ORDER BY nama_kegiatan",
            (status.value,),
        )
        return [_to_activity(r) for r in rows]

    def create(self, *, name: str, mode: ActivityMode, status: ActivityStatus) -> int:
        result = execute_write(
            self._conn_factory,
            "INSERT INTO activities(nama_kegiatan, tipe_kegiatan, status) VALUES(%s,%s,%s)",
            (name, mode.value, status.value),
        )
        return int(result.lastrowid)

    def update(self, *, activity_id: int, name: str, mode: ActivityMode, status: ActivityStatus) -> bool:
        result = execute_write(
            self._conn_factory,
            """
            UPDATE activities
            SET nama_kegiatan=%s, tipe_kegiatan=%s, status=%s
            WHERE id=%s
            """,
            (name, mode.value, status.value, activity_id),
        )
        return result.rowcount > 0

    def delete_by_id(self, activity_id: int) -> bool:
        result = execute_write(self._conn_factory, "DELETE FROM activities WHERE id=%s", (activity_id,))
        return result.rowcount > 0
