from __future__ import annotations

import csv
import io
import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import blank_to_none, require_contact_format, require_non_empty, validate_email
from ..core.constants import CONTACT_REJECTED_MESSAGE, CSV_DATETIME_FORMAT
from ..core.enums import UserType
from ..core.exceptions import FormatError, NotFoundError
from ..employees.service import EmployeeDirectoryService
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordFilter:
    """Filter dashboard: semua kriteria opsional, digabung dengan AND."""

    search: Optional[str] = None
    activity_name: Optional[str] = None
    user_type: Optional[UserType] = None
    on_date: Optional[date] = None

    def matches(self, record: AttendanceRecord) -> bool:
        if self.search:
            term = self.search.lower()
            hit = (
                term in record.name.lower()
                or (record.nip is not None and self.search in record.nip)
                or (record.organization is not None and term in record.organization.lower())
            )
            if not hit:
                return False
        if self.activity_name and record.activity_name != self.activity_name:
            return False
        if self.user_type and record.user_type != self.user_type:
            return False
        if self.on_date and record.recorded_at.date() != self.on_date:
            return False
        return True


@dataclass(frozen=True)
class AttendanceStats:
    total: int
    today: int
    internal: int
    external: int
    per_activity: Sequence[tuple[str, int]]

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "hari_ini": self.today,
            "internal": self.internal,
            "eksternal": self.external,
            "per_kegiatan": [{"nama": n, "jumlah": c} for n, c in self.per_activity],
        }


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, directory: EmployeeDirectoryService):
        self._attendance = attendance
        self._directory = directory

    def _normalize(self, command: NewAttendanceRecord) -> NewAttendanceRecord:
        contact = blank_to_none(command.contact)
        try:
            require_contact_format(contact, CONTACT_REJECTED_MESSAGE)
        except FormatError:
            logger.error("Validasi gagal: format nomor kontak tidak sesuai (%r)", contact)
            raise

        email = blank_to_none(command.email)
        email_check = validate_email(email)
        if not email_check.valid:
            raise FormatError(email_check.message)

        name = require_non_empty(command.name, "Nama")
        activity_name = require_non_empty(command.activity_name, "Kegiatan")
        nip = blank_to_none(command.nip)
        unit = blank_to_none(command.unit)
        organization = blank_to_none(command.organization)

        if command.user_type == UserType.INTERNAL:
            require_non_empty(nip or "", "NIP")
            # Internal staff belong to the unit they work in.
            organization = organization or unit

        return NewAttendanceRecord(
            user_type=command.user_type,
            name=name,
            activity_name=activity_name,
            activity_id=command.activity_id,
            nip=nip,
            unit=unit,
            organization=organization,
            contact=contact,
            email=email,
            target_person=blank_to_none(command.target_person),
            purpose=blank_to_none(command.purpose),
            signature=blank_to_none(command.signature),
        )

    def create_record(self, command: NewAttendanceRecord, *, now: datetime | None = None) -> AttendanceRecord:
        command = self._normalize(command)
        recorded_at = now or now_local()

        record_id = self._attendance.create_record(command, recorded_at=recorded_at)
        logger.info("Presensi %s disimpan (id=%s, tipe=%s)", command.name, record_id, command.user_type.value)

        if command.user_type == UserType.INTERNAL and command.nip and command.contact:
            try:
                self._directory.sync_contact(nip=command.nip, contact=command.contact)
            except Exception:
                # The record is already stored; a failed sync only leaves the directory stale.
                logger.exception("Gagal memperbarui nomor kontak untuk NIP %s", command.nip)

        return AttendanceRecord.from_command(command, record_id=record_id, recorded_at=recorded_at)

    def get_record(self, record_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            raise NotFoundError("Data presensi tidak ditemukan")
        return record

    def list_records(self, record_filter: RecordFilter | None = None) -> list[AttendanceRecord]:
        rows = self._attendance.list_recent()
        if not record_filter:
            return list(rows)
        return [r for r in rows if record_filter.matches(r)]

    def stats(self, *, today: date | None = None) -> AttendanceStats:
        rows = self._attendance.list_recent()
        today = today or now_local().date()
        per_activity = Counter(r.activity_name for r in rows)
        return AttendanceStats(
            total=len(rows),
            today=sum(1 for r in rows if r.recorded_at.date() == today),
            internal=sum(1 for r in rows if r.user_type == UserType.INTERNAL),
            external=sum(1 for r in rows if r.user_type == UserType.EXTERNAL),
            per_activity=sorted(per_activity.items(), key=lambda kv: (-kv[1], kv[0])),
        )

    @staticmethod
    def export_csv(records: Sequence[AttendanceRecord]) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_ALL)
        writer.writerow(["Nama", "NIP", "Unit Kerja/Instansi", "Kegiatan", "Tipe User", "Waktu Presensi"])
        for r in records:
            writer.writerow(
                [
                    r.name,
                    r.nip or "",
                    r.organization or r.unit or "",
                    r.activity_name,
                    r.user_type.value,
                    r.recorded_at.strftime(CSV_DATETIME_FORMAT),
                ]
            )
        return out.getvalue().encode("utf-8-sig")
