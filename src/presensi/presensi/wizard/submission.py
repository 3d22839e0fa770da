from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..common.validators import blank_to_none, validate_contact
from ..core.constants import GENERIC_SUBMIT_ERROR
from ..core.enums import UserType
from ..core.exceptions import DomainError, ValidationError
from ..gateway.protocol import AttendanceGateway
from .draft import Draft
from .notifications import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    record: Optional[AttendanceRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


class SubmissionClient:
    def __init__(self, gateway: AttendanceGateway):
        self._gateway = gateway

    @staticmethod
    def build_command(draft: Draft) -> NewAttendanceRecord:
        if draft.user_type is None:
            raise ValidationError("Jenis pengguna belum dipilih")

        internal = draft.user_type == UserType.INTERNAL
        return NewAttendanceRecord(
            user_type=draft.user_type,
            name=(draft.name or "").strip(),
            activity_name=(draft.activity_name or "").strip(),
            activity_id=draft.activity_id,
            nip=blank_to_none(draft.identifier) if internal else None,
            unit=blank_to_none(draft.unit) if internal else None,
            organization=blank_to_none(draft.organization),
            contact=blank_to_none(draft.contact),
            email=blank_to_none(draft.email),
            target_person=blank_to_none(draft.target_person),
            purpose=blank_to_none(draft.purpose),
            signature=draft.signature_image or None,
        )

    async def submit(self, draft: Draft, notifier: Notifier) -> SubmissionResult:
        check = validate_contact(blank_to_none(draft.contact))
        if not check.valid:
            draft.contact_error = check.message
            notifier.error("Nomor kontak tidak valid", check.message)
            return SubmissionResult(error=check.message)

        try:
            command = self.build_command(draft)
            record = await self._gateway.create_attendance_record(command)
        except ValidationError as e:
            message = str(e) or GENERIC_SUBMIT_ERROR
            logger.info("Presensi ditolak server: %s", message)
            notifier.error("Gagal menyimpan presensi", message)
            return SubmissionResult(error=message)
        except DomainError as e:
            message = str(e) or GENERIC_SUBMIT_ERROR
            logger.warning("Presensi gagal dikirim: %s", message)
            notifier.error("Gagal menyimpan presensi", message)
            return SubmissionResult(error=message)

        notifier.success("Presensi berhasil dicatat", "Terima kasih atas kehadiran Anda!")
        return SubmissionResult(record=record)
