from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import parse_timestamp
from ..core.enums import UserType


@dataclass(frozen=True)
class NewAttendanceRecord:
    """Command: data presensi yang dikirim wizard untuk disimpan.

    Field opsional yang kosong bernilai None (kolom nullable), bukan string kosong.
    """

    user_type: UserType
    name: str
    activity_name: str
    activity_id: Optional[int] = None
    nip: Optional[str] = None
    unit: Optional[str] = None
    organization: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    target_person: Optional[str] = None
    purpose: Optional[str] = None
    signature: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "tipe_user": self.user_type.value,
            "nip": self.nip,
            "nama": self.name,
            "unit_kerja": self.unit,
            "instansi": self.organization,
            "nomor_kontak": self.contact,
            "email": self.email,
            "orang_dituju": self.target_person,
            "tujuan": self.purpose,
            "kegiatan": self.activity_name,
            "activity_id": self.activity_id,
            "tanda_tangan": self.signature,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "NewAttendanceRecord":
        activity_id = data.get("activity_id")
        return cls(
            user_type=UserType(data.get("tipe_user")),
            name=data.get("nama") or "",
            activity_name=data.get("kegiatan") or "",
            activity_id=int(activity_id) if activity_id not in (None, "") else None,
            nip=data.get("nip"),
            # Older clients send the unit as "jabatan".
            unit=data.get("unit_kerja") or data.get("jabatan"),
            organization=data.get("instansi"),
            contact=data.get("nomor_kontak"),
            email=data.get("email"),
            target_person=data.get("orang_dituju"),
            purpose=data.get("tujuan"),
            signature=data.get("tanda_tangan"),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Entitas domain: record presensi yang sudah tersimpan (immutable)."""

    record_id: int
    recorded_at: datetime
    user_type: UserType
    name: str
    activity_name: str
    activity_id: Optional[int] = None
    nip: Optional[str] = None
    unit: Optional[str] = None
    organization: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    target_person: Optional[str] = None
    purpose: Optional[str] = None
    signature: Optional[str] = field(default=None, repr=False)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "tipe_user": self.user_type.value,
            "nip": self.nip,
            "nama": self.name,
            "unit_kerja": self.unit,
            "instansi": self.organization,
            "nomor_kontak": self.contact,
            "email": self.email,
            "orang_dituju": self.target_person,
            "tujuan": self.purpose,
            "kegiatan": self.activity_name,
            "activity_id": self.activity_id,
            "tanda_tangan": self.signature,
            "waktu_presensi": self.recorded_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        command = NewAttendanceRecord.from_dict(data)
        return cls.from_command(
            command,
            record_id=int(data["id"]),
            recorded_at=parse_timestamp(data["waktu_presensi"]),
        )

    @classmethod
    def from_command(cls, command: NewAttendanceRecord, *, record_id: int, recorded_at: datetime) -> "AttendanceRecord":
        return cls(
            record_id=record_id,
            recorded_at=recorded_at,
            user_type=command.user_type,
            name=command.name,
            activity_name=command.activity_name,
            activity_id=command.activity_id,
            nip=command.nip,
            unit=command.unit,
            organization=command.organization,
            contact=command.contact,
            email=command.email,
            target_person=command.target_person,
            purpose=command.purpose,
            signature=command.signature,
        )
