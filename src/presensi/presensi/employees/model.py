from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Entitas domain: pegawai di direktori internal.

    Wizard hanya membaca data ini; satu-satunya penulisan (nomor kontak) dilakukan
    oleh layanan presensi saat record internal disimpan.
    """

    nip: str
    name: str
    unit: Optional[str] = None
    contact: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nip": self.nip,
            "nama": self.name,
            "unit_kerja": self.unit,
            "nomor_kontak": self.contact,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            nip=str(data.get("nip") or "").strip(),
            name=data.get("nama") or "",
            unit=data.get("unit_kerja") or data.get("jabatan"),
            contact=data.get("nomor_kontak"),
        )
