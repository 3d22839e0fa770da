from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import ActivityMode, ActivityStatus


@dataclass(frozen=True)
class Activity:
    """Entitas domain: kegiatan yang bisa dipilih di form presensi."""

    activity_id: int
    name: str
    mode: ActivityMode
    status: ActivityStatus = ActivityStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ActivityStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.activity_id,
            "nama_kegiatan": self.name,
            "tipe_kegiatan": self.mode.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Activity":
        return cls(
            activity_id=int(data["id"]),
            name=data["nama_kegiatan"],
            mode=ActivityMode(data["tipe_kegiatan"]),
            status=ActivityStatus(data.get("status") or ActivityStatus.ACTIVE.value),
        )
