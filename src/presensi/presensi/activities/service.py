from __future__ import annotations

import io
import logging
from typing import Optional, Sequence
from urllib.parse import urlencode

import qrcode

from ..common.validators import require_non_empty
from ..core.enums import ActivityMode, ActivityStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Activity
from .repository import ActivityRepository

logger = logging.getLogger(__name__)


class ActivityService:
    """Use case: manage the activity catalog (admin) and list what the form may offer."""

    def __init__(self, activities: ActivityRepository, *, form_base_url: str = ""):
        self._activities = activities
        self._form_base_url = form_base_url

    @staticmethod
    def _parse_mode(value) -> ActivityMode:
        try:
            return ActivityMode(value)
        except ValueError:
            raise ValidationError("Tipe kegiatan harus Luring atau Daring")

    @staticmethod
    def _parse_status(value) -> ActivityStatus:
        if not value:
            return ActivityStatus.ACTIVE
        try:
            return ActivityStatus(value)
        except ValueError:
            raise ValidationError("Status kegiatan harus Aktif atau Nonaktif")

    def list_all(self) -> Sequence[Activity]:
        return self._activities.list_all()

    def list_active(self) -> Sequence[Activity]:
        return self._activities.list_by_status(ActivityStatus.ACTIVE)

    def get(self, activity_id: int) -> Activity:
        activity = self._activities.get_by_id(int(activity_id))
        if not activity:
            raise NotFoundError("Kegiatan tidak ditemukan")
        return activity

    def create(self, *, name: Optional[str], mode, status=None) -> Activity:
        if not name or not name.strip() or not mode:
            raise ValidationError("Nama dan Tipe Kegiatan harus diisi.")
        name = name.strip()
        parsed_mode = self._parse_mode(mode)
        parsed_status = self._parse_status(status)

        activity_id = self._activities.create(name=name, mode=parsed_mode, status=parsed_status)
        logger.info("Kegiatan %s dibuat (id=%s)", name, activity_id)
        return Activity(activity_id=activity_id, name=name, mode=parsed_mode, status=parsed_status)

    def update(self, activity_id: int, *, name: Optional[str], mode, status=None) -> Activity:
        current = self.get(activity_id)
        name = require_non_empty(name or "", "Nama kegiatan")
        parsed_mode = self._parse_mode(mode or current.mode.value)
        parsed_status = self._parse_status(status or current.status.value)

        self._activities.update(
            activity_id=current.activity_id,
            name=name,
            mode=parsed_mode,
            status=parsed_status,
        )
        return Activity(activity_id=current.activity_id, name=name, mode=parsed_mode, status=parsed_status)

    def delete(self, activity_id: int) -> None:
        self.get(activity_id)
        if not self._activities.delete_by_id(int(activity_id)):
            raise ValidationError("Gagal menghapus kegiatan")
        logger.info("Kegiatan id=%s dihapus", activity_id)

    def deep_link(self, activity_id: int) -> str:
        """URL of the check-in form with the activity preselected and locked."""
        activity = self.get(activity_id)
        base = self._form_base_url.rstrip("/") or ""
        return f"{base}/?{urlencode({'activityId': activity.activity_id})}"

    def qr_png(self, activity_id: int) -> bytes:
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=2,
        )
        qr.add_data(self.deep_link(activity_id))
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        return buf.getvalue()
