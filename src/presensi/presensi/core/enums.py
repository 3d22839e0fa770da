from __future__ import annotations

from enum import Enum


class UserType(str, Enum):
    """Jenis pengunjung yang mengisi presensi."""

    INTERNAL = "internal"
    EXTERNAL = "eksternal"


class ActivityMode(str, Enum):
    """Cara kegiatan dilaksanakan; menentukan cabang langkah tamu eksternal."""

    IN_PERSON = "Luring"
    REMOTE = "Daring"


class ActivityStatus(str, Enum):
    ACTIVE = "Aktif"
    INACTIVE = "Nonaktif"


class StepKind(str, Enum):
    """Isi satu langkah wizard."""

    TYPE_SELECT = "type_select"
    IDENTIFIER = "identifier"
    CONFIRM_IDENTITY = "confirm_identity"
    ACTIVITY_SELECT = "activity_select"
    NAME = "name"
    ORGANIZATION = "organization"
    CONTACT = "contact"
    EMAIL = "email"
    TARGET_PERSON = "target_person"
    PURPOSE = "purpose"
    SIGNATURE = "signature"
    FINAL_CONFIRM = "final_confirm"


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
