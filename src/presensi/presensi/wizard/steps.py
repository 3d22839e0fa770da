"""Step table of the check-in wizard and the advance gate.

The same :class:`StepDefinition` rows drive the validity predicate and the step
view, so the branching on (user type, activity mode) lives in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Optional

from ..core.enums import ActivityMode, StepKind, UserType
from .draft import Draft


@dataclass(frozen=True)
class StepDefinition:
    """Metadata for one wizard step.

    ``fields`` are the editable Draft attributes shown on the step,
    ``required_fields`` the subset that must be non-blank, ``summary_fields`` what
    a confirmation step lists read-only.
    """

    kind: StepKind
    title: str
    subtitle: str
    fields: tuple[str, ...] = ()
    required_fields: tuple[str, ...] = ()
    summary_fields: tuple[str, ...] = ()


# Draft attribute -> attribute holding its format error.
FIELD_ERRORS: Final[dict[str, str]] = {
    "contact": "contact_error",
    "email": "email_error",
}

FIELD_LABELS: Final[dict[str, str]] = {
    "user_type": "Jenis Pengguna",
    "identifier": "NIP",
    "name": "Nama Lengkap",
    "unit": "Unit Kerja",
    "organization": "Instansi/Perusahaan",
    "contact": "Nomor Kontak (WhatsApp/Telepon)",
    "email": "Email",
    "target_person": "Nama Orang yang Dituju",
    "purpose": "Tujuan Kedatangan",
    "activity_name": "Kegiatan",
    "signature_image": "Tanda Tangan",
}

TYPE_SELECT = StepDefinition(
    StepKind.TYPE_SELECT,
    "Selamat Datang",
    "Silakan pilih jenis pengguna Anda",
    fields=("user_type",),
    required_fields=("user_type",),
)
IDENTIFIER = StepDefinition(
    StepKind.IDENTIFIER,
    "Input NIP",
    "Masukkan Nomor Induk Pegawai Anda",
    fields=("identifier",),
    required_fields=("identifier",),
)
CONFIRM_IDENTITY = StepDefinition(
    StepKind.CONFIRM_IDENTITY,
    "Konfirmasi Data",
    "Periksa dan lengkapi data Anda",
    fields=("name", "unit", "contact", "email"),
    required_fields=("name",),
)
ACTIVITY_SELECT = StepDefinition(
    StepKind.ACTIVITY_SELECT,
    "Pilih Kegiatan",
    "Kegiatan apa yang akan Anda ikuti?",
    fields=("activity_name",),
    required_fields=("activity_name",),
)
NAME = StepDefinition(
    StepKind.NAME,
    "Data Pribadi",
    "Masukkan nama lengkap Anda",
    fields=("name",),
    required_fields=("name",),
)
ORGANIZATION = StepDefinition(
    StepKind.ORGANIZATION,
    "Instansi",
    "Dari instansi/perusahaan mana?",
    fields=("organization",),
    required_fields=("organization",),
)
CONTACT = StepDefinition(
    StepKind.CONTACT,
    "Kontak",
    "Nomor yang bisa dihubungi",
    fields=("contact",),
    required_fields=("contact",),
)
EMAIL = StepDefinition(
    StepKind.EMAIL,
    "Email",
    "Alamat email (opsional)",
    fields=("email",),
)
TARGET_PERSON = StepDefinition(
    StepKind.TARGET_PERSON,
    "Orang yang Dituju",
    "Siapa yang ingin Anda temui?",
    fields=("target_person",),
    required_fields=("target_person",),
)
PURPOSE = StepDefinition(
    StepKind.PURPOSE,
    "Tujuan Kedatangan",
    "Apa tujuan kunjungan Anda?",
    fields=("purpose",),
    required_fields=("purpose",),
)
SIGNATURE = StepDefinition(
    StepKind.SIGNATURE,
    "Tanda Tangan",
    "Tanda tangan digital (opsional)",
    fields=("signature_image",),
)

INTERNAL_FINAL = StepDefinition(
    StepKind.FINAL_CONFIRM,
    "Konfirmasi Presensi",
    "Periksa data presensi Anda",
    summary_fields=("name", "identifier", "unit", "contact", "email", "activity_name"),
)
EXTERNAL_FINAL = StepDefinition(
    StepKind.FINAL_CONFIRM,
    "Konfirmasi Presensi",
    "Periksa data presensi Anda",
    summary_fields=("name", "organization", "contact", "email", "target_person", "purpose", "activity_name"),
)

UNSET_STEPS: Final[tuple[StepDefinition, ...]] = (TYPE_SELECT,)

INTERNAL_STEPS: Final[tuple[StepDefinition, ...]] = (
    TYPE_SELECT,
    IDENTIFIER,
    CONFIRM_IDENTITY,
    ACTIVITY_SELECT,
    SIGNATURE,
    INTERNAL_FINAL,
)

EXTERNAL_REMOTE_STEPS: Final[tuple[StepDefinition, ...]] = (
    TYPE_SELECT,
    ACTIVITY_SELECT,
    NAME,
    ORGANIZATION,
    CONTACT,
    EMAIL,
    SIGNATURE,
    EXTERNAL_FINAL,
)

# In-person visits also ask who is being visited and why.
EXTERNAL_IN_PERSON_STEPS: Final[tuple[StepDefinition, ...]] = (
    TYPE_SELECT,
    ACTIVITY_SELECT,
    NAME,
    ORGANIZATION,
    CONTACT,
    EMAIL,
    TARGET_PERSON,
    PURPOSE,
    SIGNATURE,
    EXTERNAL_FINAL,
)


def steps_for(user_type: Optional[UserType], activity_mode: Optional[ActivityMode]) -> tuple[StepDefinition, ...]:
    if user_type is None:
        return UNSET_STEPS
    if user_type == UserType.INTERNAL:
        return INTERNAL_STEPS
    if activity_mode == ActivityMode.REMOTE:
        return EXTERNAL_REMOTE_STEPS
    # No activity chosen yet: show the longest branch until the mode is known.
    return EXTERNAL_IN_PERSON_STEPS


def total_steps(user_type: Optional[UserType], activity_mode: Optional[ActivityMode]) -> int:
    return len(steps_for(user_type, activity_mode))


def step_at(step: int, user_type: Optional[UserType], activity_mode: Optional[ActivityMode]) -> Optional[StepDefinition]:
    steps = steps_for(user_type, activity_mode)
    if 1 <= step <= len(steps):
        return steps[step - 1]
    return None


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def pending_errors(definition: StepDefinition, draft: Draft) -> dict[str, str]:
    errors = {}
    for key in definition.fields:
        error_attr = FIELD_ERRORS.get(key)
        message = getattr(draft, error_attr) if error_attr else None
        if message:
            errors[key] = message
    return errors


def missing_fields(definition: StepDefinition, draft: Draft) -> list[str]:
    return [key for key in definition.required_fields if _is_blank(getattr(draft, key))]


def is_step_valid(step: int, draft: Draft) -> bool:
    """May the user leave ``step`` going forward?"""
    definition = step_at(step, draft.user_type, draft.activity_mode)
    if definition is None:
        return False

    if definition.kind in (StepKind.SIGNATURE, StepKind.FINAL_CONFIRM):
        return True

    if pending_errors(definition, draft) or missing_fields(definition, draft):
        return False

    if definition.kind == StepKind.IDENTIFIER:
        # Typed text is not enough: the lookup must have matched this exact NIP.
        identifier = (draft.identifier or "").strip()
        return draft.employee_match and draft.matched_identifier == identifier

    return True
