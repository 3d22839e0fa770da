from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..core.constants import CONTACT_FORMAT_HINT, CONTACT_PATTERN, EMAIL_FORMAT_HINT, EMAIL_PATTERN
from ..core.exceptions import FormatError, ValidationError

_CONTACT_RE = re.compile(CONTACT_PATTERN)
_EMAIL_RE = re.compile(EMAIL_PATTERN)


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of a format check: ``message`` is None whenever ``valid`` is True."""

    valid: bool
    message: Optional[str] = None


_OK = FieldCheck(valid=True)


def validate_contact(value: Optional[str]) -> FieldCheck:
    """Nomor kontak: kosong dianggap valid, selain itu harus ``08`` + 8-11 digit."""
    if not value:
        return _OK
    if _CONTACT_RE.match(value):
        return _OK
    return FieldCheck(valid=False, message=CONTACT_FORMAT_HINT)


def validate_email(value: Optional[str]) -> FieldCheck:
    if not value:
        return _OK
    if _EMAIL_RE.match(value):
        return _OK
    return FieldCheck(valid=False, message=EMAIL_FORMAT_HINT)


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} harus diisi")
    return value.strip()


def require_contact_format(value: Optional[str], message: str = CONTACT_FORMAT_HINT) -> Optional[str]:
    if not validate_contact(value).valid:
        raise FormatError(message)
    return value or None


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None
