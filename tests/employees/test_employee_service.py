from __future__ import annotations

import pytest

from src.presensi.presensi.core.constants import EMPLOYEE_NOT_FOUND_MESSAGE
from src.presensi.presensi.core.exceptions import NotFoundError, ValidationError
from src.presensi.presensi.employees.model import Employee


def test_lookup_trims_identifier(container, ahmad):
    assert container.employee_service.lookup(" 123456789 ") == ahmad


def test_lookup_unknown(container):
    with pytest.raises(NotFoundError, match=EMPLOYEE_NOT_FOUND_MESSAGE):
        container.employee_service.lookup("000")


def test_lookup_blank(container):
    with pytest.raises(ValidationError):
        container.employee_service.lookup("  ")


def test_sync_contact_unknown_nip_reports_false(container):
    assert container.employee_service.sync_contact(nip="000", contact="0811111111") is False


def test_from_dict_accepts_legacy_unit_key():
    employee = Employee.from_dict({"nip": " 42 ", "nama": "Budi", "jabatan": "Sekretariat"})

    assert employee.nip == "42"
    assert employee.unit == "Sekretariat"
