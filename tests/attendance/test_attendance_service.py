from __future__ import annotations

import csv
import io
from datetime import date, datetime

import pytest

from src.presensi.presensi.attendance.model import NewAttendanceRecord
from src.presensi.presensi.attendance.service import RecordFilter
from src.presensi.presensi.core.constants import CONTACT_REJECTED_MESSAGE
from src.presensi.presensi.core.enums import UserType
from src.presensi.presensi.core.exceptions import FormatError, NotFoundError, ValidationError


def _internal(**overrides) -> NewAttendanceRecord:
    data = dict(
        user_type=UserType.INTERNAL,
        name="Ahmad Wijaya",
        activity_name="Rapat Koordinasi",
        activity_id=1,
        nip="123456789",
        unit="Dinas Kominfo",
        contact="0811111111",
    )
    data.update(overrides)
    return NewAttendanceRecord(**data)


def _guest(**overrides) -> NewAttendanceRecord:
    data = dict(
        user_type=UserType.EXTERNAL,
        name="Siti Rahma",
        activity_name="Webinar Literasi Digital",
        activity_id=2,
        organization="PT Nusantara",
        contact="0812345678",
    )
    data.update(overrides)
    return NewAttendanceRecord(**data)


def test_internal_record_syncs_contact_and_defaults_organization(container, employees_repo, fixed_now):
    record = container.attendance_service.create_record(_internal(), now=fixed_now)

    assert record.record_id == 1
    assert record.recorded_at == fixed_now
    assert record.organization == "Dinas Kominfo"
    assert employees_repo.contact_updates == [("123456789", "0811111111")]
    assert employees_repo.by_nip["123456789"].contact == "0811111111"


def test_guest_record_does_not_touch_directory(container, employees_repo, fixed_now):
    record = container.attendance_service.create_record(_guest(email=" ", purpose=""), now=fixed_now)

    assert record.email is None
    assert record.purpose is None
    assert employees_repo.contact_updates == []


def test_rejects_malformed_contact_with_api_message(container, attendance_repo):
    with pytest.raises(FormatError) as exc:
        container.attendance_service.create_record(_guest(contact="0812"))

    assert str(exc.value) == CONTACT_REJECTED_MESSAGE
    assert attendance_repo.records == {}


def test_rejects_malformed_email(container):
    with pytest.raises(FormatError):
        container.attendance_service.create_record(_guest(email="siti@"))


def test_internal_requires_nip(container):
    with pytest.raises(ValidationError, match="NIP"):
        container.attendance_service.create_record(_internal(nip="  "))


def test_requires_name_and_activity(container):
    with pytest.raises(ValidationError, match="Nama"):
        container.attendance_service.create_record(_guest(name=""))
    with pytest.raises(ValidationError, match="Kegiatan"):
        container.attendance_service.create_record(_guest(activity_name=" "))


def test_failed_contact_sync_still_stores_record(container, employees_repo, attendance_repo, fixed_now):
    employees_repo.fail_updates = True

    record = container.attendance_service.create_record(_internal(), now=fixed_now)

    assert attendance_repo.get_by_id(record.record_id) is not None


def test_get_record_not_found(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.get_record(42)


def test_filter_and_stats(container):
    svc = container.attendance_service
    svc.create_record(_internal(), now=datetime(2026, 3, 1, 8, 0))
    svc.create_record(_guest(), now=datetime(2026, 3, 2, 10, 0))
    svc.create_record(_guest(name="Budi", organization="CV Maju"), now=datetime(2026, 3, 2, 11, 0))

    assert [r.name for r in svc.list_records(RecordFilter(search="maju"))] == ["Budi"]
    assert [r.name for r in svc.list_records(RecordFilter(search="1234"))] == ["Ahmad Wijaya"]
    assert len(svc.list_records(RecordFilter(user_type=UserType.EXTERNAL, on_date=date(2026, 3, 2)))) == 2
    assert svc.list_records(RecordFilter(activity_name="Rapat Koordinasi"))[0].nip == "123456789"

    stats = svc.stats(today=date(2026, 3, 2))
    assert (stats.total, stats.today, stats.internal, stats.external) == (3, 2, 1, 2)
    assert stats.per_activity[0] == ("Webinar Literasi Digital", 2)


def test_export_csv_has_bom_and_formatted_time(container, fixed_now):
    svc = container.attendance_service
    svc.create_record(_guest(name='Siti "Ina" Rahma'), now=fixed_now)

    data = svc.export_csv(svc.list_records())

    assert data.startswith(b"\xef\xbb\xbf")
    rows = list(csv.reader(io.StringIO(data.decode("utf-8-sig"))))
    assert rows[0][0] == "Nama"
    assert rows[1][0] == 'Siti "Ina" Rahma'
    assert rows[1][2] == "PT Nusantara"
    assert rows[1][-1] == "02/03/2026 09:30"
