from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from src.presensi.presensi.attendance.model import NewAttendanceRecord
from src.presensi.presensi.core.enums import ActivityMode, UserType
from src.presensi.presensi.core.exceptions import NotFoundError, TransportError, ValidationError
from src.presensi.presensi.gateway.http_gateway import HttpGateway


def _run(handler, call):
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://api.test")
        async with HttpGateway("http://api.test", client=client) as gateway:
            return await call(gateway)

    return asyncio.run(scenario())


def test_lookup_employee_parses_directory_row():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/employees/123456789"
        return httpx.Response(
            200,
            json={"nip": "123456789", "nama": "Ahmad Wijaya", "unit_kerja": "Dinas Kominfo", "nomor_kontak": "0812345678901"},
        )

    employee = _run(handler, lambda g: g.lookup_employee(" 123456789 "))

    assert employee.name == "Ahmad Wijaya"
    assert employee.contact == "0812345678901"


def test_lookup_404_is_not_found():
    def handler(request):
        return httpx.Response(404, json={"message": "Pegawai tidak ditemukan"})

    with pytest.raises(NotFoundError, match="Pegawai tidak ditemukan"):
        _run(handler, lambda g: g.lookup_employee("999"))


def test_network_failure_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError):
        _run(handler, lambda g: g.list_active_activities())


def test_server_error_is_transport_error():
    def handler(request):
        return httpx.Response(500, json={"message": "Server Error"})

    with pytest.raises(TransportError, match="Server Error"):
        _run(handler, lambda g: g.lookup_employee("123"))


def test_list_active_activities():
    def handler(request):
        return httpx.Response(
            200,
            json=[{"id": 2, "nama_kegiatan": "Webinar", "tipe_kegiatan": "Daring", "status": "Aktif"}],
        )

    activities = _run(handler, lambda g: g.list_active_activities())

    assert activities[0].mode == ActivityMode.REMOTE


def test_create_record_posts_wire_keys():
    seen = {}

    def handler(request):
        seen.update(json.loads(request.content))
        body = dict(seen, id=7, waktu_presensi="2026-03-02T09:30:00")
        return httpx.Response(201, json=body)

    command = NewAttendanceRecord(
        user_type=UserType.EXTERNAL,
        name="Siti Rahma",
        activity_name="Webinar",
        activity_id=2,
        organization="PT Nusantara",
        contact="0812345678",
    )
    record = _run(handler, lambda g: g.create_attendance_record(command))

    assert seen["tipe_user"] == "eksternal"
    assert seen["instansi"] == "PT Nusantara"
    assert seen["kegiatan"] == "Webinar"
    assert record.record_id == 7
    assert record.recorded_at.hour == 9


def test_create_record_400_carries_server_message():
    def handler(request):
        return httpx.Response(400, json={"message": "Format Nomor Kontak tidak valid."})

    command = NewAttendanceRecord(user_type=UserType.EXTERNAL, name="X", activity_name="Y")
    with pytest.raises(ValidationError, match="Format Nomor Kontak tidak valid."):
        _run(handler, lambda g: g.create_attendance_record(command))


def test_non_json_success_body_is_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>proxy error</html>")

    with pytest.raises(TransportError, match="Respons server tidak valid"):
        _run(handler, lambda g: g.lookup_employee("123456789"))


def test_created_record_missing_keys_is_transport_error():
    def handler(request):
        return httpx.Response(201, json={"nama": "Siti Rahma"})

    command = NewAttendanceRecord(user_type=UserType.EXTERNAL, name="Siti Rahma", activity_name="Webinar")
    with pytest.raises(TransportError, match="Respons server tidak valid"):
        _run(handler, lambda g: g.create_attendance_record(command))
