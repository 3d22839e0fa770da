from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, TypeVar
from urllib.parse import quote

import httpx

from ..activities.model import Activity
from ..attendance.model import AttendanceRecord, NewAttendanceRecord
from ..core.exceptions import NotFoundError, TransportError, ValidationError
from ..employees.model import Employee

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _decode(response: httpx.Response, build: Callable[[Any], T]) -> T:
    """Parse a 2xx body; anything that is not the expected JSON is a transport failure."""
    try:
        return build(response.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.warning("Invalid response from %s: %s", response.request.url, e)
        raise TransportError("Respons server tidak valid") from e


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class HttpGateway:
    """REST implementation of :class:`AttendanceGateway` on top of ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if client is not None:
            self._client = client
        elif timeout is not None:
            self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
        else:
            self._client = httpx.AsyncClient(base_url=base_url)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError("Tidak dapat terhubung ke server") from e

    async def lookup_employee(self, nip: str) -> Employee:
        response = await self._request("GET", f"/api/employees/{quote(nip.strip(), safe='')}")
        if response.status_code == 404:
            raise NotFoundError(_error_message(response) or "Pegawai tidak ditemukan")
        if response.status_code != 200:
            raise TransportError(_error_message(response) or f"Server error ({response.status_code})")
        return _decode(response, Employee.from_dict)

    async def list_active_activities(self) -> Sequence[Activity]:
        response = await self._request("GET", "/api/activities/active")
        if response.status_code != 200:
            raise TransportError(_error_message(response) or "Gagal memuat daftar kegiatan")
        return _decode(response, lambda data: [Activity.from_dict(item) for item in data])

    async def create_attendance_record(self, command: NewAttendanceRecord) -> AttendanceRecord:
        response = await self._request("POST", "/api/records", json=command.to_dict())
        if response.status_code in (400, 422):
            raise ValidationError(_error_message(response) or "Data presensi ditolak server")
        if response.status_code not in (200, 201):
            raise TransportError(_error_message(response) or f"Server error ({response.status_code})")
        return _decode(response, AttendanceRecord.from_dict)
