from __future__ import annotations

import asyncio

import pytest

from src.presensi.presensi.core.exceptions import NotFoundError, TransportError
from src.presensi.presensi.gateway.local_gateway import LocalGateway


def test_local_gateway_passes_domain_errors_through(container):
    gateway = container.local_gateway()

    with pytest.raises(NotFoundError):
        asyncio.run(gateway.lookup_employee("000"))


def test_local_gateway_wraps_infrastructure_errors(container):
    class Broken:
        def list_active(self):
            raise ConnectionError("MySQL server has gone away")

    gateway = LocalGateway(container.employee_service, Broken(), container.attendance_service)

    with pytest.raises(TransportError, match="gone away"):
        asyncio.run(gateway.list_active_activities())


def test_local_gateway_lists_active(container):
    activities = asyncio.run(container.local_gateway().list_active_activities())

    assert {a.activity_id for a in activities} == {1, 2}
