from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..core.constants import MIN_IDENTIFIER_LENGTH
from ..core.exceptions import DomainError, NotFoundError
from ..employees.model import Employee
from ..gateway.protocol import AttendanceGateway
from .draft import Draft
from .notifications import Notifier

logger = logging.getLogger(__name__)


class LookupStatus(str, Enum):
    SKIPPED = "skipped"
    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one directory lookup, keyed by the identifier it was issued for."""

    identifier: str
    status: LookupStatus
    employee: Optional[Employee] = None
    message: Optional[str] = None


class EmployeeLookupClient:
    """Turns a debounced NIP into a found / not-found result and merges it into a Draft."""

    def __init__(self, gateway: AttendanceGateway, *, min_length: int = MIN_IDENTIFIER_LENGTH):
        self._gateway = gateway
        self._min_length = int(min_length)

    def should_lookup(self, identifier: Optional[str]) -> bool:
        return len((identifier or "").strip()) >= self._min_length

    async def lookup(self, identifier: str) -> LookupResult:
        nip = (identifier or "").strip()
        if not self.should_lookup(nip):
            return LookupResult(identifier=nip, status=LookupStatus.SKIPPED)

        try:
            employee = await self._gateway.lookup_employee(nip)
        except NotFoundError as e:
            logger.info("NIP %s tidak ditemukan", nip)
            return LookupResult(identifier=nip, status=LookupStatus.NOT_FOUND, message=str(e))
        except DomainError as e:
            logger.warning("Lookup NIP %s gagal: %s", nip, e)
            return LookupResult(identifier=nip, status=LookupStatus.FAILED, message=str(e))

        return LookupResult(identifier=nip, status=LookupStatus.FOUND, employee=employee)

    @staticmethod
    def apply(result: LookupResult, draft: Draft, notifier: Notifier) -> None:
        if result.status == LookupStatus.FOUND and result.employee is not None:
            employee = result.employee
            draft.name = employee.name
            draft.unit = employee.unit
            # Directory values may be malformed too; surface that instead of trusting it.
            draft.set_contact(employee.contact)
            draft.employee_match = True
            draft.matched_identifier = result.identifier
            notifier.success("Data ditemukan", f"Selamat datang, {employee.name}!")
            return

        draft.clear_identity()
        if result.status == LookupStatus.NOT_FOUND:
            notifier.warning("NIP tidak ditemukan", "Silakan periksa kembali NIP Anda atau hubungi administrator.")
        elif result.status == LookupStatus.FAILED:
            notifier.error("Gagal menghubungi server", result.message or "Pencarian data pegawai tidak dapat dilakukan.")
