from __future__ import annotations

import logging

from ..common.validators import require_non_empty
from ..core.constants import EMPLOYEE_NOT_FOUND_MESSAGE
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeDirectoryService:
    """Use case: look up employees by NIP and keep their contact number current."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def lookup(self, nip: str) -> Employee:
        nip = require_non_empty(nip, "NIP")
        employee = self._employees.get_by_nip(nip)
        if not employee:
            raise NotFoundError(EMPLOYEE_NOT_FOUND_MESSAGE)
        return employee

    def sync_contact(self, *, nip: str, contact: str) -> bool:
        updated = self._employees.update_contact(nip=nip.strip(), contact=contact)
        if updated:
            logger.info("Nomor kontak untuk NIP %s diperbarui", nip)
        else:
            logger.warning("NIP %s tidak ada di direktori, nomor kontak tidak disinkronkan", nip)
        return updated
