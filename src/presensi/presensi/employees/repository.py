from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee


class EmployeeRepository(Protocol):
    """Interface repository untuk direktori pegawai.

    Catatan: layer service bergantung pada interface ini, bukan pada DB konkret.
    """

    def get_by_nip(self, nip: str) -> Optional[Employee]:
        raise NotImplementedError

    def update_contact(self, *, nip: str, contact: str) -> bool:
        raise NotImplementedError
