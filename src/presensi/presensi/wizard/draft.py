from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Optional

from ..activities.model import Activity
from ..common.validators import validate_contact, validate_email
from ..core.enums import ActivityMode, UserType

IDENTITY_FIELDS = ("name", "unit", "contact")


@dataclass
class Draft:
    """In-progress attendance submission owned by one :class:`WizardSession`.

    Error slots are derived: every write to ``contact``/``email`` goes through
    :meth:`set_contact`/:meth:`set_email` so they never drift from the values.
    """

    user_type: Optional[UserType] = None
    activity_id: Optional[int] = None
    activity_name: Optional[str] = None
    activity_mode: Optional[ActivityMode] = None

    identifier: Optional[str] = None
    employee_match: bool = False
    matched_identifier: Optional[str] = None

    name: Optional[str] = None
    unit: Optional[str] = None
    organization: Optional[str] = None
    contact: Optional[str] = None
    email: Optional[str] = None
    target_person: Optional[str] = None
    purpose: Optional[str] = None
    signature_image: Optional[str] = None

    contact_error: Optional[str] = None
    email_error: Optional[str] = None

    def set_contact(self, value: Optional[str]) -> None:
        self.contact = value
        self.contact_error = validate_contact(value).message

    def set_email(self, value: Optional[str]) -> None:
        self.email = value
        self.email_error = validate_email(value).message

    def choose_activity(self, activity: Activity) -> None:
        self.activity_id = activity.activity_id
        self.activity_name = activity.name
        # Only the external branch depends on the mode.
        self.activity_mode = activity.mode if self.user_type == UserType.EXTERNAL else None

    def clear_identity(self) -> None:
        """Lookup found nothing: name/unit/contact go back to empty."""
        self.employee_match = False
        self.matched_identifier = None
        for key in IDENTITY_FIELDS:
            setattr(self, key, None)
        self.contact_error = None

    def copy(self) -> "Draft":
        return replace(self)

    def snapshot(self) -> dict:
        data = asdict(self)
        data["user_type"] = self.user_type.value if self.user_type else None
        data["activity_mode"] = self.activity_mode.value if self.activity_mode else None
        return data
