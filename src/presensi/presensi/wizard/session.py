from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from ..activities.model import Activity
from ..attendance.model import AttendanceRecord
from ..common.debounce import Debouncer
from ..core.constants import DEFAULT_DEBOUNCE_SECONDS
from ..core.enums import StepKind, UserType
from ..gateway.protocol import AttendanceGateway
from .catalog import ActivityCatalogClient
from .draft import Draft
from .lookup import EmployeeLookupClient, LookupResult, LookupStatus
from .notifications import Notification, Notifier
from .signature import SignaturePad, capture
from .steps import StepDefinition, is_step_valid, step_at, steps_for
from .submission import SubmissionClient, SubmissionResult

logger = logging.getLogger(__name__)


class WizardSession:
    """One visitor filling the check-in form.

    Owns the Draft and the 1-based step index; every mutation goes through the
    named transitions below. Lookups and submission run on the current event loop.
    """

    def __init__(
        self,
        gateway: AttendanceGateway,
        *,
        signature_pad: Optional[SignaturePad] = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        deep_link_activity_id=None,
        on_notify: Optional[Callable[[Notification], None]] = None,
        on_submitted: Optional[Callable[[AttendanceRecord], None]] = None,
    ):
        self.notifier = Notifier(on_notify)
        self.catalog = ActivityCatalogClient(gateway)
        self.lookup = EmployeeLookupClient(gateway)
        self.submission = SubmissionClient(gateway)

        self._pad = signature_pad
        self._deep_link_activity_id = deep_link_activity_id
        self._on_submitted = on_submitted
        self._debouncer: Debouncer[str] = Debouncer(debounce_seconds, self._on_identifier_settled)
        self._lookups: set[asyncio.Task] = set()
        self._submitting = False
        self._closed = False

        self.draft = Draft()
        self.step = 1

    # ----- derived state -------------------------------------------------

    @property
    def steps(self) -> tuple[StepDefinition, ...]:
        return steps_for(self.draft.user_type, self.draft.activity_mode)

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step(self) -> StepDefinition:
        return step_at(self.step, self.draft.user_type, self.draft.activity_mode) or self.steps[0]

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps and self.draft.user_type is not None

    @property
    def can_advance(self) -> bool:
        """Drives the "Lanjut" / "Submit Presensi" button; a hard gate."""
        if self._submitting or self._closed:
            return False
        return is_step_valid(self.step, self.draft)

    @property
    def can_retreat(self) -> bool:
        return self.step > 1 and not self._submitting

    @property
    def progress(self) -> int:
        return round(self.step / self.total_steps * 100)

    @property
    def submitting(self) -> bool:
        return self._submitting

    @property
    def activity_locked(self) -> bool:
        return self.catalog.is_locked

    def is_editable(self, field: str) -> bool:
        if field in ("name", "unit"):
            return not self.draft.employee_match
        if field == "activity_name":
            return not self.catalog.is_locked
        return True

    # ----- lifecycle -------------------------------------------------------

    async def start(self) -> list[Activity]:
        """Load the catalog once and apply a deep-linked activity."""
        activities = await self.catalog.load(self.notifier, preselect_id=self._deep_link_activity_id)
        self._apply_locked_activity()
        return list(activities)

    async def wait_idle(self) -> None:
        """Wait for the pending debounce and any lookup it started."""
        await self._debouncer.settled()
        while self._lookups:
            await asyncio.gather(*list(self._lookups), return_exceptions=True)

    async def close(self) -> None:
        self._closed = True
        self._debouncer.close()
        for task in list(self._lookups):
            task.cancel()
        if self._lookups:
            await asyncio.gather(*list(self._lookups), return_exceptions=True)

    def _apply_locked_activity(self) -> None:
        locked = self.catalog.locked_activity
        if locked is not None:
            self.draft.choose_activity(locked)
            self._clamp_step()

    def _clamp_step(self) -> None:
        if self.step > self.total_steps:
            self.step = self.total_steps

    def _reset(self) -> None:
        self._debouncer.reset()
        for task in list(self._lookups):
            task.cancel()
        if self._pad is not None:
            self._pad.clear()
        self.draft = Draft()
        self.step = 1
        self._apply_locked_activity()

    # ----- transitions -----------------------------------------------------

    def select_user_type(self, user_type: UserType) -> bool:
        if self.step != 1 or self._closed:
            return False
        user_type = UserType(user_type)

        # Every pass through step 1 starts from a blank form.
        self._debouncer.reset()
        for task in list(self._lookups):
            task.cancel()
        self.draft = Draft(user_type=user_type)
        self._apply_locked_activity()
        self.step = 2
        logger.debug("User type %s selected", user_type.value)
        return True

    def select_activity(self, activity_id) -> bool:
        activity = self.catalog.find(activity_id)
        if activity is None:
            return False
        locked = self.catalog.locked_activity
        if locked is not None and locked.activity_id != activity.activity_id:
            return False

        self.draft.choose_activity(activity)
        self._clamp_step()
        return True

    def set_identifier(self, value: str) -> None:
        """Raw NIP keystrokes; the lookup runs once the value settles."""
        if self._closed:
            return
        self.draft.identifier = value
        self._debouncer.push((value or "").strip())

    def set_name(self, value: str) -> bool:
        if not self.is_editable("name"):
            return False
        self.draft.name = value
        return True

    def set_unit(self, value: str) -> bool:
        if not self.is_editable("unit"):
            return False
        self.draft.unit = value
        return True

    def set_organization(self, value: str) -> None:
        self.draft.organization = value

    def set_contact(self, value: str) -> Optional[str]:
        self.draft.set_contact(value)
        return self.draft.contact_error

    def set_email(self, value: str) -> Optional[str]:
        self.draft.set_email(value)
        return self.draft.email_error

    def set_target_person(self, value: str) -> None:
        self.draft.target_person = value

    def set_purpose(self, value: str) -> None:
        self.draft.purpose = value

    def advance(self) -> bool:
        if self.is_last_step or not self.can_advance:
            return False
        if self.current_step.kind == StepKind.SIGNATURE:
            self.draft.signature_image = capture(self._pad)
        self.step += 1
        return True

    def retreat(self) -> bool:
        if not self.can_retreat:
            return False
        self.step -= 1
        return True

    async def submit(self) -> Optional[AttendanceRecord]:
        if not self.is_last_step or not self.can_advance:
            return None

        self._submitting = True
        try:
            result: SubmissionResult = await self.submission.submit(self.draft, self.notifier)
        finally:
            self._submitting = False

        if not result.ok:
            return None

        self._reset()
        if self._on_submitted is not None:
            self._on_submitted(result.record)
        return result.record

    async def primary_action(self):
        """What the main button does on the current step."""
        if self.is_last_step:
            return await self.submit()
        return self.advance()

    # ----- identifier lookup -------------------------------------------

    def _on_identifier_settled(self, identifier: str) -> None:
        if not self.lookup.should_lookup(identifier):
            self.lookup.apply(
                LookupResult(identifier=identifier, status=LookupStatus.SKIPPED),
                self.draft,
                self.notifier,
            )
            return

        task = asyncio.get_running_loop().create_task(self._run_lookup(identifier, self.draft))
        self._lookups.add(task)
        task.add_done_callback(self._lookups.discard)

    async def _run_lookup(self, identifier: str, draft: Draft) -> None:
        result = await self.lookup.lookup(identifier)
        # A newer NIP settled (or the draft was replaced) while this one was in flight.
        if draft is not self.draft or self._debouncer.value != result.identifier:
            logger.debug("Discarding stale lookup for %s", result.identifier)
            return
        self.lookup.apply(result, self.draft, self.notifier)

    # ----- snapshots ---------------------------------------------------------

    def snapshot(self) -> dict:
        return {
            "step": self.step,
            "total_steps": self.total_steps,
            "step_kind": self.current_step.kind.value,
            "can_advance": self.can_advance,
            "can_retreat": self.can_retreat,
            "is_last_step": self.is_last_step,
            "activity_locked": self.activity_locked,
            "draft": self.draft.snapshot(),
            "contact_error": self.draft.contact_error,
            "email_error": self.draft.email_error,
            "notification": self.notifier.latest.to_dict() if self.notifier.latest else None,
        }
