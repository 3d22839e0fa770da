from __future__ import annotations

import asyncio

import pytest

from src.presensi.presensi.core.constants import GENERIC_SUBMIT_ERROR
from src.presensi.presensi.core.enums import NotificationLevel, UserType
from src.presensi.presensi.core.exceptions import TransportError, ValidationError
from src.presensi.presensi.wizard.draft import Draft
from src.presensi.presensi.wizard.notifications import Notifier
from src.presensi.presensi.wizard.submission import SubmissionClient


def _internal_draft() -> Draft:
    return Draft(
        user_type=UserType.INTERNAL,
        activity_id=1,
        activity_name="Rapat Koordinasi",
        identifier=" 123456789 ",
        employee_match=True,
        matched_identifier="123456789",
        name="Ahmad Wijaya",
        unit="Dinas Kominfo",
        contact="0812345678901",
        email="",
        target_person="  ",
    )


def test_build_command_maps_blanks_to_none():
    command = SubmissionClient.build_command(_internal_draft())

    assert command.nip == "123456789"
    assert command.unit == "Dinas Kominfo"
    assert command.email is None
    assert command.target_person is None
    assert command.activity_id == 1


def test_build_command_drops_employee_fields_for_guests():
    draft = _internal_draft()
    draft.user_type = UserType.EXTERNAL

    command = SubmissionClient.build_command(draft)

    assert command.nip is None
    assert command.unit is None


def test_build_command_requires_user_type():
    with pytest.raises(ValidationError):
        SubmissionClient.build_command(Draft())


def test_invalid_contact_is_caught_before_the_request(gateway):
    draft = _internal_draft()
    draft.contact = "0812"
    notifier = Notifier()

    result = asyncio.run(SubmissionClient(gateway).submit(draft, notifier))

    assert not result.ok
    assert gateway.submitted == []
    assert draft.contact_error is not None
    assert notifier.latest.level == NotificationLevel.ERROR


def test_transport_failure_uses_message_and_keeps_draft(gateway):
    gateway.submit_error = TransportError("")
    draft = _internal_draft()
    notifier = Notifier()

    result = asyncio.run(SubmissionClient(gateway).submit(draft, notifier))

    assert result.error == GENERIC_SUBMIT_ERROR
    assert draft.name == "Ahmad Wijaya"
    assert notifier.latest.description == GENERIC_SUBMIT_ERROR


def test_success_notifies(gateway):
    notifier = Notifier()

    result = asyncio.run(SubmissionClient(gateway).submit(_internal_draft(), notifier))

    assert result.ok
    assert result.record.nip == "123456789"
    assert notifier.latest.level == NotificationLevel.SUCCESS
