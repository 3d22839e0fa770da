from __future__ import annotations

from typing import Any

from ..core.enums import StepKind, UserType
from .session import WizardSession
from .steps import FIELD_ERRORS, FIELD_LABELS

PRIMARY_NEXT_LABEL = "Lanjut"
PRIMARY_SUBMIT_LABEL = "Submit Presensi"
SUBMITTING_LABEL = "Menyimpan..."
BACK_LABEL = "Kembali"

USER_TYPE_LABELS = {
    UserType.INTERNAL: "Pegawai Internal",
    UserType.EXTERNAL: "Tamu Eksternal",
}


def _display(value: Any) -> Any:
    if value is None:
        return ""
    return getattr(value, "value", value)


def _field(session: WizardSession, key: str, *, read_only: bool = False) -> dict:
    error_attr = FIELD_ERRORS.get(key)
    return {
        "key": key,
        "label": FIELD_LABELS.get(key, key),
        "value": _display(getattr(session.draft, key)),
        "error": getattr(session.draft, error_attr) if error_attr else None,
        "read_only": read_only or not session.is_editable(key),
    }


def build_step_view(session: WizardSession) -> dict:
    """Render-ready description of the current step for any front end."""
    step = session.current_step

    view = {
        "step": session.step,
        "total_steps": session.total_steps,
        "progress": session.progress,
        "progress_text": f"Langkah {session.step} dari {session.total_steps}",
        "kind": step.kind.value,
        "title": step.title,
        "subtitle": step.subtitle,
        "fields": [_field(session, key) for key in step.fields if key != "signature_image"],
        "summary": [_field(session, key, read_only=True) for key in step.summary_fields],
        "primary": {
            "label": PRIMARY_SUBMIT_LABEL if session.is_last_step else PRIMARY_NEXT_LABEL,
            "enabled": session.can_advance,
        },
        "back": {"label": BACK_LABEL, "enabled": session.can_retreat} if session.step > 1 else None,
    }

    if session.submitting:
        view["primary"]["label"] = SUBMITTING_LABEL

    if step.kind == StepKind.TYPE_SELECT:
        view["choices"] = [
            {"value": user_type.value, "label": label, "selected": session.draft.user_type == user_type}
            for user_type, label in USER_TYPE_LABELS.items()
        ]
    elif step.kind == StepKind.ACTIVITY_SELECT:
        view["choices"] = [
            {
                "value": activity.activity_id,
                "label": f"{activity.name} ({activity.mode.value})",
                "selected": session.draft.activity_id == activity.activity_id,
            }
            for activity in session.catalog.activities
        ]
        view["locked"] = session.activity_locked
    elif step.kind == StepKind.SIGNATURE:
        view["signature_captured"] = bool(session.draft.signature_image)

    return view
