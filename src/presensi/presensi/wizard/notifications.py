from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..core.enums import NotificationLevel


@dataclass(frozen=True)
class Notification:
    """Transient toast shown by the presentation layer."""

    level: NotificationLevel
    title: str
    description: str = ""

    def to_dict(self) -> dict:
        return {"level": self.level.value, "title": self.title, "description": self.description}


class Notifier:
    """Collects notifications for a session and forwards them to an optional listener."""

    def __init__(self, listener: Optional[Callable[[Notification], None]] = None):
        self._listener = listener
        self._history: list[Notification] = []

    @property
    def history(self) -> list[Notification]:
        return list(self._history)

    @property
    def latest(self) -> Optional[Notification]:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()

    def notify(self, level: NotificationLevel, title: str, description: str = "") -> Notification:
        note = Notification(level=level, title=title, description=description)
        self._history.append(note)
        if self._listener is not None:
            self._listener(note)
        return note

    def success(self, title: str, description: str = "") -> Notification:
        return self.notify(NotificationLevel.SUCCESS, title, description)

    def warning(self, title: str, description: str = "") -> Notification:
        return self.notify(NotificationLevel.WARNING, title, description)

    def error(self, title: str, description: str = "") -> Notification:
        return self.notify(NotificationLevel.ERROR, title, description)
