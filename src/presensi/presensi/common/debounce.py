from __future__ import annotations

import asyncio
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class DebounceState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    PUBLISHED = "published"
    CLOSED = "closed"


_UNSET = object()


class Debouncer(Generic[T]):
    """Publish a value only after it stayed unchanged for ``delay`` seconds.

    State machine: IDLE -> PENDING (timer armed) -> PUBLISHED. A ``push`` while
    PENDING cancels the armed timer and arms a new one, so a burst of pushes
    publishes exactly once, with the last value. ``on_publish`` is called only when
    the published value differs from the previous one.

    Must be used from inside a running event loop.
    """

    def __init__(self, delay: float, on_publish: Callable[[T], None]):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = float(delay)
        self._on_publish = on_publish
        self._state = DebounceState.IDLE
        self._handle: Optional[asyncio.TimerHandle] = None
        self._settled: Optional[asyncio.Future] = None
        self._value = _UNSET

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def state(self) -> DebounceState:
        return self._state

    @property
    def value(self) -> Optional[T]:
        """Last published value (None before the first publish)."""
        return None if self._value is _UNSET else self._value

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    def push(self, value: T) -> None:
        if self._state == DebounceState.CLOSED:
            raise RuntimeError("Debouncer is closed")

        loop = asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
        if self._settled is None or self._settled.done():
            self._settled = loop.create_future()

        self._handle = loop.call_later(self._delay, self._fire, value)
        self._state = DebounceState.PENDING

    def _fire(self, value: T) -> None:
        self._handle = None
        changed = self._value is _UNSET or self._value != value
        self._value = value
        self._state = DebounceState.PUBLISHED
        try:
            if changed:
                self._on_publish(value)
        finally:
            self._resolve_settled()

    def cancel(self) -> None:
        """Drop the armed timer, if any, without publishing."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._state == DebounceState.PENDING:
            self._state = DebounceState.PUBLISHED if self.has_value else DebounceState.IDLE
        self._resolve_settled()

    def reset(self) -> None:
        """Cancel and forget the published value (a new session starts from IDLE)."""
        self.cancel()
        self._value = _UNSET
        if self._state != DebounceState.CLOSED:
            self._state = DebounceState.IDLE

    def close(self) -> None:
        self.cancel()
        self._state = DebounceState.CLOSED

    async def settled(self) -> None:
        """Wait until no timer is armed."""
        if self._settled is not None and not self._settled.done():
            await asyncio.shield(self._settled)

    def _resolve_settled(self) -> None:
        if self._settled is not None and not self._settled.done():
            self._settled.set_result(None)
