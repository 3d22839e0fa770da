from __future__ import annotations

import base64
from typing import Optional, Protocol


class SignaturePad(Protocol):
    """Capability the wizard needs from a signature widget."""

    def is_empty(self) -> bool:
        raise NotImplementedError

    def export_image(self) -> Optional[bytes]:
        """PNG bytes of the drawing, or None when nothing was drawn."""

        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemorySignaturePad:
    """Pad backed by an in-memory PNG, for headless sessions and tests."""

    def __init__(self, image: Optional[bytes] = None):
        self._image = image

    def draw(self, image: bytes) -> None:
        self._image = image

    def is_empty(self) -> bool:
        return not self._image

    def export_image(self) -> Optional[bytes]:
        return self._image or None

    def clear(self) -> None:
        self._image = None


def to_data_url(image: bytes, mimetype: str = "image/png") -> str:
    return f"data:{mimetype};base64,{base64.b64encode(image).decode('ascii')}"


def capture(pad: Optional[SignaturePad]) -> Optional[str]:
    """Current pad content as a data URL; an empty pad yields None."""
    if pad is None or pad.is_empty():
        return None
    image = pad.export_image()
    return to_data_url(image) if image else None
