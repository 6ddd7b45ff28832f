# genai_wire/records/media.py
"""Content parts and the media metadata attached to them."""
from datetime import timedelta
from typing import Any

from pydantic import Field, StrictBool

from ..fields import Base64Bytes, Duration, WireFloat
from .base import WireRecord

__all__ = ("Blob", "Content", "Part", "VideoMetadata")

_ZERO = timedelta(0)


class VideoMetadata(WireRecord):
    """Clip boundaries and sampling rate for video input.

    A zero offset means "unspecified". `endOffset` is emitted when non-zero.
    `startOffset` is emitted when non-zero, and also whenever `endOffset` is
    emitted, rendered as ``"0s"`` if unset: the service needs a start anchor
    for any clip that has an end.
    """

    wire_order = ("endOffset", "fps", "startOffset")

    end_offset: Duration = _ZERO
    fps: WireFloat | None = None
    start_offset: Duration = _ZERO

    def wire_omits(self, name: str, value: Any) -> bool:
        if name == "end_offset":
            return value == _ZERO
        if name == "start_offset":
            return value == _ZERO and self.end_offset == _ZERO
        return super().wire_omits(name, value)


class Blob(WireRecord):
    """Inline bytes with their MIME type; `data` is base64 on the wire."""

    wire_order = ("data", "mimeType")

    data: Base64Bytes = b""
    mime_type: str | None = None


class Part(WireRecord):
    wire_order = ("videoMetadata", "thought", "inlineData", "text")

    video_metadata: VideoMetadata | None = None
    thought: StrictBool | None = None
    inline_data: Blob | None = None
    text: str | None = None


class Content(WireRecord):
    """A multi-part message from a single role."""

    wire_order = ("parts", "role")

    parts: list[Part] = Field(default_factory=list)
    role: str | None = None
