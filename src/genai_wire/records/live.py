# genai_wire/records/live.py
from ..fields import Int64
from .base import WireRecord

__all__ = ("ContextWindowCompressionConfig", "SlidingWindow")


class SlidingWindow(WireRecord):
    """Context compression that keeps a sliding window of recent turns."""

    wire_order = ("targetTokens",)

    target_tokens: Int64 | None = None


class ContextWindowCompressionConfig(WireRecord):
    """Context window compression settings for a live session.

    `sliding_window` is nested and encoded with its own record rules. An empty
    but present window is sent as ``{}``.
    """

    wire_order = ("triggerTokens", "slidingWindow")

    trigger_tokens: Int64 | None = None
    sliding_window: SlidingWindow | None = None
