# genai_wire/records/responses.py
from enum import Enum

from pydantic import Field

from ..fields import Timestamp, WireFloat, WireInt
from .base import WireRecord
from .citation import CitationMetadata
from .media import Content

__all__ = ("Candidate", "FinishReason", "GenerateContentResponse")


class FinishReason(str, Enum):
    """Known finish reasons.

    `Candidate.finish_reason` is a plain string so values added by the
    service after this list was written still decode.
    """

    FINISH_REASON_UNSPECIFIED = "FINISH_REASON_UNSPECIFIED"
    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"
    SAFETY = "SAFETY"
    RECITATION = "RECITATION"
    LANGUAGE = "LANGUAGE"
    OTHER = "OTHER"
    BLOCKLIST = "BLOCKLIST"
    PROHIBITED_CONTENT = "PROHIBITED_CONTENT"
    SPII = "SPII"
    MALFORMED_FUNCTION_CALL = "MALFORMED_FUNCTION_CALL"


class Candidate(WireRecord):
    """A response candidate generated from the model."""

    wire_order = (
        "content",
        "citationMetadata",
        "finishMessage",
        "tokenCount",
        "finishReason",
        "avgLogprobs",
        "index",
    )

    content: Content | None = None
    citation_metadata: CitationMetadata | None = None
    finish_message: str | None = None
    token_count: WireInt | None = None
    finish_reason: str | None = None
    avg_logprobs: WireFloat | None = None
    index: WireInt | None = None


class GenerateContentResponse(WireRecord):
    wire_order = ("candidates", "createTime", "responseId", "modelVersion")

    candidates: list[Candidate] = Field(default_factory=list)
    create_time: Timestamp | None = None
    response_id: str | None = None
    model_version: str | None = None
