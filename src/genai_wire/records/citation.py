# genai_wire/records/citation.py
from pydantic import Field, field_validator

from ..fields import CalendarDate, WireInt
from .base import WireRecord

__all__ = ("Citation", "CitationMetadata")


class Citation(WireRecord):
    """Source attribution for a span of generated content.

    `start_index` and `end_index` are plain JSON integers. They are emitted
    whenever set, including 0; only an unset index is left off the wire.
    An all-zero `publication_date` is the same as no date and is stored as
    ``None``.
    """

    wire_order = ("publicationDate", "endIndex", "license", "startIndex", "title", "uri")

    end_index: WireInt | None = None
    license: str | None = None
    publication_date: CalendarDate | None = None
    start_index: WireInt | None = None
    title: str | None = None
    uri: str | None = None

    @field_validator("publication_date")
    @classmethod
    def _zero_date_is_absent(cls, value: CalendarDate | None) -> CalendarDate | None:
        if value is not None and value.is_zero():
            return None
        return value


class CitationMetadata(WireRecord):
    wire_order = ("citations",)

    citations: list[Citation] = Field(default_factory=list)
