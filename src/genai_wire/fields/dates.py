# genai_wire/fields/dates.py
"""Calendar date composite: a possibly-partial date sent as a day/month/year object."""
import datetime as dt
from typing import Any

from pydantic import ValidationInfo, model_validator

from ..exceptions import FormatError
from ..types.base import WireModel
from .scalars import WireInt, is_wire_context

__all__ = ("CalendarDate",)


class CalendarDate(WireModel):
    """A whole or partial calendar date.

    `month` and `day` are 0 when unspecified, so a year-only or year+month
    date is valid. When the date is non-zero all three keys are emitted, in
    the order day, month, year. The all-zero date is omitted by the enclosing
    record.

    On the wire a date object without a `year` key is rejected.
    """

    wire_order = ("day", "month", "year")
    wire_required = frozenset({"day", "month", "year"})

    year: WireInt = 0
    month: WireInt = 0
    day: WireInt = 0

    @model_validator(mode="before")
    @classmethod
    def _require_year(cls, data: Any, info: ValidationInfo) -> Any:
        if not is_wire_context(info):
            return data
        if not isinstance(data, dict):
            raise FormatError("expected a date object with year/month/day", value=data)
        if "year" not in data:
            raise FormatError("date is missing its year", field="year", value=data)
        return data

    def is_zero(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def to_date(self) -> dt.date:
        """Return a `datetime.date`; only valid for fully-specified dates."""
        return dt.date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: dt.date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def __str__(self) -> str:
        if not self.month:
            return f"{self.year:04d}"
        if not self.day:
            return f"{self.year:04d}-{self.month:02d}"
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
