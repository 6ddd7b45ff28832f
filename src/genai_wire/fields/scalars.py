# genai_wire/fields/scalars.py
"""
Scalar field codecs for the protobuf-JSON wire mapping.

Each conversion is exposed twice:

- as a pair of plain functions (``encode_*`` / ``decode_*``) operating on a
  single value and raising `FormatError` on malformed wire text, and
- as an ``Annotated`` pydantic type (`Int64`, `Duration`, `Timestamp`,
  `Base64Bytes`, `WireFloat`, `WireInt`) that wires those functions into
  record validation and JSON serialization.

Validators distinguish two modes through the pydantic validation context. When
a record is decoded from the wire the codec passes ``{"wire": True, ...}`` and
the validators insist on the wire grammar (an int64 must arrive as a string).
Plain Python construction (no context) accepts native values as well.
"""
import base64
import binascii
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, SerializationInfo, ValidationInfo

from ..exceptions import CodecEncodeError, FormatError

__all__ = (
    "INT64_MIN",
    "INT64_MAX",
    "encode_int64",
    "decode_int64",
    "encode_duration",
    "decode_duration",
    "encode_timestamp",
    "decode_timestamp",
    "encode_bytes",
    "decode_bytes",
    "is_wire_context",
    "Int64",
    "Duration",
    "Timestamp",
    "Base64Bytes",
    "WireFloat",
    "WireInt",
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT64_RE = re.compile(r"[+-]?[0-9]+")
_DURATION_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?s")
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)

_MICROS_PER_SECOND = 1_000_000
_ONE_MICROSECOND = timedelta(microseconds=1)
_MAX_SAFE_FLOAT_INT = 2**53


def is_wire_context(info: ValidationInfo | SerializationInfo | None) -> bool:
    context = getattr(info, "context", None)
    return isinstance(context, dict) and bool(context.get("wire"))


def _context_flag(info: ValidationInfo | None, key: str) -> bool:
    context = getattr(info, "context", None)
    return isinstance(context, dict) and bool(context.get(key))


# ---------------------------------------------------------------------------
# int64 <-> decimal string
# ---------------------------------------------------------------------------
def encode_int64(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CodecEncodeError(f"int64 value must be an int, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise CodecEncodeError(f"int64 value out of range: {value}")
    return str(value)


def decode_int64(text: Any) -> int:
    """Parse a base-10 signed 64-bit integer carried as a JSON string."""
    if not isinstance(text, str):
        raise FormatError(f"expected an int64 string, got {_json_kind(text)}", value=text)
    if not _INT64_RE.fullmatch(text):
        raise FormatError(f"invalid int64 literal {text!r}", value=text)
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise FormatError(f"int64 literal out of range {text!r}", value=text)
    return value


def _validate_int64(value: Any, info: ValidationInfo) -> int:
    if isinstance(value, str):
        return decode_int64(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if is_wire_context(info) and not _context_flag(info, "accept_numeric_int64"):
            raise FormatError("expected an int64 string, got number", value=value)
        if not INT64_MIN <= value <= INT64_MAX:
            raise FormatError(f"int64 value out of range: {value}", value=value)
        return value
    raise FormatError(f"expected an int64 string, got {_json_kind(value)}", value=value)


# ---------------------------------------------------------------------------
# duration <-> "<seconds>s"
# ---------------------------------------------------------------------------
def encode_duration(value: timedelta) -> str:
    """Render a duration as seconds with an ``s`` suffix.

    Whole seconds carry no fraction (``"10s"``); otherwise the fraction uses
    3 or 6 digits, whichever is exact (``"1.500s"``, ``"0.000250s"``).
    """
    if not isinstance(value, timedelta):
        raise CodecEncodeError(f"duration must be a timedelta, got {type(value).__name__}")
    micros = value // _ONE_MICROSECOND
    sign = "-" if micros < 0 else ""
    seconds, fraction = divmod(abs(micros), _MICROS_PER_SECOND)
    if not fraction:
        return f"{sign}{seconds}s"
    if fraction % 1000 == 0:
        return f"{sign}{seconds}.{fraction // 1000:03d}s"
    return f"{sign}{seconds}.{fraction:06d}s"


def decode_duration(text: Any) -> timedelta:
    """Parse ``<signed seconds>s``; digits past microseconds are truncated."""
    if not isinstance(text, str):
        raise FormatError(f"expected a duration string, got {_json_kind(text)}", value=text)
    match = _DURATION_RE.fullmatch(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise FormatError(f"invalid duration {text!r}, expected '<seconds>s'", value=text)
    sign, whole, fraction = match.group(1), match.group(2) or "0", match.group(3) or ""
    micros = int(whole) * _MICROS_PER_SECOND + int(fraction[:6].ljust(6, "0"))
    if sign == "-":
        micros = -micros
    try:
        return timedelta(microseconds=micros)
    except OverflowError as err:
        raise FormatError(f"duration out of range {text!r}", value=text) from err


def _validate_duration(value: Any, info: ValidationInfo) -> timedelta:
    if isinstance(value, str):
        return decode_duration(value)
    if isinstance(value, timedelta) and not is_wire_context(info):
        return value
    raise FormatError(f"expected a duration string, got {_json_kind(value)}", value=value)


# ---------------------------------------------------------------------------
# timestamp <-> RFC3339
# ---------------------------------------------------------------------------
def encode_timestamp(value: datetime) -> str:
    """Format as RFC3339 in UTC with a ``Z`` suffix.

    Naive datetimes are taken to be UTC. Sub-second precision is emitted only
    when present, with trailing zeros trimmed.
    """
    if not isinstance(value, datetime):
        raise CodecEncodeError(f"timestamp must be a datetime, got {type(value).__name__}")
    value = _as_utc(value)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    return text + "Z"


def decode_timestamp(text: Any) -> datetime:
    """Parse an RFC3339 timestamp into an aware UTC datetime."""
    if not isinstance(text, str):
        raise FormatError(f"expected an RFC3339 timestamp string, got {_json_kind(text)}", value=text)
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        raise FormatError(f"invalid RFC3339 timestamp {text!r}", value=text)
    year, month, day, hour, minute, second = (int(g) for g in match.group(1, 2, 3, 4, 5, 6))
    fraction = match.group(7) or ""
    try:
        if match.group(8):
            tz = timezone.utc
        else:
            offset = timedelta(hours=int(match.group(10)), minutes=int(match.group(11)))
            tz = timezone(-offset if match.group(9) == "-" else offset)
        parsed = datetime(
            year, month, day, hour, minute, second,
            int(fraction[:6].ljust(6, "0")),
            tzinfo=tz,
        )
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as err:
        raise FormatError(f"invalid RFC3339 timestamp {text!r}: {err}", value=text) from err


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _validate_timestamp(value: Any, info: ValidationInfo) -> datetime:
    if isinstance(value, str):
        return decode_timestamp(value)
    if isinstance(value, datetime) and not is_wire_context(info):
        return _as_utc(value)
    raise FormatError(f"expected an RFC3339 timestamp string, got {_json_kind(value)}", value=value)


# ---------------------------------------------------------------------------
# bytes <-> base64
# ---------------------------------------------------------------------------
def encode_bytes(value: bytes) -> str:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise CodecEncodeError(f"byte sequence must be bytes, got {type(value).__name__}")
    return base64.b64encode(bytes(value)).decode("ascii")


def decode_bytes(text: Any) -> bytes:
    """Decode standard-alphabet, padded base64."""
    if not isinstance(text, str):
        raise FormatError(f"expected a base64 string, got {_json_kind(text)}", value=text)
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as err:
        raise FormatError(f"invalid base64 data {text!r}", value=text) from err


def _validate_bytes(value: Any, info: ValidationInfo) -> bytes:
    if isinstance(value, str):
        return decode_bytes(value)
    if isinstance(value, (bytes, bytearray)) and not is_wire_context(info):
        return bytes(value)
    raise FormatError(f"expected a base64 string, got {_json_kind(value)}", value=value)


# ---------------------------------------------------------------------------
# plain JSON numbers
# ---------------------------------------------------------------------------
def _validate_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FormatError(f"expected a number, got {_json_kind(value)}", value=value)
    return float(value)


def _serialize_float(value: float) -> float | int:
    if not math.isfinite(value):
        raise CodecEncodeError(f"non-finite number cannot be encoded: {value!r}")
    # Whole numbers go out without a trailing ".0"
    if value.is_integer() and abs(value) < _MAX_SAFE_FLOAT_INT:
        return int(value)
    return value


def _validate_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise FormatError(f"expected an integer, got {_json_kind(value)}", value=value)
    return value


def _json_kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


Int64 = Annotated[
    int,
    PlainValidator(_validate_int64),
    PlainSerializer(encode_int64, return_type=str, when_used="json"),
]
Duration = Annotated[
    timedelta,
    PlainValidator(_validate_duration),
    PlainSerializer(encode_duration, return_type=str, when_used="json"),
]
Timestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(encode_timestamp, return_type=str, when_used="json"),
]
Base64Bytes = Annotated[
    bytes,
    PlainValidator(_validate_bytes),
    PlainSerializer(encode_bytes, return_type=str, when_used="json"),
]
WireFloat = Annotated[
    float,
    PlainValidator(_validate_float),
    PlainSerializer(_serialize_float, when_used="json"),
]
WireInt = Annotated[int, PlainValidator(_validate_int)]
