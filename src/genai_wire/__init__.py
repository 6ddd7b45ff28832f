"""
genai_wire: protobuf-JSON wire codecs for generative-AI service records.

Translates between the service's JSON wire form (int64 as decimal strings,
durations as ``"<seconds>s"``, dates as day/month/year objects, bytes as
base64, RFC3339 timestamps) and typed pydantic records.

Import Guidelines:
------------------
- Use `genai_wire.encode` / `genai_wire.decode` to move records across the wire
  (`aencode` / `adecode` from async code).
- Use `genai_wire.records` for the record types.
- Use `genai_wire.fields` for the individual field codecs.
- Use `genai_wire.exceptions` for error handling.
"""
from importlib.metadata import PackageNotFoundError, version

from .codec import adecode, aencode, decode, encode
from .exceptions import (
    CodecDecodeError,
    CodecEncodeError,
    CodecError,
    CodecNotFoundError,
    ConfigurationError,
    FormatError,
    JSONSyntaxError,
    WireError,
)
from .fields import CalendarDate
from .records import *
from .records import __all__ as _records_all

try:
    __version__ = version("genai-wire")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "encode",
    "decode",
    "aencode",
    "adecode",
    "CalendarDate",
    "WireError",
    "CodecError",
    "CodecEncodeError",
    "CodecDecodeError",
    "CodecNotFoundError",
    "ConfigurationError",
    "FormatError",
    "JSONSyntaxError",
    *_records_all,
]
