from .scalars import *
from .dates import CalendarDate

__all__ = [
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
    "Int64",
    "Duration",
    "Timestamp",
    "Base64Bytes",
    "WireFloat",
    "WireInt",
    "CalendarDate",
]
