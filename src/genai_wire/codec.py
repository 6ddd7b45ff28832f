# genai_wire/codec.py
"""
Record-level encode/decode.

Two operations are exposed, each with an async twin for use from an event
loop:

    encode(record) -> bytes                   await aencode(record)
    decode(record_type, payload) -> record    await adecode(record_type, payload)

The record type is resolved through the record registry, so only the closed
set of `WireRecord` subclasses can be encoded or decoded. Decoding either
returns a fully-validated record or raises; there is no partial result.
"""
import json
from typing import Any, NoReturn, TypeVar

from asgiref.sync import sync_to_async
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from .conf import settings
from .exceptions import CodecEncodeError, CodecError, FormatError, JSONSyntaxError
from .records.base import WireRecord
from .registry import record_registry
from .tracing import codec_span

__all__ = ["encode", "decode", "aencode", "adecode"]

R = TypeVar("R", bound=WireRecord)

_SEPARATORS = (",", ":")


def _wire_context() -> dict[str, Any]:
    return {
        "wire": True,
        "accept_numeric_int64": settings.accept_numeric_int64,
    }


def _reject_constant(name: str) -> NoReturn:
    raise JSONSyntaxError(f"{name} is not valid JSON")


def encode(record: WireRecord) -> bytes:
    """Encode a record into compact wire JSON (UTF-8 bytes)."""
    record_type = record_registry.get(type(record))
    with codec_span("encode", attributes={"genai_wire.record": record_type.__name__}):
        try:
            data = record.model_dump(mode="json", by_alias=True, context=_wire_context())
            text = json.dumps(
                data,
                separators=_SEPARATORS,
                ensure_ascii=settings.ensure_ascii,
                allow_nan=False,
            )
        except CodecError:
            raise
        except (PydanticSerializationError, ValueError, TypeError) as err:
            raise CodecEncodeError(f"Failed to encode {record_type.__name__}: {err}") from err
        return text.encode("utf-8")


def decode(record_type: type[R] | str, payload: bytes | bytearray | str) -> R:
    """Decode wire JSON into an instance of `record_type`.

    :raises JSONSyntaxError: the payload is not well-formed JSON.
    :raises FormatError: a value does not match its field grammar; `field`
        names the offending wire key path.
    """
    cls = record_registry.get(record_type)
    with codec_span("decode", attributes={"genai_wire.record": cls.__name__}):
        try:
            data = json.loads(payload, parse_constant=_reject_constant)
        except json.JSONDecodeError as err:
            raise JSONSyntaxError(
                f"Malformed JSON for {cls.__name__}: {err.msg}", position=err.pos
            ) from err
        except UnicodeDecodeError as err:
            raise JSONSyntaxError(f"Payload for {cls.__name__} is not valid UTF-8") from err

        if not isinstance(data, dict):
            raise FormatError(f"expected a JSON object for {cls.__name__}", value=data)

        try:
            return cls.model_validate(data, context=_wire_context())
        except ValidationError as err:
            raise _format_error(cls, err) from err


async def aencode(record: WireRecord) -> bytes:
    return await sync_to_async(encode)(record)


async def adecode(record_type: type[R] | str, payload: bytes | bytearray | str) -> R:
    return await sync_to_async(decode)(record_type, payload)


def _format_error(cls: type[WireRecord], err: ValidationError) -> FormatError:
    """Translate the first pydantic error into a field-attributed `FormatError`."""
    detail = err.errors()[0]
    path = _format_loc(detail.get("loc", ()))
    cause = (detail.get("ctx") or {}).get("error")
    if isinstance(cause, FormatError):
        if cause.field:
            path = f"{path}.{cause.field}" if path else cause.field
        return FormatError(cause.message, field=path or None, value=cause.value)
    return FormatError(
        f"{detail.get('msg', 'invalid value')} (in {cls.__name__})",
        field=path or None,
        value=detail.get("input"),
    )


def _format_loc(loc: tuple[Any, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path
