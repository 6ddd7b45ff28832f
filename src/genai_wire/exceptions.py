# genai_wire/exceptions.py
"""
Exception hierarchy for the wire codec layer.

Every failure raised by the public surface derives from `WireError`. Decoding
failures come in two terminal flavours:

- `JSONSyntaxError`: the payload is not well-formed JSON.
- `FormatError`: the JSON is well-formed but a value does not match its field
  grammar (non-numeric int64 string, bad duration suffix, malformed timestamp,
  invalid base64, a date missing its year).

Neither is retriable; nothing in this layer recovers from them.
"""
from typing import Any

__all__ = [
    "WireError",
    "ConfigurationError",
    "CodecError",
    "CodecEncodeError",
    "CodecDecodeError",
    "FormatError",
    "JSONSyntaxError",
    "CodecNotFoundError",
    "RegistryError",
    "RegistryDuplicateError",
    "RegistryCollisionError",
    "RegistryFrozenError",
    "RegistryLookupError",
]


class WireError(Exception):
    """Base for all genai_wire exceptions."""


class ConfigurationError(WireError, ValueError):
    """A setting was given an unknown key or a value of the wrong type."""


# ----------------------------------------------------------------------------
# Registry errors
# ----------------------------------------------------------------------------
class RegistryError(WireError): ...


class RegistryDuplicateError(RegistryError): ...


class RegistryCollisionError(RegistryError): ...


class RegistryLookupError(RegistryError): ...


class RegistryFrozenError(RuntimeError, RegistryError): ...


# ----------------------------------------------------------------------------
# Codec errors
# ----------------------------------------------------------------------------
class CodecError(WireError):
    """Base error for all codec-related failures."""


class CodecEncodeError(CodecError):
    """Failed to encode a record into its wire form."""


class CodecDecodeError(CodecError):
    """Failed to decode a wire payload into a record."""


class FormatError(CodecDecodeError, ValueError):
    """A well-formed JSON value did not match the expected field grammar.

    `field` is the dotted wire path of the offending key once the record codec
    has attributed it (e.g. ``"publicationDate.year"``); scalar codecs raise
    with `field=None` and the record layer fills it in.
    """

    def __init__(self, message: str, *, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class JSONSyntaxError(CodecDecodeError, ValueError):
    """The wire payload is not well-formed JSON."""

    def __init__(self, message: str, *, position: int | None = None):
        super().__init__(message)
        self.position = position


class CodecNotFoundError(CodecError, RegistryLookupError):
    """Requested record type is not part of the registered record set."""
