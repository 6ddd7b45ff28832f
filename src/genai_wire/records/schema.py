# genai_wire/records/schema.py
"""Validation schema descriptor (an OpenAPI-style subset)."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, StrictBool

from ..fields import Int64, WireFloat
from .base import WireRecord

__all__ = ("Schema", "SchemaType")


class SchemaType(str, Enum):
    TYPE_UNSPECIFIED = "TYPE_UNSPECIFIED"
    STRING = "STRING"
    NUMBER = "NUMBER"
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    ARRAY = "ARRAY"
    OBJECT = "OBJECT"
    NULL = "NULL"


class Schema(WireRecord):
    """Schema for function parameters and structured output.

    Length, item and property bounds are int64 values carried as strings;
    `maximum`/`minimum` are plain JSON numbers. All bounds are optional.
    """

    # Byte-wise lexical order, as the service emits it.
    wire_order = (
        "anyOf",
        "default",
        "description",
        "enum",
        "example",
        "format",
        "items",
        "maxItems",
        "maxLength",
        "maxProperties",
        "maximum",
        "minItems",
        "minLength",
        "minProperties",
        "minimum",
        "nullable",
        "pattern",
        "properties",
        "propertyOrdering",
        "required",
        "title",
        "type",
    )

    any_of: list[Schema] = Field(default_factory=list)
    default: Any = None
    description: str | None = None
    enum: list[str] = Field(default_factory=list)
    example: Any = None
    format: str | None = None
    items: Schema | None = None
    max_items: Int64 | None = None
    max_length: Int64 | None = None
    max_properties: Int64 | None = None
    maximum: WireFloat | None = None
    min_items: Int64 | None = None
    min_length: Int64 | None = None
    min_properties: Int64 | None = None
    minimum: WireFloat | None = None
    nullable: StrictBool | None = None
    pattern: str | None = None
    properties: dict[str, Schema] = Field(default_factory=dict)
    property_ordering: list[str] = Field(default_factory=list)
    required: list[str] = Field(default_factory=list)
    title: str | None = None
    type: str | None = None


Schema.model_rebuild()
