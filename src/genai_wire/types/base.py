# genai_wire/types/base.py
"""
Base model for every wire shape.

`WireModel` carries the two encode rules shared by records and composite
fields:

- **Omission.** In JSON mode a field is dropped when it is absent (`None`)
  or holds its own empty default (an empty list, mapping or byte string, or
  a value whose ``is_zero()`` reports true). Anything else is emitted, so an
  empty string set on an optional text field still goes out as ``""``.
  Names listed in ``wire_required`` are always emitted.
- **Ordering.** Keys are emitted in the order declared by ``wire_order``
  (wire key names). Keys missing from the declaration follow in field
  declaration order.

Python-mode dumps (``model_dump()``) are left untouched.
"""
from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

__all__ = ("WireModel",)


class WireModel(BaseModel):
    """Pydantic model with protobuf-JSON key naming, omission and ordering."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
        protected_namespaces=(),
    )

    wire_order: ClassVar[tuple[str, ...]] = ()
    wire_required: ClassVar[frozenset[str]] = frozenset()

    def wire_omits(self, name: str, value: Any) -> bool:
        """Return True when field `name` holding `value` is left off the wire.

        Only values that decoding an absent key gives back are dropped, so an
        encoded record always decodes to an equal one.
        """
        if name in self.wire_required:
            return False
        if value is None:
            return True
        if not _is_empty(value):
            return False
        return value == type(self).model_fields[name].get_default(call_default_factory=True)

    @model_serializer(mode="wrap")
    def _serialize_wire(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        data = handler(self)
        if not info.mode_is_json() or not isinstance(data, dict):
            return data

        cls = type(self)
        positions = {key: index for index, key in enumerate(cls.wire_order)}
        tail = len(positions)
        kept: list[tuple[int, int, str]] = []
        for index, (name, field) in enumerate(cls.model_fields.items()):
            key = field.alias if info.by_alias and field.alias else name
            if key not in data or self.wire_omits(name, getattr(self, name)):
                continue
            kept.append((positions.get(field.alias or name, tail), index, key))

        return {key: data[key] for _, _, key in sorted(kept)}


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return not value
    is_zero = getattr(value, "is_zero", None)
    return bool(callable(is_zero) and is_zero())
