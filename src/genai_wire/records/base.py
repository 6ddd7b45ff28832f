# genai_wire/records/base.py
from typing import Any, ClassVar

from ..types.base import WireModel

__all__ = ("WireRecord",)


class WireRecord(WireModel):
    """A top-level wire record with an `encode`/`decode` contract.

    Concrete subclasses register themselves with the record registry on
    definition, which is what makes them reachable from `genai_wire.encode`
    and `genai_wire.decode`. Set ``abstract = True`` in a subclass body to
    opt out.
    """

    abstract: ClassVar[bool] = True

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.__dict__.get("abstract", False):
            return
        from ..registry import record_registry

        record_registry.register(cls, strict=True)

    def to_wire(self) -> bytes:
        """Encode this record to its wire JSON bytes."""
        from ..codec import encode

        return encode(self)

    @classmethod
    def from_wire(cls, payload: bytes | str) -> "WireRecord":
        """Decode wire JSON bytes into an instance of this record type."""
        from ..codec import decode

        return decode(cls, payload)
