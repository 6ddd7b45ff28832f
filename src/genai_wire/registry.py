# genai_wire/registry.py
"""
Record registry.

Holds the closed set of record types that take part in wire encoding. Records
register themselves when their class is defined (see `WireRecord`), and
`genai_wire.records` freezes the registry once the built-in set is in place.
Lookups accept either the record class or its name.
"""
import logging
from threading import RLock
from typing import TYPE_CHECKING, Any, Iterator

from .exceptions import (
    CodecNotFoundError,
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryFrozenError,
)

if TYPE_CHECKING:
    from .records.base import WireRecord

logger = logging.getLogger(__name__)

__all__ = ["RecordRegistry", "record_registry"]


def _record_key(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, type):
        return value.__name__
    raise TypeError(f"Cannot derive a record key from {value!r}")


class RecordRegistry:
    """Thread-safe mapping of record name to record class."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._store: dict[str, type["WireRecord"]] = {}
        self._frozen = False

    def _register(self, cls: type["WireRecord"]) -> None:
        key = _record_key(cls)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            if key in self._store:
                if self._store[key] is cls:
                    raise RegistryDuplicateError(f"Record already registered: {key}")
                raise RegistryCollisionError(
                    f"Record name already registered to a different class: {key}"
                )
            self._store[key] = cls

    # --- registration ---

    def register(self, cls: type["WireRecord"], *, strict: bool = False) -> None:
        """
        Register a record class.

        Re-registering the same class is ignored unless `strict` is set, in
        which case it raises `RegistryDuplicateError`. A different class under
        an existing name always raises `RegistryCollisionError`.
        """
        try:
            self._register(cls)
        except RegistryDuplicateError:
            if strict:
                raise
            logger.debug("Duplicate registration ignored: %s", cls)

    # --- retrieval ---

    def get(self, key: Any) -> type["WireRecord"]:
        """
        Return the record class registered for `key` (a class or a name).

        :raises CodecNotFoundError: if nothing is registered under the key, or
            a class was passed that is not the registered one.
        """
        name = _record_key(key)
        with self._lock:
            try:
                cls = self._store[name]
            except KeyError as err:
                raise CodecNotFoundError(f"No wire codec registered for {name!r}") from err
        if isinstance(key, type) and key is not cls:
            raise CodecNotFoundError(f"No wire codec registered for {key!r}")
        return cls

    def try_get(self, key: Any) -> type["WireRecord"] | None:
        try:
            return self.get(key)
        except CodecNotFoundError:
            return None

    # --- introspection ---

    def keys(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._store)

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: Any) -> bool:
        return self.try_get(key) is not None

    def __iter__(self) -> Iterator[type["WireRecord"]]:
        with self._lock:
            return iter(tuple(self._store.values()))

    # --- control ---

    def freeze(self) -> None:
        """Mark the registry as frozen (no further registrations)."""
        with self._lock:
            self._frozen = True
        logger.debug("Record registry frozen with %d records", len(self._store))

    @property
    def frozen(self) -> bool:
        return self._frozen


record_registry = RecordRegistry()
