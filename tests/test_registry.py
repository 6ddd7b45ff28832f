# tests/test_registry.py
import pytest

from genai_wire.exceptions import (
    CodecNotFoundError,
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)
from genai_wire.records import Schema, WireRecord
from genai_wire.registry import RecordRegistry, record_registry


class Alpha(WireRecord):
    abstract = True

    value: str | None = None


def _make_alpha_twin():
    class Alpha(WireRecord):
        abstract = True

    return Alpha


def test_register_and_get_by_class_and_name():
    registry = RecordRegistry()
    registry.register(Alpha)

    assert registry.get(Alpha) is Alpha
    assert registry.get("Alpha") is Alpha
    assert Alpha in registry
    assert registry.keys() == ("Alpha",)
    assert registry.count() == 1
    assert list(registry) == [Alpha]


def test_duplicate_is_ignored_unless_strict():
    registry = RecordRegistry()
    registry.register(Alpha)
    registry.register(Alpha)
    assert registry.count() == 1

    with pytest.raises(RegistryDuplicateError):
        registry.register(Alpha, strict=True)


def test_same_name_different_class_collides():
    registry = RecordRegistry()
    registry.register(Alpha)

    twin = _make_alpha_twin()
    with pytest.raises(RegistryCollisionError):
        registry.register(twin)
    with pytest.raises(CodecNotFoundError):
        registry.get(twin)


def test_missing_lookup():
    registry = RecordRegistry()
    with pytest.raises(CodecNotFoundError) as exc:
        registry.get("Alpha")
    assert isinstance(exc.value, RegistryLookupError)
    assert registry.try_get("Alpha") is None
    assert "Alpha" not in registry


def test_frozen_registry_rejects_registration():
    registry = RecordRegistry()
    registry.freeze()
    assert registry.frozen is True
    with pytest.raises(RegistryFrozenError):
        registry.register(Alpha)


def test_builtin_registry_is_frozen():
    assert record_registry.frozen is True
    assert record_registry.get("Schema") is Schema
    assert "Alpha" not in record_registry


def test_defining_a_concrete_record_late_fails():
    with pytest.raises(RegistryFrozenError):

        class Late(WireRecord):
            note: str | None = None
