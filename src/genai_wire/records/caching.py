# genai_wire/records/caching.py
"""Cached-content resources and the configs used to create or update them."""
from ..fields import Duration, Timestamp
from .base import WireRecord

__all__ = (
    "CachedContent",
    "CreateCachedContentConfig",
    "UpdateCachedContentConfig",
)


class CreateCachedContentConfig(WireRecord):
    """Optional configuration for creating cached content.

    `ttl` and `expire_time` are alternative ways of bounding the cache's
    lifetime; either, both or neither may be sent.
    """

    wire_order = ("ttl", "expireTime", "displayName", "kmsKeyName")

    ttl: Duration | None = None
    expire_time: Timestamp | None = None
    display_name: str | None = None
    kms_key_name: str | None = None


class UpdateCachedContentConfig(WireRecord):
    wire_order = ("ttl", "expireTime")

    ttl: Duration | None = None
    expire_time: Timestamp | None = None


class CachedContent(WireRecord):
    """A cached content resource as returned by the service."""

    wire_order = ("name", "displayName", "model", "createTime", "updateTime", "expireTime")

    name: str | None = None
    display_name: str | None = None
    model: str | None = None
    create_time: Timestamp | None = None
    update_time: Timestamp | None = None
    expire_time: Timestamp | None = None
