# genai_wire/records/files.py
"""Uploaded file descriptors."""
from enum import Enum
from typing import Any

from pydantic import Field

from ..fields import Int64, Timestamp, WireInt
from .base import WireRecord

__all__ = ("File", "FileSource", "FileState", "FileStatus")


class FileState(str, Enum):
    STATE_UNSPECIFIED = "STATE_UNSPECIFIED"
    PROCESSING = "PROCESSING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"


class FileSource(str, Enum):
    SOURCE_UNSPECIFIED = "SOURCE_UNSPECIFIED"
    UPLOADED = "UPLOADED"
    GENERATED = "GENERATED"


class FileStatus(WireRecord):
    """Error status of a file that failed processing."""

    wire_order = ("details", "message", "code")

    details: list[dict[str, Any]] = Field(default_factory=list)
    message: str | None = None
    code: WireInt | None = None


class File(WireRecord):
    """A file uploaded to the service.

    `size_bytes` is an optional int64. The three timestamps are independent;
    each is left off the wire when unset.
    """

    wire_order = (
        "name",
        "displayName",
        "mimeType",
        "sizeBytes",
        "sha256Hash",
        "uri",
        "downloadUri",
        "state",
        "source",
        "videoMetadata",
        "error",
        "expirationTime",
        "createTime",
        "updateTime",
    )

    name: str | None = None
    display_name: str | None = None
    mime_type: str | None = None
    size_bytes: Int64 | None = None
    create_time: Timestamp | None = None
    expiration_time: Timestamp | None = None
    update_time: Timestamp | None = None
    sha256_hash: str | None = None
    uri: str | None = None
    download_uri: str | None = None
    state: str | None = None
    source: str | None = None
    video_metadata: dict[str, Any] = Field(default_factory=dict)
    error: FileStatus | None = None
