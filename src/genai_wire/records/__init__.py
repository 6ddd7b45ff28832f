# genai_wire/records/__init__.py
"""
The closed set of wire records.

Importing this package defines, and therefore registers, every record type;
the registry is frozen afterwards.
"""
from .base import WireRecord
from .caching import CachedContent, CreateCachedContentConfig, UpdateCachedContentConfig
from .citation import Citation, CitationMetadata
from .files import File, FileSource, FileState, FileStatus
from .live import ContextWindowCompressionConfig, SlidingWindow
from .media import Blob, Content, Part, VideoMetadata
from .responses import Candidate, FinishReason, GenerateContentResponse
from .schema import Schema, SchemaType
from .tokens import TokensInfo
from .tuning import Checkpoint, TunedModelInfo
from ..registry import record_registry

record_registry.freeze()

__all__ = [
    "WireRecord",
    "Blob",
    "CachedContent",
    "Candidate",
    "Checkpoint",
    "Citation",
    "CitationMetadata",
    "Content",
    "ContextWindowCompressionConfig",
    "CreateCachedContentConfig",
    "File",
    "FileSource",
    "FileState",
    "FileStatus",
    "FinishReason",
    "GenerateContentResponse",
    "Part",
    "Schema",
    "SchemaType",
    "SlidingWindow",
    "TokensInfo",
    "TunedModelInfo",
    "UpdateCachedContentConfig",
    "VideoMetadata",
]
