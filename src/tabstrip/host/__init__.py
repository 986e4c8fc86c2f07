"""Host editor capability interface and an in-memory implementation."""

from .bus import HostBus
from .interface import (
    DOCUMENT_CREATED,
    DOCUMENT_DESTROYED,
    DOCUMENT_RENAMED,
    BufferId,
    EditorHost,
    HostQueryError,
)
from .memory import MemoryDocument, MemoryHost

__all__ = [
    "BufferId",
    "DOCUMENT_CREATED",
    "DOCUMENT_DESTROYED",
    "DOCUMENT_RENAMED",
    "EditorHost",
    "HostBus",
    "HostQueryError",
    "MemoryDocument",
    "MemoryHost",
]
