"""Capability boundary between the tab strip core and the host editor."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .bus import HostBus

BufferId = int

DOCUMENT_CREATED = "document.created"
DOCUMENT_DESTROYED = "document.destroyed"
DOCUMENT_RENAMED = "document.renamed"


class HostQueryError(RuntimeError):
    """Raised when the host cannot answer an option, path, or flag lookup."""

    def __init__(
        self,
        message: str,
        *,
        buffer_id: BufferId | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.buffer_id = buffer_id
        self.key = key


class EditorHost(Protocol):
    """Narrow set of host calls the core depends on."""

    bus: HostBus

    def list_documents(self) -> Sequence[BufferId]:
        """Return every known document in the host's native order."""
        ...

    def get_option(self, buffer_id: BufferId, key: str) -> Any:
        """Return a per-document option such as ``filetype`` or ``buflisted``."""
        ...

    def get_path(self, buffer_id: BufferId) -> str:
        """Return the full path, or ``""`` for unnamed documents."""
        ...

    def get_flag(self, buffer_id: BufferId, key: str) -> Optional[Any]:
        """Return a persisted per-document variable; raise if it is unset."""
        ...

    def set_flag(self, buffer_id: BufferId, key: str, value: Any) -> None:
        """Persist a per-document variable."""
        ...


__all__ = [
    "BufferId",
    "DOCUMENT_CREATED",
    "DOCUMENT_DESTROYED",
    "DOCUMENT_RENAMED",
    "EditorHost",
    "HostQueryError",
]
