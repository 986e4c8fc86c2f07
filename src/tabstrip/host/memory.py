"""In-process host implementation for embedders without a live editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .bus import HostBus
from .interface import (
    DOCUMENT_CREATED,
    DOCUMENT_DESTROYED,
    DOCUMENT_RENAMED,
    BufferId,
    HostQueryError,
)


@dataclass(slots=True)
class MemoryDocument:
    path: str = ""
    options: Dict[str, Any] = field(default_factory=dict)
    flags: Dict[str, Any] = field(default_factory=dict)


class MemoryHost:
    """Dictionary-backed ``EditorHost`` that numbers documents from 1."""

    def __init__(self) -> None:
        self.bus = HostBus()
        self._documents: Dict[BufferId, MemoryDocument] = {}
        self._next_id = 1

    def open(
        self,
        path: str = "",
        *,
        filetype: str = "",
        listed: bool = True,
        notify: bool = True,
    ) -> BufferId:
        buffer_id = self._next_id
        self._next_id += 1
        self._documents[buffer_id] = MemoryDocument(
            path=path,
            options={"filetype": filetype, "buflisted": listed},
        )
        if notify:
            self.bus.emit(DOCUMENT_CREATED, buffer_id)
        return buffer_id

    def wipe(self, buffer_id: BufferId, *, notify: bool = True) -> None:
        if self._documents.pop(buffer_id, None) is not None and notify:
            self.bus.emit(DOCUMENT_DESTROYED, buffer_id)

    def rename(self, buffer_id: BufferId, path: str) -> None:
        self._document(buffer_id).path = path
        self.bus.emit(DOCUMENT_RENAMED, buffer_id)

    def set_option(self, buffer_id: BufferId, key: str, value: Any) -> None:
        self._document(buffer_id).options[key] = value

    def list_documents(self) -> Sequence[BufferId]:
        return tuple(self._documents)

    def get_option(self, buffer_id: BufferId, key: str) -> Any:
        options = self._document(buffer_id).options
        if key not in options:
            raise HostQueryError(
                f"Unknown option '{key}'", buffer_id=buffer_id, key=key
            )
        return options[key]

    def get_path(self, buffer_id: BufferId) -> str:
        return self._document(buffer_id).path

    def get_flag(self, buffer_id: BufferId, key: str) -> Optional[Any]:
        flags = self._document(buffer_id).flags
        if key not in flags:
            raise HostQueryError(
                f"Key not found: {key}", buffer_id=buffer_id, key=key
            )
        return flags[key]

    def set_flag(self, buffer_id: BufferId, key: str, value: Any) -> None:
        self._document(buffer_id).flags[key] = value

    def _document(self, buffer_id: BufferId) -> MemoryDocument:
        try:
            return self._documents[buffer_id]
        except KeyError as exc:
            raise HostQueryError(
                f"Invalid buffer id: {buffer_id}", buffer_id=buffer_id
            ) from exc


__all__ = ["MemoryDocument", "MemoryHost"]
