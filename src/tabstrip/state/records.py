"""Per-buffer metadata kept alongside the tab order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

BufferId = int


@dataclass(slots=True)
class BufferRecord:
    """Mutable presentation state for one open buffer.

    ``position``, ``width`` and ``real_width`` belong to the layout engine;
    the core stores them and never computes them.
    """

    closing: bool = False
    name: Optional[str] = None
    position: Optional[int] = None
    width: Optional[int] = None
    real_width: Optional[int] = None


@dataclass(frozen=True, slots=True)
class TabView:
    """Read-only view of one tab handed to the rendering side."""

    id: BufferId
    name: Optional[str]
    pinned: bool
    closing: bool
    position: Optional[int]
    width: Optional[int]
    real_width: Optional[int]


__all__ = ["BufferId", "BufferRecord", "TabView"]
