"""Command-layer adapter that wires host events into the tab collection."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Callable, Optional

from tabstrip.host import DOCUMENT_CREATED, DOCUMENT_DESTROYED, DOCUMENT_RENAMED
from tabstrip.runtime.telemetry import record_event
from tabstrip.state import BufferId, TabCollection, TabView


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class TablineOffset:
    """Space reserved on the left of the tab strip (e.g. for a file tree)."""

    width: int = 0
    text: str = ""
    highlight: Optional[str] = None


@dataclass(slots=True)
class TablineHooks:
    """Callbacks the renderer supplies to receive state changes."""

    update_tabs: Callable[[tuple[TabView, ...]], None]
    update_offset: Callable[[TablineOffset], None] = _noop
    focus: Callable[[BufferId], None] = _noop
    # Optional debug line sink, one line per handled event
    log: Callable[[str], None] = _noop


class TablineController:
    """Bridges host lifecycle notifications to ``TabCollection`` mutations.

    Every mutation ends by pushing a fresh snapshot to ``hooks.update_tabs``;
    the collection itself never triggers a redraw.
    """

    def __init__(self, collection: TabCollection, hooks: TablineHooks) -> None:
        self.collection = collection
        self.hooks = hooks
        self.active: Optional[BufferId] = None
        self.offset = TablineOffset()
        self._subscribe_events()
        self.refresh()

    def refresh(self, *, update_names: bool = False) -> tuple[TabView, ...]:
        self.collection.refresh_list(update_names=update_names)
        if self.active is not None and self.active not in self.collection.order:
            self.active = None
        return self._push()

    def set_active(self, buffer_id: BufferId) -> None:
        if buffer_id in self.collection.order:
            self.active = buffer_id

    def close(self, buffer_id: BufferId) -> Optional[BufferId]:
        """Finalize a close and return the buffer that should take focus."""

        if not self.collection.begin_close(buffer_id):
            self._log_state("close skipped", buffer=buffer_id)
            return None

        successor = None
        if buffer_id == self.active:
            successor = self.collection.find_neighbor(buffer_id)
        self.collection.close(buffer_id, refresh_names=True)
        self._log_state("closed", buffer=buffer_id, successor=successor)

        if buffer_id == self.active:
            self.active = successor
            if successor is not None:
                self.hooks.focus(successor)
        self._push()
        return successor

    def toggle_pin(self, buffer_id: BufferId) -> None:
        self.collection.toggle_pin(buffer_id)
        self._push()

    def move(self, buffer_id: BufferId, index: int) -> None:
        self.collection.move(buffer_id, index)
        self._push()

    def start_picking(self) -> None:
        self.collection.is_picking_buffer = True
        self._push()

    def stop_picking(self) -> None:
        self.collection.is_picking_buffer = False
        self._push()

    def set_offset(
        self, width: int, text: str = "", highlight: Optional[str] = None
    ) -> TablineOffset:
        self.offset = TablineOffset(width=max(width, 0), text=text, highlight=highlight)
        self.hooks.update_offset(self.offset)
        return self.offset

    def _subscribe_events(self) -> None:
        bus = self.collection.host.bus
        bus.subscribe(DOCUMENT_CREATED, self._on_created)
        bus.subscribe(DOCUMENT_DESTROYED, self._on_destroyed)
        bus.subscribe(DOCUMENT_RENAMED, self._on_renamed)

    def _on_created(self, payload: object | None) -> None:
        self._log_state("event ->", event=DOCUMENT_CREATED, payload=payload)
        self.refresh()

    def _on_destroyed(self, payload: object | None) -> None:
        self._log_state("event ->", event=DOCUMENT_DESTROYED, payload=payload)
        if isinstance(payload, int):
            self.close(payload)

    def _on_renamed(self, payload: object | None) -> None:
        self._log_state("event ->", event=DOCUMENT_RENAMED, payload=payload)
        self.refresh(update_names=True)

    def _push(self) -> tuple[TabView, ...]:
        views = self.collection.snapshot()
        self.hooks.update_tabs(views)
        return views

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: dict[str, object] = {
            "active": self.active,
            "tabs": len(self.collection.order),
            "picking": self.collection.is_picking_buffer,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


def set_offset(
    controller: TablineController,
    width: int,
    text: str = "",
    highlight: Optional[str] = None,
) -> TablineOffset:
    """Deprecated alias kept for callers of the old state-level entry point."""

    warnings.warn(
        "`set_offset` is deprecated, use `TablineController.set_offset` instead",
        DeprecationWarning,
        stacklevel=2,
    )
    record_event(
        "tabline.deprecated_set_offset", level="warning", data={"width": width}
    )
    return controller.set_offset(width, text, highlight)


__all__ = ["TablineController", "TablineHooks", "TablineOffset", "set_offset"]
