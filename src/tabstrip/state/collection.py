"""Ordered tab collection: buffer order plus per-buffer records."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from tabstrip.host import EditorHost, HostQueryError
from tabstrip.naming import resolve_names
from tabstrip.options import TabstripOptions
from tabstrip.runtime.telemetry import record_event, span

from .pins import is_pinned, partition_pinned, toggle_pin_flag
from .records import BufferId, BufferRecord, TabView


class TabCollection:
    """Owns the visual order of buffers and their presentation records.

    One instance lives for an editor session. Every host failure is absorbed
    here: lookups fall back to defaults and mutations on unknown ids do
    nothing, so stale buffer references never reach the UI as errors.
    """

    def __init__(
        self,
        host: EditorHost,
        options: TabstripOptions | None = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.options = options or TabstripOptions()
        self.order: List[BufferId] = []
        self.records: Dict[BufferId, BufferRecord] = {}
        self.is_picking_buffer = False
        self._logger_name = logger_name

    # Records

    def get_or_create_record(self, buffer_id: BufferId) -> BufferRecord:
        record = self.records.get(buffer_id)
        if record is None:
            record = self.records[buffer_id] = BufferRecord()
        return record

    def get_record(self, buffer_id: BufferId) -> Optional[BufferRecord]:
        return self.records.get(buffer_id)

    def update_layout(
        self,
        buffer_id: BufferId,
        *,
        position: Optional[int] = None,
        width: Optional[int] = None,
        real_width: Optional[int] = None,
    ) -> None:
        record = self.get_or_create_record(buffer_id)
        record.position = position
        record.width = width
        record.real_width = real_width

    # Host queries

    def list_visible(self) -> List[BufferId]:
        """Listed host documents minus excluded filetypes and basenames."""

        visible: List[BufferId] = []
        for buffer_id in self.host.list_documents():
            if not self._host_option(buffer_id, "buflisted", default=False):
                continue
            if self._excluded(buffer_id):
                continue
            visible.append(buffer_id)
        return visible

    def is_pinned(self, buffer_id: BufferId) -> bool:
        return is_pinned(self.host, buffer_id)

    def _excluded(self, buffer_id: BufferId) -> bool:
        exclude_ft = self.options.exclude_ft
        if exclude_ft:
            filetype = self._host_option(buffer_id, "filetype", default=None)
            if filetype is not None and filetype in exclude_ft:
                return True

        exclude_name = self.options.exclude_name
        if exclude_name:
            path = self._host_path(buffer_id)
            if path is not None:
                separator = self.options.path_separator
                if path.rstrip(separator).rsplit(separator, 1)[-1] in exclude_name:
                    return True
        return False

    def _host_option(self, buffer_id: BufferId, key: str, *, default: Any) -> Any:
        try:
            return self.host.get_option(buffer_id, key)
        except HostQueryError as exc:
            self._absorbed("option", buffer_id, exc)
            return default

    def _host_path(self, buffer_id: BufferId) -> Optional[str]:
        try:
            return self.host.get_path(buffer_id)
        except HostQueryError as exc:
            self._absorbed("path", buffer_id, exc)
            return None

    def _absorbed(self, what: str, buffer_id: BufferId, exc: HostQueryError) -> None:
        record_event(
            "host.query_failed",
            level="debug",
            data={"query": what, "buffer": buffer_id, "reason": str(exc)},
            logger_name=self._logger_name,
        )

    # Order mutations

    def close(self, buffer_id: BufferId, refresh_names: bool = False) -> None:
        with span(
            "state::close",
            logger_name=self._logger_name,
            component="state",
            metadata={"buffer": buffer_id},
        ) as handle:
            before = len(self.order)
            # Duplicates should not exist; drop them all if they do.
            self.order = [item for item in self.order if item != buffer_id]
            removed = before - len(self.order)
            if removed > 1:
                handle.note("duplicates_removed", count=removed)
            self.records.pop(buffer_id, None)

            if refresh_names:
                self.refresh_names()

    def begin_close(self, buffer_id: BufferId) -> bool:
        """Mark ``buffer_id`` as closing; ``False`` if a close is already running."""

        record = self.get_or_create_record(buffer_id)
        if record.closing:
            return False
        record.closing = True
        return True

    def find_neighbor(self, buffer_id: BufferId) -> Optional[BufferId]:
        """Buffer to focus once ``buffer_id`` goes away: right, else left."""

        try:
            index = self.order.index(buffer_id)
        except ValueError:
            return None
        if index + 1 < len(self.order):
            return self.order[index + 1]
        if index > 0:
            return self.order[index - 1]
        return None

    def refresh_list(self, *, update_names: bool = False) -> List[BufferId]:
        """Merge the host's visible buffers into the current order.

        Known buffers keep their place, buffers that disappeared are dropped
        (unless a close is already finalizing them), new buffers are added at
        the end, or the start with ``insert_at_start``.
        """

        with span(
            "state::refresh_list",
            logger_name=self._logger_name,
            component="state",
        ) as handle:
            visible = self.list_visible()
            visible_set = set(visible)
            changed = False

            for buffer_id in list(self.order):
                if buffer_id in visible_set:
                    continue
                record = self.records.get(buffer_id)
                if record is not None and record.closing:
                    continue
                self.close(buffer_id)
                changed = True

            known = set(self.order)
            new_buffers = [item for item in visible if item not in known]
            if new_buffers:
                changed = True
                if self.options.insert_at_start:
                    self.order = new_buffers + self.order
                else:
                    self.order.extend(new_buffers)
                for buffer_id in new_buffers:
                    self.get_or_create_record(buffer_id)

            self._prune_records()
            self.sort_pins_to_left()
            handle.add_metadata("count", len(self.order))
            handle.add_metadata("added", len(new_buffers))

            if changed or update_names:
                self.refresh_names()
            return list(self.order)

    def _prune_records(self) -> None:
        ordered = set(self.order)
        for buffer_id in [key for key in self.records if key not in ordered]:
            if not self.records[buffer_id].closing:
                del self.records[buffer_id]

    def refresh_names(self) -> None:
        with span(
            "state::refresh_names",
            logger_name=self._logger_name,
            component="state",
            metadata={"count": len(self.order)},
        ):
            entries = [
                (buffer_id, self._host_path(buffer_id) or "")
                for buffer_id in self.order
            ]
            for buffer_id, name in resolve_names(entries, self.options).items():
                self.get_or_create_record(buffer_id).name = name

    def move(self, buffer_id: BufferId, index: int) -> None:
        """Move ``buffer_id`` to ``index``, without crossing the pinned boundary."""

        if buffer_id not in self.order:
            return
        with span(
            "state::move",
            logger_name=self._logger_name,
            component="state",
            metadata={"buffer": buffer_id, "index": index},
        ):
            pinned_count = sum(1 for item in self.order if self.is_pinned(item))
            self.order.remove(buffer_id)
            if self.is_pinned(buffer_id):
                low, high = 0, pinned_count - 1
            else:
                low, high = pinned_count, len(self.order)
            self.order.insert(min(max(index, low), high), buffer_id)

    # Pins

    def sort_pins_to_left(self) -> None:
        self.order = partition_pinned(self.order, self.is_pinned)

    def toggle_pin(self, buffer_id: BufferId) -> None:
        """Flip the pin flag and regroup; redrawing is the caller's job."""

        with span(
            "state::toggle_pin",
            logger_name=self._logger_name,
            component="state",
            metadata={"buffer": buffer_id},
        ) as handle:
            try:
                toggle_pin_flag(
                    self.host, buffer_id, logger_name=self._logger_name
                )
            except HostQueryError as exc:
                handle.note("toggle_failed", reason=str(exc))
                return
            self.sort_pins_to_left()

    # Views

    def snapshot(self) -> tuple[TabView, ...]:
        views = []
        for buffer_id in self.order:
            record = self.get_or_create_record(buffer_id)
            views.append(
                TabView(
                    id=buffer_id,
                    name=record.name,
                    pinned=self.is_pinned(buffer_id),
                    closing=record.closing,
                    position=record.position,
                    width=record.width,
                    real_width=record.real_width,
                )
            )
        return tuple(views)


__all__ = ["TabCollection"]
