from __future__ import annotations

from typing import List

import pytest

from tabstrip.adapters.tabline import (
    TablineController,
    TablineHooks,
    TablineOffset,
    set_offset,
)
from tabstrip.host import DOCUMENT_DESTROYED, MemoryHost
from tabstrip.options import TabstripOptions
from tabstrip.state import TabCollection, TabView


def make_controller(
    host: MemoryHost | None = None,
) -> tuple[TablineController, List[tuple[TabView, ...]], List[int], List[str]]:
    host = host or MemoryHost()
    frames: List[tuple[TabView, ...]] = []
    focused: List[int] = []
    logs: List[str] = []
    hooks = TablineHooks(
        update_tabs=frames.append,
        focus=focused.append,
        log=logs.append,
    )
    collection = TabCollection(host, TabstripOptions(path_separator="/"))
    return TablineController(collection, hooks), frames, focused, logs


def labels(frame: tuple[TabView, ...]) -> list:
    return [view.name for view in frame]


def test_controller_tracks_opened_documents() -> None:
    host = MemoryHost()
    controller, frames, _focused, logs = make_controller(host)

    host.open("/x/a/file.txt")
    host.open("/x/b/file.txt")

    assert labels(frames[-1]) == ["a/file.txt", "b/file.txt"]
    assert controller.collection.order == [1, 2]
    assert any(line.startswith("event ->") for line in logs)


def test_closing_active_buffer_focuses_neighbor() -> None:
    host = MemoryHost()
    controller, frames, focused, _logs = make_controller(host)
    host.open("/x/a.py")
    host.open("/x/b.py")
    host.open("/x/c.py")
    controller.set_active(3)

    host.wipe(3)

    assert focused == [2]
    assert controller.active == 2
    assert [view.id for view in frames[-1]] == [1, 2]


def test_closing_inactive_buffer_keeps_focus() -> None:
    host = MemoryHost()
    controller, _frames, focused, _logs = make_controller(host)
    host.open("/x/a.py")
    host.open("/x/b.py")
    controller.set_active(1)

    host.wipe(2)

    assert focused == []
    assert controller.active == 1


def test_repeated_destroy_notification_is_ignored() -> None:
    host = MemoryHost()
    controller, _frames, _focused, logs = make_controller(host)
    host.open("/x/a.py")
    host.open("/x/b.py")
    controller.collection.begin_close(2)

    host.bus.emit(DOCUMENT_DESTROYED, 2)

    assert controller.collection.order == [1, 2]
    assert any(line.startswith("close skipped") for line in logs)


def test_rename_refreshes_labels() -> None:
    host = MemoryHost()
    _controller, frames, _focused, _logs = make_controller(host)
    host.open("/x/a/file.txt")
    second = host.open("/x/b/other.txt")

    host.rename(second, "/x/b/file.txt")

    assert labels(frames[-1]) == ["a/file.txt", "b/file.txt"]


def test_toggle_pin_and_move_push_frames() -> None:
    host = MemoryHost()
    controller, frames, _focused, _logs = make_controller(host)
    for path in ("/x/a.py", "/x/b.py", "/x/c.py"):
        host.open(path)

    controller.toggle_pin(2)
    assert [view.id for view in frames[-1]] == [2, 1, 3]
    assert frames[-1][0].pinned is True

    controller.move(3, 0)
    assert [view.id for view in frames[-1]] == [2, 3, 1]


def test_picking_mode_flag() -> None:
    controller, _frames, _focused, _logs = make_controller()

    controller.start_picking()
    assert controller.collection.is_picking_buffer is True
    controller.stop_picking()
    assert controller.collection.is_picking_buffer is False


def test_set_offset_forwards_to_hooks() -> None:
    offsets: List[TablineOffset] = []
    collection = TabCollection(MemoryHost())
    controller = TablineController(
        collection,
        TablineHooks(update_tabs=lambda _views: None, update_offset=offsets.append),
    )

    controller.set_offset(31, "FileTree")

    assert offsets == [TablineOffset(width=31, text="FileTree")]


def test_deprecated_set_offset_warns_and_forwards() -> None:
    controller, _frames, _focused, _logs = make_controller()

    with pytest.warns(DeprecationWarning):
        offset = set_offset(controller, 20, "Tree", "Normal")

    assert offset == TablineOffset(width=20, text="Tree", highlight="Normal")
    assert controller.offset == offset
