"""Pin flags and the stable partition that keeps pinned tabs on the left."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, TypeVar

from tabstrip.host import EditorHost, HostQueryError
from tabstrip.runtime.telemetry import record_event

from .records import BufferId

PIN_FLAG = "bufferline_pin"

T = TypeVar("T")


def is_pinned(host: EditorHost, buffer_id: BufferId) -> bool:
    try:
        return bool(host.get_flag(buffer_id, PIN_FLAG))
    except HostQueryError:
        return False


def toggle_pin_flag(
    host: EditorHost, buffer_id: BufferId, *, logger_name: str | None = None
) -> bool:
    """Flip the persisted pin flag and return the new value."""

    pinned = not is_pinned(host, buffer_id)
    host.set_flag(buffer_id, PIN_FLAG, pinned)
    record_event(
        "pins.toggle",
        level="debug",
        data={"buffer": buffer_id, "pinned": pinned},
        logger_name=logger_name,
    )
    return pinned


def partition_pinned(
    order: MutableSequence[T], predicate: Callable[[T], bool]
) -> List[T]:
    """Move every item failing ``predicate`` to the end, keeping both groups' order.

    ``order`` is consumed in place: pinned items stay, unpinned ones are popped
    into a side list that is appended after the scan.
    """

    unpinned: List[T] = []
    index = 0
    while index < len(order):
        if predicate(order[index]):
            index += 1
        else:
            unpinned.append(order.pop(index))
    return list(order) + unpinned


__all__ = ["PIN_FLAG", "is_pinned", "partition_pinned", "toggle_pin_flag"]
