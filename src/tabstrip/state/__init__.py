"""Tab order, per-buffer records, and pin partitioning."""

from .collection import TabCollection
from .pins import PIN_FLAG, is_pinned, partition_pinned, toggle_pin_flag
from .records import BufferId, BufferRecord, TabView

__all__ = [
    "BufferId",
    "BufferRecord",
    "PIN_FLAG",
    "TabCollection",
    "TabView",
    "is_pinned",
    "partition_pinned",
    "toggle_pin_flag",
]
