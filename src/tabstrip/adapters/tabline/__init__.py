"""Tabline adapter: host events in, tab snapshots out."""

from .controller import TablineController, TablineHooks, TablineOffset, set_offset

__all__ = ["TablineController", "TablineHooks", "TablineOffset", "set_offset"]
