"""Display names for tabs: basenames, widened just enough to be unique."""

from __future__ import annotations

import os
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tabstrip.options import TabstripOptions

BufferId = int
ELLIPSIS = "…"


def base_name(path: str, buffer_id: BufferId, options: TabstripOptions) -> str:
    """Return the naive label for a buffer before deduplication.

    Unnamed buffers use ``options.no_name_title`` or ``[buffer <id>]``; leaves
    longer than ``options.maximum_length`` are cut and end with an ellipsis.
    """

    if not path:
        if options.no_name_title is not None:
            return options.no_name_title
        return f"[buffer {buffer_id}]"

    separator = options.path_separator
    name = path.rstrip(separator).rsplit(separator, 1)[-1] or path
    limit = options.maximum_length
    if limit and len(name) > limit:
        name = name[: max(limit - 1, 0)] + ELLIPSIS
    return name


def _suffix(parts: Sequence[str], depth: int, separator: str) -> str:
    return separator.join(parts[-depth:])


def unique_name_pair(
    first: str, second: str, separator: str = os.sep
) -> Tuple[str, str]:
    """Return the shortest trailing segments that tell two paths apart.

    Both suffixes grow one parent segment at a time. A path that runs out of
    segments keeps its full form while the other keeps growing. Identical
    paths come back as two equal strings.
    """

    first_parts = first.split(separator)
    second_parts = second.split(separator)
    longest = max(len(first_parts), len(second_parts))

    depth = 1
    first_name = _suffix(first_parts, depth, separator)
    second_name = _suffix(second_parts, depth, separator)
    while first_name == second_name and depth < longest:
        depth += 1
        first_name = _suffix(first_parts, depth, separator)
        second_name = _suffix(second_parts, depth, separator)
    return first_name, second_name


class _NameTable:
    """Forward pass state: every name in use maps to the positions showing it.

    More than one position shares a name only when widening cannot tell them
    apart (same path, or unnamed buffers under one title).
    """

    def __init__(
        self, entries: Sequence[Tuple[BufferId, str]], options: TabstripOptions
    ) -> None:
        self.entries = entries
        self.options = options
        self.names: List[Optional[str]] = [None] * len(entries)
        self.index: Dict[str, List[int]] = {}

    def run(self) -> Dict[BufferId, str]:
        for position, (buffer_id, path) in enumerate(self.entries):
            self.claim(position, base_name(path, buffer_id, self.options))
        return {
            buffer_id: name or ""
            for (buffer_id, _path), name in zip(self.entries, self.names)
        }

    def claim(self, position: int, name: str) -> None:
        self._release(position)
        self.names[position] = name

        holders = self.index.get(name)
        if not holders:
            self.index[name] = [position]
            return
        self._split(position, name)

    def _release(self, position: int) -> None:
        previous = self.names[position]
        holders = self.index.get(previous) if previous is not None else None
        if holders and position in holders:
            holders.remove(position)
            if not holders:
                del self.index[previous]

    def _split(self, position: int, name: str) -> None:
        holders = self.index[name]
        for holder in holders:
            ours, theirs = self._widen(position, holder)
            if ours != theirs:
                break
        else:
            # Same file opened twice (or two unnamed buffers): share `name`.
            holders.append(position)
            return

        # Everyone showing `name` moves off it together, so it is never
        # released while still on screen.
        shared = self.index.pop(name)
        widened = [(holder, self._widen(position, holder)[1]) for holder in shared]
        self.claim(position, ours)
        for holder, their_name in widened:
            self.claim(holder, their_name)

    def _widen(self, position: int, holder: int) -> Tuple[str, str]:
        path, other_path = self.entries[position][1], self.entries[holder][1]
        ours, theirs = unique_name_pair(
            path, other_path, self.options.path_separator
        )
        if not path:
            ours = self.names[position] or ""
        if not other_path:
            theirs = self.names[holder] or ""
        return ours, theirs


def resolve_names(
    entries: Iterable[Tuple[BufferId, str]],
    options: TabstripOptions | None = None,
) -> Dict[BufferId, str]:
    """Assign every ``(buffer_id, path)`` a display name, in order.

    The first buffer with a given basename takes it. A later buffer with the
    same basename renames both to their shortest distinguishing suffixes, and
    the basename becomes free again. Whenever a widened name is already held
    by a third buffer, that pair is widened in turn before the pass moves on,
    so no two named buffers end up sharing a label unless their paths are
    identical.
    """

    return _NameTable(list(entries), options or TabstripOptions()).run()


__all__ = ["ELLIPSIS", "base_name", "resolve_names", "unique_name_pair"]
