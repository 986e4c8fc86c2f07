"""User-facing configuration for the tab strip core."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Iterable, Mapping, Optional

ENV_PREFIX = "TABSTRIP_"


def _normalize_names(values: Iterable[str] | str | None) -> frozenset[str]:
    if values is None:
        return frozenset()
    if isinstance(values, str):
        values = values.split(",")
    return frozenset(value.strip() for value in values if value and value.strip())


@dataclass(frozen=True, slots=True)
class TabstripOptions:
    """Filters and naming knobs, mirroring a host-side ``bufferline`` table."""

    exclude_ft: frozenset[str] = frozenset()
    exclude_name: frozenset[str] = frozenset()
    no_name_title: Optional[str] = None
    maximum_length: int = 30
    insert_at_start: bool = False
    path_separator: str = field(default=os.sep)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude_ft", _normalize_names(self.exclude_ft))
        object.__setattr__(self, "exclude_name", _normalize_names(self.exclude_name))
        if self.maximum_length < 0:
            raise ValueError("maximum_length cannot be negative")
        if not self.path_separator:
            raise ValueError("path_separator cannot be empty")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "TabstripOptions":
        """Build options from a host table, rejecting keys this core does not know."""

        data = dict(data or {})
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown tabstrip option(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TabstripOptions":
        env = os.environ if environ is None else environ

        def read(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        values: dict[str, Any] = {}
        if read("EXCLUDE_FT") is not None:
            values["exclude_ft"] = read("EXCLUDE_FT")
        if read("EXCLUDE_NAME") is not None:
            values["exclude_name"] = read("EXCLUDE_NAME")
        if read("NO_NAME_TITLE"):
            values["no_name_title"] = read("NO_NAME_TITLE")
        if read("MAXIMUM_LENGTH"):
            values["maximum_length"] = int(read("MAXIMUM_LENGTH") or "0")
        if read("INSERT_AT_START") is not None:
            raw = (read("INSERT_AT_START") or "").lower()
            values["insert_at_start"] = raw in {"1", "true", "yes", "on"}
        return cls(**values)


__all__ = ["TabstripOptions"]
