"""Display-name resolution for tab labels."""

from .resolver import ELLIPSIS, base_name, resolve_names, unique_name_pair

__all__ = ["ELLIPSIS", "base_name", "resolve_names", "unique_name_pair"]
