"""UI-agnostic tab strip state: buffer order, pins, and unique labels."""

__all__ = [
    "adapters",
    "host",
    "naming",
    "options",
    "runtime",
    "state",
]

__version__ = "0.1.0"
