"""Telemetry entries and the registry that builds them.

Example:
    >>> from microengineer.entries import build_all
    >>>
    >>> table = build_all()
    >>> speed = table.get("Speed")
    >>> speed.refresh(context)
    >>> speed.display
    '174.52 m/s'
"""

from microengineer.entries.base import (
    Category,
    Entry,
    EntryKind,
    attribute_source,
)
from microengineer.entries.registry import (
    ENTRY_FACTORIES,
    EntryTable,
    build_all,
)

__all__ = [
    "Category",
    "ENTRY_FACTORIES",
    "Entry",
    "EntryKind",
    "EntryTable",
    "attribute_source",
    "build_all",
]
