"""Domain model for one listed directory.

This package contains non-UI listing primitives:
- entry datatypes with timestamp and permission metadata
- directory scanning and file/directory classification
"""

from __future__ import annotations

from .types import Entry, EntryKind, TimeOption
from .fs import (
    RawEntry,
    classify_entries,
    created_ns,
    is_read_only,
    materialize_entry,
    scan_directory,
    timestamp_from_ns,
)

__all__ = [
    "Entry",
    "EntryKind",
    "TimeOption",
    "RawEntry",
    "classify_entries",
    "created_ns",
    "is_read_only",
    "materialize_entry",
    "scan_directory",
    "timestamp_from_ns",
]
