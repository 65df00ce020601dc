"""Domain datatypes for one listed directory child."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


class TimeOption(Enum):
    """Which entry timestamp a date cell shows."""

    CREATED = "created"
    MODIFIED = "modified"


@dataclass(frozen=True)
class Entry:
    """One directory child plus metadata observed from the filesystem.

    Metadata fields are ``None`` when the lookup failed during the scan; the
    formatter reports that as a missing-metadata error if it needs them.
    """

    path: str
    kind: EntryKind
    created_at: datetime | None = None
    modified_at: datetime | None = None
    read_only: bool | None = None
    stat_error: OSError | None = field(default=None, compare=False, repr=False)


__all__ = [
    "EntryKind",
    "TimeOption",
    "Entry",
]
