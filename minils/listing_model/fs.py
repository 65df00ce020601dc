"""Filesystem scanning and entry classification for one directory."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Protocol

from ..errors import DirectoryReadError
from .types import Entry, EntryKind

LOGGER = logging.getLogger(__name__)

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


class RawEntry(Protocol):
    """Minimal surface of ``os.DirEntry`` the classifier relies on."""

    path: str

    def is_dir(self) -> bool: ...

    def stat(self) -> os.stat_result: ...


def timestamp_from_ns(value_ns: int) -> datetime:
    """Convert an epoch nanosecond count to an aware UTC datetime."""
    seconds, nanos = divmod(int(value_ns), 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanos // 1_000)


def created_ns(stat_result: os.stat_result) -> int:
    """Return creation time in nanoseconds.

    Uses ``st_birthtime`` where the platform reports it and falls back to
    ``st_ctime_ns`` elsewhere.
    """
    birth_ns = getattr(stat_result, "st_birthtime_ns", None)
    if birth_ns is not None:
        return int(birth_ns)
    birth = getattr(stat_result, "st_birthtime", None)
    if birth is not None:
        return int(birth * 1_000_000_000)
    return int(stat_result.st_ctime_ns)


def is_read_only(stat_result: os.stat_result) -> bool:
    return not (stat_result.st_mode & _WRITE_BITS)


def materialize_entry(raw: RawEntry, kind: EntryKind) -> Entry:
    """Build an ``Entry`` from a raw directory child.

    A failing ``stat()`` still yields an entry, with its metadata left unset
    and the error kept for reporting.
    """
    path = os.fspath(raw.path)
    try:
        stat_result = raw.stat()
    except OSError as exc:
        LOGGER.debug("stat failed for %s: %s", path, exc)
        return Entry(path=path, kind=kind, stat_error=exc)
    return Entry(
        path=path,
        kind=kind,
        created_at=timestamp_from_ns(created_ns(stat_result)),
        modified_at=timestamp_from_ns(stat_result.st_mtime_ns),
        read_only=is_read_only(stat_result),
    )


def classify_entries(raw_entries: Iterable[RawEntry]) -> tuple[tuple[Entry, ...], tuple[Entry, ...]]:
    """Partition raw entries into ``(files, directories)`` keeping input order.

    Entries that cannot report their type are dropped.
    """
    files: list[Entry] = []
    directories: list[Entry] = []
    for raw in raw_entries:
        try:
            is_dir = raw.is_dir()
        except OSError as exc:
            LOGGER.debug("dropping unreadable entry %s: %s", raw.path, exc)
            continue
        if is_dir:
            directories.append(materialize_entry(raw, EntryKind.DIRECTORY))
        else:
            files.append(materialize_entry(raw, EntryKind.FILE))
    return tuple(files), tuple(directories)


def scan_directory(directory: str | os.PathLike[str]) -> tuple[tuple[Entry, ...], tuple[Entry, ...]]:
    """List ``directory`` without recursion and classify its children.

    Children are returned in the order ``os.scandir`` yields them.
    """
    directory_text = os.fspath(directory)
    try:
        with os.scandir(directory_text) as entries:
            raw_entries = list(entries)
    except OSError as exc:
        raise DirectoryReadError(directory_text, exc) from exc

    files, directories = classify_entries(raw_entries)
    LOGGER.debug(
        "scanned %s: %d files, %d directories",
        directory_text,
        len(files),
        len(directories),
    )
    return files, directories


__all__ = [
    "RawEntry",
    "timestamp_from_ns",
    "created_ns",
    "is_read_only",
    "materialize_entry",
    "classify_entries",
    "scan_directory",
]
