"""Cell renderers for names, dates, and permissions."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from ..errors import FileNameInvalidUnicode, MissingMetaDataError
from ..listing_model import Entry, TimeOption
from ..text import fit_graphemes
from .constants import DATE_FORMAT, DATE_FRACTION_DIGITS, PERMISSIONS_WIDTH, READ_ONLY_LABEL, WRITABLE_LABEL

# C0 and C1 controls plus the Unicode line and paragraph separators.
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\u2028\u2029]")


def rendered_path(entry: Entry) -> str:
    """Return the entry's full path as printable text.

    Paths decoded with surrogate escapes (undecodable bytes) cannot be
    encoded as UTF-8 and are rejected, as are paths holding control or
    line-separator characters that would break a report line.
    """
    try:
        entry.path.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FileNameInvalidUnicode(entry.path) from exc
    if _CONTROL_RE.search(entry.path) is not None:
        raise FileNameInvalidUnicode(entry.path)
    return entry.path


def fit_name(path: str, width: int) -> str:
    return fit_graphemes(path, width)


def format_date(instant: datetime) -> str:
    """Format ``instant`` in UTC as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    fraction = f"{instant.microsecond:06d}"[:DATE_FRACTION_DIGITS]
    return f"{instant.strftime(DATE_FORMAT)}.{fraction}"


def entry_date(entry: Entry, option: TimeOption) -> str:
    """Format the timestamp selected by ``option``."""
    if option is TimeOption.CREATED:
        instant = entry.created_at
    else:
        instant = entry.modified_at
    if instant is None:
        raise MissingMetaDataError(entry.path, entry.stat_error)
    return format_date(instant)


def permissions_cell(entry: Entry) -> str:
    """Return the permission label padded to fill its column.

    The column's trailing separator is part of ``PERMISSIONS_WIDTH``.
    """
    if entry.read_only is None:
        raise MissingMetaDataError(entry.path, entry.stat_error)
    label = READ_ONLY_LABEL if entry.read_only else WRITABLE_LABEL
    return label.ljust(PERMISSIONS_WIDTH - 1)


__all__ = [
    "rendered_path",
    "fit_name",
    "format_date",
    "entry_date",
    "permissions_cell",
]
