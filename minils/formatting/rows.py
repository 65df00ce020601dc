"""Header and row assembly for directory reports."""

from __future__ import annotations

from ..listing_model import Entry, TimeOption
from ..text import pad_graphemes
from .cells import entry_date, fit_name, permissions_cell, rendered_path
from .constants import (
    DATE_CREATED_HEADING,
    DATE_MODIFIED_HEADING,
    DATE_WIDTH,
    FILE_ICON,
    NAME_HEADING,
    PERMISSIONS_HEADING,
    PERMISSIONS_WIDTH,
    PLAIN_HEADING,
    SEPARATOR_CHAR,
)
from .widths import header_name_width


def separator_line(width: int) -> str:
    return SEPARATOR_CHAR * width


def plain_header(width: int) -> list[str]:
    return [PLAIN_HEADING, separator_line(width)]


def extended_header(width: int, longest: int) -> list[str]:
    """Build the extended heading line plus separator.

    Headings are butted together with no separator: each heading width
    already covers the space that follows the matching row cell.
    """
    heading = (
        pad_graphemes(NAME_HEADING, header_name_width(width, longest))
        + pad_graphemes(DATE_CREATED_HEADING, DATE_WIDTH)
        + pad_graphemes(PERMISSIONS_HEADING, PERMISSIONS_WIDTH)
        + pad_graphemes(DATE_MODIFIED_HEADING, DATE_WIDTH)
    )
    return [heading, separator_line(width)]


def plain_row(entry: Entry, icon: str) -> str:
    return f"{icon} {rendered_path(entry)}"


def extended_file_row(entry: Entry, name_width: int) -> str:
    """Render ``icon name created permissions modified`` for one file."""
    name = fit_name(rendered_path(entry), name_width)
    return " ".join(
        [
            FILE_ICON,
            name,
            entry_date(entry, TimeOption.CREATED),
            permissions_cell(entry),
            entry_date(entry, TimeOption.MODIFIED),
        ]
    )


__all__ = [
    "separator_line",
    "plain_header",
    "extended_header",
    "plain_row",
    "extended_file_row",
]
