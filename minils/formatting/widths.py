"""Name-column width budgeting for extended listings."""

from __future__ import annotations

from ..errors import MinimumWidthError
from .constants import HEADER_NAME_SLACK, MINIMUM_EXTENDED_WIDTH, NAME_HEADING_PADDING, RESERVED_LENGTH


def validate_width(extended: bool, width: int) -> None:
    """Refuse extended output at or below the minimum display width."""
    if extended and width <= MINIMUM_EXTENDED_WIDTH:
        raise MinimumWidthError(width, MINIMUM_EXTENDED_WIDTH)


def row_name_width(width: int, longest: int) -> int:
    """Name-cell width for extended rows.

    Uses the longest path when it fits, otherwise whatever the reserved
    columns leave over.
    """
    return min(width - RESERVED_LENGTH, longest)


def header_name_width(width: int, longest: int) -> int:
    """Width of the ``Name`` heading, covering icon, name cell and separators.

    Equals ``longest + 4`` when the path fits, capped at ``width - 60``.
    Once paths are compressed the cap sits two columns wider than the row
    name column, so later headings drift right by two.
    """
    return min(longest + NAME_HEADING_PADDING, width - HEADER_NAME_SLACK)


__all__ = [
    "validate_width",
    "row_name_width",
    "header_name_width",
]
