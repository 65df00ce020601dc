"""Column budget and glyph definitions shared by the report formatter."""

from __future__ import annotations

FILE_ICON = "\U0001F4BE"
DIRECTORY_ICON = "\U0001F4C1"

# Date and permission widths include the single space that follows the cell.
DATE_WIDTH = 24
PERMISSIONS_WIDTH = 13
ROW_SEPARATORS = 5
RESERVED_LENGTH = DATE_WIDTH * 2 + PERMISSIONS_WIDTH + ROW_SEPARATORS

MINIMUM_EXTENDED_WIDTH = 80
# Icon (two terminal columns) plus the spaces on either side of the name cell.
NAME_HEADING_PADDING = 4
# Columns held back from the Name heading once paths no longer fit.
HEADER_NAME_SLACK = 60

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FRACTION_DIGITS = 3

PLAIN_HEADING = "Name:"
NAME_HEADING = "Name"
DATE_CREATED_HEADING = "Date Created"
PERMISSIONS_HEADING = "Permissions"
DATE_MODIFIED_HEADING = "Date Modified"
SEPARATOR_CHAR = "="

READ_ONLY_LABEL = "read only"
WRITABLE_LABEL = "writable"
