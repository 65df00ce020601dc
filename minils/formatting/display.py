"""Turn a ``RenderRequest`` into the final newline-joined report."""

from __future__ import annotations

import logging

from .constants import DIRECTORY_ICON, FILE_ICON
from .extent import require_longest
from .request import RenderRequest
from .rows import extended_file_row, extended_header, plain_header, plain_row
from .widths import header_name_width, row_name_width, validate_width

LOGGER = logging.getLogger(__name__)


def generate_textual_display(request: RenderRequest) -> str:
    """Render header, file rows, then directory rows.

    Extended mode sizes the name column from the longest path and fails when
    there is nothing to size it from. Plain mode never consults the extent, so
    an empty directory renders as the header alone. Directories are always
    rendered in plain form. Any entry that cannot be rendered aborts the whole
    report.
    """
    validate_width(request.extended, request.width)

    if request.extended:
        longest = require_longest(request)
        name_width = row_name_width(request.width, longest)
        LOGGER.debug(
            "extended layout: width=%d longest=%d name=%d heading=%d",
            request.width,
            longest,
            name_width,
            header_name_width(request.width, longest),
        )
        lines = extended_header(request.width, longest)
        lines.extend(extended_file_row(entry, name_width) for entry in request.files)
    else:
        lines = plain_header(request.width)
        lines.extend(plain_row(entry, FILE_ICON) for entry in request.files)

    lines.extend(plain_row(entry, DIRECTORY_ICON) for entry in request.directories)
    return "\n".join(lines)


__all__ = ["generate_textual_display"]
