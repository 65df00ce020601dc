"""Adaptive column formatting for directory reports.

Pipeline: extent analysis, width allocation, cell rendering, and row
assembly, sequenced by ``generate_textual_display``.
"""

from __future__ import annotations

from .request import RenderRequest, build_render_request
from .extent import analyse_longest, require_longest
from .widths import header_name_width, row_name_width, validate_width
from .cells import entry_date, fit_name, format_date, permissions_cell, rendered_path
from .rows import extended_file_row, extended_header, plain_header, plain_row
from .display import generate_textual_display

__all__ = [
    "RenderRequest",
    "build_render_request",
    "analyse_longest",
    "require_longest",
    "validate_width",
    "row_name_width",
    "header_name_width",
    "rendered_path",
    "fit_name",
    "format_date",
    "entry_date",
    "permissions_cell",
    "plain_header",
    "extended_header",
    "plain_row",
    "extended_file_row",
    "generate_textual_display",
]
