"""Render request built once per listing and read by every formatting stage."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..listing_model import Entry, scan_directory


@dataclass(frozen=True)
class RenderRequest:
    """Display mode, target width, and the classified entries to format."""

    extended: bool
    width: int
    files: tuple[Entry, ...] = ()
    directories: tuple[Entry, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise ValueError(f"width must be a positive integer, got {self.width!r}")
        object.__setattr__(self, "files", tuple(self.files))
        object.__setattr__(self, "directories", tuple(self.directories))

    def all_entries(self) -> tuple[Entry, ...]:
        return self.files + self.directories


def build_render_request(directory: str | os.PathLike[str], extended: bool, width: int) -> RenderRequest:
    """Scan ``directory`` and wrap its entries in a ``RenderRequest``."""
    files, directories = scan_directory(directory)
    return RenderRequest(extended=extended, width=width, files=files, directories=directories)


__all__ = [
    "RenderRequest",
    "build_render_request",
]
