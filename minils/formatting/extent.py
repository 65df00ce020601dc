"""Longest rendered path across a request's entries."""

from __future__ import annotations

from ..errors import UnableToCalculatePathLengths
from ..text import grapheme_count
from .request import RenderRequest


def analyse_longest(request: RenderRequest) -> int | None:
    """Return the longest full-path length in grapheme clusters.

    ``None`` when the request holds no entries at all.
    """
    lengths = [grapheme_count(entry.path) for entry in request.all_entries()]
    if not lengths:
        return None
    return max(lengths)


def require_longest(request: RenderRequest) -> int:
    longest = analyse_longest(request)
    if longest is None:
        raise UnableToCalculatePathLengths()
    return longest


__all__ = [
    "analyse_longest",
    "require_longest",
]
