"""Grapheme-aware text measurement and cell shaping.

Widths here are counted in grapheme clusters so multi-code-point glyphs are
never split and padding agrees with truncation.
"""

from __future__ import annotations

import regex

GRAPHEME_RE = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into user-perceived characters."""
    return GRAPHEME_RE.findall(text)


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def truncate_graphemes(text: str, max_graphemes: int) -> str:
    """Return at most the first ``max_graphemes`` clusters of ``text``."""
    if max_graphemes <= 0:
        return ""
    return "".join(graphemes(text)[:max_graphemes])


def pad_graphemes(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces until it spans ``width`` clusters."""
    missing = width - grapheme_count(text)
    if missing <= 0:
        return text
    return text + " " * missing


def fit_graphemes(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` grapheme clusters.

    Over-long text is cut without an ellipsis marker.
    """
    if grapheme_count(text) >= width:
        return truncate_graphemes(text, width)
    return pad_graphemes(text, width)


__all__ = [
    "GRAPHEME_RE",
    "graphemes",
    "grapheme_count",
    "truncate_graphemes",
    "pad_graphemes",
    "fit_graphemes",
]
