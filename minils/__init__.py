"""Public package surface for minils.

Exports ``main`` for programmatic CLI invocation and
``generate_textual_display`` for formatting already-scanned entries.
"""

from __future__ import annotations

from .formatting import RenderRequest, build_render_request, generate_textual_display


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "RenderRequest", "build_render_request", "generate_textual_display"]
