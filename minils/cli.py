"""Command-line front door for minils.

Parses CLI options, resolves the target directory and display width, then
prints the formatted listing or writes it to a file.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from . import config
from .errors import MinilsError, MinimumWidthError
from .formatting import build_render_request, generate_textual_display

LOGGER = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_terminal_width() -> int:
    """Resolve display width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def resolve_width(explicit_width: int | None, output: Path | None) -> int:
    """Pick the report width: explicit flag, then file default, then terminal."""
    if explicit_width is not None:
        return explicit_width
    if output is not None:
        return config.load_file_output_width()
    return _default_terminal_width()


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minils",
        description="List directory contents with optional timestamps and permissions.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "-e",
        "--extended",
        action="store_true",
        default=None,
        help="Show creation/modification dates and permissions for files.",
    )
    parser.add_argument("-o", "--output", metavar="FILE", default=None, help="Write the listing to FILE instead of stdout.")
    parser.add_argument(
        "-w",
        "--width",
        type=_positive_int,
        default=None,
        help="Report width in columns (default: terminal width, or the configured file width with --output).",
    )
    parser.add_argument(
        "--save-default-extended",
        action="store_true",
        help="Remember the current --extended choice as the default.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scan and layout details to stderr.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and list one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    extended = args.extended if args.extended is not None else config.load_extended_default()
    if args.save_default_extended:
        config.save_extended_default(extended)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path is not None else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    output = Path(args.output) if args.output is not None else None
    width = resolve_width(args.width, output)
    LOGGER.debug("listing %s (extended=%s, width=%d)", path, extended, width)

    try:
        request = build_render_request(path, extended=extended, width=width)
        report = generate_textual_display(request)
    except MinimumWidthError as exc:
        parser.error(str(exc))
    except MinilsError as exc:
        raise SystemExit(str(exc)) from exc

    if output is None:
        print(report)
        return
    try:
        output.write_text(report + "\n", encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Could not write {output}: {exc}") from exc


if __name__ == "__main__":
    main()
