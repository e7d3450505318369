"""Command-line front door for goat.

Parses CLI options, merges them with persisted config defaults, and validates
key mappings before anything touches the terminal. Then dispatches into the
countdown runtime and returns its exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import __version__
from .config import load_log_level, load_mappings, load_theme_name, load_title
from .keymapping import MAPPING_FORMAT, MAX_USER_EXIT_CODE, MIN_USER_EXIT_CODE, MappingError, parse_mappings
from .log import DEFAULT_LOG_LEVEL, parse_log_level, setup_logging
from .runtime import run_timer
from .ui_theme import available_theme_names

DEFAULT_TITLE = "GOAT"
MAX_TIME_SECONDS = 2**32 - 1

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    """argparse type for countdown lengths in whole seconds."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    if parsed > MAX_TIME_SECONDS:
        raise argparse.ArgumentTypeError(f"value must be <= {MAX_TIME_SECONDS}")
    return parsed


def _log_level(value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors with exit status 1, like other configuration errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="goat",
        description="better sleep: wait for a countdown, or end it early with a key.",
    )
    parser.add_argument("-t", "--time", type=_non_negative_int, required=True, help="timer in seconds")
    parser.add_argument("--title", default=None, help=f"title shown above the key legend (default: {DEFAULT_TITLE})")
    parser.add_argument(
        "-m",
        "--mapping",
        dest="mappings",
        action="append",
        default=[],
        metavar="MAPPING",
        help=(
            f"key binding, format {MAPPING_FORMAT} "
            f"({MIN_USER_EXIT_CODE} <= code <= {MAX_USER_EXIT_CODE}); repeatable"
        ),
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-level", type=_log_level, default=None, help=f"log threshold (default: {DEFAULT_LOG_LEVEL})")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, validate mappings, and run the countdown.

    Returns the exit code chosen by the countdown. Configuration errors raise
    ``SystemExit`` with the message, which exits with status 1.
    """
    args = build_parser().parse_args(argv)

    configured_level = load_log_level()
    try:
        setup_logging(args.log_level or configured_level or DEFAULT_LOG_LEVEL)
    except ValueError:
        setup_logging(DEFAULT_LOG_LEVEL)
        logger.warning("ignoring invalid configured log level %r", configured_level)

    try:
        mappings = parse_mappings([*load_mappings(), *args.mappings])
    except MappingError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc

    title = args.title if args.title is not None else (load_title() or DEFAULT_TITLE)
    theme_name = args.theme if args.theme is not None else load_theme_name()
    return run_timer(args.time, mappings, title, theme_name=theme_name, no_color=args.no_color)


if __name__ == "__main__":
    raise SystemExit(main())
