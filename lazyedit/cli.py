"""Command-line front door for lazyedit.

Parses CLI options, loads settings and the target file, then hands control
to the interactive loop.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
import termios
from pathlib import Path

from . import __version__
from .config import CONFIG_PATH, MAX_TAB_STOP, load_settings, save_settings
from .fileio import open_file
from .loop import run_editor
from .state import EditorState
from .terminal import TerminalController, get_window_size

logger = logging.getLogger(__name__)

LOG_FILE_ENV = "LAZYEDIT_LOG_FILE"


def _tab_stop(value: str) -> int:
    """argparse type for tab stops in ``1..MAX_TAB_STOP``."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if not 1 <= parsed <= MAX_TAB_STOP:
        raise argparse.ArgumentTypeError(f"value must be between 1 and {MAX_TAB_STOP}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyedit", description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="File to edit. Omit to start with an empty buffer.")
    parser.add_argument("--tab-stop", type=_tab_stop, default=None, help="Columns per tab stop (default from config, else 8).")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help=f"Store the effective settings in {CONFIG_PATH} and exit.",
    )
    parser.add_argument("--log-file", default=os.environ.get(LOG_FILE_ENV), help=f"Write a debug log here (env: {LOG_FILE_ENV}).")
    parser.add_argument("--log-level", default="DEBUG", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: str | None, level: str) -> None:
    """Attach a file handler; the terminal itself never receives log output."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger(__package__)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, open the file, and run the editor until quit."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    settings = load_settings()
    if args.tab_stop is not None:
        settings = dataclasses.replace(settings, tab_stop=args.tab_stop)
    if args.save_settings:
        save_settings(settings)
        return

    rows, cols = get_window_size()
    state = EditorState.create(rows, cols, settings)
    if args.path is not None:
        path = Path(args.path)
        try:
            open_file(state, path)
        except OSError as exc:
            raise SystemExit(f"Cannot open {path}: {exc.strerror or exc}") from exc

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    try:
        terminal = TerminalController(stdin_fd, stdout_fd)
    except termios.error as exc:
        raise SystemExit(f"lazyedit needs an interactive terminal: {exc}") from exc

    try:
        run_editor(state, terminal, stdin_fd, stdout_fd)
    except (OSError, EOFError) as exc:
        logger.exception("fatal input error")
        raise SystemExit(f"read: {exc}") from exc


if __name__ == "__main__":
    main()
