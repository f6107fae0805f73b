"""Main interactive loop: render, read one key, act, repeat."""

from __future__ import annotations

import logging

from .editing import delete_char, insert_char, insert_newline
from .fileio import save_file
from .input import is_insertable, read_key
from .prompt import ScreenCallbacks
from .render import refresh_screen
from .search import find
from .state import EditorState
from .terminal import TerminalController
from .viewport import (
    ARROW_KEYS,
    PAGE_KEYS,
    move_cursor,
    move_to_line_end,
    move_to_line_start,
    page_cursor,
)

logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"
READ_TIMEOUT_MS = 100
IGNORED_KEYS = frozenset({"CTRL_L", "ESC"})


def process_keypress(state: EditorState, key: str, callbacks: ScreenCallbacks) -> bool:
    """Apply one key to the editor and return ``True`` when it should exit."""
    if key == "CTRL_Q":
        if state.quit_guard.request_quit(bool(state.document.dirty)):
            return True
        state.set_status_message(state.quit_guard.warning())
        return False

    if key == "ENTER":
        insert_newline(state)
    elif key == "CTRL_S":
        save_file(state, callbacks)
    elif key == "CTRL_F":
        find(state, callbacks)
    elif key == "HOME":
        move_to_line_start(state)
    elif key == "END":
        move_to_line_end(state)
    elif key in {"BACKSPACE", "CTRL_H"}:
        delete_char(state)
    elif key == "DELETE":
        move_cursor(state, "RIGHT")
        delete_char(state)
    elif key in PAGE_KEYS:
        page_cursor(state, key)
    elif key in ARROW_KEYS:
        move_cursor(state, key)
    elif key in IGNORED_KEYS:
        pass
    elif is_insertable(key):
        insert_char(state, key)

    state.quit_guard.reset()
    return False


def wait_for_key(stdin_fd: int) -> str:
    """Block until a key arrives, polling so the process stays responsive."""
    while True:
        try:
            key = read_key(stdin_fd, timeout_ms=READ_TIMEOUT_MS)
        except KeyboardInterrupt:
            continue
        if key:
            return key


def run_editor(
    state: EditorState,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
) -> None:
    """Run the editor until quit. Read errors propagate after terminal restore."""
    callbacks = ScreenCallbacks(
        read_key=lambda: wait_for_key(stdin_fd),
        refresh_screen=lambda: refresh_screen(state, stdout_fd),
    )
    state.set_status_message(HELP_MESSAGE)

    with terminal.raw_mode():
        while True:
            callbacks.refresh_screen()
            key = callbacks.read_key()
            if process_keypress(state, key, callbacks):
                break
    logger.info("editor exited")
