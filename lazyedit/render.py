"""Screen compositor.

Builds one complete frame (text rows, status bar, message bar, cursor
placement) and hands it to the terminal in a single ``os.write`` so a
partially drawn frame is never visible.
"""

from __future__ import annotations

import os
import time

from . import __version__
from .state import EditorState
from .viewport import scroll

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
ERASE_LINE = b"\x1b[K"
INVERT_ON = b"\x1b[7m"
INVERT_OFF = b"\x1b[m"
FILLER = b"~"
FILENAME_DISPLAY_LIMIT = 20
NO_NAME = "[No Name]"
WELCOME_TEXT = f"lazyedit -- version {__version__}"


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


def welcome_line(screencols: int) -> bytes:
    """Centered banner with the usual filler glyph at the left edge."""
    welcome = _encode(WELCOME_TEXT)[:screencols]
    padding = (screencols - len(welcome)) // 2
    out = bytearray()
    if padding:
        out += FILLER
        padding -= 1
    out += b" " * padding
    out += welcome
    return bytes(out)


def build_status_line(left_text: str, right_text: str, width: int) -> str:
    """Left-align ``left_text`` and right-align ``right_text`` within ``width``.

    The left part is cut at ``width``. The right part only appears when it
    fits exactly in the remaining space.
    """
    left = left_text[:width]
    gap = width - len(left)
    if gap >= len(right_text):
        return left + " " * (gap - len(right_text)) + right_text
    return left + " " * gap


def status_texts(state: EditorState) -> tuple[str, str]:
    name = str(state.filename) if state.filename is not None else NO_NAME
    modified = " (modified)" if state.document.dirty else ""
    left = f"{name[:FILENAME_DISPLAY_LIMIT]} - {state.numrows} lines{modified}"
    right = f"{state.cy + 1}/{state.numrows}"
    return left, right


def _draw_rows(state: EditorState, out: list[bytes]) -> None:
    doc = state.document
    for y in range(state.screenrows):
        filerow = y + state.rowoff
        if filerow >= doc.numrows:
            if doc.numrows == 0 and y == state.screenrows // 3:
                out.append(welcome_line(state.screencols))
            else:
                out.append(FILLER)
        else:
            render = doc.rows[filerow].render
            out.append(render[state.coloff:state.coloff + state.screencols])
        out.append(ERASE_LINE)
        out.append(b"\r\n")


def _draw_status_bar(state: EditorState, out: list[bytes]) -> None:
    left, right = status_texts(state)
    out.append(INVERT_ON)
    out.append(_encode(build_status_line(left, right, state.screencols)))
    out.append(INVERT_OFF)
    out.append(b"\r\n")


def _draw_message_bar(state: EditorState, out: list[bytes], now: float) -> None:
    out.append(ERASE_LINE)
    message = state.visible_status_message(now)
    if message:
        out.append(_encode(message[:state.screencols]))


def build_frame(state: EditorState, now: float | None = None) -> bytes:
    """Scroll the viewport to the cursor and compose one frame."""
    if now is None:
        now = time.monotonic()
    scroll(state)

    out: list[bytes] = [HIDE_CURSOR, CURSOR_HOME]
    _draw_rows(state, out)
    _draw_status_bar(state, out)
    _draw_message_bar(state, out, now)
    cursor_row = state.cy - state.rowoff + 1
    cursor_col = state.rx - state.coloff + 1
    out.append(f"\x1b[{cursor_row};{cursor_col}H".encode("ascii"))
    out.append(SHOW_CURSOR)
    return b"".join(out)


def refresh_screen(state: EditorState, stdout_fd: int) -> None:
    os.write(stdout_fd, build_frame(state))
