"""Cursor movement and viewport scrolling."""

from __future__ import annotations

from .state import EditorState

ARROW_KEYS = frozenset({"UP", "DOWN", "LEFT", "RIGHT"})
PAGE_KEYS = frozenset({"PAGE_UP", "PAGE_DOWN"})


def scroll(state: EditorState) -> None:
    """Recompute ``rx`` and pull the offsets so the cursor is on screen.

    Runs once per frame before composing; it is the only place that moves
    ``rowoff``/``coloff`` toward the cursor.
    """
    row = state.current_row()
    state.rx = row.cursor_to_render(state.cx) if row is not None else 0

    if state.cy < state.rowoff:
        state.rowoff = state.cy
    if state.cy >= state.rowoff + state.screenrows:
        state.rowoff = state.cy - state.screenrows + 1
    if state.rx < state.coloff:
        state.coloff = state.rx
    if state.rx >= state.coloff + state.screencols:
        state.coloff = state.rx - state.screencols + 1


def move_cursor(state: EditorState, key: str) -> None:
    """Move one step for an arrow key, wrapping across line ends."""
    row = state.current_row()
    if key == "LEFT":
        if state.cx != 0:
            state.cx -= 1
        elif state.cy > 0:
            state.cy -= 1
            state.cx = len(state.document.rows[state.cy])
    elif key == "RIGHT":
        if row is not None and state.cx < len(row):
            state.cx += 1
        elif row is not None and state.cx == len(row):
            state.cy += 1
            state.cx = 0
    elif key == "UP":
        if state.cy != 0:
            state.cy -= 1
    elif key == "DOWN":
        if state.cy < state.numrows:
            state.cy += 1

    row = state.current_row()
    row_len = len(row) if row is not None else 0
    if state.cx > row_len:
        state.cx = row_len


def page_cursor(state: EditorState, key: str) -> None:
    """Snap to the viewport edge, then move a full screen up or down."""
    if key == "PAGE_UP":
        state.cy = state.rowoff
    else:
        state.cy = min(state.rowoff + state.screenrows - 1, state.numrows)

    step = "UP" if key == "PAGE_UP" else "DOWN"
    for _ in range(state.screenrows):
        move_cursor(state, step)


def move_to_line_start(state: EditorState) -> None:
    state.cx = 0


def move_to_line_end(state: EditorState) -> None:
    row = state.current_row()
    if row is not None:
        state.cx = len(row)
