"""Point-cursor edits on the document."""

from __future__ import annotations

from .state import EditorState


def insert_char(state: EditorState, ch: str) -> None:
    """Insert one byte (given as a latin-1 character) at the cursor."""
    doc = state.document
    if state.cy == doc.numrows:
        doc.insert_row(doc.numrows)
    doc.row_insert_char(doc.rows[state.cy], state.cx, ord(ch))
    state.cx += 1


def insert_newline(state: EditorState) -> None:
    doc = state.document
    if state.cx == 0:
        doc.insert_row(state.cy)
    else:
        doc.split_row(state.cy, state.cx)
    state.cy += 1
    state.cx = 0


def delete_char(state: EditorState) -> None:
    """Delete the byte left of the cursor, joining lines at column 0."""
    doc = state.document
    if state.cy == doc.numrows:
        return
    if state.cx == 0 and state.cy == 0:
        return

    row = doc.rows[state.cy]
    if state.cx > 0:
        doc.row_delete_char(row, state.cx - 1)
        state.cx -= 1
    else:
        state.cx = doc.merge_with_previous(state.cy)
        state.cy -= 1
