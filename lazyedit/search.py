"""Incremental search driven by the line prompt."""

from __future__ import annotations

import logging

from .prompt import PromptListener, ScreenCallbacks, prompt
from .state import EditorState

logger = logging.getLogger(__name__)

SEARCH_PROMPT = "Search: {} (Use ESC/Arrows/Enter)"
FORWARD_KEYS = frozenset({"RIGHT", "DOWN"})
BACKWARD_KEYS = frozenset({"LEFT", "UP"})


def find_next(state: EditorState, query: str) -> bool:
    """Step from the last match in the search direction to the next hit.

    Wraps around both ends and visits each row at most once. On a hit the
    cursor moves to it and ``rowoff`` is pushed past the end so the next
    scroll puts the match on the top line. Returns whether a row matched.
    """
    search = state.search
    if search.last_match == -1:
        search.direction = 1

    needle = query.encode("latin-1", errors="replace")
    rows = state.document.rows
    current = search.last_match
    for _ in range(len(rows)):
        current += search.direction
        if current == -1:
            current = len(rows) - 1
        elif current == len(rows):
            current = 0

        row = rows[current]
        offset = row.render.find(needle)
        if offset == -1:
            continue
        search.last_match = current
        state.cy = current
        state.cx = row.render_to_cursor(offset)
        state.rowoff = len(rows)
        return True
    return False


class IncrementalSearch(PromptListener):
    """Re-run the search on every prompt keystroke."""

    def on_key(self, state: EditorState, text: str, key: str) -> None:
        search = state.search
        if key in {"ENTER", "ESC"}:
            search.reset()
            return
        if key in FORWARD_KEYS:
            search.direction = 1
        elif key in BACKWARD_KEYS:
            search.direction = -1
        else:
            search.reset()
        find_next(state, text)


def find(state: EditorState, callbacks: ScreenCallbacks) -> None:
    """Run a search session, restoring the view if the user cancels."""
    saved = (state.cx, state.cy, state.coloff, state.rowoff)
    state.search.reset()
    query = prompt(state, SEARCH_PROMPT, callbacks, IncrementalSearch())
    if query is None:
        state.cx, state.cy, state.coloff, state.rowoff = saved
        return
    logger.debug("search accepted at row %d for %r", state.cy, query)
