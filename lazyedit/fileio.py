"""Loading and saving the document.

Reads split on ``\\n`` with trailing ``\\r`` removed; saves write the
serialized rows in one go. Save failures become status messages and leave
the document dirty.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .prompt import ScreenCallbacks, prompt
from .state import EditorState

logger = logging.getLogger(__name__)

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def read_lines(path: Path) -> list[bytes]:
    """Return the lines of ``path`` without their line terminators."""
    data = path.read_bytes()
    if not data:
        return []
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line.rstrip(b"\r\n") for line in lines]


def open_file(state: EditorState, path: Path) -> None:
    """Load ``path`` into the document; a missing file starts empty."""
    state.filename = path
    try:
        lines = read_lines(path)
    except FileNotFoundError:
        logger.info("opening new file %s", path)
        state.document.load_lines([])
        return
    state.document.load_lines(lines)
    logger.info("loaded %s (%d lines)", path, len(lines))


def write_text(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path``, truncating to its exact length."""
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        os.ftruncate(fd, len(data))
        written = os.write(fd, data)
    finally:
        os.close(fd)
    if written != len(data):
        raise OSError(f"short write ({written} of {len(data)} bytes)")
    return written


def save_file(state: EditorState, callbacks: ScreenCallbacks) -> bool:
    """Save to the current filename, asking for one first if needed."""
    if state.filename is None:
        name = prompt(state, SAVE_AS_PROMPT, callbacks)
        if name is None:
            state.set_status_message("Save aborted")
            return False
        state.filename = Path(name)

    data = state.document.rows_to_text()
    try:
        written = write_text(state.filename, data)
    except OSError as exc:
        logger.warning("save to %s failed: %s", state.filename, exc)
        reason = exc.strerror or str(exc)
        state.set_status_message(f"Can't save! I/O error: {reason}")
        return False

    state.document.dirty = 0
    state.set_status_message(f"{written} bytes written to disk")
    logger.info("saved %s (%d bytes)", state.filename, written)
    return True
