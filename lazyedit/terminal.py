"""Terminal control helpers for the editor session.

Owns raw-mode lifecycle and alternate-screen switching, plus the window
size lookup the editor needs once at startup.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

DEFAULT_WINDOW_SIZE = (80, 24)


def get_window_size() -> tuple[int, int]:
    """Return ``(rows, cols)`` of the controlling terminal."""
    size = shutil.get_terminal_size(DEFAULT_WINDOW_SIZE)
    return size.lines, size.columns


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_raw_mode(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_raw_mode(self) -> None:
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket the editing session; the terminal is restored even on errors."""
        try:
            self.enable_raw_mode()
            yield
        finally:
            self.disable_raw_mode()
