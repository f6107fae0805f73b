"""Confirmation counter for quitting with unsaved edits."""

from __future__ import annotations

from .config import DEFAULT_QUIT_TIMES


class QuitGuard:
    """Saturating counter gating quit while the document is dirty.

    A clean document quits on the first request. A dirty one needs
    ``threshold`` consecutive requests; any other key re-arms the counter.
    """

    def __init__(self, threshold: int = DEFAULT_QUIT_TIMES) -> None:
        self.threshold = max(1, threshold)
        self.remaining = self.threshold

    def request_quit(self, dirty: bool) -> bool:
        """Register one quit request and return ``True`` when quit may proceed."""
        if not dirty:
            return True
        self.remaining = max(0, self.remaining - 1)
        return self.remaining == 0

    def reset(self) -> None:
        self.remaining = self.threshold

    def warning(self) -> str:
        return (
            "WARNING!!! File has unsaved changes. "
            f"Press Ctrl-Q {self.remaining} more times to quit."
        )
