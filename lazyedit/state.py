from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from .config import EditorSettings
from .quit_guard import QuitGuard
from .rows import Document, Row

STATUS_BAR_ROWS = 2


@dataclass
class SearchState:
    last_match: int = -1
    direction: int = 1

    def reset(self) -> None:
        self.last_match = -1
        self.direction = 1


@dataclass
class EditorState:
    document: Document
    screenrows: int
    screencols: int
    settings: EditorSettings = field(default_factory=EditorSettings)
    cx: int = 0
    cy: int = 0
    rx: int = 0
    rowoff: int = 0
    coloff: int = 0
    filename: Path | None = None
    status_message: str = ""
    status_message_until: float = 0.0
    search: SearchState = field(default_factory=SearchState)
    quit_guard: QuitGuard = field(default_factory=QuitGuard)

    @classmethod
    def create(
        cls,
        term_rows: int,
        term_cols: int,
        settings: EditorSettings | None = None,
    ) -> EditorState:
        """Build a fresh editor for a terminal of ``term_rows`` x ``term_cols``."""
        settings = settings or EditorSettings()
        return cls(
            document=Document(tab_stop=settings.tab_stop),
            screenrows=max(1, term_rows - STATUS_BAR_ROWS),
            screencols=max(1, term_cols),
            settings=settings,
            quit_guard=QuitGuard(settings.quit_times),
        )

    @property
    def numrows(self) -> int:
        return self.document.numrows

    def current_row(self) -> Row | None:
        if self.cy < self.document.numrows:
            return self.document.rows[self.cy]
        return None

    def set_status_message(self, message: str, now: float | None = None) -> None:
        if now is None:
            now = time.monotonic()
        self.status_message = message
        self.status_message_until = now + self.settings.message_timeout_seconds

    def visible_status_message(self, now: float | None = None) -> str:
        if not self.status_message:
            return ""
        if now is None:
            now = time.monotonic()
        if now >= self.status_message_until:
            return ""
        return self.status_message
