"""Document rows and tab-aware render mapping.

Each row keeps its raw bytes plus a tab-expanded render form. All content
mutation goes through ``Row``/``Document`` methods so the render form is
rebuilt before any caller can observe it.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_TAB_STOP = 8
_TAB = 0x09


def expand_tabs(content: bytes, tab_stop: int = DEFAULT_TAB_STOP) -> bytes:
    """Return ``content`` with tabs padded with spaces to the next tab stop."""
    out = bytearray()
    for byte in content:
        if byte == _TAB:
            out.append(0x20)
            while len(out) % tab_stop != 0:
                out.append(0x20)
        else:
            out.append(byte)
    return bytes(out)


class Row:
    """One document line."""

    __slots__ = ("content", "render", "tab_stop")

    def __init__(self, content: bytes = b"", tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.content = bytearray(content)
        self.tab_stop = tab_stop
        self.render = b""
        self.update_render()

    def __len__(self) -> int:
        return len(self.content)

    def __repr__(self) -> str:
        return f"Row({bytes(self.content)!r})"

    def update_render(self) -> None:
        self.render = expand_tabs(self.content, self.tab_stop)

    def cursor_to_render(self, cx: int) -> int:
        """Map a byte offset in ``content`` to a column in ``render``."""
        rx = 0
        for byte in self.content[:cx]:
            if byte == _TAB:
                rx += (self.tab_stop - 1) - (rx % self.tab_stop)
            rx += 1
        return rx

    def render_to_cursor(self, rx: int) -> int:
        """Map a render column back to the byte offset that produces it.

        Columns inside a tab's expansion map to the tab itself; columns past
        the rendered width map to the end of the row.
        """
        cur_rx = 0
        for cx, byte in enumerate(self.content):
            if byte == _TAB:
                cur_rx += (self.tab_stop - 1) - (cur_rx % self.tab_stop)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self.content)

    def insert_char(self, at: int, byte: int) -> None:
        at = max(0, min(at, len(self.content)))
        self.content.insert(at, byte)
        self.update_render()

    def delete_char(self, at: int) -> bool:
        if at < 0 or at >= len(self.content):
            return False
        del self.content[at]
        self.update_render()
        return True

    def append(self, data: bytes) -> None:
        self.content.extend(data)
        self.update_render()

    def truncate(self, length: int) -> bytes:
        """Cut the row at ``length`` and return the removed tail."""
        tail = bytes(self.content[length:])
        del self.content[length:]
        self.update_render()
        return tail


class Document:
    """Ordered rows plus a modification counter.

    ``dirty`` counts mutations since the last load or save; any non-zero value
    means there are unsaved edits.
    """

    def __init__(self, tab_stop: int = DEFAULT_TAB_STOP) -> None:
        self.rows: list[Row] = []
        self.dirty = 0
        self.tab_stop = tab_stop

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def load_lines(self, lines: Iterable[bytes]) -> None:
        """Replace all rows with ``lines`` and mark the document clean."""
        self.rows = [Row(line, self.tab_stop) for line in lines]
        self.dirty = 0

    def insert_row(self, at: int, content: bytes = b"") -> Row | None:
        if at < 0 or at > len(self.rows):
            return None
        row = Row(content, self.tab_stop)
        self.rows.insert(at, row)
        self.dirty += 1
        return row

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    def row_insert_char(self, row: Row, at: int, byte: int) -> None:
        row.insert_char(at, byte)
        self.dirty += 1

    def row_delete_char(self, row: Row, at: int) -> None:
        if row.delete_char(at):
            self.dirty += 1

    def row_append(self, row: Row, data: bytes) -> None:
        row.append(data)
        self.dirty += 1

    def split_row(self, at: int, cx: int) -> None:
        """Move the tail of row ``at`` starting at ``cx`` into a new next row."""
        tail = self.rows[at].truncate(cx)
        self.insert_row(at + 1, tail)

    def merge_with_previous(self, at: int) -> int:
        """Append row ``at`` to the row above it, delete it, and return the join column."""
        prev = self.rows[at - 1]
        join_at = len(prev)
        self.row_append(prev, bytes(self.rows[at].content))
        self.delete_row(at)
        return join_at

    def rows_to_text(self) -> bytes:
        """Serialize every row followed by a newline, the last one included."""
        return b"".join(bytes(row.content) + b"\n" for row in self.rows)
