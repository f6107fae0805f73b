"""Editing operation tests: insert, split, merge, and serialization."""

from __future__ import annotations

import unittest

from lazyedit.editing import delete_char, insert_char, insert_newline
from lazyedit.state import EditorState


def _state(*lines: bytes) -> EditorState:
    state = EditorState.create(12, 40)
    state.document.load_lines(lines)
    return state


def _contents(state: EditorState) -> list[bytes]:
    return [bytes(row.content) for row in state.document.rows]


class InsertCharTests(unittest.TestCase):
    def test_insert_into_empty_document_creates_row(self) -> None:
        state = _state()
        insert_char(state, "a")
        self.assertEqual(_contents(state), [b"a"])
        self.assertEqual((state.cx, state.cy), (1, 0))
        self.assertTrue(state.document.dirty)

    def test_insert_on_virtual_last_line_appends_row(self) -> None:
        state = _state(b"one")
        state.cy = 1
        insert_char(state, "x")
        self.assertEqual(_contents(state), [b"one", b"x"])

    def test_insert_then_delete_is_identity(self) -> None:
        state = _state(b"hello")
        state.cx = 2
        insert_char(state, "Z")
        delete_char(state)
        self.assertEqual(_contents(state), [b"hello"])
        self.assertEqual(state.cx, 2)

    def test_insert_tab_updates_render(self) -> None:
        state = _state(b"ab")
        state.cx = 1
        insert_char(state, "\t")
        self.assertEqual(state.document.rows[0].render, b"a       b")


class NewlineTests(unittest.TestCase):
    def test_newline_at_column_zero_inserts_row_above(self) -> None:
        state = _state(b"one", b"two")
        state.cy = 1
        insert_newline(state)
        self.assertEqual(_contents(state), [b"one", b"", b"two"])
        self.assertEqual((state.cx, state.cy), (0, 2))

    def test_newline_mid_row_splits(self) -> None:
        state = _state(b"abcdef")
        state.cx = 2
        insert_newline(state)
        self.assertEqual(_contents(state), [b"ab", b"cdef"])
        self.assertEqual((state.cx, state.cy), (0, 1))

    def test_split_then_merge_restores_row(self) -> None:
        state = _state(b"first", b"a\tbc", b"last")
        state.cy, state.cx = 1, 2
        insert_newline(state)
        delete_char(state)
        self.assertEqual(_contents(state), [b"first", b"a\tbc", b"last"])
        self.assertEqual((state.cx, state.cy), (2, 1))
        self.assertEqual(state.document.rows[1].render, b"a       bc")


class DeleteCharTests(unittest.TestCase):
    def test_delete_at_document_start_is_noop(self) -> None:
        state = _state(b"abc")
        delete_char(state)
        self.assertEqual(_contents(state), [b"abc"])
        self.assertEqual(state.document.dirty, 0)

    def test_delete_past_last_row_is_noop(self) -> None:
        state = _state(b"abc")
        state.cy = 1
        delete_char(state)
        self.assertEqual(_contents(state), [b"abc"])
        self.assertEqual(state.document.dirty, 0)

    def test_delete_at_line_start_merges_into_previous(self) -> None:
        state = _state(b"foo", b"bar")
        state.cy = 1
        delete_char(state)
        self.assertEqual(_contents(state), [b"foobar"])
        self.assertEqual((state.cx, state.cy), (3, 0))


class RowsToTextTests(unittest.TestCase):
    def test_newline_and_typing_serialize(self) -> None:
        state = _state(b"line one", b"line two")
        state.cx = len(b"line one")
        insert_newline(state)
        insert_char(state, "X")
        self.assertEqual(state.document.rows_to_text(), b"line one\nX\nline two\n")


if __name__ == "__main__":
    unittest.main()
