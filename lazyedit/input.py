"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Escape sequences get a short lookahead; anything unrecognized or cut short
becomes a bare ``ESC`` and no bytes are carried over to the next call.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25

_BRACKET_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}
_O_FINAL_KEYS = {
    b"H": "HOME",
    b"F": "END",
}
_PUNCTUATION_CONTROL_KEYS = {
    0x00: "CTRL_AT",
    0x1C: "CTRL_BACKSLASH",
    0x1D: "CTRL_RIGHT_BRACKET",
    0x1E: "CTRL_CARET",
    0x1F: "CTRL_UNDERSCORE",
}
_TILDE_DIGIT_KEYS = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _control_key(ch: bytes) -> str | None:
    code = ch[0]
    if ch in {b"\r", b"\n"}:
        return "ENTER"
    if ch == b"\t":
        return None
    if code == 0x7F:
        return "BACKSPACE"
    if 1 <= code <= 26:
        return f"CTRL_{chr(code + 64)}"
    return _PUNCTUATION_CONTROL_KEYS.get(code)


def _read_escape_sequence(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return "ESC"
    if seq == b"O":
        return _O_FINAL_KEYS.get(final, "ESC")
    if seq != b"[":
        return "ESC"
    if final.isdigit():
        tilde = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if tilde != b"~":
            return "ESC"
        return _TILDE_DIGIT_KEYS.get(final, "ESC")
    return _BRACKET_FINAL_KEYS.get(final, "ESC")


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read and decode one key from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses before a byte arrives.
    ``OSError`` from the underlying read propagates and a closed stream
    raises ``EOFError``.
    """
    if timeout_ms is not None:
        ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
        if not ready:
            return ""

    ch = os.read(fd, 1)
    if not ch:
        raise EOFError("input stream closed")

    if ch == b"\x1b":
        return _read_escape_sequence(fd)

    control = _control_key(ch)
    if control is not None:
        return control
    # latin-1 keeps one character per byte.
    return ch.decode("latin-1")


def is_printable_ascii(key: str) -> bool:
    return len(key) == 1 and 32 <= ord(key) < 127


def is_insertable(key: str) -> bool:
    """Tab and non-control bytes go into the document; control bytes never do."""
    if len(key) != 1:
        return False
    code = ord(key)
    return key == "\t" or (code >= 32 and code != 0x7F)
