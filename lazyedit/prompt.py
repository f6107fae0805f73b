"""Modal single-line input shown in the message bar."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .input import is_printable_ascii
from .state import EditorState

ERASE_KEYS = frozenset({"BACKSPACE", "DELETE", "CTRL_H"})


@dataclass(frozen=True)
class ScreenCallbacks:
    """Blocking key source and repaint hook shared by the loop and prompts."""

    read_key: Callable[[], str]
    refresh_screen: Callable[[], None]


class PromptListener:
    """Per-keystroke hook for ``prompt``; the base class ignores every key."""

    def on_key(self, state: EditorState, text: str, key: str) -> None:
        return None


NO_LISTENER = PromptListener()


def prompt(
    state: EditorState,
    template: str,
    callbacks: ScreenCallbacks,
    listener: PromptListener = NO_LISTENER,
) -> str | None:
    """Collect a line of input; ``template`` holds one ``{}`` for the text.

    Enter returns the text once it is non-empty; Escape returns ``None``.
    ``listener`` sees every key, the confirming and cancelling ones included.
    """
    buf: list[str] = []
    while True:
        text = "".join(buf)
        state.set_status_message(template.format(text))
        callbacks.refresh_screen()

        key = callbacks.read_key()
        if key in ERASE_KEYS:
            if buf:
                buf.pop()
        elif key == "ESC":
            state.set_status_message("")
            listener.on_key(state, text, key)
            return None
        elif key == "ENTER":
            if buf:
                state.set_status_message("")
                listener.on_key(state, text, key)
                return text
        elif is_printable_ascii(key):
            buf.append(key)

        listener.on_key(state, "".join(buf), key)
