"""Pane descriptions and encoding of key presses as terminal input bytes."""

from __future__ import annotations

from dataclasses import dataclass

from agx.colors import Color
from agx.input import KeyCode, KeyEvent, KeyModifiers


@dataclass
class PaneSpec:
    """What a pane runs and how it is shown."""

    label: str
    command: str
    detect_idle: str | None = None
    accent_color: Color | None = None


_KEY_BYTES = {
    KeyCode.ENTER: b"\r",
    KeyCode.BACKSPACE: b"\x7f",
    KeyCode.TAB: b"\t",
    KeyCode.BACKTAB: b"\x1b[Z",
    KeyCode.ESC: b"\x1b",
    KeyCode.UP: b"\x1b[A",
    KeyCode.DOWN: b"\x1b[B",
    KeyCode.RIGHT: b"\x1b[C",
    KeyCode.LEFT: b"\x1b[D",
    KeyCode.HOME: b"\x1b[H",
    KeyCode.END: b"\x1b[F",
    KeyCode.DELETE: b"\x1b[3~",
    KeyCode.INSERT: b"\x1b[2~",
    KeyCode.PAGE_UP: b"\x1b[5~",
    KeyCode.PAGE_DOWN: b"\x1b[6~",
}


def encode_key(key: KeyEvent) -> bytes:
    """The bytes a terminal sends for a key press; empty if it has none."""
    code = key.code
    if isinstance(code, str):
        if KeyModifiers.CONTROL in key.modifiers:
            if not code.isascii():
                return b""
            return bytes([ord(code.lower()) & 0x1F])
        return code.encode("utf-8")
    return _KEY_BYTES.get(code, b"")