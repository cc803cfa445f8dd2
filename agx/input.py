"""Key events, the prefix key binding and routing of keys to panes or commands."""

from __future__ import annotations

import string
import time
from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import ClassVar

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


class KeyCode(Enum):
    """Non-character keys. Character keys are one-character strings."""

    ENTER = auto()
    BACKSPACE = auto()
    TAB = auto()
    BACKTAB = auto()
    ESC = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()
    INSERT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()


class KeyModifiers(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8


Key = KeyCode | str


@dataclass(frozen=True)
class KeyEvent:
    """A key press: a KeyCode or a single character, plus modifiers."""

    code: Key
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if isinstance(self.code, str) and len(self.code) != 1:
            raise ValueError(f"character key must be one character, got {self.code!r}")


_MODIFIER_NAMES = {
    "ctrl": KeyModifiers.CONTROL,
    "control": KeyModifiers.CONTROL,
    "alt": KeyModifiers.ALT,
    "shift": KeyModifiers.SHIFT,
    "super": KeyModifiers.SUPER,
    "cmd": KeyModifiers.SUPER,
    "command": KeyModifiers.SUPER,
    "meta": KeyModifiers.SUPER,
}

_NAMED_KEYS: dict[str, Key] = {
    "enter": KeyCode.ENTER,
    "esc": KeyCode.ESC,
    "escape": KeyCode.ESC,
    "tab": KeyCode.TAB,
    "space": " ",
}


def parse_key_code(token: str) -> Key:
    """Parse the key part of a binding such as ``a``, ``Enter`` or ``space``."""
    lower = _ascii_lower(token)
    named = _NAMED_KEYS.get(lower)
    if named is not None:
        return named
    if len(lower) == 1:
        return lower
    raise ValueError(f"unsupported key `{token}` in prefix binding")


@dataclass(frozen=True)
class KeyBinding:
    """A parsed key combination such as ``Ctrl-a``."""

    raw: str
    modifiers: KeyModifiers
    code: Key

    @classmethod
    def parse(cls, value: str) -> KeyBinding:
        """Parse ``Mod-Mod-key``; raise ValueError on anything unsupported."""
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("prefix key cannot be empty")

        tokens = [part.strip() for part in trimmed.split("-")]
        tokens = [part for part in tokens if part]
        if not tokens:
            raise ValueError(f"invalid prefix key `{trimmed}`")

        *modifier_tokens, key_token = tokens
        modifiers = KeyModifiers.NONE
        for token in modifier_tokens:
            name = _ascii_lower(token)
            try:
                modifiers |= _MODIFIER_NAMES[name]
            except KeyError:
                raise ValueError(
                    f"unsupported modifier `{name}` in prefix key `{trimmed}`"
                ) from None

        return cls(raw=trimmed, modifiers=modifiers, code=parse_key_code(key_token))

    def matches(self, key: KeyEvent) -> bool:
        """Whether a key event is this binding; characters compare case-blind."""
        if key.modifiers != self.modifiers:
            return False
        if isinstance(self.code, str) and isinstance(key.code, str):
            return _ascii_lower(self.code) == _ascii_lower(key.code)
        return self.code == key.code


@dataclass(frozen=True)
class PrefixCommand:
    """A command given after the prefix key."""

    name: str
    workspace: int | None = None

    FOCUS_PREV: ClassVar[PrefixCommand]
    FOCUS_NEXT: ClassVar[PrefixCommand]
    NEW_PANE: ClassVar[PrefixCommand]
    CLOSE_PANE: ClassVar[PrefixCommand]
    NEW_WORKSPACE: ClassVar[PrefixCommand]
    QUIT: ClassVar[PrefixCommand]

    @classmethod
    def switch_workspace(cls, index: int) -> PrefixCommand:
        """Switch to the workspace at a zero-based index."""
        return cls("switch_workspace", index)


PrefixCommand.FOCUS_PREV = PrefixCommand("focus_prev")
PrefixCommand.FOCUS_NEXT = PrefixCommand("focus_next")
PrefixCommand.NEW_PANE = PrefixCommand("new_pane")
PrefixCommand.CLOSE_PANE = PrefixCommand("close_pane")
PrefixCommand.NEW_WORKSPACE = PrefixCommand("new_workspace")
PrefixCommand.QUIT = PrefixCommand("quit")


@dataclass(frozen=True)
class InputAction:
    """What to do with a key press."""

    name: str
    key: KeyEvent | None = None
    command: PrefixCommand | None = None

    ENTER_PREFIX_MODE: ClassVar[InputAction]
    PREFIX_TIMED_OUT: ClassVar[InputAction]
    NOOP: ClassVar[InputAction]

    @classmethod
    def forward_to_pty(cls, key: KeyEvent) -> InputAction:
        """Send the key to the focused pane."""
        return cls("forward_to_pty", key=key)

    @classmethod
    def prefix_command(cls, command: PrefixCommand) -> InputAction:
        """Run a prefix command."""
        return cls("prefix_command", command=command)


InputAction.ENTER_PREFIX_MODE = InputAction("enter_prefix_mode")
InputAction.PREFIX_TIMED_OUT = InputAction("prefix_timed_out")
InputAction.NOOP = InputAction("noop")

_PREFIX_CHARS = {
    "n": PrefixCommand.NEW_PANE,
    "x": PrefixCommand.CLOSE_PANE,
    "c": PrefixCommand.NEW_WORKSPACE,
    "q": PrefixCommand.QUIT,
}


def map_prefix_key(key: KeyEvent) -> InputAction:
    """Turn the key pressed after the prefix into an action."""
    code = key.code
    if code in (KeyCode.LEFT, KeyCode.UP):
        return InputAction.prefix_command(PrefixCommand.FOCUS_PREV)
    if code in (KeyCode.RIGHT, KeyCode.DOWN):
        return InputAction.prefix_command(PrefixCommand.FOCUS_NEXT)
    if isinstance(code, str):
        char = _ascii_lower(code)
        command = _PREFIX_CHARS.get(char)
        if command is not None:
            return InputAction.prefix_command(command)
        if "1" <= char <= "9":
            return InputAction.prefix_command(
                PrefixCommand.switch_workspace(ord(char) - ord("1"))
            )
    return InputAction.NOOP


class PrefixRouter:
    """Routes keys to the pane, or to commands once the prefix key is pressed."""

    def __init__(self, binding: KeyBinding, timeout: float = 2.0) -> None:
        self.binding = binding
        self.timeout = timeout
        self._prefix_started_at: float | None = None

    def route_key(self, key: KeyEvent, now: float | None = None) -> InputAction:
        """Decide what a key press does; ``now`` is a monotonic time in seconds."""
        if now is None:
            now = time.monotonic()
        self.expire(now)

        if self.binding.matches(key):
            self._prefix_started_at = now
            return InputAction.ENTER_PREFIX_MODE

        if self.is_prefix_active():
            self._prefix_started_at = None
            return map_prefix_key(key)

        return InputAction.forward_to_pty(key)

    def expire(self, now: float | None = None) -> InputAction | None:
        """Leave prefix mode if it has lasted the timeout or longer."""
        if now is None:
            now = time.monotonic()
        started = self._prefix_started_at
        if started is not None and now - started >= self.timeout:
            self._prefix_started_at = None
            return InputAction.PREFIX_TIMED_OUT
        return None

    def is_prefix_active(self) -> bool:
        """Whether the prefix key was pressed and is waiting for a command."""
        return self._prefix_started_at is not None

    def binding_label(self) -> str:
        """The prefix binding as written in the configuration."""
        return self.binding.raw