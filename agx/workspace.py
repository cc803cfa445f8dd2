"""A named group of panes with one of them focused."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from agx.input import KeyEvent
from agx.split import SplitDirection


class Pane(Protocol):
    """What a workspace needs from a pane."""

    def poll(self) -> Any: ...

    def send_key(self, key: KeyEvent) -> Any: ...


@dataclass
class Workspace:
    """Panes shown together, split in one direction, with a focused pane."""

    name: str
    split: SplitDirection = SplitDirection.VERTICAL
    panes: list[Pane] = field(default_factory=list)
    focused: int = 0

    def poll(self) -> None:
        """Let every pane take in its pending output."""
        for pane in self.panes:
            pane.poll()

    def add_pane(self, pane: Pane) -> None:
        """Append a pane and focus it."""
        self.panes.append(pane)
        self.focused = len(self.panes) - 1

    def close_focused_pane(self) -> None:
        """Remove the focused pane, keeping the focus within range."""
        if not self.panes:
            return
        del self.panes[self.focused]
        if not self.panes:
            self.focused = 0
        elif self.focused >= len(self.panes):
            self.focused = len(self.panes) - 1

    def focus_prev(self) -> None:
        """Move the focus one pane back, stopping at the first."""
        if self.focused > 0:
            self.focused -= 1

    def focus_next(self) -> None:
        """Move the focus one pane on, stopping at the last."""
        if self.focused + 1 < len(self.panes):
            self.focused += 1

    def send_key_to_focused(self, key: KeyEvent) -> None:
        """Pass a key press to the focused pane, if there is one."""
        if 0 <= self.focused < len(self.panes):
            self.panes[self.focused].send_key(key)

    def is_empty(self) -> bool:
        """Whether the workspace has no panes."""
        return not self.panes