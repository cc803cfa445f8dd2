"""Direction in which a workspace's panes are laid out."""

from __future__ import annotations

import string
from enum import Enum

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class SplitDirection(Enum):
    """How panes share the screen: side by side or stacked."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @classmethod
    def from_config_value(cls, value: str) -> SplitDirection | None:
        """Parse a configuration value, ignoring case and surrounding space."""
        normalized = value.strip().translate(_ASCII_LOWER)
        try:
            return cls(normalized)
        except ValueError:
            return None