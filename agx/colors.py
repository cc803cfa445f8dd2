"""Terminal colours and parsing of colour names from configuration."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import ClassVar

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_HEX_COLOR = re.compile(r"#([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")


def _check_byte(value: int, what: str) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{what} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named palette entry, an indexed colour or RGB."""

    name: str
    components: tuple[int, ...] = ()

    RESET: ClassVar[Color]
    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    MAGENTA: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    GRAY: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        """A 24-bit colour."""
        for component in (r, g, b):
            _check_byte(component, "colour component")
        return cls("rgb", (r, g, b))

    @classmethod
    def indexed(cls, index: int) -> Color:
        """A colour from the 256-entry terminal palette."""
        _check_byte(index, "palette index")
        return cls("indexed", (index,))


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.WHITE = Color("white")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("darkgray")

_NAMED_COLORS = {
    "black": Color.BLACK,
    "red": Color.RED,
    "green": Color.GREEN,
    "yellow": Color.YELLOW,
    "blue": Color.BLUE,
    "magenta": Color.MAGENTA,
    "cyan": Color.CYAN,
    "white": Color.WHITE,
    "gray": Color.GRAY,
    "grey": Color.GRAY,
    "darkgray": Color.DARK_GRAY,
    "dark-gray": Color.DARK_GRAY,
    "dark_grey": Color.DARK_GRAY,
    "darkgrey": Color.DARK_GRAY,
}


def parse_color(value: str) -> Color:
    """Parse a colour name or a ``#rrggbb`` value; raise ValueError otherwise."""
    lower = value.strip().translate(_ASCII_LOWER)
    named = _NAMED_COLORS.get(lower)
    if named is not None:
        return named

    if lower.startswith("#") and len(lower.encode("utf-8")) == 7:
        match = _HEX_COLOR.fullmatch(lower)
        if match is None:
            raise ValueError(f"invalid hex color `{lower}`")
        r, g, b = (int(part, 16) for part in match.groups())
        return Color.rgb(r, g, b)

    raise ValueError(f"unsupported color `{value}`")