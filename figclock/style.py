"""Foreground/background styling of rendered lines."""

from dataclasses import dataclass
from typing import Optional, Tuple

from rich.color import Color
from rich.segment import Segment
from rich.style import Style

from .errors import InvalidColorFormat

RGB = Tuple[int, int, int]


def parse_rgb(value: str) -> RGB:
    """Parse an 'r,g,b' string such as '255,128,0'."""
    parts = value.split(",")
    if len(parts) != 3:
        raise InvalidColorFormat(value)
    try:
        r, g, b = (int(part.strip()) for part in parts)
    except ValueError as e:
        raise InvalidColorFormat(value) from e
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise InvalidColorFormat(value)
    return r, g, b


@dataclass(frozen=True)
class StyleSpec:
    foreground: Optional[RGB] = None
    background: Optional[RGB] = None

    def to_style(self) -> Optional[Style]:
        """The rich Style for these colors, or None when neither is set."""
        fg, bg = self.foreground, self.background
        if fg is not None and bg is not None:
            return Style(color=Color.from_rgb(*fg), bgcolor=Color.from_rgb(*bg))
        if fg is not None:
            return Style(color=Color.from_rgb(*fg))
        if bg is not None:
            return Style(bgcolor=Color.from_rgb(*bg))
        return None


def compose(line: str, spec: StyleSpec) -> Segment:
    """Attach the session style to a whole line."""
    return Segment(line, spec.to_style())
