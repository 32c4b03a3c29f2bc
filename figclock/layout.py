"""Vertical placement of text blocks inside the terminal."""

from dataclasses import dataclass
from enum import Enum

from .log import get_logger

logger = get_logger("layout")


class Alignment(Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: str) -> "Alignment":
        """Parse 'top', 'center' or 'bottom' (case-insensitive)."""
        return cls(value.strip().lower())


@dataclass
class Dimensions:
    """Terminal size in character cells."""
    width: int
    height: int

    def __post_init__(self):
        # Some terminals report 0x0 while attaching
        self.width = max(1, self.width)
        self.height = max(1, self.height)


# The clock never shares the message's alignment, so the two blocks don't overlap
_CLOCK_ALIGNMENT = {
    Alignment.TOP: Alignment.CENTER,
    Alignment.BOTTOM: Alignment.CENTER,
    Alignment.CENTER: Alignment.TOP,
}


def clock_alignment(message_alignment: Alignment) -> Alignment:
    """Return the alignment of the clock block for a given message alignment."""
    return _CLOCK_ALIGNMENT[message_alignment]


def compute_offset(align: Alignment, container_height: int, content_height: int) -> int:
    """Row at which a block of content_height lines starts.

    Content taller than the container would give a negative row; it is
    clamped to 0 so the top of the block stays visible.
    """
    if align is Alignment.TOP:
        y = 0
    elif align is Alignment.CENTER:
        y = container_height // 2 - content_height // 2
    else:
        y = container_height - content_height

    if y < 0:
        logger.debug(
            "block of %d lines does not fit in %d rows (%s), clamping offset to 0",
            content_height, container_height, align.value,
        )
        return 0
    return y
