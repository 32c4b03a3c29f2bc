"""
Render pipeline: glyph blocks -> positioned, styled lines -> one flush.
"""

import sys
from typing import List, TextIO

from colorama import Cursor, ansi
from rich.segment import Segment

from .errors import TerminalIOFailure
from .glyphs import GlyphRenderer, TextBlock
from .layout import Alignment, clock_alignment, compute_offset
from .style import compose

# Trailing spaces written after every line so a shorter frame fully covers a longer one
PADDING = 10


def is_blank(line: str) -> bool:
    """True for lines made only of spaces, including empty ones."""
    return all(c == " " for c in line)


def trim_and_pad(block: TextBlock, padding: int = PADDING) -> TextBlock:
    """Drop blank lines and give every remaining line the same trailing padding."""
    return TextBlock(
        line.rstrip(" ") + " " * padding
        for line in block.lines
        if not is_blank(line)
    )


class Screen:
    """Queues cursor moves and text, then writes them to the terminal at once."""

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout
        self._pending: List[str] = []

    def move_to(self, x: int, y: int):
        # ANSI positions are 1-based
        self._pending.append(Cursor.POS(x + 1, y + 1))

    def clear(self):
        self._pending.append(ansi.clear_screen())

    def write(self, segment: Segment):
        text, style = segment.text, segment.style
        self._pending.append(style.render(text) if style else text)

    def flush(self):
        data = "".join(self._pending)
        self._pending.clear()
        try:
            self.stream.write(data)
            self.stream.flush()
        except (OSError, UnicodeError) as e:
            raise TerminalIOFailure(f"could not write to terminal: {e}") from e


class RenderPipeline:
    """Draws the message block and the clock block for one frame."""

    def __init__(self, config, renderer: GlyphRenderer, screen: Screen):
        self.config = config
        self.renderer = renderer
        self.screen = screen

    def render_frame(self, state, clock):
        self.draw_block(self.config.message, self.config.alignment, state)
        self.draw_block(clock.display(), clock_alignment(self.config.alignment), state)
        self.screen.flush()

    def draw_block(self, text: str, align: Alignment, state):
        width, height = state.dimensions.width, state.dimensions.height
        block = trim_and_pad(self.renderer.render(text, state.font, width))
        y = compute_offset(align, height, block.height)
        for row, line in enumerate(block.lines):
            if y + row >= height:
                break
            self.screen.move_to(0, y + row)
            # Writing past the last column would wrap and could scroll the screen
            self.screen.write(compose(line[:width], self.config.style))
