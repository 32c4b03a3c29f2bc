"""
Glyph renderers: turn a string into a block of ASCII-art lines.

Two backends are provided, the external `figlet` program and the embedded
pyfiglet font tables. The rest of figclock only sees GlyphRenderer.
"""

import shutil
import subprocess
from typing import List, Sequence

import pyfiglet

from .errors import RenderBackendFailure
from .log import get_logger

logger = get_logger("glyphs")

BACKENDS = ("auto", "figlet", "pyfiglet")


class TextBlock:
    """Ordered lines of rendered glyphs."""

    def __init__(self, lines: Sequence[str]):
        self.lines: List[str] = list(lines)

    @classmethod
    def from_text(cls, text: str) -> "TextBlock":
        return cls(text.splitlines())

    @property
    def height(self) -> int:
        return len(self.lines)

    @property
    def width(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    def __eq__(self, other):
        return isinstance(other, TextBlock) and self.lines == other.lines

    def __repr__(self):
        return f"TextBlock({self.lines!r})"


class GlyphRenderer:
    """Interface: render(text, font, width) -> TextBlock.

    Implementations raise RenderBackendFailure on any failure.
    """

    name = "base"

    def render(self, text: str, font: str, width: int) -> TextBlock:
        raise NotImplementedError


class FigletProcessRenderer(GlyphRenderer):
    """Runs `figlet -f FONT -w WIDTH -c TEXT`."""

    name = "figlet"

    def __init__(self, executable: str = "figlet"):
        self.executable = executable

    def render(self, text: str, font: str, width: int) -> TextBlock:
        cmd = [self.executable, "-f", font, "-w", str(width), "-c", text]
        try:
            result = subprocess.run(cmd, capture_output=True, check=True)
        except FileNotFoundError as e:
            raise RenderBackendFailure(f"{self.executable} not found") from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace").strip()
            raise RenderBackendFailure(
                f"{self.executable} exited with status {e.returncode}: {stderr}"
            ) from e
        except OSError as e:
            raise RenderBackendFailure(f"could not run {self.executable}: {e}") from e

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RenderBackendFailure(f"{self.executable} produced non UTF-8 output") from e
        return TextBlock.from_text(output)


class PyfigletRenderer(GlyphRenderer):
    """Renders with pyfiglet's bundled font tables."""

    name = "pyfiglet"

    def render(self, text: str, font: str, width: int) -> TextBlock:
        try:
            figlet = pyfiglet.Figlet(font=font, width=width, justify="center")
            output = figlet.renderText(text)
        except pyfiglet.FontNotFound as e:
            raise RenderBackendFailure(f"font {font!r} is not available to pyfiglet") from e
        except pyfiglet.FigletError as e:
            raise RenderBackendFailure(f"pyfiglet could not render {text!r}: {e}") from e
        return TextBlock.from_text(output)


def create_renderer(backend: str = "auto") -> GlyphRenderer:
    """Build the renderer for a backend name from BACKENDS."""
    if backend == "auto":
        backend = "figlet" if shutil.which("figlet") else "pyfiglet"
    if backend == "figlet":
        renderer = FigletProcessRenderer()
    elif backend == "pyfiglet":
        renderer = PyfigletRenderer()
    else:
        raise ValueError(f"unknown renderer backend {backend!r}")
    logger.info("using %s glyph renderer", renderer.name)
    return renderer
