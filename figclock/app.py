"""Wires the configuration, renderer, terminal session and event loop together."""

from typing import Optional

import colorama

from . import fonts
from .clock import Clock
from .config import ClockConfig
from .events import EventLoop, RenderState
from .glyphs import GlyphRenderer, create_renderer
from .log import get_logger
from .render import RenderPipeline, Screen
from .terminal import TerminalSession

logger = get_logger("app")


def initial_font_index(config: ClockConfig) -> int:
    if config.random_font:
        return fonts.random_font_index()
    return fonts.font_index(config.font)


def run(config: ClockConfig, renderer: Optional[GlyphRenderer] = None):
    """Show the clock until Escape is pressed."""
    colorama.just_fix_windows_console()
    renderer = renderer or create_renderer(config.renderer)
    font = initial_font_index(config)
    logger.info("starting with font %s", fonts.FONTS[font])

    with TerminalSession() as session:
        state = RenderState(session.dimensions, font_index=font)
        pipeline = RenderPipeline(config, renderer, Screen(session.stdout))
        EventLoop(pipeline, session, state, Clock.started()).run()
