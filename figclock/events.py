"""
Event loop: a two-state machine (RUNNING -> STOPPED) fed by terminal events.

The loop blocks in poll() for at most POLL_TIMEOUT seconds, applies whatever
event arrived, and redraws. With no input that gives one frame per second.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Optional, Union

from . import fonts
from .layout import Dimensions
from .log import get_logger

logger = get_logger("events")

POLL_TIMEOUT = 1.0


class LoopState(Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class Key:
    ESCAPE = "escape"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    modifiers: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


@dataclass
class RenderState:
    """Everything that changes while the clock is on screen."""
    dimensions: Dimensions
    font_index: int = 0
    loop_state: LoopState = field(default=LoopState.RUNNING)

    @property
    def running(self) -> bool:
        return self.loop_state is LoopState.RUNNING

    @property
    def font(self) -> str:
        return fonts.FONTS[self.font_index]


# Unmodified keys that do something; everything else is ignored
_FONT_STEPS = {Key.UP: 1, Key.DOWN: -1}


class EventLoop:
    def __init__(self, pipeline, source, state: RenderState, clock, poll_timeout: float = POLL_TIMEOUT):
        self.pipeline = pipeline
        self.source = source
        self.state = state
        self.clock = clock
        self.poll_timeout = poll_timeout

    def handle(self, event: Optional[Event]):
        """Apply one event (or a poll timeout, None) to the render state."""
        if isinstance(event, ResizeEvent):
            self.state.dimensions = Dimensions(event.width, event.height)
            logger.info("terminal resized to %dx%d", event.width, event.height)
            # The old layout is invalid everywhere, not just where the new frame draws
            self.pipeline.screen.clear()
        elif isinstance(event, KeyEvent) and not event.modifiers:
            if event.key == Key.ESCAPE:
                self.state.loop_state = LoopState.STOPPED
                logger.info("quit requested")
            elif event.key in _FONT_STEPS:
                self.state.font_index = fonts.cycle(self.state.font_index, _FONT_STEPS[event.key])
                logger.info("font changed to %s", self.state.font)
                self.pipeline.screen.clear()

    def step(self):
        """One iteration: wait for input, apply it, redraw unless stopped."""
        event = self.source.poll(self.poll_timeout)
        self.handle(event)
        if self.state.running:
            self.pipeline.render_frame(self.state, self.clock)

    def run(self):
        """Draw the first frame, then step until Escape stops the loop."""
        self.pipeline.render_frame(self.state, self.clock)
        while self.state.running:
            self.step()
