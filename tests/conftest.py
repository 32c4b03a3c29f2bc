import io

import pytest

from figclock.config import ClockConfig
from figclock.events import RenderState
from figclock.glyphs import GlyphRenderer, TextBlock
from figclock.layout import Alignment, Dimensions
from figclock.render import RenderPipeline, Screen


class FakeRenderer(GlyphRenderer):
    """Returns canned blocks and records every call."""

    name = "fake"

    def __init__(self, blocks=None, default=("XX",)):
        self.blocks = blocks or {}
        self.default = default
        self.calls = []

    def render(self, text, font, width):
        self.calls.append((text, font, width))
        return TextBlock(self.blocks.get(text, self.default))


class FakeClock:
    def __init__(self, text="0s"):
        self.text = text

    def display(self):
        return self.text


class FakeSource:
    """Hands out queued events; polling past the end is a test failure."""

    def __init__(self, events):
        self.events = list(events)
        self.timeouts = []

    def poll(self, timeout):
        self.timeouts.append(timeout)
        assert self.events, "polled after the loop should have stopped"
        return self.events.pop(0)


@pytest.fixture
def renderer():
    return FakeRenderer(blocks={"hi": ["AB  ", "", "CD"], "0s": ["12"]})


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def config():
    return ClockConfig(message="hi", alignment=Alignment.TOP)


@pytest.fixture
def pipeline(config, renderer, stream):
    return RenderPipeline(config, renderer, Screen(stream))


@pytest.fixture
def state():
    return RenderState(Dimensions(80, 24))
