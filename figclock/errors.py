"""Exceptions raised by figclock. Every one of them is fatal."""


class FigClockError(Exception):
    """Base class for all figclock errors."""


class RenderBackendFailure(FigClockError):
    """The glyph renderer could not produce a text block."""


class InvalidColorFormat(FigClockError, ValueError):
    """A color string did not parse into three 0-255 components."""

    def __init__(self, value: str):
        super().__init__(f"invalid color {value!r}, expected 'r,g,b' with values 0-255")
        self.value = value


class TerminalIOFailure(FigClockError):
    """Writing to or querying the terminal failed."""


class InputPollFailure(FigClockError):
    """Polling or reading terminal input failed."""
