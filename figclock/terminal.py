"""
Terminal session: raw input, hidden cursor and the alternate screen.

TerminalSession is a context manager so the user's terminal is restored
however the program leaves the `with` block. It is also the event source for
the event loop: keys come from stdin, resizes from SIGWINCH through a
self-pipe, both waited on with select().
"""

import os
import select
import signal
import sys
import termios
import tty
from collections import deque
from typing import Deque, List, Optional, TextIO

from rich.control import Control

from .errors import InputPollFailure, TerminalIOFailure
from .events import Event, Key, KeyEvent, ResizeEvent
from .layout import Dimensions
from .log import get_logger

logger = get_logger("terminal")

_SEQUENCES = {
    "\x1b[A": KeyEvent(Key.UP),
    "\x1bOA": KeyEvent(Key.UP),
    "\x1b[B": KeyEvent(Key.DOWN),
    "\x1bOB": KeyEvent(Key.DOWN),
}


def _split_keys(text: str) -> List[str]:
    """Cut the text of one read into single keys."""
    keys = []
    i = 0
    while i < len(text):
        if text[i] != "\x1b" or i + 1 == len(text) or text[i + 1] == "\x1b":
            # A plain character or a lone Escape
            keys.append(text[i])
            i += 1
        elif text[i + 1] in "[O" and i + 2 < len(text):
            # CSI/SS3 sequence: parameters up to a final byte in @..~
            end = i + 2
            while end < len(text) - 1 and not "@" <= text[end] <= "~":
                end += 1
            keys.append(text[i:end + 1])
            i = end + 1
        else:
            keys.append(text[i:i + 2])
            i += 2
    return keys


def _to_event(key: str) -> KeyEvent:
    if key == "\x1b":
        return KeyEvent(Key.ESCAPE)
    if key in _SEQUENCES:
        return _SEQUENCES[key]
    if len(key) == 2 and key[0] == "\x1b":
        return KeyEvent(key[1], frozenset({"alt"}))
    if len(key) == 1 and ord(key) < 32:
        # Ctrl+A..Ctrl+Z arrive as 0x01..0x1a
        return KeyEvent(chr(ord(key) + 96), frozenset({"ctrl"}))
    return KeyEvent(key)


def decode_keys(data: bytes) -> List[KeyEvent]:
    """Translate the bytes of one raw-mode read into key events, in order."""
    text = data.decode("utf-8", errors="replace")
    return [_to_event(key) for key in _split_keys(text)]


class TerminalSession:
    def __init__(self, stdin: TextIO = None, stdout: TextIO = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.dimensions: Optional[Dimensions] = None
        self._saved_attrs = None
        self._prev_sigwinch = None
        self._sigwinch_installed = False
        self._wake_r: Optional[int] = None
        self._wake_w: Optional[int] = None
        self._screen_active = False
        self._pending: Deque[KeyEvent] = deque()

    def __enter__(self) -> "TerminalSession":
        try:
            fd = self.stdin.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setraw(fd)

            self._wake_r, self._wake_w = os.pipe()
            os.set_blocking(self._wake_r, False)
            os.set_blocking(self._wake_w, False)
            self._prev_sigwinch = signal.signal(signal.SIGWINCH, self._on_sigwinch)
            self._sigwinch_installed = True

            self._write(str(Control.show_cursor(False)) + str(Control.alt_screen(True)))
            self._screen_active = True
            self.dimensions = self.query_size()
        except (OSError, termios.error, ValueError) as e:
            self._restore()
            raise TerminalIOFailure(f"could not set up terminal: {e}") from e
        logger.info("session started at %dx%d", self.dimensions.width, self.dimensions.height)
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self._restore()
        except (OSError, termios.error) as e:
            if exc_type is None:
                raise TerminalIOFailure(f"could not restore terminal: {e}") from e
            logger.error("could not restore terminal while handling %s: %s", exc_type.__name__, e)
        logger.info("session ended")
        return False

    def query_size(self) -> Dimensions:
        """Ask the OS for the current terminal size."""
        try:
            size = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError) as e:
            raise TerminalIOFailure(f"could not query terminal size: {e}") from e
        return Dimensions(size.columns, size.lines)

    def poll(self, timeout: float) -> Optional[Event]:
        """Wait up to timeout seconds for a key or a resize."""
        if self._pending:
            return self._pending.popleft()
        fd = self.stdin.fileno()
        try:
            readable, _, _ = select.select([fd, self._wake_r], [], [], timeout)
        except (OSError, ValueError) as e:
            raise InputPollFailure(f"select failed: {e}") from e

        if self._wake_r in readable:
            self._drain_wakeups()
            size = self.query_size()
            return ResizeEvent(size.width, size.height)
        if fd in readable:
            try:
                data = os.read(fd, 64)
            except OSError as e:
                raise InputPollFailure(f"could not read input: {e}") from e
            if not data:
                raise InputPollFailure("input stream closed")
            events = decode_keys(data)
            self._pending.extend(events[1:])
            return events[0]
        return None

    def _on_sigwinch(self, signum, frame):
        try:
            os.write(self._wake_w, b"w")
        except BlockingIOError:
            # Pipe already full, a resize is pending anyway
            pass

    def _drain_wakeups(self):
        try:
            while os.read(self._wake_r, 512):
                pass
        except BlockingIOError:
            pass

    def _write(self, data: str):
        self.stdout.write(data)
        self.stdout.flush()

    def _restore(self):
        try:
            if self._screen_active:
                self._screen_active = False
                self._write(str(Control.show_cursor(True)) + str(Control.alt_screen(False)))
        finally:
            if self._sigwinch_installed:
                self._sigwinch_installed = False
                signal.signal(signal.SIGWINCH, self._prev_sigwinch or signal.SIG_DFL)
            for pipe_fd in (self._wake_r, self._wake_w):
                if pipe_fd is not None:
                    os.close(pipe_fd)
            self._wake_r = self._wake_w = None
            if self._saved_attrs is not None:
                attrs, self._saved_attrs = self._saved_attrs, None
                termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, attrs)
