import os
import signal
import termios

import pytest

from figclock.errors import TerminalIOFailure
from figclock.events import Key, KeyEvent, ResizeEvent
from figclock.terminal import TerminalSession, decode_keys


@pytest.mark.parametrize("data, expected", [
    (b"\x1b", KeyEvent(Key.ESCAPE)),
    (b"\x1b[A", KeyEvent(Key.UP)),
    (b"\x1bOB", KeyEvent(Key.DOWN)),
    (b"\x1bq", KeyEvent("q", frozenset({"alt"}))),
    (b"\x03", KeyEvent("c", frozenset({"ctrl"}))),
    (b"x", KeyEvent("x")),
])
def test_decode_single_key(data, expected):
    assert decode_keys(data) == [expected]


@pytest.mark.parametrize("data, expected", [
    (b"\x1b\x1b", [KeyEvent(Key.ESCAPE), KeyEvent(Key.ESCAPE)]),
    (b"a\x1b", [KeyEvent("a"), KeyEvent(Key.ESCAPE)]),
    (b"\x1b[A\x1b", [KeyEvent(Key.UP), KeyEvent(Key.ESCAPE)]),
    (b"\x1b[1;2Ax", [KeyEvent("\x1b[1;2A"), KeyEvent("x")]),
    (b"\x1bq\x1bOB", [KeyEvent("q", frozenset({"alt"})), KeyEvent(Key.DOWN)]),
])
def test_decode_keys_typed_together(data, expected):
    assert decode_keys(data) == expected


@pytest.fixture
def pty():
    if not hasattr(os, "openpty"):
        pytest.skip("needs a pseudo terminal")
    master, slave = os.openpty()
    stdin = os.fdopen(slave, "rb", buffering=0)
    stdout = os.fdopen(os.dup(slave), "w")
    yield master, stdin, stdout
    stdout.close()
    stdin.close()
    os.close(master)


def test_session_enters_and_restores(pty):
    master, stdin, stdout = pty
    before = termios.tcgetattr(stdin.fileno())
    with TerminalSession(stdin, stdout) as session:
        assert termios.tcgetattr(stdin.fileno()) != before
        assert session.dimensions.width >= 1
    assert termios.tcgetattr(stdin.fileno()) == before
    written = os.read(master, 4096)
    assert b"\x1b[?1049h" in written
    assert b"\x1b[?25l" in written
    assert b"\x1b[?25h" in written
    assert b"\x1b[?1049l" in written


def test_session_restores_on_error(pty):
    master, stdin, stdout = pty
    before = termios.tcgetattr(stdin.fileno())
    previous = signal.getsignal(signal.SIGWINCH)
    with pytest.raises(RuntimeError):
        with TerminalSession(stdin, stdout):
            raise RuntimeError("boom")
    assert termios.tcgetattr(stdin.fileno()) == before
    assert signal.getsignal(signal.SIGWINCH) == previous


def test_poll_reads_keys(pty):
    master, stdin, stdout = pty
    with TerminalSession(stdin, stdout) as session:
        assert session.poll(0.01) is None
        os.write(master, b"\x1b")
        assert session.poll(1.0) == KeyEvent(Key.ESCAPE)


def test_poll_reports_resize(pty):
    master, stdin, stdout = pty
    with TerminalSession(stdin, stdout) as session:
        os.kill(os.getpid(), signal.SIGWINCH)
        event = session.poll(1.0)
    assert isinstance(event, ResizeEvent)


def test_setup_failure_is_terminal_io_failure(tmp_path):
    not_a_tty = open(tmp_path / "plain", "w+")
    try:
        with pytest.raises(TerminalIOFailure):
            with TerminalSession(not_a_tty, not_a_tty):
                pass
    finally:
        not_a_tty.close()


def test_poll_returns_every_key_from_one_read(pty):
    master, stdin, stdout = pty
    with TerminalSession(stdin, stdout) as session:
        os.write(master, b"\x1b[A\x1b")
        assert session.poll(1.0) == KeyEvent(Key.UP)
        assert session.poll(0.01) == KeyEvent(Key.ESCAPE)
        assert session.poll(0.01) is None
