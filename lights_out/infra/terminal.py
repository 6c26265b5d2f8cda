from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

# Stands in for a keypress the terminal encoding cannot decode; never a digit.
UNDECODABLE_KEY = "\ufffd"


@contextmanager
def raw_input_mode(stream: TextIO | None = None, *, enabled: bool = True) -> Iterator[bool]:
    """Disable canonical input on `stream` for the duration of the block.

    Yields True if the terminal mode was changed. Non-TTY streams (pipes, tests)
    are left alone. The previous mode is restored on every exit path, including
    KeyboardInterrupt.
    """

    stream = stream if stream is not None else sys.stdin
    if not enabled or not stream.isatty():
        yield False
        return

    import termios

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    raw = list(saved)
    raw[3] = saved[3] & ~termios.ICANON
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    logger.debug("Canonical input disabled on fd=%d", fd)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Terminal mode restored on fd=%d", fd)


def make_key_reader(*, stream: TextIO, out: TextIO, single_key: bool) -> Callable[[], str]:
    """Build the `read_selection` collaborator.

    In single-key mode one character is read per call and a newline is echoed
    after it. Otherwise one line is read and returned without its line ending.
    """

    def _read_key() -> str:
        try:
            ch = stream.read(1)
        except UnicodeDecodeError:
            logger.debug("Undecodable keypress on input stream")
            ch = UNDECODABLE_KEY
        if ch == "":
            raise EOFError("Input stream closed")
        out.write("\n")
        out.flush()
        return ch

    def _read_line() -> str:
        line = stream.readline()
        if line == "":
            raise EOFError("Input stream closed")
        return line.rstrip("\r\n")

    return _read_key if single_key else _read_line
