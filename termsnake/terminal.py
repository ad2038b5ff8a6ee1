"""
terminal.py — Scoped terminal mode.

Terminal is a context manager: entering it puts stdin into cbreak mode
(no line buffering, no echo), leaving it puts back exactly what was there
before. SIGTERM is turned into SystemExit while the mode is active so the
restore in __exit__ runs on that path too.

Reads poll with a zero-timeout select. The file status flags are left
alone: O_NONBLOCK on stdin would also apply to stdout when both share one
open file description.

POSIX only (termios).
"""

import logging
import os
import select
import signal
import sys
import termios
import tty

from .config import READ_CHUNK

logger = logging.getLogger(__name__)


def is_interactive(stream) -> bool:
    """True when the stream is backed by a terminal."""
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)


class Terminal:
    """Owns stdin's terminal attributes for the lifetime of a game."""

    def __init__(self, stdin=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.fd = None
        self.active = False
        self._saved_attrs = None
        self._saved_sigterm = None

    def __enter__(self) -> "Terminal":
        if not is_interactive(self.stdin):
            logger.warning("stdin is not a terminal; keyboard input disabled")
            return self

        fd = self.fd = self.stdin.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self._saved_sigterm = signal.signal(signal.SIGTERM, _raise_exit)
        self.active = True
        logger.info("terminal in cbreak mode (fd %d)", fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    def restore(self) -> None:
        """Put the saved attributes back. Safe to call more than once."""
        if not self.active:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        finally:
            signal.signal(signal.SIGTERM, self._saved_sigterm)
            self.active = False
            logger.info("terminal mode restored")

    def read_bytes(self) -> bytes:
        """Whatever is waiting on stdin, or b"" without blocking."""
        if not self.active:
            return b""
        readable, _, _ = select.select([self.fd], [], [], 0)
        if not readable:
            return b""
        return os.read(self.fd, READ_CHUNK)
