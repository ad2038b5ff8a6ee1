"""
keys.py — Raw keyboard decoding.

Turns the bytes a terminal in cbreak mode delivers into logical keys.
Arrow keys arrive as ESC "[" followed by one of A/B/C/D; the quit key is a
single "x" or "X". Anything else decodes to Key.NONE and is dropped.
"""

import enum
from typing import Optional, Protocol

from .config import (
    ESC, CSI,
    ARROW_UP, ARROW_DOWN, ARROW_RIGHT, ARROW_LEFT,
    QUIT_KEYS, MAX_PENDING,
)
from .model import Direction


class Key(enum.Enum):
    NONE  = "none"
    UP    = "up"
    DOWN  = "down"
    LEFT  = "left"
    RIGHT = "right"
    QUIT  = "quit"

    @property
    def direction(self) -> Optional[Direction]:
        """The movement direction for an arrow key, None otherwise."""
        return _KEY_DIRECTIONS.get(self)


_KEY_DIRECTIONS = {
    Key.UP:    Direction.UP,
    Key.DOWN:  Direction.DOWN,
    Key.LEFT:  Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

_ARROWS = {
    ARROW_UP:    Key.UP,
    ARROW_DOWN:  Key.DOWN,
    ARROW_RIGHT: Key.RIGHT,
    ARROW_LEFT:  Key.LEFT,
}


def decode(raw: bytes) -> tuple[Key, int]:
    """
    Decode the first key in `raw`.

    Returns (key, consumed). An empty buffer yields (Key.NONE, 0).
    A truncated ESC "[" at the end of the buffer is consumed and ignored.
    """
    if not raw:
        return Key.NONE, 0
    first = raw[0]
    if first in QUIT_KEYS:
        return Key.QUIT, 1
    if first != ESC:
        return Key.NONE, 1
    if len(raw) < 2 or raw[1] != CSI:
        # lone ESC; whatever follows is decoded on its own
        return Key.NONE, 1
    if len(raw) < 3:
        return Key.NONE, 2
    return _ARROWS.get(raw[2], Key.NONE), 3


class ByteSource(Protocol):
    def read_bytes(self) -> bytes: ...


class KeyReader:
    """
    Buffers raw input and hands out at most one Key per poll.

    At most `limit` bytes wait between polls. When keys arrive faster than
    they are polled the oldest are dropped, except that a dropped quit key
    is still reported by the next poll.
    """

    def __init__(self, source: ByteSource, limit: int = MAX_PENDING):
        self.source = source
        self.limit = limit
        self._pending = b""
        self._quit_dropped = False

    def poll(self) -> Key:
        self._fill()
        if self._quit_dropped:
            self._quit_dropped = False
            return Key.QUIT
        key, consumed = decode(self._pending)
        self._pending = self._pending[consumed:]
        return key

    def read_all(self) -> list[Key]:
        """Every key available right now, NONE entries dropped."""
        keys = []
        self._fill()
        if self._quit_dropped:
            self._quit_dropped = False
            keys.append(Key.QUIT)
        while self._pending:
            key, consumed = decode(self._pending)
            self._pending = self._pending[consumed:]
            if key is not Key.NONE:
                keys.append(key)
        return keys

    def _fill(self) -> None:
        self._pending += self.source.read_bytes()
        while len(self._pending) > self.limit:
            key, consumed = decode(self._pending)
            self._pending = self._pending[consumed:]
            if key is Key.QUIT:
                self._quit_dropped = True
