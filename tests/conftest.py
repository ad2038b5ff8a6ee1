import io
import os
import random
import sys

# Ensure project root is importable (so termsnake.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
from rich.console import Console


class FakeTerminal:
    """Stands in for termsnake.terminal.Terminal: scripted reads, no tty."""

    def __init__(self, chunks=()):
        self.chunks = list(chunks)
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        return False

    def read_bytes(self) -> bytes:
        if self.chunks:
            return self.chunks.pop(0)
        return b""


class FakeSleep:
    """Records every delay; bails out if a loop never ends."""

    def __init__(self, limit=1000):
        self.calls = []
        self.limit = limit

    def __call__(self, seconds):
        self.calls.append(seconds)
        if len(self.calls) > self.limit:
            raise RuntimeError("loop did not terminate")


@pytest.fixture
def console(monkeypatch):
    # rich drops control codes on dumb terminals
    monkeypatch.setenv("TERM", "xterm")
    return Console(file=io.StringIO(), force_terminal=True, color_system=None, width=200)


@pytest.fixture
def output(console):
    def read():
        return console.file.getvalue()
    return read


@pytest.fixture
def model_factory():
    from termsnake.model import GameModel

    def make(seed=1234, fruit=(1, 1), **kwargs):
        model = GameModel(rng=random.Random(seed), **kwargs)
        if fruit is not None:
            model.fruit = fruit
        return model
    return make


@pytest.fixture
def terminal_factory():
    return FakeTerminal


@pytest.fixture
def fake_sleep():
    return FakeSleep()
