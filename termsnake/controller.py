"""
controller.py — Controller layer.

Responsibilities:
  - Own the terminal for the lifetime of the session.
  - Translate raw keys into model commands (steer / quit).
  - Drive the game loop: sleep, poll, step the model, ask the view to redraw.
  - Hold the post-game screen until the quit key is pressed.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

One tick is:  sleep(delay for score) -> poll one key -> steer -> step -> render.
A quit key ends the session before any movement that tick.
"""

import logging
import time
from typing import Callable, Optional

from .config import POST_GAME_POLL
from .keys import Key, KeyReader
from .model import GameModel, GameOverReason, TickResult
from .terminal import Terminal
from .view import GameView

logger = logging.getLogger(__name__)


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    """

    def __init__(
        self,
        model: Optional[GameModel] = None,
        view: Optional[GameView] = None,
        terminal: Optional[Terminal] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.model    = model if model is not None else GameModel()
        self.view     = view if view is not None else GameView()
        self.terminal = terminal if terminal is not None else Terminal()
        self.keys     = KeyReader(self.terminal)
        self._sleep   = sleep

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> GameOverReason:
        """Play one session and return why it ended."""
        logger.info("session start: fruit=%s head=%s", self.model.fruit, self.model.snake.head)
        with self.terminal:
            try:
                self.view.initialize(self.model.fruit, self.model.snake)
                self._play()
                self.view.show_game_over(self.model.reason, self.model.score)
                self._wait_for_quit()
            except KeyboardInterrupt:
                self.model.quit()
            finally:
                self.view.restore()
        logger.info("session end: %s score=%d", self.model.reason.name, self.model.score)
        return self.model.reason

    def tick(self) -> Optional[TickResult]:
        """Run a single tick. Returns None when the tick was a quit."""
        self._sleep(self.model.delay)
        key = self.keys.poll()
        if key is Key.QUIT:
            self.model.quit()
            return None
        self.model.steer(key.direction)
        result = self.model.step()
        self.view.render(result, self.model.snake)
        return result

    # ── Loops ─────────────────────────────────────────────────────
    def _play(self) -> None:
        while not self.model.over:
            self.tick()

    def _wait_for_quit(self) -> None:
        # the quit key already ended the game, nothing left to wait for
        if self.model.reason is GameOverReason.USER_QUIT:
            return
        while Key.QUIT not in self.keys.read_all():
            self._sleep(POST_GAME_POLL)
