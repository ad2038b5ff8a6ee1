"""
view.py — View layer.

Draws the game on an ANSI terminal through a rich Console. Every cell is
addressed directly with a cursor move, so a tick only repaints what the
model reports as changed: the vacated tail cell, the new head, and on a
bite the old and new fruit and the score line.

Screen coordinates are 1-indexed: game cell (x, y) lands on screen row
x + 1, column y + 1.

Public API:
    GameView(console)             — bind to a rich Console
    view.initialize(fruit)        — first full frame
    view.render(result, snake)    — apply one TickResult
    view.show_game_over(reason, score)
    view.restore()                — clear and bring the cursor back
"""

from typing import Iterable, Optional

from rich.console import Console
from rich.control import Control

from .config import (
    WIDTH, HEIGHT,
    WALL_GLYPH, SNAKE_GLYPH, FRUIT_GLYPH, EMPTY_GLYPH,
    SCORE_OFFSET, HINT_OFFSET, FOOTER_OFFSET, QUIT_HINT, FOOTER_LINES,
)
from .model import GameOverReason, Position, Snake, TickResult

_OVER_MESSAGES = {
    GameOverReason.SELF_COLLISION: ("You hit yourself", "red"),
    GameOverReason.WALL_COLLISION: ("You hit the boundary", "red"),
    GameOverReason.WIN:            ("You are a winner", "green"),
}
_DEFAULT_OVER = ("Game Over", "red")


class GameView:
    """Stateless with respect to game data; everything comes in as arguments."""

    def __init__(self, console: Optional[Console] = None, width: int = WIDTH, height: int = HEIGHT):
        self.console = console if console is not None else Console(highlight=False)
        self.width = width
        self.height = height

    # ── Frames ───────────────────────────────────────────────────
    def initialize(self, fruit: Position, snake: Iterable[Position] = ()) -> None:
        self.console.control(Control.clear(), Control.show_cursor(False), Control.home())
        self.draw_border()
        self.draw_snake(snake)
        self.draw_fruit(fruit)
        self.draw_score(0)
        self.draw_messages()

    def render(self, result: TickResult, snake: Snake) -> None:
        if not result.moved:
            return
        if result.vacated is not None and not snake.occupies(result.vacated):
            self.erase_cell(result.vacated)
        if result.reason in (GameOverReason.WALL_COLLISION, GameOverReason.SELF_COLLISION):
            return
        if result.ate:
            self.erase_cell(result.old_fruit)
        self.draw_cell(result.head, SNAKE_GLYPH)
        if result.ate:
            self.draw_fruit(result.fruit)
            self.draw_score(result.score)

    def show_game_over(self, reason: GameOverReason, score: int) -> None:
        message, style = _OVER_MESSAGES.get(reason, _DEFAULT_OVER)
        self.console.control(Control.clear(), Control.home())
        self.console.print(message, style=style, markup=False)
        self.console.print(f"Score = {score}", markup=False)
        self.console.out(QUIT_HINT, end="")

    def restore(self) -> None:
        self.console.control(Control.clear(), Control.home(), Control.show_cursor(True))

    # ── Primitives ───────────────────────────────────────────────
    def draw_cell(self, pos: Position, glyph: str) -> None:
        x, y = pos
        self.console.control(Control.move_to(y, x))
        self.console.out(glyph, end="")

    def erase_cell(self, pos: Position) -> None:
        self.draw_cell(pos, EMPTY_GLYPH)

    def draw_border(self) -> None:
        edge = WALL_GLYPH * self.width
        inner = WALL_GLYPH + EMPTY_GLYPH * (self.width - 2) + WALL_GLYPH
        for row in range(self.height):
            self._write_line(row + 1, edge if row in (0, self.height - 1) else inner)

    def draw_snake(self, cells: Iterable[Position]) -> None:
        for cell in cells:
            self.draw_cell(cell, SNAKE_GLYPH)

    def draw_fruit(self, pos: Position) -> None:
        self.draw_cell(pos, FRUIT_GLYPH)

    def draw_score(self, score: int) -> None:
        self._write_line(self.height + SCORE_OFFSET, f"Score = {score}")
        self._write_line(self.height + HINT_OFFSET, QUIT_HINT)

    def draw_messages(self, lines: Iterable[str] = FOOTER_LINES) -> None:
        for offset, line in enumerate(lines):
            self._write_line(self.height + FOOTER_OFFSET + offset, line)

    def _write_line(self, row: int, text: str) -> None:
        """Write text at column 1 of a 1-indexed screen row."""
        self.console.control(Control.move_to(0, row - 1))
        self.console.out(text, end="")
