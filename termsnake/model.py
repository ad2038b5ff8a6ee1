"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero terminal I/O.
Exposes a clean API for the Controller to read/write.

Classes:
    Direction       — committed movement direction with its (dx, dy) offset
    GameOverReason  — why a session ended
    SessionState    — IDLE -> RUNNING -> OVER
    Snake           — bounded body buffer, tail first, head last
    TickResult      — what changed during one tick (the render diff)
    GameModel       — top-level model; owns snake, fruit, score, direction
"""

import enum
import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

from .config import (
    WIDTH, HEIGHT, LENGTH_SNAKE,
    SCORE_STEP, WIN_SCORE, SPEED_CURVE,
)

logger = logging.getLogger(__name__)

Position = tuple[int, int]


class SnakeOverflowError(RuntimeError):
    """The snake tried to grow past its buffer capacity."""


# ─────────────────────────── Direction ───────────────────────────
class Direction(enum.Enum):
    """Movement direction. x is the row axis, y the column axis."""

    NONE  = (0,  0)
    DOWN  = (1,  0)
    LEFT  = (0, -1)
    UP    = (-1, 0)
    RIGHT = (0,  1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def reverse(self) -> "Direction":
        return Direction((-self.dx, -self.dy))

    def is_opposite(self, other: "Direction") -> bool:
        return self is not Direction.NONE and self.reverse is other


class GameOverReason(enum.Enum):
    NONE           = "none"
    SELF_COLLISION = "self"
    WALL_COLLISION = "wall"
    WIN            = "win"
    USER_QUIT      = "quit"


class SessionState(enum.Enum):
    IDLE    = "idle"
    RUNNING = "running"
    OVER    = "over"


def arbitrate(current: Direction, candidate: Optional[Direction]) -> Direction:
    """
    Pick the committed direction for the next tick.

    No candidate keeps the current direction. So does an exact reversal.
    """
    if candidate is None or candidate is Direction.NONE:
        return current
    if candidate.is_opposite(current):
        return current
    return candidate


# ──────────────────────────── Snake ──────────────────────────────
class Snake:
    """
    Body cells ordered tail (index 0) to head (index -1).
    No rendering. No input handling.
    """

    def __init__(self, start: Position, capacity: int = LENGTH_SNAKE):
        self.capacity = capacity
        self.body: deque[Position] = deque([start])

    # ── Accessors ────────────────────────────────────────────────
    @property
    def head(self) -> Position:
        return self.body[-1]

    @property
    def tail(self) -> Position:
        return self.body[0]

    @property
    def length(self) -> int:
        return len(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def cells(self) -> tuple[Position, ...]:
        return tuple(self.body)

    # ── Commands ─────────────────────────────────────────────────
    def move(self, direction: Direction) -> Optional[Position]:
        """
        Advance one cell. Returns the vacated tail cell, or None when
        the direction is NONE and nothing moved.
        """
        if direction is Direction.NONE:
            return None
        hx, hy = self.head
        vacated = self.body.popleft()
        self.body.append((hx + direction.dx, hy + direction.dy))
        return vacated

    def grow(self) -> None:
        """Extend the tail by repeating the current tail cell at index 0."""
        if len(self.body) >= self.capacity:
            raise SnakeOverflowError(
                f"snake length {len(self.body)} already at capacity {self.capacity}"
            )
        self.body.appendleft(self.tail)

    # ── Queries ──────────────────────────────────────────────────
    def occupies(self, pos: Position) -> bool:
        return pos in self.body


def detect_collision(snake: Snake, width: int = WIDTH, height: int = HEIGHT) -> GameOverReason:
    """Classify the post-move head. Walls are checked before the body."""
    hx, hy = snake.head
    if not (1 <= hx <= height - 2 and 1 <= hy <= width - 2):
        return GameOverReason.WALL_COLLISION
    if snake.head in snake.cells()[:-1]:
        return GameOverReason.SELF_COLLISION
    return GameOverReason.NONE


def spawn_fruit(
    rng: random.Random,
    occupied: Iterable[Position] = (),
    width: int = WIDTH,
    height: int = HEIGHT,
) -> Position:
    """Uniform interior position, re-rolled until it is off the snake."""
    taken = set(occupied)
    while True:
        pos = (rng.randint(1, height - 2), rng.randint(1, width - 2))
        if pos not in taken:
            return pos


def tick_delay(score: int) -> float:
    """Seconds to sleep before the next tick at the given score."""
    for threshold, delay in SPEED_CURVE:
        if score >= threshold:
            return delay
    return SPEED_CURVE[-1][1]


# ────────────────────────── TickResult ───────────────────────────
@dataclass(frozen=True)
class TickResult:
    """Everything the view needs to redraw after one tick."""
    moved: bool
    vacated: Optional[Position]
    head: Position
    ate: bool
    old_fruit: Position
    fruit: Position
    score: int
    reason: GameOverReason


# ─────────────────────────── GameModel ───────────────────────────
class GameModel:
    """
    Top-level model.  Owns all game state.
    The controller calls steer() with each input, then step() once per tick.
    """

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        capacity: int = LENGTH_SNAKE,
        rng: Optional[random.Random] = None,
    ):
        if width < 3 or height < 3:
            raise ValueError(f"grid {width}x{height} has no interior")
        interior = (width - 2) * (height - 2)
        if capacity <= WIN_SCORE // SCORE_STEP:
            raise ValueError(
                f"capacity {capacity} cannot hold a winning snake "
                f"({WIN_SCORE // SCORE_STEP + 1} cells)"
            )
        if capacity >= interior:
            raise ValueError(f"capacity {capacity} leaves no room for fruit in {interior} cells")
        self.width = width
        self.height = height
        self.capacity = capacity
        self.rng = rng if rng is not None else random.Random()
        self.snake: Snake = None
        self.fruit: Position = (0, 0)
        self.reset()

    # ── Public API ───────────────────────────────────────────────
    def reset(self) -> None:
        self.snake = Snake((self.height // 2, self.width // 2), self.capacity)
        self.direction = Direction.NONE
        self.state = SessionState.IDLE
        self.reason = GameOverReason.NONE
        self.score = 0
        self.fruit = spawn_fruit(self.rng, self.snake, self.width, self.height)

    @property
    def over(self) -> bool:
        return self.state is SessionState.OVER

    @property
    def delay(self) -> float:
        return tick_delay(self.score)

    def steer(self, candidate: Optional[Direction]) -> Direction:
        """Feed one candidate direction through the arbiter."""
        if self.over:
            return self.direction
        committed = arbitrate(self.direction, candidate)
        if committed is not self.direction:
            logger.debug("direction %s -> %s", self.direction.name, committed.name)
            self.direction = committed
        if self.state is SessionState.IDLE and committed is not Direction.NONE:
            self.state = SessionState.RUNNING
            logger.info("session running")
        return self.direction

    def quit(self) -> None:
        if not self.over:
            self._finish(GameOverReason.USER_QUIT)

    def step(self) -> TickResult:
        """Advance one tick: move, collide, then eat and check for a win."""
        if self.state is not SessionState.RUNNING:
            return self._result(moved=False, vacated=None, ate=False, old_fruit=self.fruit)

        vacated = self.snake.move(self.direction)
        collision = detect_collision(self.snake, self.width, self.height)
        if collision is not GameOverReason.NONE:
            self._finish(collision)
            return self._result(moved=True, vacated=vacated, ate=False, old_fruit=self.fruit)

        old_fruit = self.fruit
        ate = self.snake.head == self.fruit
        if ate:
            self._eat()
            if self.score >= WIN_SCORE:
                self._finish(GameOverReason.WIN)
        return self._result(moved=True, vacated=vacated, ate=ate, old_fruit=old_fruit)

    # ── Private helpers ──────────────────────────────────────────
    def _eat(self) -> None:
        self.fruit = spawn_fruit(self.rng, self.snake, self.width, self.height)
        self.score += SCORE_STEP
        self.snake.grow()
        logger.debug("fruit eaten: score=%d length=%d", self.score, self.snake.length)

    def _finish(self, reason: GameOverReason) -> None:
        self.state = SessionState.OVER
        self.reason = reason
        logger.info("game over: %s (score %d)", reason.name, self.score)

    def _result(self, moved: bool, vacated, ate: bool, old_fruit: Position) -> TickResult:
        return TickResult(
            moved=moved,
            vacated=vacated,
            head=self.snake.head,
            ate=ate,
            old_fruit=old_fruit,
            fruit=self.fruit,
            score=self.score,
            reason=self.reason,
        )
