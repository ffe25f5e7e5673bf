"""Snake game engine: board state, movement rules and text rendering."""

from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

BORDER = "\u2592\u2592"
SNAKE = "\u2588\u2588"
FOOD = "\u25cf "
EMPTY = "  "

MIN_BOARD_SIZE = 9


def rand_in_range(low: int, high: int) -> int:
    """Return a cryptographically random integer in the closed range [low, high]."""
    if high < low:
        raise ValueError(f"empty range: {low}..{high}")
    return low + secrets.randbelow(high - low + 1)


class Movement(IntEnum):
    """Direction of travel; x grows downward (rows), y grows rightward (columns)."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    def is_opposite(self, other: Movement) -> bool:
        return _OPPOSITES[self] is other


_OFFSETS = {
    Movement.UP: (-1, 0),
    Movement.DOWN: (1, 0),
    Movement.LEFT: (0, -1),
    Movement.RIGHT: (0, 1),
}

_OPPOSITES = {
    Movement.UP: Movement.DOWN,
    Movement.DOWN: Movement.UP,
    Movement.LEFT: Movement.RIGHT,
    Movement.RIGHT: Movement.LEFT,
}


class GameStatus(Enum):
    NONE = 0
    WIN = 1
    LOST = 2


@dataclass(frozen=True)
class Cell:
    """A board position: x is the row, y the column."""

    x: int
    y: int

    def shifted(self, movement: Movement) -> Cell:
        dx, dy = movement.offset
        return Cell(self.x + dx, self.y + dy)


class SnakeEngine:
    """One stage of the game: a snake, a piece of food and a food quota to eat."""

    def __init__(
        self,
        rows: int,
        cols: int,
        food_left: int,
        score: int = 0,
        rand: Callable[[int, int], int] = rand_in_range,
    ) -> None:
        if rows < MIN_BOARD_SIZE or cols < MIN_BOARD_SIZE:
            raise ValueError("board size too small")
        if food_left <= 0:
            raise ValueError("food must be at least 1")

        self.rows = rows
        self.cols = cols
        self.food_left = food_left
        self.score = score
        self._rand = rand
        self._snake = [
            Cell(rows // 2, cols // 2),
            Cell(rows // 2, cols // 2 + 1),
        ]
        self.heading = Movement.LEFT
        self.food = self._place_food()

    @property
    def snake(self) -> tuple[Cell, ...]:
        """Snake cells, head first."""
        return tuple(self._snake)

    @property
    def head(self) -> Cell:
        return self._snake[0]

    def _random_cell(self) -> Cell:
        return Cell(self._rand(0, self.rows - 1), self._rand(0, self.cols - 1))

    def _place_food(self) -> Cell:
        while True:
            cell = self._random_cell()
            if cell not in self._snake:
                return cell

    def _inside(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.rows and 0 <= cell.y < self.cols

    def move(self, movement: Movement) -> GameStatus:
        """Advance the snake one step; a reversal keeps the current heading."""
        movement = Movement(movement)
        if movement.is_opposite(self.heading):
            movement = self.heading

        new_head = self.head.shifted(movement)
        if not self._inside(new_head):
            return GameStatus.LOST

        body = self._snake[1:]
        if new_head in body:
            self._snake[0] = new_head
            return GameStatus.LOST

        old_tail = self._snake[-1]
        self._snake = [new_head, *self._snake[:-1]]

        if new_head == self.food:
            self._snake.append(old_tail)
            self.score += 1
            self.food = self._place_food()
            self.food_left -= 1
            if self.food_left == 0:
                return GameStatus.WIN

        self.heading = movement
        return GameStatus.NONE

    def _cell_text(self, cell: Cell) -> str:
        if cell in self._snake:
            return SNAKE
        if cell == self.food:
            return FOOD
        return EMPTY

    def render(self) -> str:
        """Return the board as text, two characters per cell, framed by a border."""
        edge = BORDER * (self.cols + 2) + "\n"
        lines = [edge]
        for x in range(self.rows):
            cells = "".join(self._cell_text(Cell(x, y)) for y in range(self.cols))
            lines.append(f"{BORDER}{cells}{BORDER}\n")
        lines.append(edge)
        return "".join(lines)