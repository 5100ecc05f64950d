"""Game state and rules for snake: movement, food, collisions and restart."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from .snake import Direction, Snake

MOVING_PERIOD = 0.1
RESTART_TIME = 1.0

_START = (2, 2)
_FIRST_FOOD = (6, 4)


class Key(Enum):
    """Keys the game reacts to; any other key is :attr:`OTHER`."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


_KEY_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Game:
    """A snake game on a ``width`` x ``height`` grid with a one-block border."""

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng or random.Random()
        self._reset()

    def _reset(self) -> None:
        self.snake = Snake(*_START)
        self.waiting_time = 0.0
        self.food_exists = True
        self.food_x, self.food_y = _FIRST_FOOD
        self.game_over = False

    def key_pressed(self, key: Key) -> None:
        """Turn (or step) the snake; reversing onto itself is ignored."""
        if self.game_over:
            return
        direction = _KEY_DIRECTIONS.get(key, self.snake.head_direction())
        if direction == self.snake.head_direction().opposite():
            return
        self._update_snake(direction)

    def update(self, delta_time: float) -> None:
        """Advance the clock by ``delta_time`` seconds."""
        self.waiting_time += delta_time
        if self.game_over:
            if self.waiting_time > RESTART_TIME:
                self._reset()
            return
        if not self.food_exists:
            self._add_food()
        if self.waiting_time > MOVING_PERIOD:
            self._update_snake(None)

    def _check_eating(self) -> None:
        if self.food_exists and (self.food_x, self.food_y) == self.snake.head_position():
            self.food_exists = False
            self.snake.restore_tail()

    def _is_snake_alive(self, direction: Optional[Direction]) -> bool:
        x, y = self.snake.next_head(direction)
        if self.snake.overlap_tail(x, y):
            return False
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def _add_food(self) -> None:
        while True:
            x = self._rng.randrange(1, self.width - 1)
            y = self._rng.randrange(1, self.height - 1)
            if not self.snake.overlap_tail(x, y):
                break
        self.food_x, self.food_y = x, y
        self.food_exists = True

    def _update_snake(self, direction: Optional[Direction]) -> None:
        if self._is_snake_alive(direction):
            self.snake.move_forward(direction)
            self._check_eating()
        else:
            self.game_over = True
        self.waiting_time = 0.0