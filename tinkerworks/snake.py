"""The snake: a chain of grid blocks moving in one direction."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import islice
from typing import Iterator, Optional, Tuple

Position = Tuple[int, int]


class Direction(Enum):
    """A heading on the grid; y grows downwards."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }[self]


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Snake:
    """A three-block snake starting at ``(x, y)`` with its head to the right."""

    def __init__(self, x: int, y: int) -> None:
        self._direction = Direction.RIGHT
        self._body: deque[Position] = deque([(x + 2, y), (x + 1, y), (x, y)])
        self._tail: Optional[Position] = None

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def __len__(self) -> int:
        return len(self._body)

    def head_position(self) -> Position:
        return self._body[0]

    def head_direction(self) -> Direction:
        return self._direction

    def next_head(self, direction: Optional[Direction] = None) -> Position:
        """Where the head would go when moving in ``direction`` (or the current one)."""
        dx, dy = _STEPS[self._direction if direction is None else direction]
        x, y = self.head_position()
        return x + dx, y + dy

    def move_forward(self, direction: Optional[Direction] = None) -> None:
        """Advance one block, turning first if ``direction`` is given."""
        if direction is not None:
            self._direction = direction
        self._body.appendleft(self.next_head())
        self._tail = self._body.pop()

    def restore_tail(self) -> None:
        """Grow by putting back the block dropped by the last move."""
        if self._tail is None:
            raise RuntimeError("the snake has not moved yet, there is no tail to restore")
        self._body.append(self._tail)

    def overlap_tail(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies on the body, not counting the last block."""
        checked = max(len(self._body) - 1, 1)
        return (x, y) in islice(self._body, checked)