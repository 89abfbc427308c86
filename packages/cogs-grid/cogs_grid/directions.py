"""Four- and eight-way grid directions, and rotations between them."""
from __future__ import annotations

import math
from enum import Enum

from cogs_grid.coords import ICoord


class Rotation(Enum):
    """A turn with no angle of its own; the angle comes from what is rotated."""

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1

    @property
    def steps_clockwise(self) -> int:
        return self.value

    def reverse(self) -> Rotation:
        return Rotation(-self.value)


class Direction4(Enum):
    """North, east, south, west.

    Values count clockwise from north, so ``value`` can be used directly in
    rotation arithmetic.
    """

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate(self, rotation: Rotation) -> Direction4:
        return self.rotate_by(rotation.steps_clockwise)

    def rotate_by(self, steps_clockwise: int) -> Direction4:
        """Rotate by this many steps clockwise. Negative steps go counter-clockwise."""
        return Direction4((self.value + steps_clockwise) % 4)

    def flip(self) -> Direction4:
        return self.rotate_by(2)

    def radians(self) -> float:
        """Angle of this direction.

        0 points east and angles grow clockwise, because +y points down on
        screen. Use ``math.degrees`` for degrees.
        """
        return ((self.value - 1) % 4) * math.tau / 4

    def deltas(self) -> ICoord:
        return _DELTAS4[self]

    def is_horizontal(self) -> bool:
        return self in (Direction4.EAST, Direction4.WEST)

    def is_vertical(self) -> bool:
        return self in (Direction4.NORTH, Direction4.SOUTH)


class Direction8(Enum):
    """The four cardinal directions plus the diagonals, clockwise from north."""

    NORTH = 0
    NORTH_EAST = 1
    EAST = 2
    SOUTH_EAST = 3
    SOUTH = 4
    SOUTH_WEST = 5
    WEST = 6
    NORTH_WEST = 7

    def rotate(self, rotation: Rotation) -> Direction8:
        return self.rotate_by(rotation.steps_clockwise)

    def rotate_by(self, steps_clockwise: int) -> Direction8:
        """Rotate by this many 45 degree steps clockwise."""
        return Direction8((self.value + steps_clockwise) % 8)

    def flip(self) -> Direction8:
        return self.rotate_by(4)

    def radians(self) -> float:
        """Angle of this direction; 0 is east, positive is clockwise."""
        return ((self.value - 2) % 8) * math.tau / 8

    def deltas(self) -> ICoord:
        return _DELTAS8[self]

    def is_diagonal(self) -> bool:
        return self.value % 2 == 1

    def to_direction4(self) -> Direction4 | None:
        """The matching four-way direction, or None for diagonals."""
        if self.is_diagonal():
            return None
        return Direction4(self.value // 2)

    @classmethod
    def from_direction4(cls, direction: Direction4) -> Direction8:
        return cls(direction.value * 2)


_DELTAS4: dict[Direction4, ICoord] = {
    Direction4.NORTH: ICoord(0, -1),
    Direction4.EAST: ICoord(1, 0),
    Direction4.SOUTH: ICoord(0, 1),
    Direction4.WEST: ICoord(-1, 0),
}

_DELTAS8: dict[Direction8, ICoord] = {
    Direction8.NORTH: ICoord(0, -1),
    Direction8.NORTH_EAST: ICoord(1, -1),
    Direction8.EAST: ICoord(1, 0),
    Direction8.SOUTH_EAST: ICoord(1, 1),
    Direction8.SOUTH: ICoord(0, 1),
    Direction8.SOUTH_WEST: ICoord(-1, 1),
    Direction8.WEST: ICoord(-1, 0),
    Direction8.NORTH_WEST: ICoord(-1, -1),
}
