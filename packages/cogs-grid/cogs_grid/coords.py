"""Integer grid coordinates: unsigned Coord and signed ICoord."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Coord:
    """Non-negative grid position, e.g. an index into a 2D array."""

    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Coord components must be non-negative, got ({self.x}, {self.y})")

    def to_2d_idx(self, width: int) -> int:
        """Index into a flat row-major array (``y * width + x``)."""
        return self.y * width + self.x

    def to_icoord(self) -> ICoord:
        return ICoord(self.x, self.y)

    @classmethod
    def from_icoord(cls, coord: ICoord) -> Coord:
        """Raises ValueError if either component is negative."""
        return cls(coord.x, coord.y)

    def __add__(self, other: object) -> Coord:
        if not isinstance(other, Coord):
            return NotImplemented
        return Coord(self.x + other.x, self.y + other.y)

    def __mul__(self, factor: object) -> Coord:
        if not isinstance(factor, int):
            return NotImplemented
        return Coord(self.x * factor, self.y * factor)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Coord:
        return cls(data["x"], data["y"])


@dataclass(frozen=True, slots=True)
class ICoord:
    """Signed grid position or offset.

    Adding a Direction4 or Direction8 steps one cell that way.
    """

    x: int
    y: int

    def quadrant(self) -> int:
        """Quadrant number: 1 is +x+y, 2 is -x+y, 3 is -x-y, 4 is +x-y.

        Zero counts as positive.
        """
        if self.x >= 0:
            return 1 if self.y >= 0 else 4
        return 2 if self.y >= 0 else 3

    def to_coord(self) -> Coord:
        """Raises ValueError if either component is negative."""
        return Coord.from_icoord(self)

    def __add__(self, other: object) -> ICoord:
        if isinstance(other, ICoord):
            return ICoord(self.x + other.x, self.y + other.y)
        deltas = getattr(other, "deltas", None)
        if deltas is None:
            return NotImplemented
        return self + deltas()

    def __sub__(self, other: object) -> ICoord:
        if not isinstance(other, ICoord):
            return NotImplemented
        return ICoord(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: object) -> ICoord:
        if not isinstance(factor, int):
            return NotImplemented
        return ICoord(self.x * factor, self.y * factor)

    def __neg__(self) -> ICoord:
        return ICoord(-self.x, -self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ICoord:
        return cls(data["x"], data["y"])
