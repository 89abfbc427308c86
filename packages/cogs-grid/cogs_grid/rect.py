"""IRect - integer rectangle on a grid."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from typing import Any

from cogs_grid.coords import ICoord


@dataclass(frozen=True, slots=True)
class IRect:
    """Axis-aligned rectangle of grid cells.

    ``right()`` and ``bottom()`` are the last cells inside the rectangle,
    so a 1x1 rect has ``left == right()``.
    """

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"IRect size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def centered(cls, center: ICoord, width: int, height: int) -> IRect:
        return cls(center.x - width // 2, center.y - height // 2, width, height)

    def right(self) -> int:
        return self.left + self.width - 1

    def bottom(self) -> int:
        return self.top + self.height - 1

    def area(self) -> int:
        return self.width * self.height

    def contains(self, pos: ICoord) -> bool:
        """Boundary cells count as inside."""
        return self.left <= pos.x <= self.right() and self.top <= pos.y <= self.bottom()

    def shifted(self, by: ICoord) -> IRect:
        return replace(self, left=self.left + by.x, top=self.top + by.y)

    def __add__(self, other: object) -> IRect:
        if not isinstance(other, ICoord):
            return NotImplemented
        return self.shifted(other)

    def contained_coords(self) -> Iterator[ICoord]:
        """Every cell in reading order: left to right, then top to bottom."""
        for y in range(self.top, self.top + self.height):
            for x in range(self.left, self.left + self.width):
                yield ICoord(x, y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IRect:
        return cls(data["left"], data["top"], data["width"], data["height"])
