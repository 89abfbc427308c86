"""cogs-grid - Grid coordinates, directions, and rectangles."""
from __future__ import annotations

from cogs_grid.coords import Coord, ICoord
from cogs_grid.directions import Direction4, Direction8, Rotation
from cogs_grid.rect import IRect

__all__ = [
    "Coord",
    "ICoord",
    "Direction4",
    "Direction8",
    "Rotation",
    "IRect",
]
