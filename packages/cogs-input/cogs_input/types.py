"""Per-key state types for input tracking."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    """Where a key sits in its per-frame lifecycle."""

    UP = "up"
    JUST_UP = "just_up"
    DOWN = "down"
    JUST_DOWN = "just_down"

    @classmethod
    def from_flags(cls, down: bool, changed: bool) -> Phase:
        if down:
            return cls.JUST_DOWN if changed else cls.DOWN
        return cls.JUST_UP if changed else cls.UP

    @property
    def is_down(self) -> bool:
        return self in (Phase.DOWN, Phase.JUST_DOWN)

    @property
    def changed(self) -> bool:
        return self in (Phase.JUST_UP, Phase.JUST_DOWN)


@dataclass(slots=True)
class KeyState:
    """Runtime state of one tracked key. Mutable, serializable."""

    down: bool = False
    changed: bool = False  # any transition since the last end_frame()
    held: int = 0  # frames down, current one included; 0 while up

    @property
    def phase(self) -> Phase:
        return Phase.from_flags(self.down, self.changed)


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed entries)."""
