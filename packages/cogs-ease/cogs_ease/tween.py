"""Tween - a value eased from start to end over a fixed number of ticks."""
from __future__ import annotations

from dataclasses import dataclass

from cogs_ease.interpolate import resolve


@dataclass
class Tween:
    """Owned by the caller and stepped once per tick.

    ``easing`` is a name from EASINGS. The final step lands exactly on
    ``end`` regardless of the curve.
    """

    start: float
    end: float
    duration: int
    easing: str = "linear"
    elapsed: int = 0

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        resolve(self.easing)

    @property
    def progress(self) -> float:
        return min(self.elapsed / self.duration, 1.0)

    @property
    def done(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def value(self) -> float:
        if self.done:
            return self.end
        eased_t = resolve(self.easing)(self.progress)
        return self.start + (self.end - self.start) * eased_t

    def step(self, ticks: int = 1) -> float:
        """Advance by ``ticks`` (clamped at duration) and return the new value."""
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")
        self.elapsed = min(self.elapsed + ticks, self.duration)
        return self.value

    def reset(self) -> None:
        self.elapsed = 0
