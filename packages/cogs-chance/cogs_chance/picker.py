"""WeightedPicker - weighted random selection via Vose's alias method."""
from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

_logger = logging.getLogger("cogs.chance")


class WeightedPicker(Generic[T]):
    """A weighted bag: give it items with weights, then sample them.

    Loot tables are the usual example. Building the table is O(n) and
    every draw is O(1), using Vose's alias method
    (https://www.keithschwarz.com/darts-dice-coins/).

    Weights are fixed once built. Items can be replaced by index.
    """

    def __init__(self, entries: Iterable[tuple[T, float]]) -> None:
        items: list[T] = []
        weights: list[float] = []
        for item, weight in entries:
            if not math.isfinite(weight) or weight < 0:
                raise ValueError(f"Invalid weight {weight!r} for {item!r}")
            items.append(item)
            weights.append(float(weight))
        if not items:
            raise ValueError("WeightedPicker needs at least one entry")
        total = math.fsum(weights)
        if total <= 0:
            raise ValueError("WeightedPicker needs a positive total weight")

        n = len(items)
        scaled = [w * n / total for w in weights]
        prob = [0.0] * n
        alias = [0] * n
        small = [i for i, p in enumerate(scaled) if p < 1.0]
        large = [i for i, p in enumerate(scaled) if p >= 1.0]

        while small and large:
            less = small.pop()
            more = large.pop()
            prob[less] = scaled[less]
            alias[less] = more
            scaled[more] = scaled[more] + scaled[less] - 1.0
            if scaled[more] < 1.0:
                small.append(more)
            else:
                large.append(more)

        # leftovers are 1.0 up to rounding error
        for i in large:
            prob[i] = 1.0
        for i in small:
            prob[i] = 1.0 if scaled[i] > 0 else 0.0

        self._items = items
        self._prob = prob
        self._alias = alias
        _logger.debug("Built alias table for %d entries (total weight %g)", n, total)

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get_idx(self, rng: random.Random) -> int:
        """Draw an index into the entry list."""
        column = rng.randrange(len(self._prob))
        if rng.random() < self._prob[column]:
            return column
        return self._alias[column]

    def get(self, rng: random.Random) -> T:
        return self._items[self.get_idx(rng)]

    def get_by_idx(self, idx: int) -> T | None:
        if 0 <= idx < len(self._items):
            return self._items[idx]
        return None

    def set_by_idx(self, idx: int, item: T) -> None:
        """Replace the item at ``idx``; its weight is unchanged."""
        if not 0 <= idx < len(self._items):
            raise IndexError(f"Index {idx} out of range for {len(self._items)} entries")
        self._items[idx] = item

    @classmethod
    def pick(cls, entries: Iterable[tuple[T, float]], rng: random.Random) -> T:
        """One-off weighted draw without keeping the picker around."""
        return cls(entries).get(rng)
