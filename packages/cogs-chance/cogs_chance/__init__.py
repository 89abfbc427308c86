"""cogs-chance - Weighted random selection and stable hashing."""
from __future__ import annotations

from cogs_chance.hashing import hashcode
from cogs_chance.picker import WeightedPicker

__all__ = ["WeightedPicker", "hashcode"]
