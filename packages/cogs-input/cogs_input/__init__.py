"""cogs-input - Edge-detecting input state for polled and event-driven backends."""
from __future__ import annotations

from cogs_input.bindings import ControlMap
from cogs_input.tracker import InputTracker
from cogs_input.types import KeyState, Phase, SnapshotError

__all__ = [
    "InputTracker",
    "ControlMap",
    "KeyState",
    "Phase",
    "SnapshotError",
]
