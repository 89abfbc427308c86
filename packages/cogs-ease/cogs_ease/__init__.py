"""cogs-ease - Easing curves, interpolation, and tweens."""
from __future__ import annotations

from cogs_ease.easing import EASINGS, OVERSHOOTING
from cogs_ease.interpolate import ease, lerp, resolve
from cogs_ease.tween import Tween

__all__ = ["EASINGS", "OVERSHOOTING", "ease", "lerp", "resolve", "Tween"]
