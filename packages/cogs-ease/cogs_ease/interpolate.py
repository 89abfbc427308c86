"""Linear interpolation and eased interpolation between values."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Union, overload

from cogs_ease.easing import EASINGS

Easing = Union[str, Callable[[float], float]]


@overload
def lerp(t: float, start: float, end: float) -> float: ...
@overload
def lerp(t: float, start: Sequence[float], end: Sequence[float]) -> tuple[float, ...]: ...


def lerp(t, start, end):
    """Value ``t`` of the way from ``start`` to ``end``.

    ``t`` outside [0, 1] extrapolates. Sequences are interpolated
    element-wise and must have equal length.
    """
    if isinstance(start, Sequence):
        return tuple(
            s * (1 - t) + e * t for s, e in zip(start, end, strict=True)
        )
    return start * (1 - t) + end * t


def resolve(easing: Easing) -> Callable[[float], float]:
    """Look up an easing by name, or pass a callable through.

    Raises KeyError for an unknown name.
    """
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise KeyError(f"Unknown easing {easing!r}") from None


@overload
def ease(easing: Easing, t: float, start: float, end: float) -> float: ...
@overload
def ease(
    easing: Easing, t: float, start: Sequence[float], end: Sequence[float]
) -> tuple[float, ...]: ...


def ease(easing, t, start, end):
    """Interpolate with ``t`` passed through ``easing`` first."""
    return lerp(resolve(easing)(t), start, end)
