"""Easing curves.

Every curve maps progress ``t`` to eased progress, with 0 -> 0 and 1 -> 1.
``back_*`` and ``elastic_*`` overshoot the [0, 1] range on the way.
Formulas follow https://easings.net.
"""
from __future__ import annotations

import math
from typing import Callable

_BACK = 1.70158
_BACK_IN_OUT = _BACK * 1.525
_ELASTIC = math.tau / 3
_ELASTIC_IN_OUT = math.tau / 4.5
_BOUNCE_N = 7.5625
_BOUNCE_D = 2.75


def linear(t: float) -> float:
    return t


# --- Sine ---


def sine_in(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t: float) -> float:
    return math.sin(t * math.pi / 2)


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


# --- Polynomial ---


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return t * (2 - t)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def cubic_in(t: float) -> float:
    return t ** 3


def cubic_out(t: float) -> float:
    return 1 - (1 - t) ** 3


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4 * t ** 3
    return 1 - (-2 * t + 2) ** 3 / 2


def quart_in(t: float) -> float:
    return t ** 4


def quart_out(t: float) -> float:
    return 1 - (1 - t) ** 4


def quart_in_out(t: float) -> float:
    if t < 0.5:
        return 8 * t ** 4
    return 1 - (-2 * t + 2) ** 4 / 2


def quint_in(t: float) -> float:
    return t ** 5


def quint_out(t: float) -> float:
    return 1 - (1 - t) ** 5


def quint_in_out(t: float) -> float:
    if t < 0.5:
        return 16 * t ** 5
    return 1 - (-2 * t + 2) ** 5 / 2


# --- Exponential / circular ---


def expo_in(t: float) -> float:
    return 0.0 if t == 0 else 2 ** (10 * t - 10)


def expo_out(t: float) -> float:
    return 1.0 if t == 1 else 1 - 2 ** (-10 * t)


def expo_in_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    if t < 0.5:
        return 2 ** (20 * t - 10) / 2
    return (2 - 2 ** (-20 * t + 10)) / 2


def circ_in(t: float) -> float:
    return 1 - math.sqrt(max(0.0, 1 - t * t))


def circ_out(t: float) -> float:
    return math.sqrt(max(0.0, 1 - (t - 1) ** 2))


def circ_in_out(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(max(0.0, 1 - (2 * t) ** 2))) / 2
    return (math.sqrt(max(0.0, 1 - (-2 * t + 2) ** 2)) + 1) / 2


# --- Overshooting ---


def back_in(t: float) -> float:
    return (_BACK + 1) * t ** 3 - _BACK * t * t


def back_out(t: float) -> float:
    return 1 + (_BACK + 1) * (t - 1) ** 3 + _BACK * (t - 1) ** 2


def back_in_out(t: float) -> float:
    c = _BACK_IN_OUT
    if t < 0.5:
        return ((2 * t) ** 2 * ((c + 1) * 2 * t - c)) / 2
    return ((2 * t - 2) ** 2 * ((c + 1) * (t * 2 - 2) + c) + 2) / 2


def elastic_in(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * _ELASTIC)


def elastic_out(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * _ELASTIC) + 1


def elastic_in_out(t: float) -> float:
    if t == 0 or t == 1:
        return float(t)
    wave = math.sin((20 * t - 11.125) * _ELASTIC_IN_OUT)
    if t < 0.5:
        return -(2 ** (20 * t - 10) * wave) / 2
    return (2 ** (-20 * t + 10) * wave) / 2 + 1


# --- Bounce ---


def bounce_out(t: float) -> float:
    if t < 1 / _BOUNCE_D:
        return _BOUNCE_N * t * t
    if t < 2 / _BOUNCE_D:
        t -= 1.5 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.75
    if t < 2.5 / _BOUNCE_D:
        t -= 2.25 / _BOUNCE_D
        return _BOUNCE_N * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D
    return _BOUNCE_N * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return (1 - bounce_out(1 - 2 * t)) / 2
    return (1 + bounce_out(2 * t - 1)) / 2


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    # short names for the quadratic family
    "ease_in": quad_in,
    "ease_out": quad_out,
    "ease_in_out": quad_in_out,
    "sine_in": sine_in,
    "sine_out": sine_out,
    "sine_in_out": sine_in_out,
    "quad_in": quad_in,
    "quad_out": quad_out,
    "quad_in_out": quad_in_out,
    "cubic_in": cubic_in,
    "cubic_out": cubic_out,
    "cubic_in_out": cubic_in_out,
    "quart_in": quart_in,
    "quart_out": quart_out,
    "quart_in_out": quart_in_out,
    "quint_in": quint_in,
    "quint_out": quint_out,
    "quint_in_out": quint_in_out,
    "expo_in": expo_in,
    "expo_out": expo_out,
    "expo_in_out": expo_in_out,
    "circ_in": circ_in,
    "circ_out": circ_out,
    "circ_in_out": circ_in_out,
    "back_in": back_in,
    "back_out": back_out,
    "back_in_out": back_in_out,
    "elastic_in": elastic_in,
    "elastic_out": elastic_out,
    "elastic_in_out": elastic_in_out,
    "bounce_in": bounce_in,
    "bounce_out": bounce_out,
    "bounce_in_out": bounce_in_out,
}

OVERSHOOTING: frozenset[str] = frozenset({
    "back_in",
    "back_out",
    "back_in_out",
    "elastic_in",
    "elastic_out",
    "elastic_in_out",
})
