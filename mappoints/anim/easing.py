"""
Easing curves. Each takes linear progress t in [0, 1] and returns eased
progress, with f(0) == 0 and f(1) == 1. Curves are looked up by name from
the `circle_easing` / `line_easing` options.
"""
from __future__ import annotations

import math
from typing import Callable, Dict

Easing = Callable[[float], float]

EASINGS: Dict[str, Easing] = {}


def _named(fn: Easing) -> Easing:
    EASINGS[fn.__name__] = fn
    return fn


@_named
def linear(t: float) -> float:
    return t


@_named
def ease_in(t: float) -> float:
    return t ** 2


@_named
def ease_out(t: float) -> float:
    return 1 - (1 - t) ** 2


@_named
def ease_in_out(t: float) -> float:
    # cubic, mirrored at the midpoint
    if t < 0.5:
        return 4 * t ** 3
    return 1 - (2 - 2 * t) ** 3 / 2


@_named
def accelerate_decelerate(t: float) -> float:
    return math.cos((t + 1) * math.pi) / 2 + 0.5
