"""Line segment geometry used to place elements along a ``<line>``."""
from __future__ import annotations

import math
from typing import Tuple


def segment_width(x1: float, y1: float, x2: float, y2: float) -> float:
    return abs(x2 - x1)


def segment_height(x1: float, y1: float, x2: float, y2: float) -> float:
    return abs(y2 - y1)


def segment_length(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def segment_slope(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return dy/dx. Vertical segments have no slope and raise ZeroDivisionError."""
    if x1 == x2:
        raise ZeroDivisionError(
            f"slope is undefined for vertical segment ({x1}, {y1})-({x2}, {y2})"
        )
    return (y2 - y1) / (x2 - x1)


def point_along(
    x1: float, y1: float, x2: float, y2: float, fraction: float
) -> Tuple[float, float]:
    """Return the point ``fraction`` of the way from (x1, y1) to (x2, y2).

    0 is the start and 1 the end; values outside [0, 1] extrapolate past the
    endpoints. Zero-length segments always yield the start point.
    """
    distance = fraction * segment_length(x1, y1, x2, y2)

    if x1 == x2:
        if y1 > y2:
            return x1, y1 - distance
        return x1, y1 + distance

    slope = segment_slope(x1, y1, x2, y2)
    # Solving (x - x1)^2 * (1 + slope^2) = distance^2 gives two roots.
    offset = abs(distance) / math.sqrt(1 + slope * slope)
    toward = x1 + offset if x2 > x1 else x1 - offset
    away = x1 - offset if x2 > x1 else x1 + offset
    x_pos = toward if fraction >= 0 else away
    y_pos = slope * (x_pos - x1) + y1
    return x_pos, y_pos


__all__ = [
    "point_along",
    "segment_height",
    "segment_length",
    "segment_slope",
    "segment_width",
]
