"""2D vector helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def negate(v: Vec2) -> Vec2:
    return (-v[0], -v[1])


def distance_sq(a: Vec2, b: Vec2) -> float:
    dx, dy = sub(a, b)
    return dx * dx + dy * dy


def distance(a: Vec2, b: Vec2) -> float:
    return math.sqrt(distance_sq(a, b))


def clamp_axis(value: float, low: float, high: float) -> float:
    """Clamp into [low, high]. When the range is inverted, low wins."""
    return max(low, min(high, value))
