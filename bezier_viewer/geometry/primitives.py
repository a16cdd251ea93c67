from __future__ import annotations

import math
from typing import Iterable

Point = tuple[float, float]


def lerp(a: Point, b: Point, t: float) -> Point:
    return ((1 - t) * a[0] + t * b[0], (1 - t) * a[1] + t * b[1])


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def translate(points: Iterable[Point], offset: Point) -> list[Point]:
    return [add(point, offset) for point in points]


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])
