"""De Casteljau evaluation and hodograph helpers.

Everything here is pure: inputs are never mutated and no state is kept
between calls, so a point set may change freely between two evaluations.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from bezier_viewer.geometry.primitives import Point, lerp, sub

DEFAULT_SAMPLES = 150


def subdivide(points: Sequence[Point], t: float) -> list[list[Point]]:
    """Return every de Casteljau level for ``points`` at parameter ``t``.

    Level 0 is a copy of ``points``; each following level holds one point
    fewer and the last level holds the single curve point. ``t`` is not
    clamped, values outside [0, 1] extrapolate along the same blend.
    """

    if not points:
        raise ValueError("subdivide requires at least one control point")

    level = [(float(x), float(y)) for x, y in points]
    levels = [level]
    while len(level) > 1:
        level = [lerp(level[i], level[i + 1], t) for i in range(len(level) - 1)]
        levels.append(level)
    return levels


def curve_point(points: Sequence[Point], t: float) -> Point:
    return subdivide(points, t)[-1][0]


def sample_curve(points: Sequence[Point], samples: int = DEFAULT_SAMPLES) -> list[Point]:
    """Evaluate the curve at ``samples + 1`` evenly spaced parameters in [0, 1]."""

    if not points:
        return []
    if samples < 1:
        raise ValueError(f"samples must be positive, got {samples}")
    return [curve_point(points, float(t)) for t in np.linspace(0.0, 1.0, samples + 1)]


def derivative(points: Sequence[Point]) -> list[Point]:
    """Differences between adjacent control points.

    This is the hodograph control polygon without the ``(n - 1)`` degree
    factor; the viewer draws the raw differences.
    """

    return [sub(points[i + 1], points[i]) for i in range(len(points) - 1)]
