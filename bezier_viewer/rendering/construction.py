"""Draw calls for the de Casteljau construction.

Converts geometry (levels, traces, vectors) into renderer calls without
computing anything about the curve itself.
"""
from __future__ import annotations

import math
from typing import Sequence

from bezier_viewer.geometry.primitives import Point, add
from bezier_viewer.rendering.renderer import Renderer
from bezier_viewer.rendering.styles import (
    ARROW_HEAD_LENGTH,
    MARKER_RADIUS,
    ConstructionStyles,
    PolylineStyle,
    construction_styles,
)


def draw_construction(
    renderer: Renderer,
    levels: Sequence[Sequence[Point]],
    trace: Sequence[Point],
    draw_final: bool,
    styles: ConstructionStyles | None = None,
) -> None:
    """Clear the surface and draw a construction frame.

    Level 0 is the control polygon (dashed, with a dot per point). Deeper
    levels are the construction scaffolding and are skipped for a final
    frame. ``trace`` is the curve drawn so far.
    """

    styles = styles or construction_styles()
    renderer.clear_surface()

    polygon = list(levels[0]) if levels else []
    _draw_polyline(renderer, polygon, styles.polygon)
    for point in polygon:
        renderer.draw_filled_circle(point, MARKER_RADIUS, styles.palette.control_point)

    if not draw_final:
        for level in levels[1:]:
            _draw_polyline(renderer, level, styles.construction)

    _draw_polyline(renderer, trace, styles.curve)


def draw_tracing_point(
    renderer: Renderer, point: Point, styles: ConstructionStyles | None = None
) -> None:
    styles = styles or construction_styles()
    renderer.draw_filled_circle(point, MARKER_RADIUS, styles.palette.tracing_point)


def draw_derivative_vectors(
    renderer: Renderer,
    vectors: Sequence[Point],
    center: Point,
    styles: ConstructionStyles | None = None,
) -> None:
    """Draw each vector as an arrow anchored at ``center``."""

    styles = styles or construction_styles()
    for vector in vectors:
        tip = add(center, vector)
        renderer.draw_line_segment(center, tip, styles.vector)
        for barb in arrowhead(center, tip):
            renderer.draw_line_segment(tip, barb, styles.vector)


def arrowhead(
    start: Point, tip: Point, length: float = ARROW_HEAD_LENGTH
) -> tuple[Point, Point]:
    """Return the two barb end points of an arrow pointing at ``tip``."""

    angle = math.atan2(tip[1] - start[1], tip[0] - start[0])
    spread = math.pi / 6
    left = (
        tip[0] - length * math.cos(angle - spread),
        tip[1] - length * math.sin(angle - spread),
    )
    right = (
        tip[0] - length * math.cos(angle + spread),
        tip[1] - length * math.sin(angle + spread),
    )
    return left, right


def _draw_polyline(
    renderer: Renderer, points: Sequence[Point], style: PolylineStyle
) -> None:
    if len(points) < 2:
        return
    renderer.draw_polyline(points, style)
