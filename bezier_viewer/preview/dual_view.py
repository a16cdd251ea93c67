"""Derivative (hodograph) view mirrored from the primary control points.

The secondary surface draws the difference vectors as if they were control
points of a small Bézier curve, shifted so the polygon sits around the
surface center instead of the origin.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bezier_viewer.geometry.de_casteljau import DEFAULT_SAMPLES, derivative, sample_curve
from bezier_viewer.geometry.primitives import Point, translate
from bezier_viewer.rendering.construction import draw_construction, draw_derivative_vectors
from bezier_viewer.rendering.renderer import Renderer
from bezier_viewer.rendering.styles import ConstructionStyles


@dataclass(frozen=True)
class DerivativeOverlay:
    """Raw derivative vectors and the anchor their arrows start from."""

    vectors: tuple[Point, ...]
    center: Point

    def translated(self) -> list[Point]:
        return translate(self.vectors, self.center)


def surface_center(size: tuple[int, int]) -> Point:
    width, height = size
    return (width / 2, height / 2)


def hodograph_polygon(points: Sequence[Point], center: Point) -> list[Point]:
    return translate(derivative(points), center)


def build_overlay(points: Sequence[Point], size: tuple[int, int]) -> DerivativeOverlay:
    return DerivativeOverlay(tuple(derivative(points)), surface_center(size))


def draw_overlay(
    renderer: Renderer,
    overlay: DerivativeOverlay,
    trace: Sequence[Point],
    styles: ConstructionStyles | None = None,
) -> None:
    """Draw the translated vector polygon, ``trace`` and the arrows."""

    draw_construction(renderer, [overlay.translated()], trace, True, styles)
    draw_derivative_vectors(renderer, overlay.vectors, overlay.center, styles)


def draw_static_hodograph(
    renderer: Renderer,
    points: Sequence[Point],
    size: tuple[int, int],
    samples: int = DEFAULT_SAMPLES,
    styles: ConstructionStyles | None = None,
) -> DerivativeOverlay:
    """Redraw the whole derivative view for ``points`` without animating."""

    overlay = build_overlay(points, size)
    draw_overlay(renderer, overlay, sample_curve(overlay.translated(), samples), styles)
    return overlay
