from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from bezier_viewer.geometry.primitives import Point
from bezier_viewer.rendering.styles import PolylineStyle


@runtime_checkable
class Renderer(Protocol):
    def clear_surface(self) -> None:
        ...

    def draw_polyline(self, points: Sequence[Point], style: PolylineStyle) -> None:
        ...

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        ...

    def draw_line_segment(self, start: Point, end: Point, style: PolylineStyle) -> None:
        ...
