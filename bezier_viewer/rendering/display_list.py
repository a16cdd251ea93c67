"""Recorded draw calls for one drawing surface.

A surface widget owns a ``DisplayList`` and replays it on every paint event,
so the geometry side can draw at any time without holding a painter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from bezier_viewer.geometry.primitives import Point
from bezier_viewer.rendering.renderer import Renderer
from bezier_viewer.rendering.styles import PolylineStyle


@dataclass(frozen=True)
class PolylineCommand:
    points: tuple[Point, ...]
    style: PolylineStyle


@dataclass(frozen=True)
class CircleCommand:
    center: Point
    radius: float
    color: str


@dataclass(frozen=True)
class SegmentCommand:
    start: Point
    end: Point
    style: PolylineStyle


DrawCommand = Union[PolylineCommand, CircleCommand, SegmentCommand]


class DisplayList:
    """Renderer that records commands instead of drawing them."""

    def __init__(self) -> None:
        self._commands: list[DrawCommand] = []

    @property
    def is_empty(self) -> bool:
        return not self._commands

    def commands(self) -> list[DrawCommand]:
        return list(self._commands)

    def polylines(self) -> list[PolylineCommand]:
        return [cmd for cmd in self._commands if isinstance(cmd, PolylineCommand)]

    def circles(self) -> list[CircleCommand]:
        return [cmd for cmd in self._commands if isinstance(cmd, CircleCommand)]

    def segments(self) -> list[SegmentCommand]:
        return [cmd for cmd in self._commands if isinstance(cmd, SegmentCommand)]

    def clear_surface(self) -> None:
        self._commands.clear()

    def draw_polyline(self, points: Sequence[Point], style: PolylineStyle) -> None:
        self._commands.append(PolylineCommand(tuple(points), style))

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        self._commands.append(CircleCommand(center, radius, color))

    def draw_line_segment(self, start: Point, end: Point, style: PolylineStyle) -> None:
        self._commands.append(SegmentCommand(start, end, style))

    def replay(self, renderer: Renderer) -> None:
        for cmd in self._commands:
            if isinstance(cmd, PolylineCommand):
                renderer.draw_polyline(cmd.points, cmd.style)
            elif isinstance(cmd, CircleCommand):
                renderer.draw_filled_circle(cmd.center, cmd.radius, cmd.color)
            else:
                renderer.draw_line_segment(cmd.start, cmd.end, cmd.style)
