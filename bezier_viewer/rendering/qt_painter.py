"""QPainter backend for the renderer protocol."""
from __future__ import annotations

from typing import Sequence

from PyQt5 import QtCore, QtGui
from PyQt5.QtCore import Qt

from bezier_viewer.geometry.primitives import Point
from bezier_viewer.rendering.styles import PolylineStyle


def make_pen(style: PolylineStyle) -> QtGui.QPen:
    pen = QtGui.QPen(QtGui.QColor(style.color))
    pen.setWidthF(style.width)
    if style.dash_pattern:
        # Qt dash lengths are in units of the pen width
        width = style.width or 1.0
        pen.setDashPattern([length / width for length in style.dash_pattern])
    else:
        pen.setStyle(Qt.SolidLine)
    pen.setCapStyle(Qt.FlatCap)
    pen.setJoinStyle(Qt.MiterJoin)
    return pen


class QPainterRenderer:
    """Issue renderer calls on an active QPainter."""

    def __init__(self, painter: QtGui.QPainter, background: QtGui.QColor) -> None:
        self._painter = painter
        self._background = background
        self._painter.setRenderHint(QtGui.QPainter.Antialiasing, True)

    def clear_surface(self) -> None:
        self._painter.fillRect(self._painter.viewport(), self._background)

    def draw_polyline(self, points: Sequence[Point], style: PolylineStyle) -> None:
        if len(points) < 2:
            return
        self._painter.save()
        self._painter.setPen(make_pen(style))
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawPolyline(
            QtGui.QPolygonF([QtCore.QPointF(x, y) for x, y in points])
        )
        self._painter.restore()

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        self._painter.save()
        self._painter.setPen(Qt.NoPen)
        self._painter.setBrush(QtGui.QColor(color))
        self._painter.drawEllipse(QtCore.QPointF(*center), radius, radius)
        self._painter.restore()

    def draw_line_segment(self, start: Point, end: Point, style: PolylineStyle) -> None:
        self._painter.save()
        self._painter.setPen(make_pen(style))
        self._painter.drawLine(QtCore.QPointF(*start), QtCore.QPointF(*end))
        self._painter.restore()
