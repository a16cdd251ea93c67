"""Control points and editing mode for the Bézier editor.

The state is owned by the editor controller and only changes through the
transition methods below. Callers get tuples back, never the live list.
"""
from __future__ import annotations

import logging
from enum import Enum

from bezier_viewer.geometry.hit_test import DEFAULT_HIT_RADIUS, find_control_point
from bezier_viewer.geometry.primitives import Point

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    IDLE = "idle"
    ADDING_POINTS = "adding_points"
    DRAGGING = "dragging"


class EditorState:
    def __init__(self, points: list[Point] | None = None) -> None:
        self._points: list[Point] = [(float(x), float(y)) for x, y in points or []]
        self._adding_points = False
        self._drag_index: int | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def mode(self) -> InteractionMode:
        if self._drag_index is not None:
            return InteractionMode.DRAGGING
        if self._adding_points:
            return InteractionMode.ADDING_POINTS
        return InteractionMode.IDLE

    @property
    def drag_index(self) -> int | None:
        return self._drag_index

    def __len__(self) -> int:
        return len(self._points)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def enter_adding_mode(self) -> None:
        self._adding_points = True
        logger.debug("Mode -> %s", self.mode.value)

    def enter_idle(self) -> None:
        self._adding_points = False
        logger.debug("Mode -> %s", self.mode.value)

    def reset(self) -> None:
        self._points = []
        self._adding_points = False
        self._drag_index = None
        logger.debug("Editor state reset")

    def add_point(self, pos: Point) -> bool:
        """Append ``pos`` while adding points. Returns True if added."""
        if not self._adding_points:
            return False
        self._points.append((float(pos[0]), float(pos[1])))
        logger.debug("Added control point %d at (%.1f, %.1f)", len(self._points) - 1, *pos)
        return True

    def begin_drag(self, pos: Point, radius: float = DEFAULT_HIT_RADIUS) -> int | None:
        index = find_control_point(self._points, pos, radius)
        if index is None:
            return None
        self._drag_index = index
        logger.debug("Dragging control point %d", index)
        return index

    def drag_to(self, pos: Point) -> bool:
        """Replace the dragged point with ``pos``. Returns True if changed."""
        if self._drag_index is None:
            return False
        self._points[self._drag_index] = (float(pos[0]), float(pos[1]))
        return True

    def end_drag(self) -> None:
        if self._drag_index is not None:
            logger.debug("Released control point %d", self._drag_index)
        self._drag_index = None
