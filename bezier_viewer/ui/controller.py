from __future__ import annotations

import logging
from typing import Callable, Protocol

from bezier_viewer.animation.run import AnimationRun
from bezier_viewer.config import ViewerSettings
from bezier_viewer.geometry.de_casteljau import DEFAULT_SAMPLES, sample_curve
from bezier_viewer.geometry.primitives import Point
from bezier_viewer.model.editor_state import EditorState, InteractionMode
from bezier_viewer.preview.dual_view import build_overlay, draw_static_hodograph
from bezier_viewer.rendering.construction import draw_construction
from bezier_viewer.rendering.display_list import DisplayList
from bezier_viewer.rendering.styles import construction_styles

logger = logging.getLogger(__name__)


class Surface(Protocol):
    renderer: DisplayList

    def surface_size(self) -> tuple[int, int]:
        ...

    def request_repaint(self) -> None:
        ...


class Scheduler(Protocol):
    def start(self, run: AnimationRun, on_frame: Callable[[], None]) -> None:
        ...

    def cancel_all(self) -> None:
        ...


class EditorController:
    """Routes commands and pointer events to the editor state and surfaces."""

    def __init__(
        self,
        primary: Surface,
        secondary: Surface,
        scheduler: Scheduler,
        settings: ViewerSettings | None = None,
        state: EditorState | None = None,
        show_status: Callable[[str], None] | None = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._scheduler = scheduler
        self._settings = settings or ViewerSettings()
        self._state = state if state is not None else EditorState()
        self._show_status = show_status or (lambda _text: None)
        self._styles = construction_styles(self._settings.palette)
        self._press_pos: Point | None = None

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def settings(self) -> ViewerSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def on_add_points_command(self) -> None:
        self._state.enter_adding_mode()
        self._show_status("Click to add control points; drag a point to move it")

    def on_animate_command(self) -> tuple[AnimationRun, AnimationRun]:
        self._state.enter_idle()
        self._scheduler.cancel_all()

        points = self._state.points
        steps = self._settings.steps
        curve_run = AnimationRun(
            points,
            self._primary.renderer,
            steps=steps,
            styles=self._styles,
            name="curve",
        )
        overlay = build_overlay(points, self._secondary.surface_size())
        hodograph_run = AnimationRun(
            overlay.translated(),
            self._secondary.renderer,
            steps=steps,
            styles=self._styles,
            overlay=overlay,
            name="hodograph",
        )
        self._scheduler.start(curve_run, self._primary.request_repaint)
        self._scheduler.start(hodograph_run, self._secondary.request_repaint)
        logger.info("Animating curve with %d control points over %d steps", len(points), steps)
        if len(points) < 2:
            self._show_status("Add at least two control points to see a curve")
        else:
            self._show_status(f"Animating degree {len(points) - 1} curve")
        return curve_run, hodograph_run

    def on_reset_command(self) -> None:
        self._scheduler.cancel_all()
        self._state.reset()
        self._press_pos = None
        for surface in (self._primary, self._secondary):
            surface.renderer.clear_surface()
            surface.request_repaint()
        logger.info("Reset control points")
        self._show_status("Cleared")

    # ------------------------------------------------------------------
    # Pointer events (surface-local coordinates)
    # ------------------------------------------------------------------
    def on_pointer_press(self, pos: Point) -> bool:
        self._press_pos = pos
        index = self._state.begin_drag(pos, self._settings.hit_radius)
        if index is None:
            return False
        self._scheduler.cancel_all()
        return True

    def on_pointer_move(self, pos: Point) -> bool:
        if self._state.mode is not InteractionMode.DRAGGING:
            return False
        self._state.drag_to(pos)
        self.redraw_static()
        return True

    def on_pointer_release(self, pos: Point) -> bool:
        was_click = self._is_click(pos)
        self._press_pos = None
        self._state.end_drag()
        if was_click and self._state.mode is InteractionMode.ADDING_POINTS:
            return self.on_click(pos)
        return False

    def on_click(self, pos: Point) -> bool:
        if not self._state.add_point(pos):
            return False
        draw_construction(self._primary.renderer, [self._state.points], [], True, self._styles)
        self._primary.request_repaint()
        self._show_status(f"{len(self._state)} control points")
        return True

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def redraw_static(self) -> None:
        """Redraw both surfaces for the current points without animating."""
        points = self._state.points
        samples = DEFAULT_SAMPLES
        draw_construction(
            self._primary.renderer,
            [points],
            sample_curve(points, samples),
            True,
            self._styles,
        )
        draw_static_hodograph(
            self._secondary.renderer,
            points,
            self._secondary.surface_size(),
            samples,
            self._styles,
        )
        self._primary.request_repaint()
        self._secondary.request_repaint()

    def _is_click(self, pos: Point) -> bool:
        if self._press_pos is None:
            return False
        moved = abs(pos[0] - self._press_pos[0]) + abs(pos[1] - self._press_pos[1])
        return moved < self._settings.click_tolerance
