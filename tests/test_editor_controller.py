from __future__ import annotations

import pytest

from bezier_viewer.config import ViewerSettings
from bezier_viewer.geometry import curve_point
from bezier_viewer.model.editor_state import EditorState, InteractionMode
from bezier_viewer.rendering import DisplayList
from bezier_viewer.ui.controller import EditorController


class _FakeSurface:
    def __init__(self, size=(600, 600)) -> None:
        self.renderer = DisplayList()
        self._size = size
        self.repaints = 0

    def surface_size(self) -> tuple[int, int]:
        return self._size

    def request_repaint(self) -> None:
        self.repaints += 1


class _FakeScheduler:
    def __init__(self) -> None:
        self.runs = []
        self.cancel_calls = 0

    def start(self, run, on_frame) -> None:
        self.runs.append((run, on_frame))

    def cancel_all(self) -> None:
        self.cancel_calls += 1
        for run, _ in self.runs:
            run.cancel()
        self.runs = []

    def pump(self, ticks: int | None = None) -> None:
        count = 0
        while self.runs and (ticks is None or count < ticks):
            remaining = []
            for run, on_frame in self.runs:
                more = run.advance()
                on_frame()
                if more:
                    remaining.append((run, on_frame))
            self.runs = remaining
            count += 1


TRIANGLE = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0)]


@pytest.fixture
def surfaces():
    return _FakeSurface(), _FakeSurface()


@pytest.fixture
def scheduler():
    return _FakeScheduler()


@pytest.fixture
def controller(surfaces, scheduler):
    primary, secondary = surfaces
    return EditorController(primary, secondary, scheduler, state=EditorState(TRIANGLE))


def _click(controller: EditorController, pos) -> None:
    controller.on_pointer_press(pos)
    controller.on_pointer_release(pos)


def test_clicks_add_points_only_in_adding_mode(surfaces, scheduler):
    primary, _ = surfaces
    controller = EditorController(primary, surfaces[1], scheduler)

    _click(controller, (10.0, 10.0))
    assert controller.state.points == ()

    controller.on_add_points_command()
    _click(controller, (10.0, 10.0))
    _click(controller, (200.0, 50.0))

    assert controller.state.points == ((10.0, 10.0), (200.0, 50.0))
    assert controller.state.mode is InteractionMode.ADDING_POINTS
    # polygon only, no curve yet
    assert len(primary.renderer.polylines()) == 1
    assert len(primary.renderer.circles()) == 2
    assert primary.repaints == 2


def test_moving_press_is_not_a_click(surfaces, scheduler):
    controller = EditorController(surfaces[0], surfaces[1], scheduler)
    controller.on_add_points_command()

    controller.on_pointer_press((10.0, 10.0))
    controller.on_pointer_release((40.0, 40.0))

    assert controller.state.points == ()


def test_drag_recomputes_full_curve(controller, surfaces):
    primary, secondary = surfaces
    before = curve_point(TRIANGLE, 0.5)

    assert controller.on_pointer_press((100.0, 0.0)) is True
    assert controller.state.mode is InteractionMode.DRAGGING
    assert controller.on_pointer_move((50.0, 50.0)) is True

    assert controller.state.points[1] == (50.0, 50.0)
    curve = primary.renderer.polylines()[-1].points
    assert len(curve) == 151
    assert curve[75] == pytest.approx((50.0, 50.0))
    assert curve[75] != pytest.approx(before)
    # derivative view: polygon, curve and three arrows per vector
    assert secondary.renderer.polylines()[0].points == ((350.0, 350.0), (350.0, 350.0))
    assert len(secondary.renderer.segments()) == 6

    controller.on_pointer_release((50.0, 50.0))
    assert controller.state.mode is InteractionMode.IDLE
    assert controller.on_pointer_move((10.0, 10.0)) is False
    assert controller.state.points[1] == (50.0, 50.0)


def test_press_on_overlapping_points_drags_lowest_index(surfaces, scheduler):
    state = EditorState([(10.0, 10.0), (10.0, 10.0)])
    controller = EditorController(surfaces[0], surfaces[1], scheduler, state=state)

    controller.on_pointer_press((11.0, 10.0))
    controller.on_pointer_move((80.0, 80.0))

    assert state.points == ((80.0, 80.0), (10.0, 10.0))


def test_animate_starts_two_runs(controller, surfaces, scheduler):
    primary, secondary = surfaces
    controller.on_add_points_command()

    curve_run, hodograph_run = controller.on_animate_command()

    assert controller.state.mode is InteractionMode.IDLE
    assert [run for run, _ in scheduler.runs] == [curve_run, hodograph_run]

    scheduler.pump()

    assert curve_run.finished and hodograph_run.finished
    assert primary.repaints == 152
    assert secondary.repaints == 152
    assert len(primary.renderer.polylines()[-1].points) == 151
    assert secondary.renderer.polylines()[0].points == ((400.0, 300.0), (300.0, 400.0))
    assert len(secondary.renderer.segments()) == 6


def test_animate_uses_configured_steps(surfaces, scheduler):
    settings = ViewerSettings(steps=10)
    controller = EditorController(
        surfaces[0], surfaces[1], scheduler, settings=settings, state=EditorState(TRIANGLE)
    )

    controller.on_animate_command()
    scheduler.pump()

    assert len(surfaces[0].renderer.polylines()[-1].points) == 11


def test_new_animation_cancels_previous(controller, scheduler):
    first, _ = controller.on_animate_command()
    scheduler.pump(ticks=5)

    second, _ = controller.on_animate_command()

    assert first.token.cancelled
    assert not second.finished


def test_drag_cancels_running_animation(controller, scheduler):
    curve_run, hodograph_run = controller.on_animate_command()
    scheduler.pump(ticks=3)

    controller.on_pointer_press((0.0, 0.0))

    assert curve_run.token.cancelled
    assert hodograph_run.token.cancelled
    assert scheduler.runs == []


def test_press_on_empty_space_keeps_animation(controller, scheduler):
    curve_run, _ = controller.on_animate_command()

    assert controller.on_pointer_press((400.0, 400.0)) is False
    assert not curve_run.token.cancelled


def test_animate_with_no_points_degrades_quietly(surfaces, scheduler):
    controller = EditorController(surfaces[0], surfaces[1], scheduler)

    controller.on_animate_command()
    scheduler.pump()

    assert surfaces[0].renderer.is_empty
    assert surfaces[1].renderer.is_empty


def test_reset_clears_points_and_surfaces(controller, surfaces, scheduler):
    primary, secondary = surfaces
    curve_run, _ = controller.on_animate_command()
    scheduler.pump(ticks=2)

    controller.on_reset_command()

    assert controller.state.points == ()
    assert controller.state.mode is InteractionMode.IDLE
    assert primary.renderer.is_empty
    assert secondary.renderer.is_empty
    assert curve_run.token.cancelled
    scheduler.pump()
    assert primary.renderer.is_empty


def test_status_messages_are_reported(surfaces, scheduler):
    messages = []
    controller = EditorController(
        surfaces[0], surfaces[1], scheduler, show_status=messages.append
    )

    controller.on_add_points_command()
    controller.on_animate_command()
    controller.on_reset_command()

    assert len(messages) == 3
    assert "two control points" in messages[1]


def test_drag_redraw_ignores_animation_step_count(surfaces, scheduler):
    primary, secondary = surfaces
    controller = EditorController(
        primary,
        secondary,
        scheduler,
        settings=ViewerSettings(steps=10),
        state=EditorState(TRIANGLE),
    )

    controller.on_pointer_press((0.0, 0.0))
    controller.on_pointer_move((5.0, 5.0))

    assert len(primary.renderer.polylines()[-1].points) == 151
    assert len(secondary.renderer.polylines()[-1].points) == 151
