import pytest

from bezier_viewer.preview.dual_view import (
    DerivativeOverlay,
    build_overlay,
    draw_static_hodograph,
    hodograph_polygon,
    surface_center,
)
from bezier_viewer.rendering import DisplayList


TRIANGLE = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0)]


def test_surface_center_is_half_size():
    assert surface_center((600, 400)) == (300.0, 200.0)


def test_hodograph_polygon_is_translated_derivative():
    assert hodograph_polygon(TRIANGLE, (300.0, 300.0)) == [(400.0, 300.0), (300.0, 400.0)]


def test_overlay_keeps_raw_vectors():
    overlay = build_overlay(TRIANGLE, (600, 600))

    assert overlay == DerivativeOverlay(((100.0, 0.0), (0.0, 100.0)), (300.0, 300.0))
    assert overlay.translated() == [(400.0, 300.0), (300.0, 400.0)]


def test_static_hodograph_draws_polygon_curve_and_arrows():
    renderer = DisplayList()

    draw_static_hodograph(renderer, TRIANGLE, (600, 600), samples=150)

    polylines = renderer.polylines()
    assert len(polylines) == 2
    assert polylines[0].points == ((400.0, 300.0), (300.0, 400.0))
    curve = polylines[1].points
    assert len(curve) == 151
    assert curve[0] == (400.0, 300.0)
    assert curve[-1] == pytest.approx((300.0, 400.0))
    assert len(renderer.segments()) == 6


def test_static_hodograph_with_too_few_points_is_empty():
    renderer = DisplayList()
    renderer.draw_filled_circle((0.0, 0.0), 5.0, "black")

    overlay = draw_static_hodograph(renderer, [(10.0, 10.0)], (600, 600))

    assert overlay.vectors == ()
    assert renderer.is_empty
