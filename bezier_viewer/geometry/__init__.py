from .de_casteljau import (
    DEFAULT_SAMPLES,
    curve_point,
    derivative,
    sample_curve,
    subdivide,
)
from .hit_test import DEFAULT_HIT_RADIUS, find_control_point
from .primitives import Point

__all__ = [
    "Point",
    "DEFAULT_SAMPLES",
    "DEFAULT_HIT_RADIUS",
    "subdivide",
    "curve_point",
    "sample_curve",
    "derivative",
    "find_control_point",
]
