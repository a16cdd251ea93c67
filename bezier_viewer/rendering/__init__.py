"""Drawing helpers for the Bézier surfaces."""
from __future__ import annotations

from .construction import (
    arrowhead,
    draw_construction,
    draw_derivative_vectors,
    draw_tracing_point,
)
from .display_list import DisplayList
from .renderer import Renderer
from .styles import ConstructionStyles, Palette, PolylineStyle, construction_styles

__all__ = [
    "ConstructionStyles",
    "DisplayList",
    "Palette",
    "PolylineStyle",
    "Renderer",
    "arrowhead",
    "construction_styles",
    "draw_construction",
    "draw_derivative_vectors",
    "draw_tracing_point",
]
