"""Stroke and fill styles for the construction drawing."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace

MARKER_RADIUS = 5.0
ARROW_HEAD_LENGTH = 10.0


@dataclass(frozen=True)
class PolylineStyle:
    color: str
    width: float = 1.0
    dash_pattern: tuple[float, ...] = ()


@dataclass(frozen=True)
class Palette:
    """Color names (or ``#rrggbb``) used by the construction drawing."""

    polygon: str = "gray"
    control_point: str = "black"
    construction: str = "red"
    curve: str = "blue"
    tracing_point: str = "green"
    vector: str = "red"
    background: str = "white"

    @classmethod
    def keys(cls) -> list[str]:
        return [item.name for item in fields(cls)]

    def with_overrides(self, overrides: dict[str, str]) -> "Palette":
        known = {key: value for key, value in overrides.items() if key in self.keys()}
        return replace(self, **known)


@dataclass(frozen=True)
class ConstructionStyles:
    polygon: PolylineStyle
    construction: PolylineStyle
    curve: PolylineStyle
    vector: PolylineStyle
    palette: Palette = field(default_factory=Palette)


def construction_styles(palette: Palette | None = None) -> ConstructionStyles:
    palette = palette or Palette()
    return ConstructionStyles(
        polygon=PolylineStyle(palette.polygon, 2.0, (5.0, 5.0)),
        construction=PolylineStyle(palette.construction, 1.0),
        curve=PolylineStyle(palette.curve, 3.0),
        vector=PolylineStyle(palette.vector, 1.0),
        palette=palette,
    )
