"""Configuration helpers for Bézier Viewer settings persistence."""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
import sys
from typing import Optional

from PyQt5 import QtGui

from bezier_viewer.animation.run import DEFAULT_STEPS
from bezier_viewer.geometry.hit_test import DEFAULT_HIT_RADIUS
from bezier_viewer.rendering.styles import Palette

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "bezier_viewer.ini"
_ANIMATION_SECTION = "animation"
_INTERACTION_SECTION = "interaction"
_SURFACE_SECTION = "surface"
_COLORS_SECTION = "colors"
DEFAULT_CLICK_TOLERANCE = 6
DEFAULT_FRAME_INTERVAL_MS = 16
DEFAULT_SURFACE_SIZE = (600, 600)


@dataclass
class ViewerSettings:
    steps: int = DEFAULT_STEPS
    frame_interval_ms: int = DEFAULT_FRAME_INTERVAL_MS
    hit_radius: float = DEFAULT_HIT_RADIUS
    click_tolerance: int = DEFAULT_CLICK_TOLERANCE
    surface_width: int = DEFAULT_SURFACE_SIZE[0]
    surface_height: int = DEFAULT_SURFACE_SIZE[1]
    palette: Palette = field(default_factory=Palette)

    @property
    def surface_size(self) -> tuple[int, int]:
        return (self.surface_width, self.surface_height)


def _config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    main_module = sys.modules.get("__main__")
    if main_module and getattr(main_module, "__file__", None):
        return Path(main_module.__file__).resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return _config_dir(main_script_path) / CONFIG_FILENAME


def _read_parser(ini_path: Path) -> ConfigParser | None:
    parser = ConfigParser()
    parser.optionxform = str
    if not ini_path.exists():
        return None
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.warning("Could not read settings from %s; using defaults", ini_path)
        return None
    return parser


def _parse_ini_color(value: str) -> str | None:
    cleaned = value.strip()
    if not cleaned:
        return None
    if cleaned.startswith("#") or QtGui.QColor.isValidColor(cleaned):
        parsed = QtGui.QColor(cleaned)
        return cleaned if parsed.isValid() else None
    parts = [part.strip() for part in cleaned.split(",")]
    if len(parts) != 3:
        return None
    try:
        r, g, b = (int(part) for part in parts)
    except ValueError:
        return None
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            return None
    return QtGui.QColor(r, g, b).name()


def _get_int(parser: ConfigParser, section: str, key: str, default: int, minimum: int) -> int:
    raw = parser.get(section, key, fallback=None)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s.%s value %r; using %s", section, key, raw, default)
        return default
    if value < minimum:
        logger.warning("%s.%s must be >= %s, got %s; using %s", section, key, minimum, value, default)
        return default
    return value


def _get_float(parser: ConfigParser, section: str, key: str, default: float) -> float:
    raw = parser.get(section, key, fallback=None)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid %s.%s value %r; using %s", section, key, raw, default)
        return default
    if value <= 0:
        logger.warning("%s.%s must be positive, got %s; using %s", section, key, value, default)
        return default
    return value


def load_settings(ini_path: Path) -> ViewerSettings:
    settings = ViewerSettings()
    parser = _read_parser(ini_path)
    if parser is None:
        return settings

    settings.steps = _get_int(parser, _ANIMATION_SECTION, "steps", settings.steps, 1)
    settings.frame_interval_ms = _get_int(
        parser, _ANIMATION_SECTION, "frame_interval_ms", settings.frame_interval_ms, 1
    )
    settings.hit_radius = _get_float(
        parser, _INTERACTION_SECTION, "hit_radius", settings.hit_radius
    )
    settings.click_tolerance = _get_int(
        parser, _INTERACTION_SECTION, "click_tolerance", settings.click_tolerance, 1
    )
    settings.surface_width = _get_int(
        parser, _SURFACE_SECTION, "width", settings.surface_width, 1
    )
    settings.surface_height = _get_int(
        parser, _SURFACE_SECTION, "height", settings.surface_height, 1
    )
    if parser.has_section(_COLORS_SECTION):
        overrides = {}
        unknown = []
        for key, value in parser.items(_COLORS_SECTION):
            if key not in Palette.keys():
                unknown.append(key)
                continue
            if not value.strip():
                continue
            color = _parse_ini_color(value)
            if color is None:
                logger.warning(
                    "Invalid colors.%s value %r; using %s",
                    key,
                    value,
                    getattr(settings.palette, key),
                )
                continue
            overrides[key] = color
        if unknown:
            logger.warning("Ignoring unknown color keys: %s", ", ".join(sorted(unknown)))
        settings.palette = settings.palette.with_overrides(overrides)
    return settings


def save_settings(settings: ViewerSettings, ini_path: Path) -> None:
    config = ConfigParser()
    config.optionxform = str
    config[_ANIMATION_SECTION] = {
        "steps": str(settings.steps),
        "frame_interval_ms": str(settings.frame_interval_ms),
    }
    config[_INTERACTION_SECTION] = {
        "hit_radius": str(settings.hit_radius),
        "click_tolerance": str(settings.click_tolerance),
    }
    config[_SURFACE_SECTION] = {
        "width": str(settings.surface_width),
        "height": str(settings.surface_height),
    }
    config[_COLORS_SECTION] = {
        key: str(getattr(settings.palette, key)) for key in Palette.keys()
    }
    try:
        with ini_path.open("w", encoding="utf-8") as handle:
            config.write(handle)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError:
        logger.exception("Unable to write settings to %s", ini_path)
