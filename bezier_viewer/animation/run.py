"""Frame-by-frame de Casteljau animation.

``animation_frames`` is the animation loop written as a generator: each
``next()`` is one frame, so a timer (or a test) decides when frames happen.
``AnimationRun`` pairs the generator with a renderer and a cancel token.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from bezier_viewer.geometry.de_casteljau import subdivide
from bezier_viewer.geometry.primitives import Point
from bezier_viewer.preview.dual_view import DerivativeOverlay, draw_overlay
from bezier_viewer.rendering.construction import (
    draw_construction,
    draw_derivative_vectors,
    draw_tracing_point,
)
from bezier_viewer.rendering.renderer import Renderer
from bezier_viewer.rendering.styles import ConstructionStyles

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 150


class RunToken:
    """Cancellation flag owned by a single animation run."""

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


@dataclass(frozen=True)
class AnimationFrame:
    index: int
    t: float
    levels: tuple[tuple[Point, ...], ...]
    trace: tuple[Point, ...]
    done: bool = False

    @property
    def curve_point(self) -> Point | None:
        if not self.levels or not self.levels[-1]:
            return None
        return self.levels[-1][0]


def animation_frames(
    points: Sequence[Point],
    steps: int = DEFAULT_STEPS,
    token: RunToken | None = None,
) -> Iterator[AnimationFrame]:
    """Yield construction frames for ``t = 0, 1/steps, ... 1``, then a done frame."""

    if steps < 1:
        raise ValueError(f"steps must be positive, got {steps}")

    snapshot = [(float(x), float(y)) for x, y in points]
    token = token or RunToken()
    trace: list[Point] = []
    index = 0
    t = 0.0

    while snapshot and t <= 1:
        if token.cancelled:
            return
        levels = subdivide(snapshot, t)
        trace.append(levels[-1][0])
        yield AnimationFrame(
            index=index,
            t=t,
            levels=tuple(tuple(level) for level in levels),
            trace=tuple(trace),
        )
        index += 1
        t = index / steps

    if token.cancelled:
        return
    yield AnimationFrame(
        index=index,
        t=t,
        levels=(tuple(snapshot),),
        trace=tuple(trace),
        done=True,
    )


class AnimationRun:
    def __init__(
        self,
        points: Sequence[Point],
        renderer: Renderer,
        steps: int = DEFAULT_STEPS,
        styles: ConstructionStyles | None = None,
        overlay: DerivativeOverlay | None = None,
        name: str = "run",
    ) -> None:
        self.token = RunToken()
        self.name = name
        self._renderer = renderer
        self._styles = styles
        self._overlay = overlay
        self._frames = animation_frames(points, steps, self.token)
        self._finished = False
        self.last_frame: AnimationFrame | None = None

    @property
    def finished(self) -> bool:
        return self._finished or self.token.cancelled

    def cancel(self) -> None:
        if not self.finished:
            logger.debug("Cancelling animation %s", self.name)
        self.token.cancel()

    def advance(self) -> bool:
        """Render the next frame. Returns False once no frames remain."""
        if self.finished:
            return False
        frame = next(self._frames, None)
        if frame is None:
            self._finished = True
            return False
        self.last_frame = frame
        if frame.done:
            self._render_final(frame)
            self._finished = True
            logger.debug("Animation %s finished after %d frames", self.name, frame.index)
            return False
        self._render_frame(frame)
        return True

    def run_to_completion(self) -> int:
        """Advance until the run ends; returns the number of frames rendered."""
        count = 0
        while not self.finished:
            self.advance()
            count += 1
        return count

    def _render_frame(self, frame: AnimationFrame) -> None:
        draw_construction(self._renderer, frame.levels, frame.trace, False, self._styles)
        draw_tracing_point(self._renderer, frame.curve_point, self._styles)
        if self._overlay is not None:
            draw_derivative_vectors(
                self._renderer, self._overlay.vectors, self._overlay.center, self._styles
            )

    def _render_final(self, frame: AnimationFrame) -> None:
        if self._overlay is not None:
            draw_overlay(self._renderer, self._overlay, frame.trace, self._styles)
        else:
            draw_construction(self._renderer, frame.levels, frame.trace, True, self._styles)
