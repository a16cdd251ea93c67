from __future__ import annotations

import logging
from typing import Callable

from PyQt5 import QtCore

from bezier_viewer.animation.run import AnimationRun
from bezier_viewer.config import DEFAULT_FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class FrameScheduler(QtCore.QObject):
    """Advance every active animation run once per timer tick."""

    def __init__(
        self,
        parent: QtCore.QObject | None = None,
        interval_ms: int = DEFAULT_FRAME_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._runs: list[tuple[AnimationRun, Callable[[], None]]] = []
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(max(1, int(interval_ms)))
        self._timer.timeout.connect(self.tick)

    @property
    def active_runs(self) -> list[AnimationRun]:
        return [run for run, _ in self._runs]

    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self, run: AnimationRun, on_frame: Callable[[], None]) -> None:
        """Schedule ``run``; ``on_frame`` is called after each rendered frame."""
        self._runs.append((run, on_frame))
        logger.debug("Scheduled animation %s (%d active)", run.name, len(self._runs))
        if not self._timer.isActive():
            self._timer.start()

    def cancel_all(self) -> None:
        for run, _ in self._runs:
            run.cancel()
        self._runs = []
        self._timer.stop()

    def tick(self) -> None:
        remaining = []
        for run, on_frame in self._runs:
            if run.finished:
                continue
            more = run.advance()
            on_frame()
            if more:
                remaining.append((run, on_frame))
        self._runs = remaining
        if not self._runs:
            self._timer.stop()
