from __future__ import annotations

from PyQt5 import QtCore, QtGui, QtWidgets

from bezier_viewer.rendering.display_list import DisplayList
from bezier_viewer.rendering.qt_painter import QPainterRenderer


class SurfaceWidget(QtWidgets.QWidget):
    """Drawing surface that replays its display list on every paint."""

    pointerPressed = QtCore.pyqtSignal(float, float)
    pointerMoved = QtCore.pyqtSignal(float, float)
    pointerReleased = QtCore.pyqtSignal(float, float)

    def __init__(
        self,
        size: tuple[int, int],
        background: str = "white",
        interactive: bool = True,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setFixedSize(*size)
        self.setMouseTracking(False)
        self._interactive = interactive
        self._background = QtGui.QColor(background)
        self.renderer = DisplayList()

    def surface_size(self) -> tuple[int, int]:
        return (self.width(), self.height())

    def request_repaint(self) -> None:
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:  # noqa: D401
        _ = event
        painter = QtGui.QPainter(self)
        try:
            backend = QPainterRenderer(painter, self._background)
            backend.clear_surface()
            self.renderer.replay(backend)
        finally:
            painter.end()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._interactive and event.button() == QtCore.Qt.LeftButton:
            self.pointerPressed.emit(float(event.x()), float(event.y()))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._interactive and event.buttons() & QtCore.Qt.LeftButton:
            self.pointerMoved.emit(float(event.x()), float(event.y()))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:  # noqa: D401
        if self._interactive and event.button() == QtCore.Qt.LeftButton:
            self.pointerReleased.emit(float(event.x()), float(event.y()))
            event.accept()
            return
        super().mouseReleaseEvent(event)
