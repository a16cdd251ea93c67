from __future__ import annotations

from typing import List

from PyQt5 import QtWidgets

from bezier_viewer.config import ViewerSettings
from bezier_viewer.ui.main_window import BezierViewerWindow


class BezierViewerApp(QtWidgets.QApplication):
    """Thin application wrapper for the Bézier viewer."""

    def __init__(self, argv: List[str]):
        super().__init__(argv)
        self.setApplicationName("Bézier Viewer")
        self.setQuitOnLastWindowClosed(True)
        self.window: BezierViewerWindow | None = None


def bootstrap_window(settings: ViewerSettings | None = None) -> BezierViewerWindow:
    """Build the main window with its controller wired."""

    return BezierViewerWindow(settings)
