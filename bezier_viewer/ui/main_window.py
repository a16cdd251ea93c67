from __future__ import annotations

from PyQt5 import QtCore, QtWidgets

from bezier_viewer.animation.scheduler import FrameScheduler
from bezier_viewer.config import ViewerSettings
from bezier_viewer.ui.controller import EditorController
from bezier_viewer.ui.surface_widget import SurfaceWidget

HODOGRAPH_CAPTION = (
    "Derivative vectors P[i+1] - P[i], drawn without the degree factor (n - 1)."
)


class BezierViewerWindow(QtWidgets.QMainWindow):
    """Bézier editor with a synchronized derivative view."""

    def __init__(self, settings: ViewerSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Bézier Viewer")
        self._settings = settings or ViewerSettings()

        background = self._settings.palette.background
        self.curve_surface = SurfaceWidget(self._settings.surface_size, background)
        self.derivative_surface = SurfaceWidget(
            self._settings.surface_size, background, interactive=False
        )
        self.scheduler = FrameScheduler(self, self._settings.frame_interval_ms)
        self.controller = EditorController(
            self.curve_surface,
            self.derivative_surface,
            self.scheduler,
            settings=self._settings,
            show_status=self.show_status_message,
        )

        self._add_points_button = QtWidgets.QPushButton("Add Control Points")
        self._add_points_button.setToolTip("Click on the left surface to place points")
        self._animate_button = QtWidgets.QPushButton("Draw Bézier Curve")
        self._reset_button = QtWidgets.QPushButton("Reset")

        self._add_points_button.clicked.connect(self.controller.on_add_points_command)
        self._animate_button.clicked.connect(self.controller.on_animate_command)
        self._reset_button.clicked.connect(self.controller.on_reset_command)

        self.curve_surface.pointerPressed.connect(
            lambda x, y: self.controller.on_pointer_press((x, y))
        )
        self.curve_surface.pointerMoved.connect(
            lambda x, y: self.controller.on_pointer_move((x, y))
        )
        self.curve_surface.pointerReleased.connect(
            lambda x, y: self.controller.on_pointer_release((x, y))
        )

        button_row = QtWidgets.QHBoxLayout()
        button_row.addWidget(self._add_points_button)
        button_row.addWidget(self._animate_button)
        button_row.addWidget(self._reset_button)
        button_row.addStretch(1)

        curve_column = QtWidgets.QVBoxLayout()
        curve_column.addWidget(QtWidgets.QLabel("Curve"))
        curve_column.addWidget(self.curve_surface)

        caption = QtWidgets.QLabel(HODOGRAPH_CAPTION)
        caption.setWordWrap(True)
        caption.setMaximumWidth(self._settings.surface_width)
        derivative_column = QtWidgets.QVBoxLayout()
        derivative_column.addWidget(QtWidgets.QLabel("Derivative"))
        derivative_column.addWidget(self.derivative_surface)
        derivative_column.addWidget(caption)

        surfaces_row = QtWidgets.QHBoxLayout()
        surfaces_row.addLayout(curve_column)
        surfaces_row.addLayout(derivative_column)

        layout = QtWidgets.QVBoxLayout()
        layout.addLayout(button_row)
        layout.addLayout(surfaces_row)
        layout.setAlignment(QtCore.Qt.AlignTop | QtCore.Qt.AlignLeft)

        container = QtWidgets.QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)
        self.statusBar()

    def show_status_message(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.scheduler.cancel_all()
        super().closeEvent(event)
