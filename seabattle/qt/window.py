"""Main Qt window."""

from __future__ import annotations

from seabattle.app.controller import GameController
from seabattle.qt.canvas import GameCanvas

try:
    from PyQt6.QtWidgets import QApplication, QMainWindow
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


class MainWindow(QMainWindow):
    def __init__(self, controller: GameController) -> None:
        super().__init__()
        self._controller = controller
        self._canvas = GameCanvas(controller, self.sync_ui)
        self.setCentralWidget(self._canvas)
        self.setWindowTitle("Морской бой")

    def sync_ui(self) -> None:
        ui = self._controller.ui_state()
        if ui.is_closing:
            app = QApplication.instance()
            if app is not None:
                app.quit()
            return
        self._canvas.update()
        self._canvas.setFocus()


class QtFrontendWindow:
    """Adapter exposing the frontend window contract over ``MainWindow``."""

    def __init__(self, window: MainWindow) -> None:
        self._window = window

    def show_fullscreen(self) -> None:
        self._window.showFullScreen()

    def show_maximized(self) -> None:
        self._window.showMaximized()

    def show_windowed(self, width: int, height: int) -> None:
        self._window.resize(width, height)
        self._window.show()

    def sync_ui(self) -> None:
        self._window.sync_ui()
