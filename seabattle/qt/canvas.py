"""Qt canvas that paints both boards and forwards input to the controller."""

from __future__ import annotations

from collections.abc import Callable

from seabattle.app.controller import GameController
from seabattle.app.events import Gesture, KeyPressed, PointerPressed
from seabattle.app.state_machine import AppState
from seabattle.app.ui_state import AppUIState
from seabattle.core.models import COLUMN_LABELS, ROW_LABELS, BoardSide, CellState, Coord
from seabattle.qt.common import (
    BACKGROUND,
    BOARD_FILL,
    CELL_COLORS,
    CELL_GLYPHS,
    GRID_LINE,
    LABEL,
    status_color,
)
from seabattle.ui.board_layout import DESIGN_H, DESIGN_W, Rect
from seabattle.ui.overlays import Button, button_label, status_rect

try:
    from PyQt6.QtCore import QPointF, QRectF, Qt
    from PyQt6.QtGui import QColor, QFont, QMouseEvent, QPainter, QPen
    from PyQt6.QtWidgets import QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

_KEYS = {
    Qt.Key.Key_N: "n",
    Qt.Key.Key_R: "r",
    Qt.Key.Key_H: "h",
    Qt.Key.Key_M: "m",
    Qt.Key.Key_Space: "space",
}


class GameCanvas(QWidget):
    def __init__(self, controller: GameController, on_change: Callable[[], None]) -> None:
        super().__init__()
        self._controller = controller
        self._on_change = on_change
        self._scale = 1.0
        self._offset_x = 0.0
        self._offset_y = 0.0
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def _update_viewport(self) -> None:
        w = max(1.0, float(self.width()))
        h = max(1.0, float(self.height()))
        self._scale = min(w / DESIGN_W, h / DESIGN_H)
        self._offset_x = (w - DESIGN_W * self._scale) * 0.5
        self._offset_y = (h - DESIGN_H * self._scale) * 0.5

    def _to_design(self, x: float, y: float) -> tuple[float, float]:
        self._update_viewport()
        return (x - self._offset_x) / self._scale, (y - self._offset_y) / self._scale

    def _to_screen_rect(self, r: Rect) -> QRectF:
        self._update_viewport()
        return QRectF(
            self._offset_x + r.x * self._scale,
            self._offset_y + r.y * self._scale,
            r.w * self._scale,
            r.h * self._scale,
        )

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        ui = self._controller.ui_state()
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(BACKGROUND))
        self._draw_board(painter, ui, BoardSide.PLAYER)
        self._draw_board(painter, ui, BoardSide.OPPONENT)
        for b in ui.buttons:
            self._draw_button(painter, b)
        s = status_rect()
        self._draw_rect(painter, s, "#172554")
        self._draw_text(painter, ui.status, s.x + 10, s.y + s.h / 2 + 5, 13, status_color(ui.status))
        painter.end()

    def _draw_rect(self, painter: QPainter, r: Rect, color: str) -> None:
        sr = self._to_screen_rect(r)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(color))
        painter.drawRect(sr)

    def _draw_text(self, painter: QPainter, text: str, x: float, y: float, size: int = 14, color: str = "#e5e7eb") -> None:
        self._update_viewport()
        painter.setPen(QColor(color))
        painter.setFont(QFont("Segoe UI", max(8, int(size * self._scale))))
        painter.drawText(QPointF(self._offset_x + x * self._scale, self._offset_y + y * self._scale), text)

    def _draw_button(self, painter: QPainter, b: Button) -> None:
        if b.active:
            color = "#16a34a"
        elif b.enabled:
            color = "#1f6feb"
        else:
            color = "#374151"
        self._draw_rect(painter, Rect(b.x, b.y, b.w, b.h), color)
        self._draw_text(painter, button_label(b.id), b.x + 10, b.y + b.h / 2 + 5, 12)

    def _draw_board(self, painter: QPainter, ui: AppUIState, side: BoardSide) -> None:
        layout = self._controller.layout
        br = layout.board_rect(side)
        if side is BoardSide.PLAYER and ui.state is AppState.PLACEMENT and ui.next_ship_size is not None:
            title = f"Your fleet: place {ui.next_ship_size}-cell ship ({ui.orientation.value.lower()})"
        elif side is BoardSide.PLAYER:
            title = f"Your fleet: {ui.incoming.hits} hit / {ui.incoming.misses} miss"
        else:
            title = f"Opponent: {ui.outgoing.hits} hit / {ui.outgoing.misses} miss"
        self._draw_text(painter, title, br.x, br.y - 36, 14, LABEL)
        self._draw_rect(painter, br, BOARD_FILL)

        cells = ui.player_cells if side is BoardSide.PLAYER else ui.opponent_cells
        for r, row in enumerate(cells):
            for c, state in enumerate(row):
                color = CELL_COLORS.get(state)
                if color is None:
                    continue
                cell = layout.cell_rect(side, Coord(r, c))
                inset = 2.0 if state is CellState.SHIP else 6.0
                self._draw_rect(painter, Rect(cell.x + inset, cell.y + inset, cell.w - 2 * inset, cell.h - 2 * inset), color)
                glyph = CELL_GLYPHS.get(state)
                if glyph:
                    self._draw_text(painter, glyph, cell.x + cell.w / 2 - 5, cell.y + cell.h / 2 + 6, 14)

        sr = self._to_screen_rect(br)
        painter.setPen(QPen(QColor(GRID_LINE), 1))
        for i in range(layout.board_size + 1):
            x = sr.x() + (sr.width() / layout.board_size) * i
            y = sr.y() + (sr.height() / layout.board_size) * i
            painter.drawLine(QPointF(x, sr.y()), QPointF(x, sr.y() + sr.height()))
            painter.drawLine(QPointF(sr.x(), y), QPointF(sr.x() + sr.width(), y))

        for i in range(layout.board_size):
            cell = layout.cell_rect(side, Coord(0, i))
            self._draw_text(painter, COLUMN_LABELS[i], cell.x + cell.w / 2 - 5, br.y - 8, 12, LABEL)
            cell = layout.cell_rect(side, Coord(i, 0))
            self._draw_text(painter, ROW_LABELS[i], br.x - 26, cell.y + cell.h / 2 + 5, 12, LABEL)

    def _press(self, event: QMouseEvent, gesture: Gesture) -> None:
        x, y = self._to_design(event.position().x(), event.position().y())
        if self._controller.handle_pointer(PointerPressed(x=x, y=y, gesture=gesture)):
            self._on_change()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._press(event, Gesture.PRIMARY)
        elif event.button() == Qt.MouseButton.RightButton:
            self._press(event, Gesture.SECONDARY)

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() == Qt.MouseButton.LeftButton:
            self._press(event, Gesture.SECONDARY)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        key = _KEYS.get(event.key())
        if key is not None and self._controller.handle_key(KeyPressed(key)):
            self._on_change()
            return
        super().keyPressEvent(event)
