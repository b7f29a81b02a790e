"""Shared Qt UI colours and helpers."""

from __future__ import annotations

from seabattle.core.models import CellState

BACKGROUND = "#0b132b"
BOARD_FILL = "#1e3a8a"
GRID_LINE = "#60a5fa"
LABEL = "#cbd5e1"

CELL_COLORS: dict[CellState, str] = {
    CellState.SHIP: "#7dd3fc",
    CellState.HIT: "#e11d48",
    CellState.MISS: "#94a3b8",
}

CELL_GLYPHS: dict[CellState, str] = {
    CellState.HIT: "X",
    CellState.MISS: "•",
}


def status_color(status: str) -> str:
    low = status.lower()
    if any(word in low for word in ("cannot", "invalid")):
        return "#fca5a5"
    if any(word in low for word in ("placed", "ready", "new game", "random")):
        return "#86efac"
    return "#dbeafe"
