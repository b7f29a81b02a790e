"""Typed UI state exposed by the controller."""

from __future__ import annotations

from dataclasses import dataclass

from seabattle.app.state_machine import AppState
from seabattle.core.models import CellState, Mark, Orientation
from seabattle.ui.overlays import Button


@dataclass(frozen=True, slots=True)
class MarkTally:
    """Hit/miss counts recorded on one board."""

    hits: int
    misses: int


@dataclass(frozen=True, slots=True)
class AppUIState:
    """View-ready state snapshot."""

    state: AppState
    status: str
    buttons: list[Button]
    player_cells: list[list[CellState]]
    opponent_cells: list[list[CellState]]
    pending_mark: Mark
    orientation: Orientation
    next_ship_size: int | None
    incoming: MarkTally
    outgoing: MarkTally
    is_closing: bool
