"""Application controller: routes input events to session operations."""

from __future__ import annotations

from collections.abc import Callable
import logging

from seabattle.app.events import BoardCellPressed, ButtonPressed, Gesture, KeyPressed, PointerPressed
from seabattle.app.state_machine import AppState
from seabattle.app.ui_state import AppUIState, MarkTally
from seabattle.core.errors import InvalidPlacement
from seabattle.core.fleet import FleetGenerator, is_fleet_complete, next_ship_size
from seabattle.core.grid import Grid
from seabattle.core.marks import MarkTracker
from seabattle.core.models import BoardSide, Coord, Mark, Orientation, ShipPlacement, format_coord
from seabattle.core.session import (
    GameSession,
    board_view,
    mark,
    new_game,
    new_session,
    randomize_fleet,
    set_pending_mark,
    toggle_pending_mark,
    unmark,
)
from seabattle.ui.board_layout import BoardLayout
from seabattle.ui.overlays import Button, buttons_for_state

logger = logging.getLogger(__name__)

_PLAY_HINT = "Click a cell to record a shot, right-click or double-click to clear it."


class GameController:
    """Handles app events and owns the game session."""

    def __init__(self, generator: FleetGenerator, layout: BoardLayout | None = None) -> None:
        self._generator = generator
        self._layout = layout or BoardLayout()
        self._session = new_session(generator)
        self._state = AppState.PLAY
        self._orientation = Orientation.HORIZONTAL
        self._status = f"New game. {_PLAY_HINT}"
        self._is_closing = False
        self._buttons: list[Button] = []
        self._button_handlers: dict[str, Callable[[], bool]] = {
            "new_game": self._on_new_game,
            "randomize": self._on_randomize,
            "manual_placement": self._on_manual_placement,
            "rotate": self._on_rotate,
            "finish_placement": self._on_finish_placement,
            "pending_hit": lambda: self._on_pending(Mark.HIT),
            "pending_miss": lambda: self._on_pending(Mark.MISS),
            "quit": self._on_quit,
        }
        self._key_handlers: dict[str, Callable[[], bool]] = {
            "n": self._on_new_game,
            "r": self._on_rotate,
            "h": lambda: self._on_pending(Mark.HIT),
            "m": lambda: self._on_pending(Mark.MISS),
            "space": self._on_toggle_pending,
        }
        self._refresh_buttons()

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def layout(self) -> BoardLayout:
        return self._layout

    def ui_state(self) -> AppUIState:
        """Return current view-ready state."""
        return AppUIState(
            state=self._state,
            status=self._status,
            buttons=list(self._buttons),
            player_cells=board_view(self._session, BoardSide.PLAYER),
            opponent_cells=board_view(self._session, BoardSide.OPPONENT),
            pending_mark=self._session.pending_mark,
            orientation=self._orientation,
            next_ship_size=next_ship_size(self._session.player_grid) if self._state is AppState.PLACEMENT else None,
            incoming=_tally(self._session.incoming),
            outgoing=_tally(self._session.outgoing),
            is_closing=self._is_closing,
        )

    def handle_button(self, event: ButtonPressed) -> bool:
        """Process button event. Returns whether UI changed."""
        button = next((b for b in self._buttons if b.id == event.button_id), None)
        if button is None or not button.enabled:
            return False
        handler = self._button_handlers.get(event.button_id)
        if handler is None:
            return False
        changed = handler()
        self._refresh_buttons()
        return changed

    def handle_key(self, event: KeyPressed) -> bool:
        """Process a keyboard shortcut. Returns whether UI changed."""
        handler = self._key_handlers.get(event.key.lower())
        if handler is None:
            return False
        changed = handler()
        self._refresh_buttons()
        return changed

    def handle_pointer(self, event: PointerPressed) -> bool:
        """Route a pointer press to a button or board cell."""
        if event.gesture is Gesture.PRIMARY:
            for button in self._buttons:
                if button.contains(event.x, event.y):
                    return self.handle_button(ButtonPressed(button.id))
        target = self._layout.hit_test(event.x, event.y)
        if target is None:
            return False
        side, coord = target
        return self.handle_board_cell(BoardCellPressed(side=side, coord=coord, gesture=event.gesture))

    def handle_board_cell(self, event: BoardCellPressed) -> bool:
        """Process a board cell activation. Returns whether UI changed."""
        if event.side is BoardSide.PLAYER and self._state is AppState.PLACEMENT:
            changed = self._placement_cell(event.coord, event.gesture)
            self._refresh_buttons()
            return changed
        if event.gesture is Gesture.SECONDARY:
            return self._clear_mark(event.side, event.coord)
        return self._record_mark(event.side, event.coord)

    def _record_mark(self, side: BoardSide, coord: Coord) -> bool:
        recorded = mark(self._session, side, coord)
        if recorded is None:
            return False
        who = "Opponent shot" if side is BoardSide.PLAYER else "Your shot"
        self._status = f"{who} at {format_coord(coord)}: {recorded.value}."
        return True

    def _clear_mark(self, side: BoardSide, coord: Coord) -> bool:
        if not unmark(self._session, side, coord):
            return False
        self._status = f"Cleared mark at {format_coord(coord)}."
        return True

    def _placement_cell(self, coord: Coord, gesture: Gesture) -> bool:
        grid = self._session.player_grid
        if gesture is Gesture.SECONDARY:
            removed = grid.remove_ship_at(coord)
            if removed == 0:
                return False
            self._status = f"Removed {removed}-cell ship. {self._placement_prompt()}"
            return True

        size = next_ship_size(grid)
        if size is None:
            self._status = "All ships placed. Press Done to start."
            return True
        placement = ShipPlacement(size=size, bow=coord, orientation=self._orientation)
        try:
            grid.place_ship(placement)
        except InvalidPlacement as exc:
            self._status = f"Cannot place {size}-cell ship at {format_coord(coord)}: {exc.reason}"
            return True
        logger.debug("ship_placed size=%d bow=%s orientation=%s", size, format_coord(coord), self._orientation.value)
        self._status = f"Placed {size}-cell ship at {format_coord(coord)}. {self._placement_prompt()}"
        return True

    def _placement_prompt(self) -> str:
        size = next_ship_size(self._session.player_grid)
        if size is None:
            return "All ships placed. Press Done to start."
        return f"Next: {size}-cell ship ({self._orientation.value.lower()})."

    def _on_new_game(self) -> bool:
        new_game(self._session, self._generator)
        self._orientation = Orientation.HORIZONTAL
        self._set_state(AppState.PLAY)
        self._status = f"New game. {_PLAY_HINT}"
        return True

    def _on_randomize(self) -> bool:
        randomize_fleet(self._session, self._generator)
        self._set_state(AppState.PLAY)
        self._status = "Ships placed at random."
        return True

    def _on_manual_placement(self) -> bool:
        self._session.player_grid = Grid(size=self._session.player_grid.size)
        self._session.incoming.reset()
        self._set_state(AppState.PLACEMENT)
        self._status = f"Manual placement. {self._placement_prompt()}"
        return True

    def _on_rotate(self) -> bool:
        if self._state is not AppState.PLACEMENT:
            return False
        self._orientation = self._orientation.rotated()
        self._status = self._placement_prompt()
        return True

    def _on_finish_placement(self) -> bool:
        if self._state is not AppState.PLACEMENT or not is_fleet_complete(self._session.player_grid):
            return False
        self._set_state(AppState.PLAY)
        self._status = f"Fleet ready. {_PLAY_HINT}"
        return True

    def _on_pending(self, value: Mark) -> bool:
        if not set_pending_mark(self._session, value):
            return False
        self._status = f"Shots on the opponent board are recorded as {value.value}."
        return True

    def _on_toggle_pending(self) -> bool:
        value = toggle_pending_mark(self._session)
        self._status = f"Shots on the opponent board are recorded as {value.value}."
        return True

    def _on_quit(self) -> bool:
        self._is_closing = True
        return True

    def _set_state(self, state: AppState) -> None:
        if state is not self._state:
            logger.info("app_state %s -> %s", self._state.name, state.name)
        self._state = state

    def _refresh_buttons(self) -> None:
        self._buttons = buttons_for_state(
            self._state,
            placement_ready=self._state is AppState.PLACEMENT and is_fleet_complete(self._session.player_grid),
            pending_hit=self._session.pending_mark is Mark.HIT,
        )


def _tally(tracker: MarkTracker) -> MarkTally:
    return MarkTally(hits=tracker.count(Mark.HIT), misses=tracker.count(Mark.MISS))
