"""Game session state and the mark/unmark operations driven by user input."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from seabattle.core.fleet import FleetGenerator
from seabattle.core.grid import Grid
from seabattle.core.marks import MarkTracker
from seabattle.core.models import BoardSide, CellState, Coord, Mark, format_coord

logger = logging.getLogger(__name__)

DEFAULT_PENDING_MARK = Mark.MISS


@dataclass(slots=True)
class GameSession:
    """Both grids plus the two independent mark sets of one game.

    ``incoming`` holds the opponent's shots on the player grid; ``outgoing``
    holds the user's shots on the opponent grid.
    """

    player_grid: Grid
    opponent_grid: Grid = field(default_factory=Grid)
    incoming: MarkTracker = field(default_factory=MarkTracker)
    outgoing: MarkTracker = field(default_factory=MarkTracker)
    pending_mark: Mark = DEFAULT_PENDING_MARK

    def tracker(self, side: BoardSide) -> MarkTracker:
        """Return the mark set recorded on the given board."""
        return self.incoming if side is BoardSide.PLAYER else self.outgoing

    def grid(self, side: BoardSide) -> Grid:
        return self.player_grid if side is BoardSide.PLAYER else self.opponent_grid


def new_session(generator: FleetGenerator) -> GameSession:
    """Create a session with a freshly generated player fleet."""
    return GameSession(player_grid=generator.generate())


def new_game(session: GameSession, generator: FleetGenerator) -> None:
    """Start over: new fleet, empty mark sets, default pending mode."""
    session.player_grid = generator.generate()
    session.opponent_grid = Grid(size=session.player_grid.size)
    session.incoming = MarkTracker(size=session.player_grid.size)
    session.outgoing = MarkTracker(size=session.player_grid.size)
    session.pending_mark = DEFAULT_PENDING_MARK
    logger.info("new_game")


def randomize_fleet(session: GameSession, generator: FleetGenerator) -> None:
    """Replace the player's ship layout; recorded marks are left untouched."""
    session.player_grid = generator.generate()
    logger.info("fleet_randomized")


def incoming_mark(session: GameSession, coord: Coord) -> Mark:
    """Compute the result of an opponent shot from the player's own grid."""
    return Mark.HIT if session.player_grid.is_occupied(coord) else Mark.MISS


def mark(session: GameSession, side: BoardSide, coord: Coord) -> Mark | None:
    """Record a shot on ``side`` at ``coord``.

    Returns the recorded mark, or ``None`` when the cell was already marked.
    """
    if side is BoardSide.PLAYER:
        value = incoming_mark(session, coord)
    else:
        value = session.pending_mark
    if not session.tracker(side).set_if_absent(coord, value):
        return None
    logger.debug("mark side=%s cell=%s value=%s", side.value, format_coord(coord), value.value)
    return value


def unmark(session: GameSession, side: BoardSide, coord: Coord) -> bool:
    """Clear the mark on ``side`` at ``coord``. Returns whether one was removed."""
    removed = session.tracker(side).clear(coord)
    if removed:
        logger.debug("unmark side=%s cell=%s", side.value, format_coord(coord))
    return removed


def set_pending_mark(session: GameSession, value: Mark) -> bool:
    """Select the mark applied to opponent-grid shots. Returns whether it changed."""
    if session.pending_mark is value:
        return False
    session.pending_mark = value
    return True


def toggle_pending_mark(session: GameSession) -> Mark:
    session.pending_mark = Mark.MISS if session.pending_mark is Mark.HIT else Mark.HIT
    return session.pending_mark


def cell_state(session: GameSession, side: BoardSide, coord: Coord) -> CellState:
    """Resolve what a cell should display; marks take precedence over ships."""
    recorded = session.tracker(side).get(coord)
    if recorded is Mark.HIT:
        return CellState.HIT
    if recorded is Mark.MISS:
        return CellState.MISS
    if side is BoardSide.PLAYER and session.player_grid.is_occupied(coord):
        return CellState.SHIP
    return CellState.EMPTY


def board_view(session: GameSession, side: BoardSide) -> list[list[CellState]]:
    """Return the display state of every cell on ``side`` in row-major order."""
    size = session.grid(side).size
    return [[cell_state(session, side, Coord(row, col)) for col in range(size)] for row in range(size)]
