from seabattle.core.fleet import FleetGenerator, validate_fleet
from seabattle.core.models import BoardSide, CellState, Coord, Mark
from seabattle.core.session import (
    GameSession,
    board_view,
    cell_state,
    incoming_mark,
    mark,
    new_game,
    randomize_fleet,
    set_pending_mark,
    toggle_pending_mark,
    unmark,
)


def _first_cells(session: GameSession) -> tuple[Coord, Coord]:
    occupied = session.player_grid.occupied_cells()
    empty = next(
        Coord(r, c) for r in range(10) for c in range(10) if not session.player_grid.is_occupied(Coord(r, c))
    )
    return occupied[0], empty


def test_new_session_scenario(session: GameSession) -> None:
    assert len(session.incoming) == 0
    assert len(session.outgoing) == 0
    assert session.player_grid.ship_cell_count() == 20
    assert session.opponent_grid.ship_cell_count() == 0
    assert session.pending_mark is Mark.MISS


def test_incoming_mark_is_computed_from_player_grid(session: GameSession) -> None:
    ship, water = _first_cells(session)
    assert incoming_mark(session, ship) is Mark.HIT
    assert mark(session, BoardSide.PLAYER, ship) is Mark.HIT
    assert mark(session, BoardSide.PLAYER, water) is Mark.MISS
    assert mark(session, BoardSide.PLAYER, ship) is None
    assert session.incoming.get(ship) is Mark.HIT
    assert session.incoming.get(water) is Mark.MISS


def test_outgoing_mark_uses_pending_mode(session: GameSession) -> None:
    set_pending_mark(session, Mark.HIT)
    assert mark(session, BoardSide.OPPONENT, Coord(3, 3)) is Mark.HIT

    set_pending_mark(session, Mark.MISS)
    assert mark(session, BoardSide.OPPONENT, Coord(3, 3)) is None
    assert session.outgoing.get(Coord(3, 3)) is Mark.HIT
    assert len(session.incoming) == 0


def test_mark_then_unmark_player_cell(session: GameSession) -> None:
    mark(session, BoardSide.PLAYER, Coord(0, 0))
    assert unmark(session, BoardSide.PLAYER, Coord(0, 0)) is True
    assert Coord(0, 0) not in session.incoming
    assert unmark(session, BoardSide.PLAYER, Coord(0, 0)) is False


def test_randomize_twice_replaces_layout_and_keeps_marks(session: GameSession, generator: FleetGenerator) -> None:
    mark(session, BoardSide.OPPONENT, Coord(1, 1))
    before = session.player_grid
    randomize_fleet(session, generator)
    middle = session.player_grid
    randomize_fleet(session, generator)

    assert session.player_grid is not middle
    assert middle is not before
    assert validate_fleet(middle)[0]
    assert validate_fleet(session.player_grid)[0]
    assert session.outgoing.get(Coord(1, 1)) is Mark.MISS


def test_new_game_resets_everything(session: GameSession, generator: FleetGenerator) -> None:
    set_pending_mark(session, Mark.HIT)
    mark(session, BoardSide.OPPONENT, Coord(2, 2))
    mark(session, BoardSide.PLAYER, Coord(2, 2))
    new_game(session, generator)

    assert len(session.incoming) == 0
    assert len(session.outgoing) == 0
    assert session.pending_mark is Mark.MISS
    assert session.player_grid.ship_cell_count() == 20
    assert session.opponent_grid.ship_cell_count() == 0
    assert validate_fleet(session.player_grid)[0]


def test_toggle_pending_mark(session: GameSession) -> None:
    assert toggle_pending_mark(session) is Mark.HIT
    assert toggle_pending_mark(session) is Mark.MISS
    assert set_pending_mark(session, Mark.MISS) is False


def test_cell_state_precedence(session: GameSession) -> None:
    ship, water = _first_cells(session)
    assert cell_state(session, BoardSide.PLAYER, ship) is CellState.SHIP
    assert cell_state(session, BoardSide.PLAYER, water) is CellState.EMPTY
    assert cell_state(session, BoardSide.OPPONENT, ship) is CellState.EMPTY

    mark(session, BoardSide.PLAYER, ship)
    mark(session, BoardSide.PLAYER, water)
    assert cell_state(session, BoardSide.PLAYER, ship) is CellState.HIT
    assert cell_state(session, BoardSide.PLAYER, water) is CellState.MISS


def test_board_view_covers_whole_grid(session: GameSession) -> None:
    view = board_view(session, BoardSide.PLAYER)
    assert len(view) == 10
    assert all(len(row) == 10 for row in view)
    assert sum(state is CellState.SHIP for row in view for state in row) == 20
    opponent = board_view(session, BoardSide.OPPONENT)
    assert all(state is CellState.EMPTY for row in opponent for state in row)
