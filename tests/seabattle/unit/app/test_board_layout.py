from seabattle.app.state_machine import AppState
from seabattle.core.models import BoardSide, Coord
from seabattle.ui.board_layout import BoardLayout
from seabattle.ui.overlays import button_label, buttons_for_state


def test_screen_to_cell_round_trips_cell_centres() -> None:
    layout = BoardLayout()
    for side in (BoardSide.PLAYER, BoardSide.OPPONENT):
        rect = layout.cell_rect(side, Coord(7, 2))
        assert layout.screen_to_cell(side, rect.x + rect.w / 2, rect.y + rect.h / 2) == Coord(7, 2)


def test_hit_test_picks_board_side() -> None:
    layout = BoardLayout()
    player = layout.cell_rect(BoardSide.PLAYER, Coord(0, 0))
    opponent = layout.cell_rect(BoardSide.OPPONENT, Coord(9, 9))
    assert layout.hit_test(player.x + 1, player.y + 1) == (BoardSide.PLAYER, Coord(0, 0))
    assert layout.hit_test(opponent.x + 1, opponent.y + 1) == (BoardSide.OPPONENT, Coord(9, 9))
    assert layout.hit_test(0.0, 0.0) is None


def test_buttons_per_state() -> None:
    play = {b.id for b in buttons_for_state(AppState.PLAY, placement_ready=False, pending_hit=False)}
    placement = buttons_for_state(AppState.PLACEMENT, placement_ready=False, pending_hit=True)
    ids = {b.id for b in placement}

    assert "manual_placement" in play and "rotate" not in play
    assert {"rotate", "finish_placement"} <= ids
    assert next(b for b in placement if b.id == "finish_placement").enabled is False
    assert next(b for b in placement if b.id == "pending_hit").active is True


def test_buttons_do_not_overlap_boards() -> None:
    layout = BoardLayout()
    top = layout.board_rect(BoardSide.PLAYER).y
    for button in buttons_for_state(AppState.PLACEMENT, placement_ready=True, pending_hit=False):
        assert button.y + button.h < top
        assert button_label(button.id) != button.id
