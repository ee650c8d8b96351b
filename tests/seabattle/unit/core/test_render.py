from seabattle.game.core.board import Board
from seabattle.game.core.models import Direction, ShipType
from seabattle.game.core.render import render_board

HEADER = "  1 2 3 4 5 6 7 8 9 10"


def test_render_empty_board_has_two_grids_top_row_first() -> None:
    lines = render_board(Board()).split("\n")
    assert lines[0] == HEADER
    assert lines[1] == "J " + "  " * 10
    assert lines[10] == "A " + "  " * 10
    assert lines[11] == ""
    assert lines[12] == HEADER
    assert lines[13].startswith("J ")
    assert len(lines) == 24  # trailing newline


def test_render_marks_shots_fleet_and_incoming_hits() -> None:
    board = Board()
    board.place_ship(0, 0, Direction.RIGHT, ShipType.PATROL_BOAT)
    board.apply_opponent_shot(1, 0)
    board.record_own_shot(0, 9, was_hit=True)
    board.record_own_shot(1, 9, was_hit=False)

    lines = render_board(board).split("\n")
    assert lines[1] == "J X O " + "  " * 8
    assert lines[22] == "A P X " + "  " * 8


def test_render_can_hide_fleet() -> None:
    board = Board()
    board.place_ship(0, 0, Direction.RIGHT, ShipType.CARRIER)
    hidden = render_board(board, show_fleet=False)
    assert hidden.count(HEADER) == 1
    assert "A C C C C C" not in hidden
    assert "A C C C C C" in render_board(board)
