import numpy as np
import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementError, ShotContractError
from seabattle.game.core.models import Coord, Direction, ShipType, ShotOutcome


def _tagged_cells(board: Board) -> dict[Coord, ShipType]:
    ys, xs = np.nonzero(board.ships)
    return {Coord(int(x), int(y)): board.ship_at(int(x), int(y)) for x, y in zip(xs, ys)}


def test_place_ship_in_each_direction() -> None:
    cases = [
        (4, 2, Direction.UP, ShipType.DESTROYER, [(4, 2), (4, 3), (4, 4)]),
        (8, 5, Direction.DOWN, ShipType.CARRIER, [(8, 5), (8, 4), (8, 3), (8, 2), (8, 1)]),
        (5, 5, Direction.LEFT, ShipType.BATTLESHIP, [(5, 5), (4, 5), (3, 5), (2, 5)]),
        (0, 0, Direction.RIGHT, ShipType.SUBMARINE, [(0, 0), (1, 0), (2, 0)]),
        (9, 9, Direction.DOWN, ShipType.PATROL_BOAT, [(9, 9), (9, 8)]),
    ]
    for x, y, direction, ship_type, expected in cases:
        board = Board()
        cells = board.place_ship(x, y, direction, ship_type)
        assert cells == [Coord(cx, cy) for cx, cy in expected]
        assert _tagged_cells(board) == {Coord(cx, cy): ship_type for cx, cy in expected}


def test_place_ship_off_each_edge_leaves_board_unmodified() -> None:
    edges = (
        (5, 9, Direction.UP),
        (5, 0, Direction.DOWN),
        (0, 5, Direction.LEFT),
        (9, 5, Direction.RIGHT),
    )
    for x, y, direction in edges:
        board = Board()
        board.place_ship(0, 0, Direction.RIGHT, ShipType.CARRIER)
        before = board.copy()
        with pytest.raises(PlacementError, match="off the board"):
            board.place_ship(x, y, direction, ShipType.PATROL_BOAT)
        assert board == before


def test_place_ship_over_existing_ship_fails_atomically() -> None:
    board = Board()
    board.place_ship(8, 5, Direction.DOWN, ShipType.CARRIER)
    before = board.copy()
    with pytest.raises(PlacementError, match="already a ship at d9"):
        board.place_ship(7, 3, Direction.RIGHT, ShipType.PATROL_BOAT)
    assert board == before
    assert board.ship_at(7, 3) is None


def test_place_ship_rejects_unknown_type_and_direction() -> None:
    board = Board()
    with pytest.raises(PlacementError, match="invalid ship type"):
        board.place_ship(0, 0, Direction.UP, "CRUISER")  # type: ignore[arg-type]
    with pytest.raises(PlacementError, match="invalid direction"):
        board.place_ship(0, 0, "DIAGONAL", ShipType.CARRIER)  # type: ignore[arg-type]
    assert board == Board()


def test_apply_opponent_shot_miss_hit_and_sunk() -> None:
    board = Board()
    board.place_ship(1, 1, Direction.RIGHT, ShipType.PATROL_BOAT)

    assert board.apply_opponent_shot(0, 0) == ShotOutcome(hit=False)
    assert board.was_shot_by_opponent(0, 0)
    assert board.apply_opponent_shot(1, 1) == ShotOutcome(hit=True)
    assert board.apply_opponent_shot(2, 1) == ShotOutcome(hit=True, sunk=ShipType.PATROL_BOAT)


def test_apply_opponent_shot_reports_sink_only_once() -> None:
    board = Board()
    board.place_ship(1, 1, Direction.RIGHT, ShipType.PATROL_BOAT)
    board.apply_opponent_shot(1, 1)
    assert board.apply_opponent_shot(2, 1).sunk is ShipType.PATROL_BOAT
    assert board.apply_opponent_shot(2, 1) == ShotOutcome(hit=True)


def test_apply_opponent_shot_off_board_is_contract_error() -> None:
    with pytest.raises(ShotContractError):
        Board().apply_opponent_shot(10, 0)


def test_record_own_shot_sets_shot_and_hit_flags() -> None:
    board = Board()
    board.record_own_shot(3, 4, was_hit=False)
    board.record_own_shot(5, 6, was_hit=True)
    assert board.has_shot_at(3, 4) and not board.has_hit_at(3, 4)
    assert board.has_shot_at(5, 6) and board.has_hit_at(5, 6)
    assert not board.has_shot_at(0, 0)
    # Outgoing shots never touch the fleet layer.
    assert not board.ships.any()
    assert not board.incoming.any()


def test_record_own_shot_twice_is_contract_error() -> None:
    board = Board()
    board.record_own_shot(3, 4, was_hit=False)
    with pytest.raises(ShotContractError, match="e4"):
        board.record_own_shot(3, 4, was_hit=True)
    assert not board.has_hit_at(3, 4)


def test_is_sunk_false_for_empty_cell_and_partial_ship() -> None:
    board = Board()
    assert not board.is_sunk(0, 0)
    board.place_ship(2, 2, Direction.UP, ShipType.DESTROYER)
    board.apply_opponent_shot(2, 2)
    board.apply_opponent_shot(2, 4)
    assert not board.is_sunk(2, 2)
    assert not board.is_sunk(2, 3)
    board.apply_opponent_shot(2, 3)
    for y in (2, 3, 4):
        assert board.is_sunk(2, y)


def test_is_sunk_horizontal_ship_bounded_by_other_ship() -> None:
    board = Board()
    board.place_ship(0, 0, Direction.RIGHT, ShipType.SUBMARINE)
    board.place_ship(3, 0, Direction.RIGHT, ShipType.PATROL_BOAT)
    for x in (0, 1, 2):
        board.apply_opponent_shot(x, 0)
    assert board.is_sunk(1, 0)
    assert not board.is_sunk(3, 0)


def test_is_sunk_vertical_ship_against_board_edge() -> None:
    board = Board()
    board.place_ship(9, 9, Direction.DOWN, ShipType.PATROL_BOAT)
    board.apply_opponent_shot(9, 9)
    assert not board.is_sunk(9, 9)
    board.apply_opponent_shot(9, 8)
    assert board.is_sunk(9, 9)


def test_ship_cells_and_placed_types(example_board: Board) -> None:
    assert example_board.ship_cells(ShipType.PATROL_BOAT) == [Coord(8, 0), Coord(8, 1)]
    assert example_board.placed_ship_types() == set(ShipType)


def test_copy_is_independent_and_clear_resets(example_board: Board) -> None:
    snapshot = example_board.copy()
    example_board.apply_opponent_shot(0, 0)
    assert example_board != snapshot
    example_board.clear()
    assert example_board == Board()
