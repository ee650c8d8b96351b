"""Fleet placement helpers."""

from __future__ import annotations

import random

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementError
from seabattle.game.core.models import BOARD_SIZE, FLEET_ORDER, Direction, ShipType

_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


def random_board(rng: random.Random) -> Board:
    """Create a board with every fleet ship placed at random.

    Each ship draws a start cell and direction until a placement fits.
    Ships may touch but never overlap.
    """
    board = Board()
    for ship_type in FLEET_ORDER:
        while True:
            x = rng.randrange(BOARD_SIZE)
            y = rng.randrange(BOARD_SIZE)
            direction = rng.choice(_DIRECTIONS)
            try:
                board.place_ship(x, y, direction, ship_type)
            except PlacementError:
                continue
            break
    return board


def missing_ship_types(board: Board) -> list[ShipType]:
    """Return fleet ships not yet placed, in fleet order."""
    placed = board.placed_ship_types()
    return [ship_type for ship_type in FLEET_ORDER if ship_type not in placed]


def is_fleet_complete(board: Board) -> bool:
    """Return whether every fleet ship is on the board."""
    return not missing_ship_types(board)
