from __future__ import annotations

import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.models import Direction, ShipType


def make_example_board() -> Board:
    """Fleet laid out in separate columns, each starting on row ``a``."""
    board = Board()
    board.place_ship(0, 0, Direction.UP, ShipType.CARRIER)
    board.place_ship(2, 0, Direction.UP, ShipType.BATTLESHIP)
    board.place_ship(4, 0, Direction.UP, ShipType.DESTROYER)
    board.place_ship(6, 0, Direction.UP, ShipType.SUBMARINE)
    board.place_ship(8, 0, Direction.UP, ShipType.PATROL_BOAT)
    return board


@pytest.fixture
def example_board() -> Board:
    return make_example_board()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
