"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from seabattle.game.core.errors import PlacementError, ShotContractError
from seabattle.game.core.models import (
    BOARD_SIZE,
    Coord,
    Direction,
    ShipType,
    ShotOutcome,
    cells_for_placement,
    in_bounds,
)
from seabattle.game.core.position import format_position

logger = logging.getLogger(__name__)


def _empty_codes() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


def _empty_flags() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.bool_)


@dataclass(slots=True, eq=False)
class Board:
    """One player's view of the game, backed by numpy arrays indexed ``[y, x]``.

    A board holds two kinds of information that never mix:
      - the player's own fleet (``ships``) and the opponent's shots against it
        (``incoming``);
      - the player's knowledge of the opponent's water: cells it has fired at
        (``own_shots``) and which of those were hits (``own_hits``).
    """

    ships: np.ndarray = field(default_factory=_empty_codes)
    own_shots: np.ndarray = field(default_factory=_empty_flags)
    own_hits: np.ndarray = field(default_factory=_empty_flags)
    incoming: np.ndarray = field(default_factory=_empty_flags)

    @property
    def size(self) -> int:
        return BOARD_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            np.array_equal(self.ships, other.ships)
            and np.array_equal(self.own_shots, other.own_shots)
            and np.array_equal(self.own_hits, other.own_hits)
            and np.array_equal(self.incoming, other.incoming)
        )

    def copy(self) -> Board:
        """Return an independent copy of every cell."""
        return Board(
            ships=self.ships.copy(),
            own_shots=self.own_shots.copy(),
            own_hits=self.own_hits.copy(),
            incoming=self.incoming.copy(),
        )

    def clear(self) -> None:
        """Reset the board to empty water with no shots recorded."""
        self.ships.fill(0)
        self.own_shots.fill(False)
        self.own_hits.fill(False)
        self.incoming.fill(False)

    def ship_at(self, x: int, y: int) -> ShipType | None:
        """Return the ship occupying (x, y), if any."""
        return ShipType.from_code(int(self.ships[y, x]))

    def ship_cells(self, ship_type: ShipType) -> list[Coord]:
        """Return every cell tagged with ``ship_type``."""
        ys, xs = np.nonzero(self.ships == ship_type.code)
        return sorted((Coord(int(x), int(y)) for x, y in zip(xs, ys)), key=lambda c: (c.x, c.y))

    def placed_ship_types(self) -> set[ShipType]:
        """Return the ship types currently on the board."""
        return {ShipType.from_code(int(code)) for code in np.unique(self.ships) if code != 0}

    def place_ship(self, x: int, y: int, direction: Direction, ship_type: ShipType) -> list[Coord]:
        """Place a ship extending from (x, y); all cells are written or none are."""
        if not isinstance(ship_type, ShipType):
            raise PlacementError(f"invalid ship type {ship_type!r}")
        if not isinstance(direction, Direction):
            raise PlacementError(f"invalid direction {direction!r}")

        cells = cells_for_placement(x, y, direction, ship_type)
        for cell in cells:
            if not in_bounds(cell.x, cell.y):
                raise PlacementError("ship is off the board")
            if self.ships[cell.y, cell.x] != 0:
                raise PlacementError(
                    f"there is already a ship at {format_position(cell.x, cell.y)}"
                )

        for cell in cells:
            self.ships[cell.y, cell.x] = ship_type.code
        logger.debug(
            "ship_placed type=%s start=%s direction=%s",
            ship_type.value,
            format_position(x, y),
            direction.value,
        )
        return cells

    def apply_opponent_shot(self, x: int, y: int) -> ShotOutcome:
        """Record an opponent shot at (x, y) and report hit and sunk ship."""
        if not in_bounds(x, y):
            raise ShotContractError(f"opponent shot off the board at ({x}, {y})")

        already_hit = bool(self.incoming[y, x])
        self.incoming[y, x] = True
        ship_type = self.ship_at(x, y)
        if ship_type is None:
            return ShotOutcome(hit=False)
        if not already_hit and self.is_sunk(x, y):
            logger.debug("ship_sunk type=%s at=%s", ship_type.value, format_position(x, y))
            return ShotOutcome(hit=True, sunk=ship_type)
        return ShotOutcome(hit=True)

    def record_own_shot(self, x: int, y: int, was_hit: bool) -> None:
        """Record this player's shot at the opponent; each cell may be recorded once."""
        if not in_bounds(x, y):
            raise ShotContractError(f"shot recorded off the board at ({x}, {y})")
        if self.own_shots[y, x]:
            raise ShotContractError(f"shot at {format_position(x, y)} was already recorded")
        self.own_shots[y, x] = True
        if was_hit:
            self.own_hits[y, x] = True

    def has_shot_at(self, x: int, y: int) -> bool:
        return bool(self.own_shots[y, x])

    def has_hit_at(self, x: int, y: int) -> bool:
        return bool(self.own_hits[y, x])

    def was_shot_by_opponent(self, x: int, y: int) -> bool:
        return bool(self.incoming[y, x])

    def is_sunk(self, x: int, y: int) -> bool:
        """Return whether the ship at (x, y) has every cell hit by the opponent.

        The ship is recovered by walking outward from (x, y) along its axis
        while the ship tag matches. A same-type neighbour above or below marks
        the ship as vertical; anything else, single cells included, is
        scanned horizontally.
        """
        code = self.ships[y, x]
        if code == 0:
            return False

        vertical = (y + 1 < BOARD_SIZE and self.ships[y + 1, x] == code) or (
            y - 1 >= 0 and self.ships[y - 1, x] == code
        )
        dx, dy = (0, 1) if vertical else (1, 0)

        for sign in (1, -1):
            ix, iy = x, y
            while in_bounds(ix, iy) and self.ships[iy, ix] == code:
                if not self.incoming[iy, ix]:
                    return False
                ix += dx * sign
                iy += dy * sign
        return True
