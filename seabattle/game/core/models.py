"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


class ShipType(StrEnum):
    """Fleet ship types."""

    CARRIER = "CARRIER"
    BATTLESHIP = "BATTLESHIP"
    DESTROYER = "DESTROYER"
    SUBMARINE = "SUBMARINE"
    PATROL_BOAT = "PATROL_BOAT"

    @property
    def size(self) -> int:
        return SHIP_LENGTHS[self]

    @property
    def label(self) -> str:
        return SHIP_LABELS[self]

    @property
    def symbol(self) -> str:
        return SHIP_SYMBOLS[self]

    @property
    def code(self) -> int:
        """Integer tag stored in board cells; 0 is reserved for empty water."""
        return SHIP_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> ShipType | None:
        if code == 0:
            return None
        return _SHIPS_BY_CODE[code]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.DESTROYER: 3,
    ShipType.SUBMARINE: 3,
    ShipType.PATROL_BOAT: 2,
}

SHIP_LABELS: dict[ShipType, str] = {
    ShipType.CARRIER: "Carrier",
    ShipType.BATTLESHIP: "Battleship",
    ShipType.DESTROYER: "Destroyer",
    ShipType.SUBMARINE: "Submarine",
    ShipType.PATROL_BOAT: "Patrol Boat",
}

SHIP_SYMBOLS: dict[ShipType, str] = {
    ShipType.CARRIER: "C",
    ShipType.BATTLESHIP: "B",
    ShipType.DESTROYER: "D",
    ShipType.SUBMARINE: "S",
    ShipType.PATROL_BOAT: "P",
}

SHIP_CODES: dict[ShipType, int] = {ship: index for index, ship in enumerate(ShipType, start=1)}
_SHIPS_BY_CODE: dict[int, ShipType] = {code: ship for ship, code in SHIP_CODES.items()}

FLEET_ORDER: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.DESTROYER,
    ShipType.SUBMARINE,
    ShipType.PATROL_BOAT,
)

FLEET_SIZE = len(FLEET_ORDER)


class Direction(StrEnum):
    """Direction a ship extends from its starting cell."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def step(self) -> tuple[int, int]:
        """Unit (dx, dy) vector; y grows towards the top of the printed board."""
        return _DIRECTION_STEPS[self]

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a direction word such as ``"down"``; raises ``ValueError``."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"unknown direction {text.strip()!r}") from None


_DIRECTION_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate: ``x`` is the column, ``y`` the lettered row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Result of a shot routed through a link."""

    hit: bool
    sunk: ShipType | None = None


def in_bounds(x: int, y: int, size: int = BOARD_SIZE) -> bool:
    """Return whether (x, y) lies on the board."""
    return 0 <= x < size and 0 <= y < size


def cells_for_placement(x: int, y: int, direction: Direction, ship_type: ShipType) -> list[Coord]:
    """Compute the cells a ship would occupy, without bounds checking."""
    dx, dy = direction.step
    return [Coord(x + dx * i, y + dy * i) for i in range(ship_type.size)]
