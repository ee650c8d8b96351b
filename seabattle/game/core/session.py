"""Player contracts and the shot-routing link between two players."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from seabattle.game.core.board import Board
from seabattle.game.core.errors import ShotContractError
from seabattle.game.core.models import FLEET_SIZE, Coord, ShotOutcome, in_bounds
from seabattle.game.core.position import format_position

logger = logging.getLogger(__name__)


class Link(Protocol):
    """Narrow channel a player uses to fire at its opponent."""

    def take_shot(self, x: int, y: int) -> ShotOutcome:
        """Apply a shot to the opponent's board and report the result."""


class Player(Protocol):
    """A participant in a match, automated or interactive."""

    @property
    def board(self) -> Board:
        """Return the player's own board."""

    def turn(self, link: Link) -> bool:
        """Fire exactly one shot through ``link``; return True once the player has won."""


class LocalLink:
    """Link to a player running in the same process."""

    def __init__(self, player: Player) -> None:
        self._player = player

    def take_shot(self, x: int, y: int) -> ShotOutcome:
        return self._player.board.apply_opponent_shot(x, y)


@dataclass(slots=True)
class PlayerSession:
    """Board and score owned by one player."""

    board: Board = field(default_factory=Board)
    score: int = 0

    @property
    def has_won(self) -> bool:
        return self.score >= FLEET_SIZE

    def fire(self, link: Link, coord: Coord) -> ShotOutcome:
        """Fire at ``coord`` through ``link`` and record the outcome on this board."""
        if not in_bounds(coord.x, coord.y):
            raise ShotContractError(f"shot off the board at ({coord.x}, {coord.y})")
        if self.board.has_shot_at(coord.x, coord.y):
            raise ShotContractError(f"{format_position(coord.x, coord.y)} was already shot")

        outcome = link.take_shot(coord.x, coord.y)
        self.board.record_own_shot(coord.x, coord.y, outcome.hit)
        if outcome.sunk is not None:
            self.score += 1
        logger.debug(
            "shot_fired at=%s hit=%s sunk=%s score=%d",
            format_position(coord.x, coord.y),
            outcome.hit,
            outcome.sunk.value if outcome.sunk else None,
            self.score,
        )
        return outcome
