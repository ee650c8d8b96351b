"""AI strategy interface and selection utilities."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from seabattle.game.core.board import Board
from seabattle.game.core.models import BOARD_SIZE, Coord


class AIStrategy(ABC):
    """Shot-selection contract for automated players.

    Strategies keep no memory between turns: every decision is recomputed from
    the shots and hits recorded on the player's own board.
    """

    name: str = ""

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    @abstractmethod
    def choose_shot(self, board: Board) -> Coord:
        """Return the next never-shot coordinate to fire at."""

    def random_shot(self, board: Board) -> Coord:
        """Draw random cells until one that was never shot comes up."""
        while True:
            x = self._rng.randrange(BOARD_SIZE)
            y = self._rng.randrange(BOARD_SIZE)
            if not board.has_shot_at(x, y):
                return Coord(x, y)


class RandomShotAI(AIStrategy):
    """Hunts at random and never follows up on hits."""

    name = "easy"

    def choose_shot(self, board: Board) -> Coord:
        return self.random_shot(board)


def build_ai_strategy(difficulty: str, rng: random.Random) -> AIStrategy:
    """Construct AI strategy from selected difficulty."""
    from seabattle.game.ai.hunt_target import HuntTargetAI

    strategies: dict[str, type[AIStrategy]] = {
        RandomShotAI.name: RandomShotAI,
        HuntTargetAI.name: HuntTargetAI,
    }
    key = difficulty.strip().lower()
    if key not in strategies:
        raise ValueError(f"unknown AI difficulty {difficulty!r}")
    return strategies[key](rng)
