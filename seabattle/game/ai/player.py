"""Automated player driven by an AI strategy."""

from __future__ import annotations

import logging
import random

from seabattle.game.ai.strategy import AIStrategy, build_ai_strategy
from seabattle.game.core.board import Board
from seabattle.game.core.fleet import random_board
from seabattle.game.core.session import Link, PlayerSession

logger = logging.getLogger(__name__)


class AIPlayer:
    """Player whose shots are picked by an :class:`AIStrategy`."""

    def __init__(self, strategy: AIStrategy, board: Board) -> None:
        self._strategy = strategy
        self._session = PlayerSession(board=board)

    @property
    def board(self) -> Board:
        return self._session.board

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def strategy(self) -> AIStrategy:
        return self._strategy

    def turn(self, link: Link) -> bool:
        shot = self._strategy.choose_shot(self._session.board)
        outcome = self._session.fire(link, shot)
        if outcome.sunk is not None:
            logger.debug("ai_sunk ship=%s score=%d", outcome.sunk.value, self._session.score)
        return self._session.has_won


def new_ai_player(rng: random.Random | None = None, difficulty: str = "normal") -> AIPlayer:
    """Create an AI player with a randomly placed fleet."""
    if rng is None:
        rng = random.Random()
    strategy = build_ai_strategy(difficulty, rng)
    return AIPlayer(strategy, random_board(rng))
