"""Headless matches between automated players."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from seabattle.game.ai.player import new_ai_player
from seabattle.game.core.errors import MatchStalledError
from seabattle.game.core.models import BOARD_SIZE
from seabattle.game.core.session import LocalLink

logger = logging.getLogger(__name__)

MAX_ROUNDS = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of one automated match."""

    winner: int
    rounds: int


@dataclass(slots=True)
class SimulationSummary:
    """Aggregate statistics over many automated matches."""

    results: list[MatchResult] = field(default_factory=list)

    @property
    def games(self) -> int:
        return len(self.results)

    @property
    def wins(self) -> dict[int, int]:
        counts = {1: 0, 2: 0}
        for result in self.results:
            counts[result.winner] += 1
        return counts

    @property
    def min_rounds(self) -> int:
        return min((result.rounds for result in self.results), default=0)

    @property
    def max_rounds(self) -> int:
        return max((result.rounds for result in self.results), default=0)

    @property
    def mean_rounds(self) -> float:
        if not self.results:
            return 0.0
        return sum(result.rounds for result in self.results) / len(self.results)


def play_ai_match(
    rng: random.Random,
    *,
    difficulties: tuple[str, str] = ("normal", "normal"),
) -> MatchResult:
    """Play two AI players with independent random fleets against each other."""
    player1 = new_ai_player(random.Random(rng.getrandbits(64)), difficulties[0])
    player2 = new_ai_player(random.Random(rng.getrandbits(64)), difficulties[1])
    link_to_1, link_to_2 = LocalLink(player1), LocalLink(player2)

    for rounds in range(1, MAX_ROUNDS + 1):
        if player1.turn(link_to_2):
            return MatchResult(winner=1, rounds=rounds)
        if player2.turn(link_to_1):
            return MatchResult(winner=2, rounds=rounds)
    raise MatchStalledError(f"no winner after {MAX_ROUNDS} rounds")


def run_simulation(
    games: int,
    rng: random.Random,
    *,
    difficulties: tuple[str, str] = ("normal", "normal"),
) -> SimulationSummary:
    """Play ``games`` automated matches and collect their results."""
    summary = SimulationSummary()
    for _ in range(games):
        summary.results.append(play_ai_match(rng, difficulties=difficulties))
    logger.info(
        "simulation_finished games=%d wins=%s mean_rounds=%.2f min_rounds=%d max_rounds=%d",
        summary.games,
        summary.wins,
        summary.mean_rounds,
        summary.min_rounds,
        summary.max_rounds,
    )
    return summary
