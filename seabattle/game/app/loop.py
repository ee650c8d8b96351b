"""Terminal match flow: player selection, setup and alternating turns."""

from __future__ import annotations

import logging
import random
from typing import TextIO

from seabattle.game.ai.player import AIPlayer, new_ai_player
from seabattle.game.app.terminal import TerminalPlayer
from seabattle.game.core.errors import InputClosedError
from seabattle.game.core.render import render_board
from seabattle.game.core.session import LocalLink, Player
from seabattle.game.infra.config import AppConfig

logger = logging.getLogger(__name__)

PLAYER_KINDS: tuple[str, ...] = ("ai", "player")


def ask_player_kind(reader: TextIO, writer: TextIO) -> str:
    """Prompt until the user picks ``ai`` or ``player``."""
    while True:
        writer.write('Enter "ai" or "player"\n')
        writer.flush()
        line = reader.readline()
        if not line:
            raise InputClosedError("input closed")
        choice = line.strip().lower()
        if choice in PLAYER_KINDS:
            return choice


def create_player(
    kind: str,
    reader: TextIO,
    writer: TextIO,
    *,
    rng: random.Random | None = None,
    difficulty: str = "normal",
) -> Player:
    """Build a ready-to-play player; interactive players place their fleet here."""
    if kind == "ai":
        return new_ai_player(rng, difficulty)
    if kind == "player":
        player = TerminalPlayer(reader, writer)
        player.set_up()
        return player
    raise ValueError(f"unknown player kind {kind!r}")


def run_match(
    player1: Player,
    player2: Player,
    writer: TextIO,
    *,
    show_ai_boards: bool = True,
) -> int:
    """Alternate turns until a player wins; return the winner's number."""
    players = (player1, player2)
    links = (LocalLink(player2), LocalLink(player1))
    rounds = 0
    while True:
        rounds += 1
        for number, (player, link) in enumerate(zip(players, links), start=1):
            writer.write(f"Player {number} Turn\n")
            won = player.turn(link)
            if isinstance(player, AIPlayer):
                writer.write("AI board\n")
                writer.write(render_board(player.board, show_fleet=show_ai_boards))
            writer.flush()
            if won:
                writer.write(f"Player {number} Won!\n")
                writer.flush()
                logger.debug("match_finished winner=%d rounds=%d", number, rounds)
                return number


def run_game(reader: TextIO, writer: TextIO, config: AppConfig) -> int:
    """Set up both players from terminal input and play a match."""
    seeds = random.Random(config.seed) if config.seed is not None else None
    players: list[Player] = []
    for number in (1, 2):
        writer.write(f"Player {number}:\n")
        kind = ask_player_kind(reader, writer)
        rng = random.Random(seeds.getrandbits(64)) if seeds is not None else None
        players.append(
            create_player(kind, reader, writer, rng=rng, difficulty=config.ai_difficulty)
        )
        logger.debug("player_created number=%d kind=%s", number, kind)
    return run_match(players[0], players[1], writer, show_ai_boards=config.show_ai_board)
