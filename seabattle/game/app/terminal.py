"""Interactive player reading commands from a text terminal."""

from __future__ import annotations

import logging
from typing import TextIO

from seabattle.game.core.board import Board
from seabattle.game.core.errors import InputClosedError, PositionError
from seabattle.game.core.models import FLEET_ORDER, Coord, Direction
from seabattle.game.core.position import format_position, parse_position
from seabattle.game.core.render import render_board
from seabattle.game.core.session import Link, PlayerSession

logger = logging.getLogger(__name__)

PLACEMENT_HELP = (
    "Syntax: [location] [direction]\n"
    'Possible directions are "up", "down", "left", "right"\n'
    "location is a-j for vertical position, 1-10 for horizontal position.\n"
    "i.e h4 down\n"
)

SHOT_HELP = (
    "Syntax: [location]\n"
    "location is a-j for vertical position, 1-10 for horizontal position.\n"
    " i.e. g6\n"
)


class TerminalPlayer:
    """Human player prompted through a pair of text streams."""

    def __init__(self, reader: TextIO, writer: TextIO) -> None:
        self._reader = reader
        self._writer = writer
        self._session = PlayerSession()

    @property
    def board(self) -> Board:
        return self._session.board

    @property
    def score(self) -> int:
        return self._session.score

    def set_up(self) -> None:
        """Ask for a location and direction for every ship until each one fits."""
        board = self._session.board
        index = 0
        while index < len(FLEET_ORDER):
            ship_type = FLEET_ORDER[index]
            self._write(render_board(board))
            self._write(f"Enter {ship_type.label} location and direction. (h for help)\n")
            command = self._read_command()

            if command == "h":
                self._write(PLACEMENT_HELP)
                continue

            args = command.split(" ")
            if len(args) != 2:
                self._write("wrong number of arguments; can only take 2\n")
                continue

            try:
                start = parse_position(args[0])
                direction = Direction.parse(args[1])
                board.place_ship(start.x, start.y, direction, ship_type)
            except ValueError as exc:
                self._write(f"{exc}\n")
                continue
            index += 1

        self._write(render_board(board) + "\n")
        self._write("All ships placed\n")
        logger.debug("terminal_setup_complete")

    def turn(self, link: Link) -> bool:
        self._write(f"Current score {self._session.score}\n")
        self._write(render_board(self._session.board))

        target = self._prompt_target()
        outcome = self._session.fire(link, target)
        if outcome.hit:
            self._write("Hit!\n")
            if outcome.sunk is not None:
                self._write(f"You sunk their {outcome.sunk.label}!\n")
        else:
            self._write("Miss!\n")

        self._write("Press enter to finish turn\n")
        self._reader.readline()
        return self._session.has_won

    def _prompt_target(self) -> Coord:
        while True:
            self._write("Enter shot location (h for help)\n")
            command = self._read_command()

            if command == "h":
                self._write(SHOT_HELP)
                continue

            try:
                target = parse_position(command)
            except PositionError as exc:
                self._write(f"{exc}\n")
                continue

            if self._session.board.has_shot_at(target.x, target.y):
                self._write("You've already shot that location!\n")
                continue

            logger.debug("terminal_target=%s", format_position(target.x, target.y))
            return target

    def _read_command(self) -> str:
        line = self._reader.readline()
        if not line:
            raise InputClosedError("input closed")
        return line.strip().lower()

    def _write(self, text: str) -> None:
        self._writer.write(text)
        self._writer.flush()
