"""Game error taxonomy."""

from __future__ import annotations


class SeaBattleError(Exception):
    """Base class for every error raised by the game."""


class PlacementError(SeaBattleError, ValueError):
    """A ship placement was rejected; the board is left unmodified."""


class PositionError(SeaBattleError, ValueError):
    """Coordinate text could not be parsed into an on-board position."""


class ShotContractError(SeaBattleError, RuntimeError):
    """A shot broke turn discipline (repeat shot, off-board cell).

    These indicate a defect in the calling player implementation and are never
    recovered from inside the game core.
    """


class InputClosedError(SeaBattleError, EOFError):
    """The interactive input stream ended while a player was being prompted."""


class MatchStalledError(SeaBattleError, RuntimeError):
    """An automated match ran past the maximum number of rounds."""
