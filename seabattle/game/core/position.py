"""Conversion between board coordinates and their text form (e.g. ``"b6"``)."""

from __future__ import annotations

from seabattle.game.core.errors import PositionError
from seabattle.game.core.models import BOARD_SIZE, Coord, in_bounds


def parse_position(text: str) -> Coord:
    """Translate text like ``"b6"`` into a coordinate.

    The letter selects the row (``a`` is y=0) and the 1-based number selects
    the column, so ``"b6"`` is ``Coord(x=5, y=1)``. Letters are
    case-insensitive and surrounding whitespace is ignored.
    """
    location = text.strip().lower()
    if not location:
        raise PositionError("no location specified")

    y = ord(location[0]) - ord("a")
    digits = location[1:]
    if not (digits.isascii() and digits.isdigit()):
        raise PositionError(f"invalid location {location}")
    x = int(digits) - 1
    if not in_bounds(x, y, BOARD_SIZE):
        raise PositionError(f"invalid location {location}")
    return Coord(x, y)


def format_position(x: int, y: int) -> str:
    """Inverse of :func:`parse_position`: ``(5, 1)`` becomes ``"b6"``."""
    return f"{chr(ord('a') + y)}{x + 1}"
