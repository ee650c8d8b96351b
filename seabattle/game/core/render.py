"""Text rendering of a board for terminal players."""

from __future__ import annotations

from seabattle.game.core.board import Board
from seabattle.game.core.models import BOARD_SIZE, ShipType

_HEADER = "  " + " ".join(str(x + 1) for x in range(BOARD_SIZE)) + "\n"


def render_board(board: Board, *, show_fleet: bool = True) -> str:
    """Format the board as two stacked grids.

    The top grid shows this player's shots at the opponent (``X`` hit, ``O``
    miss). The bottom grid shows this player's fleet by ship symbol, with
    cells hit by the opponent drawn as ``X``; it is omitted when
    ``show_fleet`` is false. Rows are printed from ``J`` down to ``A``.
    """
    text = _render_shots(board)
    if show_fleet:
        text += "\n" + _render_fleet(board)
    return text


def _render_shots(board: Board) -> str:
    lines = [_HEADER]
    for y in reversed(range(BOARD_SIZE)):
        row = _row_label(y)
        for x in range(BOARD_SIZE):
            if board.has_hit_at(x, y):
                row += "X "
            elif board.has_shot_at(x, y):
                row += "O "
            else:
                row += "  "
        lines.append(row + "\n")
    return "".join(lines)


def _render_fleet(board: Board) -> str:
    lines = [_HEADER]
    for y in reversed(range(BOARD_SIZE)):
        row = _row_label(y)
        for x in range(BOARD_SIZE):
            row += _fleet_cell(board.ship_at(x, y), board.was_shot_by_opponent(x, y))
        lines.append(row + "\n")
    return "".join(lines)


def _fleet_cell(ship: ShipType | None, hit: bool) -> str:
    if ship is None:
        return "  "
    if hit:
        return "X "
    return f"{ship.symbol} "


def _row_label(y: int) -> str:
    return chr(ord("A") + y) + " "
