"""Hunt/Target AI strategy.

Target phase: walk the board (x outer, y inner) looking for a previous hit
that still has an actionable follow-up shot. Around a hit the AI looks for a
line of hits:

- hits beside it on the row mean a horizontal line, extended to the nearest
  unshot cell on either side;
- hits above or below it mean a vertical line, extended the same way;
- lines in both directions suggest two parallel ships touching, so the
  diagonal neighbours are tried next;
- a line with both ends closed by misses or edges yields nothing here;
- an isolated hit probes its four neighbours.

Hunt phase: when no hit yields a shot, fire at a random unshot cell.

The scan and neighbour orders are fixed: a given board always yields the same
target-phase shot.
"""

from __future__ import annotations

import logging

from seabattle.game.ai.strategy import AIStrategy
from seabattle.game.core.board import Board
from seabattle.game.core.models import BOARD_SIZE, Coord, in_bounds
from seabattle.game.core.position import format_position

logger = logging.getLogger(__name__)

# (dx, dy) in probing order.
_ADJACENT_ORDER: tuple[tuple[int, int], ...] = (
    (0, 1),  # up
    (0, -1),  # down
    (-1, 0),  # left
    (1, 0),  # right
)
_DIAGONAL_ORDER: tuple[tuple[int, int], ...] = (
    (-1, -1),  # bottom left
    (1, -1),  # bottom right
    (1, 1),  # top right
    (-1, 1),  # top left
)


class HuntTargetAI(AIStrategy):
    """Finishes off discovered ships before searching at random."""

    name = "normal"

    def choose_shot(self, board: Board) -> Coord:
        target = choose_target_shot(board)
        if target is not None:
            logger.debug("ai_phase=target shot=%s", format_position(target.x, target.y))
            return target
        shot = self.random_shot(board)
        logger.debug("ai_phase=hunt shot=%s", format_position(shot.x, shot.y))
        return shot


def choose_target_shot(board: Board) -> Coord | None:
    """Return the first follow-up shot found by scanning previous hits."""
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            shot = find_follow_up_shot(board, x, y)
            if shot is not None:
                return shot
    return None


def find_follow_up_shot(board: Board, x: int, y: int) -> Coord | None:
    """Return a shot that continues the attack on a hit at (x, y), if any."""
    if not board.has_hit_at(x, y):
        return None

    horizontal = _hit_beside(board, x, y, 1, 0)
    if horizontal:
        shot = _line_shot(board, x, y, 1, 0)
        if shot is not None:
            return shot

    vertical = _hit_beside(board, x, y, 0, 1)
    if vertical:
        shot = _line_shot(board, x, y, 0, 1)
        if shot is not None:
            return shot

    if horizontal and vertical:
        shot = _first_unshot(board, x, y, _DIAGONAL_ORDER)
        if shot is not None:
            return shot

    if horizontal or vertical:
        return None

    return _first_unshot(board, x, y, _ADJACENT_ORDER)


def _hit_beside(board: Board, x: int, y: int, dx: int, dy: int) -> bool:
    """Return whether either neighbour along (dx, dy) was hit."""
    return any(
        in_bounds(x + dx * sign, y + dy * sign) and board.has_hit_at(x + dx * sign, y + dy * sign)
        for sign in (-1, 1)
    )


def _line_shot(board: Board, x: int, y: int, dx: int, dy: int) -> Coord | None:
    """Extend a line of hits through (x, y), positive direction first.

    Each walk passes over hits and stops at the first miss or the edge.
    """
    for sign in (1, -1):
        ix, iy = x, y
        while in_bounds(ix, iy):
            if board.has_hit_at(ix, iy):
                ix += dx * sign
                iy += dy * sign
                continue
            if board.has_shot_at(ix, iy):
                break
            return Coord(ix, iy)
    return None


def _first_unshot(
    board: Board, x: int, y: int, offsets: tuple[tuple[int, int], ...]
) -> Coord | None:
    for dx, dy in offsets:
        nx, ny = x + dx, y + dy
        if in_bounds(nx, ny) and not board.has_shot_at(nx, ny):
            return Coord(nx, ny)
    return None
