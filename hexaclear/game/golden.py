"""Golden cell spawner for endless mode.

The golden cell behaves like a real filled cube: if it lands on an empty
cell that cell becomes filled. Empty cells whose filling would immediately
complete a scoring pattern are rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from hexaclear.engine.models import BoardState, CellId, CellState
from hexaclear.engine.rng import Rng, shuffled, system_random
from hexaclear.game.board import BOARD_DEFINITION, FLOWER_PATTERNS, find_clears

logger = logging.getLogger(__name__)


def _forbidden_cells(forbidden_flowers: Collection[str] | None) -> set[CellId]:
    if not forbidden_flowers:
        return set()
    return {
        cell_id
        for pattern in FLOWER_PATTERNS
        if pattern.id in forbidden_flowers
        for cell_id in pattern.cell_ids
    }


def spawn_golden_cell(
    board: BoardState,
    forbidden_flowers: Collection[str] | None = None,
    rng: Rng = system_random,
) -> tuple[CellId | None, BoardState]:
    """Pick a new golden cell. Returns (cell id or None, resulting board).

    The input board is never modified; the returned board has the golden
    cell filled. Cells inside ``forbidden_flowers`` are skipped.
    """
    board = dict(board)
    forbidden = _forbidden_cells(forbidden_flowers)
    candidates = [c.id for c in shuffled(BOARD_DEFINITION.cells, rng) if c.id not in forbidden]

    for cell_id in candidates:
        if board[cell_id] == CellState.FILLED:
            # Occupancy does not change, so no new clear is possible
            return cell_id, board

        board[cell_id] = CellState.FILLED
        cleared_patterns, _cells = find_clears(board)
        if not cleared_patterns:
            return cell_id, board
        board[cell_id] = CellState.EMPTY

    # Filled candidates are accepted in the loop, so nothing is left to fall back to
    logger.warning("No golden cell available outside %s", sorted(forbidden_flowers or ()))
    return None, board
