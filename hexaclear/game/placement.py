"""Placement validation and the placement/clear state transition.

Nothing here mutates its inputs: every transition works on copies and
returns fresh values. Illegal moves return None rather than raising.
"""

from __future__ import annotations

import logging

from hexaclear.engine.models import (
    ActivePiece,
    BoardState,
    CellId,
    CellState,
    GameMode,
    GameState,
    Hand,
    PieceShape,
    PlacementPreview,
    PlacementResult,
)
from hexaclear.engine.rng import Rng, system_random
from hexaclear.game.board import (
    CELL_COORDS,
    find_clears,
    flowers_containing,
    is_board_empty,
)
from hexaclear.game.golden import spawn_golden_cell
from hexaclear.game.scoring import score_clears
from hexaclear.game.types import hex_to_key

logger = logging.getLogger(__name__)


def placement_targets(shape: PieceShape, origin_cell_id: str) -> list[CellId] | None:
    """Absolute cell ids covered by ``shape`` at ``origin_cell_id``.

    Returns None if the origin is not a board cell. Targets may fall outside
    the board.
    """
    origin = CELL_COORDS.get(origin_cell_id)
    if origin is None:
        return None
    oq, orr = origin
    return [hex_to_key(oq + dq, orr + dr) for dq, dr in shape.cells]


def can_place_piece(
    board: BoardState,
    shape: PieceShape,
    origin_cell_id: str,
) -> list[CellId] | None:
    """Return the target cell ids if the placement is legal, else None.

    Targets follow the shape's cell order.
    """
    targets = placement_targets(shape, origin_cell_id)
    if targets is None:
        return None
    for cell_id in targets:
        if board.get(cell_id) != CellState.EMPTY:
            return None
    return targets


def valid_origins(board: BoardState, shape: PieceShape) -> list[CellId]:
    """Every origin cell at which ``shape`` can be placed."""
    return [
        cell_id for cell_id in CELL_COORDS
        if can_place_piece(board, shape, cell_id) is not None
    ]


def _apply_daily_hits(
    state: GameState,
    cleared_patterns: list,
) -> tuple[dict[CellId, int], int, bool]:
    """Tick down numbered cells once per cleared pattern they belong to."""
    daily_hits = state.daily_hits
    remaining = state.daily_remaining_hits
    completed = state.daily_completed

    per_cell: dict[CellId, int] = {}
    for pattern in cleared_patterns:
        for cell_id in pattern.cell_ids:
            if daily_hits.get(cell_id, 0) > 0:
                per_cell[cell_id] = per_cell.get(cell_id, 0) + 1

    if not per_cell:
        return daily_hits, remaining, completed

    daily_hits = dict(daily_hits)
    for cell_id, hit_count in per_cell.items():
        before = daily_hits[cell_id]
        after = max(0, before - hit_count)
        daily_hits[cell_id] = after
        remaining -= before - after

    if remaining <= 0 and state.daily_total_hits > 0:
        remaining = 0
        completed = True

    return daily_hits, remaining, completed


def apply_placement(
    state: GameState,
    piece: ActivePiece,
    origin_cell_id: str,
    rng: Rng = system_random,
) -> PlacementResult | None:
    """Place ``piece`` at ``origin_cell_id`` and resolve clears.

    Steps: fill the footprint, find every completed scoring pattern, tick
    down daily numbered cells, empty the cleared cells (numbered cells with
    hits left stay filled), consume and respawn the golden cell if it was
    cleared, and score the move.

    ``rng`` only drives the golden cell respawn. Returns None if the
    placement is illegal; ``state`` is never modified.
    """
    targets = can_place_piece(state.board, piece.shape, origin_cell_id)
    if targets is None:
        return None

    board = dict(state.board)
    for cell_id in targets:
        board[cell_id] = CellState.FILLED

    cleared_patterns, cleared_cell_ids = find_clears(board)
    daily_hits, daily_remaining, daily_completed = _apply_daily_hits(state, cleared_patterns)

    if not cleared_patterns:
        return PlacementResult(
            board=board,
            cleared_cell_ids=[],
            cleared_patterns=[],
            placed_cell_ids=targets,
            points_gained=0,
            combo_multiplier=1.0,
            streak_multiplier=1.0,
            daily_hits=daily_hits,
            daily_total_hits=state.daily_total_hits,
            daily_remaining_hits=daily_remaining,
            daily_completed=daily_completed,
            golden_cell_id=state.golden_cell_id,
            golden_cleared=False,
        )

    for cell_id in cleared_cell_ids:
        board[cell_id] = CellState.EMPTY

    # Numbered cells survive a clear while they still have hits left
    for cell_id, hits in daily_hits.items():
        if hits > 0:
            board[cell_id] = CellState.FILLED

    golden_cell_id = state.golden_cell_id
    golden_cleared = (
        state.mode == GameMode.ENDLESS
        and golden_cell_id is not None
        and golden_cell_id in cleared_cell_ids
    )

    breakdown = score_clears(
        clear_count=len(cleared_patterns),
        streak=state.streak,
        board_cleared=not is_board_empty(state.board) and is_board_empty(board),
        golden_cleared=golden_cleared,
    )

    if golden_cleared:
        forbidden = {p.id for p in flowers_containing(golden_cell_id)}
        golden_cell_id, board = spawn_golden_cell(board, forbidden, rng=rng)
        logger.debug("Golden cell cleared, respawned at %s", golden_cell_id)

    logger.debug(
        "Placed %s at %s: %d clears, +%d points",
        piece.id, origin_cell_id, len(cleared_patterns), breakdown.points_gained,
    )

    return PlacementResult(
        board=board,
        cleared_cell_ids=cleared_cell_ids,
        cleared_patterns=cleared_patterns,
        placed_cell_ids=targets,
        points_gained=breakdown.points_gained,
        combo_multiplier=breakdown.combo_multiplier,
        streak_multiplier=breakdown.streak_multiplier,
        daily_hits=daily_hits,
        daily_total_hits=state.daily_total_hits,
        daily_remaining_hits=daily_remaining,
        daily_completed=daily_completed,
        golden_cell_id=golden_cell_id,
        golden_cleared=golden_cleared,
    )


def has_any_valid_move(board: BoardState, hand: Hand) -> bool:
    """True if some piece in ``hand`` has a legal placement on ``board``.

    Uses the same path as real moves so the answer always matches them.
    """
    probe = GameState(board=board, hand=hand, hand_slots=[p.id for p in hand])
    for piece in hand:
        for cell_id in CELL_COORDS:
            if apply_placement(probe, piece, cell_id) is not None:
                return True
    return False


def preview_placement(
    state: GameState,
    piece: ActivePiece,
    origin_cell_id: str,
) -> PlacementPreview | None:
    """Footprint, legality and would-be clears of a hovered placement.

    Returns None if the origin is not a board cell. Footprint cells outside
    the board are still listed so a caller can draw the invalid outline.
    """
    targets = placement_targets(piece.shape, origin_cell_id)
    if targets is None:
        return None

    valid = can_place_piece(state.board, piece.shape, origin_cell_id) is not None
    cleared: list[CellId] = []
    if valid:
        board = dict(state.board)
        for cell_id in targets:
            board[cell_id] = CellState.FILLED
        _patterns, cleared = find_clears(board)

    return PlacementPreview(target_cell_ids=targets, valid=valid, cleared_cell_ids=cleared)
