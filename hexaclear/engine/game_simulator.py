"""Synchronous turn driver: one player move from state to state.

Wraps ``apply_placement`` with the turn bookkeeping a front end needs
(hand slots, streak, flat placement points, hand refills, game over) and
is also what the arena uses to play complete games.
"""

from __future__ import annotations

import logging

from hexaclear.engine.models import CellId, GameMode, GameState
from hexaclear.engine.rng import Rng, system_random
from hexaclear.game.board import CELL_COORDS
from hexaclear.game.hand import daily_stream, deal_hand, deal_playable_hand
from hexaclear.game.placement import apply_placement, can_place_piece, has_any_valid_move

logger = logging.getLogger(__name__)

POINTS_PER_PLACED_CELL = 1


def valid_moves(state: GameState) -> list[tuple[str, CellId]]:
    """Every legal (piece id, origin cell id) pair for the current hand."""
    if state.game_over:
        return []
    return [
        (piece.id, cell_id)
        for piece in state.hand
        for cell_id in CELL_COORDS
        if can_place_piece(state.board, piece.shape, cell_id) is not None
    ]


def play_piece(
    state: GameState,
    piece_id: str,
    origin_cell_id: str,
    rng: Rng = system_random,
) -> GameState | None:
    """Play one piece from the hand and return the next state.

    Returns None (no state change) if the game is over, the piece is not in
    the hand, or the placement is illegal. ``rng`` drives the golden cell
    and endless-mode refills; daily refills always use the date seed.
    """
    if state.game_over:
        return None

    piece = next((p for p in state.hand if p.id == piece_id), None)
    if piece is None:
        return None

    result = apply_placement(state, piece, origin_cell_id, rng=rng)
    if result is None:
        return None

    cleared = bool(result.cleared_patterns)
    hand = [p for p in state.hand if p.id != piece.id]
    hand_slots = [None if slot == piece.id else slot for slot in state.hand_slots]
    update: dict = {}

    if not hand:
        if state.mode == GameMode.DAILY and state.daily_seed is not None:
            deal_count = (state.daily_hand_deal_count or 0) + 1
            stream = daily_stream(state.daily_seed, deal_count, state.daily_rng_draws)
            hand = deal_playable_hand(result.board, rng=stream)
            update["daily_hand_deal_count"] = deal_count
            update["daily_rng_draws"] = stream.draws
        else:
            hand = deal_hand(rng)
        hand_slots = [p.id for p in hand]

    score = state.score + result.points_gained + POINTS_PER_PLACED_CELL * len(result.placed_cell_ids)
    game_over = result.daily_completed or not has_any_valid_move(result.board, hand)
    if game_over:
        logger.debug(f"Game over after {state.moves + 1} moves, score {score}")

    return state.model_copy(update={
        "board": result.board,
        "score": score,
        "streak": state.streak + 1 if cleared else 0,
        "hand": hand,
        "hand_slots": hand_slots,
        "game_over": game_over,
        "moves": state.moves + 1,
        "daily_hits": result.daily_hits,
        "daily_remaining_hits": result.daily_remaining_hits,
        "daily_completed": result.daily_completed,
        "golden_cell_id": result.golden_cell_id,
        **update,
    })
