"""Initial game states for endless and daily play."""

from __future__ import annotations

import logging
from datetime import date

from hexaclear.engine.models import CellState, GameMode, GameState
from hexaclear.engine.rng import Rng, SeededRandom, system_random
from hexaclear.game.board import create_empty_board
from hexaclear.game.daily import daily_seed, generate_daily_targets
from hexaclear.game.golden import spawn_golden_cell
from hexaclear.game.hand import deal_playable_hand
from hexaclear.game.placement import has_any_valid_move

logger = logging.getLogger(__name__)


def create_initial_game_state(rng: Rng = system_random) -> GameState:
    """Fresh endless game: empty board, a golden cell and a playable hand."""
    golden_cell_id, board = spawn_golden_cell(create_empty_board(), rng=rng)
    hand = deal_playable_hand(board, rng=rng)

    return GameState(
        mode=GameMode.ENDLESS,
        board=board,
        hand=hand,
        hand_slots=[p.id for p in hand],
        game_over=not has_any_valid_move(board, hand),
        golden_cell_id=golden_cell_id,
    )


def create_daily_game_state(for_date: date | None = None) -> GameState:
    """Today's daily puzzle (or the one for ``for_date``).

    Everything, including the starting hand, comes from the date seed, so
    the same date always yields the same state.
    """
    seed = daily_seed(for_date)
    rng = SeededRandom(seed)

    daily_hits, total_hits = generate_daily_targets(rng)
    board = create_empty_board()
    for cell_id, hits in daily_hits.items():
        if hits > 0:
            board[cell_id] = CellState.FILLED

    hand = deal_playable_hand(board, rng=rng)
    logger.debug("Created daily puzzle seed=%d with %d hits", seed, total_hits)

    return GameState(
        mode=GameMode.DAILY,
        board=board,
        hand=hand,
        hand_slots=[p.id for p in hand],
        game_over=not has_any_valid_move(board, hand),
        daily_hits=daily_hits,
        daily_total_hits=total_hits,
        daily_remaining_hits=total_hits,
        daily_seed=seed,
        daily_hand_deal_count=0,
        daily_rng_draws=rng.draws,
    )
