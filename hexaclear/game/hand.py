"""Hand dealing.

Per dealt piece the random stream is consumed in a fixed order: one draw
for the shape (plus one per re-draw of an oversized piece), one for the
rotation and one for the instance id suffix.
"""

from __future__ import annotations

import logging

from hexaclear.config import settings
from hexaclear.engine.models import ActivePiece, BoardState, Hand, PieceShape
from hexaclear.engine.rng import Rng, SeededRandom, pick, random_index, system_random
from hexaclear.game.pieces import ALL_PIECE_SHAPES, MAX_PIECE_SIZE, rotate_cells
from hexaclear.game.placement import has_any_valid_move

logger = logging.getLogger(__name__)

HAND_SIZE = 3
MAX_HAND_CELLS = 10
OVERSIZE_RETRIES = 20


def _draw_shape(rng: Rng, cells_so_far: int) -> PieceShape:
    shape = pick(ALL_PIECE_SHAPES, rng)
    attempts = 0
    while (
        shape.size == MAX_PIECE_SIZE
        and cells_so_far + shape.size > MAX_HAND_CELLS
        and attempts < OVERSIZE_RETRIES
    ):
        shape = pick(ALL_PIECE_SHAPES, rng)
        attempts += 1
    return shape


def deal_hand(rng: Rng = system_random) -> Hand:
    """Deal ``HAND_SIZE`` randomly rotated pieces.

    A 4-cell piece is re-drawn (up to 20 times) when it would push the
    hand above 10 cells in total.
    """
    hand: Hand = []
    total_cells = 0
    for slot in range(HAND_SIZE):
        shape = _draw_shape(rng, total_cells)
        rotation = random_index(rng, 6)
        suffix = int(rng() * 2**32)
        instance = shape.model_copy(update={"cells": rotate_cells(shape.cells, rotation)})
        hand.append(ActivePiece(id=f"piece-{slot}-{suffix:08x}", shape=instance))
        total_cells += shape.size
    return hand


def deal_playable_hand(
    board: BoardState,
    max_attempts: int | None = None,
    rng: Rng = system_random,
) -> Hand:
    """Deal hands until one has a legal move on ``board``.

    Gives up after ``max_attempts`` re-deals and returns the last hand.
    """
    if max_attempts is None:
        max_attempts = settings.max_deal_attempts

    hand = deal_hand(rng)
    for _attempt in range(max_attempts):
        if has_any_valid_move(board, hand):
            return hand
        hand = deal_hand(rng)

    logger.warning(f"No playable hand after {max_attempts} attempts, keeping the last one")
    return hand


def daily_stream(
    daily_seed: int,
    hand_deal_count: int,
    draws_consumed: int | None = None,
) -> SeededRandom:
    """Seeded stream positioned for the next daily hand.

    With ``draws_consumed`` the stream resumes exactly where the previous
    deal stopped. Without it, ``daily_hand_block_size`` draws are skipped
    per prior hand, which only approximates the real position.
    """
    rng = SeededRandom(daily_seed)
    if draws_consumed is None:
        draws_consumed = hand_deal_count * settings.daily_hand_block_size
    rng.skip(draws_consumed)
    return rng


def deal_daily_hand(
    board: BoardState,
    daily_seed: int,
    hand_deal_count: int,
    draws_consumed: int | None = None,
) -> Hand:
    """Deterministically deal the next daily hand for ``board``."""
    rng = daily_stream(daily_seed, hand_deal_count, draws_consumed)
    return deal_playable_hand(board, rng=rng)
