"""Scoring for HexaClear clears."""

from __future__ import annotations

import math
from typing import NamedTuple

POINTS_PER_CLEAR = 10
BOARD_CLEARED_BONUS = 25
GOLDEN_BONUS = 10
COMBO_STEP = 0.5
STREAK_STEP = 0.1


class ScoreBreakdown(NamedTuple):
    base_points: int
    combo_multiplier: float
    streak_multiplier: float
    points_gained: int


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def score_clears(
    clear_count: int,
    streak: int,
    board_cleared: bool = False,
    golden_cleared: bool = False,
) -> ScoreBreakdown:
    """Points for a placement that cleared ``clear_count`` patterns.

    base = 10 per clear (+25 for emptying the board, +10 for the golden cell),
    scaled by a combo multiplier (+0.5 per extra clear) and a streak
    multiplier (+0.1 per consecutive clearing move before this one).
    """
    if clear_count <= 0:
        return ScoreBreakdown(0, 1.0, 1.0, 0)

    base_points = POINTS_PER_CLEAR * clear_count
    if board_cleared:
        base_points += BOARD_CLEARED_BONUS
    if golden_cleared:
        base_points += GOLDEN_BONUS

    combo_multiplier = 1 + COMBO_STEP * (clear_count - 1)
    streak_multiplier = 1 + STREAK_STEP * streak
    points = round_half_up(base_points * combo_multiplier * streak_multiplier)
    return ScoreBreakdown(base_points, combo_multiplier, streak_multiplier, points)
