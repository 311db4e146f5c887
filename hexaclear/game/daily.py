"""Daily puzzle generation.

The layout depends only on the local calendar date: the date string is
hashed to a seed, and the seed drives a ``SeededRandom`` stream. Every outer
rosette gets one numbered cell with 2 to 4 hits; the central rosette gets
none. The starting hand is dealt from the same stream right after the
layout draws.
"""

from __future__ import annotations

import logging
from datetime import date

from hexaclear.engine.models import CellId, Pattern
from hexaclear.engine.rng import Rng, random_index
from hexaclear.game.board import CELL_COORDS, FLOWER_PATTERNS

logger = logging.getLogger(__name__)

MIN_HITS = 2
MAX_HITS = 4


def daily_seed(for_date: date | None = None) -> int:
    """Signed 32-bit polynomial hash (``h * 31 + char``) of ``"Y-M-D"``.

    Month and day are not zero-padded.
    """
    day = for_date or date.today()
    key = f"{day.year}-{day.month}-{day.day}"
    h = 0
    for ch in key:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    return h - 2**32 if h >= 2**31 else h


def find_center_flower(flowers: list[Pattern] | None = None) -> Pattern | None:
    """The flower whose average coordinate is nearest the origin."""
    flowers = FLOWER_PATTERNS if flowers is None else flowers
    best: Pattern | None = None
    best_dist_sq = float("inf")
    for pattern in flowers:
        coords = [CELL_COORDS[c] for c in pattern.cell_ids if c in CELL_COORDS]
        if not coords:
            continue
        avg_q = sum(q for q, _r in coords) / len(coords)
        avg_r = sum(r for _q, r in coords) / len(coords)
        dist_sq = avg_q * avg_q + avg_r * avg_r
        if dist_sq < best_dist_sq:
            best_dist_sq = dist_sq
            best = pattern
    return best


def generate_daily_targets(rng: Rng) -> tuple[dict[CellId, int], int]:
    """Numbered cells and their starting hits. Returns (hits by cell, total).

    Draw order per outer flower (in board order): cell index, then hits.
    """
    center = find_center_flower()
    daily_hits: dict[CellId, int] = {}
    total = 0

    for pattern in FLOWER_PATTERNS:
        if center is not None and pattern.id == center.id:
            continue
        cell_id = pattern.cell_ids[random_index(rng, len(pattern.cell_ids))]
        hits = MIN_HITS + random_index(rng, MAX_HITS - MIN_HITS + 1)
        daily_hits[cell_id] = daily_hits.get(cell_id, 0) + hits
        total += hits

    logger.debug("Daily targets: %s (total %d hits)", daily_hits, total)
    return daily_hits, total
