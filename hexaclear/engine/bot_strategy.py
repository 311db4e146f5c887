"""Bot strategy abstraction: picks a (piece id, origin cell id) move for a state."""

from __future__ import annotations

import random as _random
from typing import Protocol

from hexaclear.engine.game_simulator import valid_moves
from hexaclear.engine.models import CellId, GameState
from hexaclear.game.placement import apply_placement


class BotStrategy(Protocol):
    """A bot strategy selects a move given the current game state."""

    def choose_move(self, state: GameState) -> tuple[str, CellId] | None:
        """Return a legal (piece id, origin cell id), or None if there is none."""
        ...


class RandomStrategy:
    """Picks a uniformly random legal move."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_move(self, state: GameState) -> tuple[str, CellId] | None:
        moves = valid_moves(state)
        if not moves:
            return None
        return self._rng.choice(moves)


class GreedyStrategy:
    """Picks the move with the most immediate points, then the most cleared cells.

    Ties are broken randomly.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_move(self, state: GameState) -> tuple[str, CellId] | None:
        pieces = {p.id: p for p in state.hand}
        best: list[tuple[str, CellId]] = []
        best_key: tuple[int, int] | None = None

        for piece_id, cell_id in valid_moves(state):
            # Golden respawn randomness must not leak into the bot's own RNG
            result = apply_placement(state, pieces[piece_id], cell_id, rng=_random.Random(0).random)
            if result is None:
                continue
            key = (result.points_gained, len(result.cleared_cell_ids))
            if best_key is None or key > best_key:
                best_key = key
                best = [(piece_id, cell_id)]
            elif key == best_key:
                best.append((piece_id, cell_id))

        if not best:
            return None
        return self._rng.choice(best)
