"""Bot arena: play N complete games per strategy and report results."""

from __future__ import annotations

import logging
import math
import random as _random
import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable

from hexaclear.engine.bot_strategy import BotStrategy
from hexaclear.engine.game_simulator import play_piece
from hexaclear.engine.models import GameMode, GameState
from hexaclear.game.state import create_daily_game_state, create_initial_game_state

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    score: int
    moves: int
    completed: bool
    duration_ms: float


@dataclass
class ArenaResult:
    """Aggregated results from an arena run."""

    num_games: int
    mode: GameMode
    records: dict[str, list[GameRecord]] = field(default_factory=dict)

    def scores(self, name: str) -> list[int]:
        return [r.score for r in self.records.get(name, [])]

    def avg_score(self, name: str) -> float:
        scores = self.scores(name)
        return sum(scores) / max(len(scores), 1)

    def score_stddev(self, name: str) -> float:
        scores = self.scores(name)
        if len(scores) < 2:
            return 0.0
        avg = self.avg_score(name)
        variance = sum((s - avg) ** 2 for s in scores) / (len(scores) - 1)
        return math.sqrt(variance)

    def avg_moves(self, name: str) -> float:
        records = self.records.get(name, [])
        return sum(r.moves for r in records) / max(len(records), 1)

    def completion_rate(self, name: str) -> float:
        records = self.records.get(name, [])
        return sum(1 for r in records if r.completed) / max(len(records), 1)

    def summary(self) -> str:
        lines = [f"Arena Results ({self.num_games} {self.mode.value} games per strategy)"]
        lines.append("=" * 60)
        for name in self.records:
            line = (
                f"  {name:>12s}: avg={self.avg_score(name):7.1f} +/- {self.score_stddev(name):6.1f}"
                f"  max={max(self.scores(name), default=0):5d}"
                f"  moves={self.avg_moves(name):5.1f}"
            )
            if self.mode == GameMode.DAILY:
                line += f"  solved={self.completion_rate(name):5.1%}"
            lines.append(line)
        durations = [r.duration_ms for records in self.records.values() for r in records]
        if durations:
            avg_ms = sum(durations) / len(durations)
            lines.append(f"  Avg game: {avg_ms:.0f}ms  |  Total: {sum(durations) / 1000:.1f}s")
        return "\n".join(lines)


def play_game(
    strategy: BotStrategy,
    state: GameState,
    rng: Callable[[], float],
    max_moves: int = 500,
) -> GameState:
    """Play ``state`` to the end (or ``max_moves``) with ``strategy``."""
    for _ in range(max_moves):
        if state.game_over:
            break
        move = strategy.choose_move(state)
        if move is None:
            state = state.model_copy(update={"game_over": True})
            break
        next_state = play_piece(state, move[0], move[1], rng=rng)
        if next_state is None:
            raise ValueError(f"Strategy chose an illegal move: {move}")
        state = next_state
    return state


def run_arena(
    strategies: dict[str, BotStrategy],
    num_games: int = 20,
    base_seed: int = 0,
    mode: GameMode = GameMode.ENDLESS,
    max_moves: int = 500,
    start_date: date | None = None,
    progress_callback: Callable[[int, int], None] | None = None,
) -> ArenaResult:
    """Play *num_games* with every strategy and return aggregated stats.

    Parameters
    ----------
    strategies:
        Mapping of ``strategy_name -> BotStrategy``.
    base_seed:
        Endless game *i* uses ``random.Random(base_seed + i)`` for dealing
        and golden cells, so every strategy sees the same opening.
    mode:
        ``daily`` plays the puzzles of ``start_date`` and the following days.
    progress_callback:
        Called with ``(games_completed, total_games)`` after each game.
    """
    result = ArenaResult(num_games=num_games, mode=mode, records={n: [] for n in strategies})
    total = num_games * len(strategies)
    done = 0
    first_day = start_date or date.today()

    for game_idx in range(num_games):
        for name, strategy in strategies.items():
            rng = _random.Random(base_seed + game_idx).random
            if mode == GameMode.DAILY:
                state = create_daily_game_state(first_day + timedelta(days=game_idx))
            else:
                state = create_initial_game_state(rng=rng)

            t0 = time.perf_counter()
            final = play_game(strategy, state, rng, max_moves=max_moves)
            elapsed_ms = (time.perf_counter() - t0) * 1000

            result.records[name].append(GameRecord(
                score=final.score,
                moves=final.moves,
                completed=final.daily_completed,
                duration_ms=elapsed_ms,
            ))
            logger.debug("Game %d (%s): score=%d moves=%d", game_idx, name, final.score, final.moves)

            done += 1
            if progress_callback:
                progress_callback(done, total)

    return result
