"""CLI for running bot autoplay over endless or daily games.

Usage::

    python -m hexaclear.engine.arena_cli --strategy greedy --games 20

    # Compare strategies on a week of daily puzzles
    python -m hexaclear.engine.arena_cli --strategy random --strategy greedy \\
        --mode daily --games 7 --start-date 2024-03-05
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from hexaclear.config import settings
from hexaclear.engine.arena import run_arena
from hexaclear.engine.bot_strategy import BotStrategy, GreedyStrategy, RandomStrategy
from hexaclear.engine.models import GameMode


def _make_strategy(name: str, seed: int) -> BotStrategy:
    if name == "random":
        return RandomStrategy(seed=seed)
    if name == "greedy":
        return GreedyStrategy(seed=seed)
    print(f"Unknown strategy: {name}", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    parser = argparse.ArgumentParser(description="HexaClear bot arena")
    parser.add_argument(
        "--strategy",
        action="append",
        choices=["random", "greedy"],
        help="Strategy to run (repeatable, default: greedy)",
    )
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--mode", choices=[m.value for m in GameMode], default="endless")
    parser.add_argument("--max-moves", type=int, default=500)
    parser.add_argument(
        "--start-date",
        type=date.fromisoformat,
        default=None,
        help="First daily puzzle date (YYYY-MM-DD, default: today)",
    )
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    names = args.strategy or ["greedy"]
    strategies = {name: _make_strategy(name, args.seed) for name in dict.fromkeys(names)}
    mode = GameMode(args.mode)

    print(f"Arena: {', '.join(strategies)}, {args.games} {mode.value} games each")
    print()

    result = run_arena(
        strategies=strategies,
        num_games=args.games,
        base_seed=args.seed,
        mode=mode,
        max_moves=args.max_moves,
        start_date=args.start_date,
        progress_callback=lambda done, total: print(
            f"\r  Game {done}/{total}", end="", flush=True
        ),
    )
    print()
    print()
    print(result.summary())


if __name__ == "__main__":
    main()
