"""Entropy sources.

Every random decision in the engine goes through a zero-argument callable
returning a float in [0, 1). Endless mode uses the system RNG; daily mode
uses ``SeededRandom`` so two runs with the same seed consume the stream in
the same order and produce the same results.
"""

from __future__ import annotations

import random as _random
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

Rng = Callable[[], float]

system_random: Rng = _random.random

_LCG_A = 1664525
_LCG_C = 1013904223
_MASK32 = 0xFFFFFFFF


class SeededRandom:
    """Numerical Recipes linear congruential generator.

    ``state = state * 1664525 + 1013904223 (mod 2**32)``; each call returns
    ``state / 2**32``. ``draws`` counts values produced so far, so a stream
    can later be resumed with ``skip``.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = seed & _MASK32
        self.draws = 0

    def __call__(self) -> float:
        self._state = (self._state * _LCG_A + _LCG_C) & _MASK32
        self.draws += 1
        return self._state / 2**32

    def skip(self, count: int) -> None:
        for _ in range(count):
            self()


def random_index(rng: Rng, n: int) -> int:
    """Uniform index in ``range(n)`` from a single draw."""
    return int(rng() * n)


def pick(items: Sequence[T], rng: Rng) -> T:
    return items[random_index(rng, len(items))]


def shuffled(items: Sequence[T], rng: Rng) -> list[T]:
    """Fisher-Yates shuffle into a new list, walking from the end."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = random_index(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result
