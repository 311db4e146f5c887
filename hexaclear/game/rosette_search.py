"""Offline search for the rosette ring used by ``board.ROSETTE_CENTERS``.

Not used at runtime. Finds six rosettes around the origin rosette such that
none overlaps another, each touches the origin rosette along exactly 3
hex-edge cell pairs, and each touches exactly two other outer rosettes
along 3 pairs.

Usage::

    python -m hexaclear.game.rosette_search --window 5
"""

from __future__ import annotations

import argparse
from itertools import combinations

from hexaclear.engine.models import Axial
from hexaclear.game.board import rosette_cells
from hexaclear.game.types import HEX_DIRECTIONS, hex_add

SHARED_EDGES = 3
RING_SIZE = 6


def adjacency_count(a: list[Axial], b: list[Axial]) -> int:
    """Number of (cell in a, neighbor in b) pairs."""
    b_set = set(b)
    return sum(1 for cell in a for d in HEX_DIRECTIONS if hex_add(cell, d) in b_set)


def candidate_centers(window: int = 5) -> list[Axial]:
    """Centers whose rosette touches the origin rosette on 3 edges without overlap."""
    center_cells = rosette_cells((0, 0))
    center_set = set(center_cells)
    found: list[Axial] = []
    for q in range(-window, window + 1):
        for r in range(-window, window + 1):
            if (q, r) == (0, 0):
                continue
            cells = rosette_cells((q, r))
            if center_set & set(cells):
                continue
            if adjacency_count(center_cells, cells) == SHARED_EDGES:
                found.append((q, r))
    return found


def find_rosette_ring(window: int = 5) -> list[Axial] | None:
    """First ring of 6 outer centers meeting the constraints, origin first."""
    candidates = candidate_centers(window)
    flowers = {c: rosette_cells(c) for c in candidates}

    for ring in combinations(candidates, RING_SIZE):
        if any(set(flowers[a]) & set(flowers[b]) for a, b in combinations(ring, 2)):
            continue
        touching = {c: 0 for c in ring}
        for a, b in combinations(ring, 2):
            if adjacency_count(flowers[a], flowers[b]) == SHARED_EDGES:
                touching[a] += 1
                touching[b] += 1
        if all(n == 2 for n in touching.values()):
            return [(0, 0), *ring]
    return None


def main() -> None:
    parser = argparse.ArgumentParser(description="Search for a 7-rosette board layout")
    parser.add_argument("--window", type=int, default=5, help="Search |q|,|r| <= window")
    args = parser.parse_args()

    candidates = candidate_centers(args.window)
    print(f"Found {len(candidates)} candidate centers")
    ring = find_rosette_ring(args.window)
    if ring is None:
        print("No valid ring found")
        return
    print("Valid ring found:")
    for center in ring:
        print(f"  {center}")


if __name__ == "__main__":
    main()
