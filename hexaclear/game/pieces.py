"""Polyhex piece catalog: every shape of 1 to 4 hexes.

Shapes are grown cell by cell from a single hex and deduplicated under the
12-element hex symmetry group (6 rotations, each optionally mirrored).
Deck shapes keep the offsets they were grown with, so the origin cell
(0, 0) is always part of the piece.

Dealt pieces are rotated but never mirrored (see ``rotate_cells``).
"""

from __future__ import annotations

import logging

from hexaclear.engine.errors import MalformedShapeError
from hexaclear.engine.models import Axial, PieceShape
from hexaclear.game.types import HEX_DIRECTIONS, reflect_axial, rotate_axial

logger = logging.getLogger(__name__)

MAX_PIECE_SIZE = 4

# A shape is a list of (dq, dr) offsets relative to the origin cell.
Shape = list[Axial]


def rotate_cells(cells: Shape, times: int) -> Shape:
    """Rotate every offset by ``times`` sixth-turns."""
    if times % 6 == 0:
        return list(cells)
    return [rotate_axial(c, times) for c in cells]


def normalize_cells(cells: Shape) -> Shape:
    """Translate so min q and min r are 0, then sort lexicographically."""
    if not cells:
        raise MalformedShapeError("Cannot normalize an empty shape", cells=cells)
    min_q = min(q for q, _r in cells)
    min_r = min(r for _q, r in cells)
    return sorted((q - min_q, r - min_r) for q, r in cells)


def transform_variants(cells: Shape) -> list[Shape]:
    """Return the 12 normalized symmetry transforms of a shape.

    Order: rotation 0, rotation 0 mirrored, rotation 1, rotation 1 mirrored, ...
    """
    variants: list[Shape] = []
    for rotation in range(6):
        rotated = [rotate_axial(c, rotation) for c in cells]
        variants.append(normalize_cells(rotated))
        variants.append(normalize_cells([reflect_axial(c) for c in rotated]))
    return variants


def shape_key(cells: Shape) -> str:
    return ";".join(f"{q},{r}" for q, r in cells)


def canonical_key(cells: Shape) -> str:
    """Lexicographically smallest key among the 12 symmetry transforms."""
    return min(shape_key(v) for v in transform_variants(cells))


def _grow(cells: Shape) -> list[Shape]:
    """Every shape obtained by adding one hex adjacent to ``cells``."""
    existing = set(cells)
    grown: list[Shape] = []
    for q, r in cells:
        for dq, dr in HEX_DIRECTIONS:
            neighbor = (q + dq, r + dr)
            if neighbor not in existing:
                grown.append(cells + [neighbor])
    return grown


def generate_shapes(max_size: int = MAX_PIECE_SIZE) -> list[PieceShape]:
    """Enumerate all polyhexes up to ``max_size`` cells, one per canonical key."""
    start: Shape = [(0, 0)]
    shapes: dict[str, Shape] = {canonical_key(start): start}

    frontier = [start]
    for _size in range(2, max_size + 1):
        next_frontier: list[Shape] = []
        for cells in frontier:
            for grown in _grow(cells):
                key = canonical_key(grown)
                if key not in shapes:
                    shapes[key] = grown
                    next_frontier.append(grown)
        frontier = next_frontier

    pieces = [
        PieceShape(id=f"shape-{len(cells)}-{index}", cells=cells, size=len(cells))
        for index, cells in enumerate(shapes.values())
    ]
    pieces.sort(key=lambda p: p.size)

    logger.debug("Generated %d piece shapes up to size %d", len(pieces), max_size)
    return pieces


ALL_PIECE_SHAPES: list[PieceShape] = generate_shapes()
"""Deck shapes sorted by size: 1 monohex, 1 dihex, 3 trihexes, 7 tetrahexes."""
