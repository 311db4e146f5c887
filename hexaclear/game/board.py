"""Board topology for HexaClear.

The board is the union of seven rosettes ("flowers"): a center hex plus its
six neighbors. One rosette sits at the origin; the six outer rosettes share
no cell with any other rosette, touch the central rosette along three hex
edges and touch each of their two ring neighbors along three hex edges.
The centers below were found offline (see ``rosette_search``).

Scoring patterns are the seven flowers plus every maximal straight line that
spans the whole board.
"""

from __future__ import annotations

import logging

from hexaclear.engine.errors import TopologyError
from hexaclear.engine.models import (
    Axial,
    BoardDefinition,
    BoardState,
    Cell,
    CellId,
    CellState,
    Pattern,
    PatternId,
    PatternType,
)
from hexaclear.game.types import (
    HEX_DIRECTIONS,
    PRIMARY_DIRECTIONS,
    hex_add,
    hex_to_key,
)

logger = logging.getLogger(__name__)

ROSETTE_CENTERS: list[Axial] = [
    (0, 0),  # center
    (-3, 1),
    (-2, 3),
    (-1, -2),
    (1, 2),
    (2, -3),
    (3, -1),
]

ROSETTE_SIZE = 1 + len(HEX_DIRECTIONS)


def rosette_cells(center: Axial) -> list[Axial]:
    """Return the 7 cells of the rosette around ``center``, center first."""
    return [center] + [hex_add(center, d) for d in HEX_DIRECTIONS]


def build_board(centers: list[Axial] | None = None) -> BoardDefinition:
    """Build cells and scoring patterns from rosette centers.

    Raises TopologyError if the rosettes overlap (the board must hold exactly
    ``len(centers) * 7`` cells).
    """
    centers = ROSETTE_CENTERS if centers is None else centers
    cell_map: dict[CellId, Axial] = {}

    for center in centers:
        for coord in rosette_cells(center):
            cell_map.setdefault(hex_to_key(*coord), coord)

    expected = len(centers) * ROSETTE_SIZE
    if len(cell_map) != expected:
        raise TopologyError(
            f"Rosettes overlap: built {len(cell_map)} cells, expected {expected}"
        )

    cells = [Cell(id=cell_id, coord=coord) for cell_id, coord in cell_map.items()]

    patterns: list[Pattern] = []
    flower_ids: list[PatternId] = []

    for index, center in enumerate(centers):
        cell_ids = [
            hex_to_key(*coord)
            for coord in rosette_cells(center)
            if hex_to_key(*coord) in cell_map
        ]
        if len(cell_ids) == ROSETTE_SIZE:
            pattern_id = PatternId(f"flower-{index}")
            flower_ids.append(pattern_id)
            patterns.append(Pattern(id=pattern_id, type=PatternType.FLOWER, cell_ids=cell_ids))

    lines: list[Pattern] = []
    seen: set[tuple[CellId, ...]] = set()

    for start_id, start in cell_map.items():
        for direction in PRIMARY_DIRECTIONS:
            back = (start[0] - direction[0], start[1] - direction[1])
            if hex_to_key(*back) in cell_map:
                continue

            line_ids = [start_id]
            current = hex_add(start, direction)
            while hex_to_key(*current) in cell_map:
                line_ids.append(hex_to_key(*current))
                current = hex_add(current, direction)

            key = tuple(line_ids)
            if len(line_ids) < 2 or key in seen:
                continue
            seen.add(key)
            line = Pattern(
                id=PatternId(f"line-{len(patterns) + len(lines)}"),
                type=PatternType.LINE,
                cell_ids=line_ids,
            )
            lines.append(line)

    # Only board-spanning lines score; shorter runs are artifacts of the walk
    full_length = max((len(line.cell_ids) for line in lines), default=0)
    scoring_line_ids = [line.id for line in lines if len(line.cell_ids) == full_length]
    patterns.extend(lines)

    logger.debug(
        "Built board: %d cells, %d flowers, %d scoring lines (length %d)",
        len(cells), len(flower_ids), len(scoring_line_ids), full_length,
    )

    return BoardDefinition(
        cells=cells,
        patterns=patterns,
        scoring_line_ids=scoring_line_ids,
        flower_ids=flower_ids,
    )


BOARD_DEFINITION: BoardDefinition = build_board()

CELL_COORDS: dict[CellId, Axial] = {c.id: c.coord for c in BOARD_DEFINITION.cells}
SCORING_PATTERNS: list[Pattern] = BOARD_DEFINITION.scoring_patterns
FLOWER_PATTERNS: list[Pattern] = BOARD_DEFINITION.flower_patterns


def create_empty_board() -> BoardState:
    """Create a board with every cell empty."""
    return {cell_id: CellState.EMPTY for cell_id in CELL_COORDS}


def find_clears(board: BoardState) -> tuple[list[Pattern], list[CellId]]:
    """Return the scoring patterns that are completely filled, and their cells.

    Cell ids are unique and ordered by first appearance.
    """
    cleared_patterns: list[Pattern] = []
    cleared_cells: dict[CellId, None] = {}

    for pattern in SCORING_PATTERNS:
        if all(board.get(cell_id) == CellState.FILLED for cell_id in pattern.cell_ids):
            cleared_patterns.append(pattern)
            for cell_id in pattern.cell_ids:
                cleared_cells[cell_id] = None

    return cleared_patterns, list(cleared_cells)


def is_board_empty(board: BoardState) -> bool:
    return all(state == CellState.EMPTY for state in board.values())


def flowers_containing(cell_id: str) -> list[Pattern]:
    return [p for p in FLOWER_PATTERNS if cell_id in p.cell_ids]
