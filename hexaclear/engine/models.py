from __future__ import annotations

from enum import Enum
from typing import NewType

from pydantic import BaseModel, Field, model_validator

# --- Identifiers ---
CellId = NewType("CellId", str)
PatternId = NewType("PatternId", str)
Axial = tuple[int, int]

# --- Enums ---
class GameMode(str, Enum):
    ENDLESS = "endless"
    DAILY = "daily"

class CellState(str, Enum):
    EMPTY = "empty"
    FILLED = "filled"

class PatternType(str, Enum):
    LINE = "line"
    FLOWER = "flower"

BoardState = dict[CellId, CellState]

# --- Board topology ---
class Cell(BaseModel):
    id: CellId
    coord: Axial

class Pattern(BaseModel):
    id: PatternId
    type: PatternType
    cell_ids: list[CellId]  # flowers list their center first

class BoardDefinition(BaseModel):
    """Static board facts: built once, shared by reference, never mutated."""
    cells: list[Cell]
    patterns: list[Pattern]
    scoring_line_ids: list[PatternId]
    flower_ids: list[PatternId]

    @property
    def cell_ids(self) -> list[CellId]:
        return [c.id for c in self.cells]

    @property
    def scoring_patterns(self) -> list[Pattern]:
        scoring = set(self.scoring_line_ids) | set(self.flower_ids)
        return [p for p in self.patterns if p.id in scoring]

    @property
    def flower_patterns(self) -> list[Pattern]:
        return [p for p in self.patterns if p.type == PatternType.FLOWER]

    def coord_of(self, cell_id: str) -> Axial | None:
        for cell in self.cells:
            if cell.id == cell_id:
                return cell.coord
        return None

# --- Pieces ---
class PieceShape(BaseModel):
    id: str
    cells: list[Axial]  # offsets relative to the origin cell
    size: int

    @model_validator(mode="after")
    def _check_cells(self) -> PieceShape:
        if not self.cells:
            raise ValueError("A piece shape needs at least one cell")
        if self.size != len(self.cells):
            raise ValueError(f"size {self.size} does not match {len(self.cells)} cells")
        return self

class ActivePiece(BaseModel):
    id: str
    shape: PieceShape

Hand = list[ActivePiece]

# --- Game State ---
class GameState(BaseModel):
    mode: GameMode = GameMode.ENDLESS
    board: BoardState
    score: int = 0
    streak: int = 0
    hand: Hand = Field(default_factory=list)
    hand_slots: list[str | None] = Field(default_factory=list)
    game_over: bool = False
    moves: int = 0
    # Daily puzzle data; empty/zero in endless mode
    daily_hits: dict[CellId, int] = Field(default_factory=dict)
    daily_total_hits: int = 0
    daily_remaining_hits: int = 0
    daily_completed: bool = False
    daily_seed: int | None = None
    daily_hand_deal_count: int | None = None
    daily_rng_draws: int | None = None
    # Endless-mode golden cell; None in daily mode
    golden_cell_id: CellId | None = None

# --- Transition Result ---
class PlacementResult(BaseModel):
    board: BoardState
    cleared_cell_ids: list[CellId]
    cleared_patterns: list[Pattern]
    placed_cell_ids: list[CellId]  # raw footprint, before clears
    points_gained: int
    combo_multiplier: float
    streak_multiplier: float
    daily_hits: dict[CellId, int]
    daily_total_hits: int
    daily_remaining_hits: int
    daily_completed: bool
    golden_cell_id: CellId | None
    golden_cleared: bool

class PlacementPreview(BaseModel):
    target_cell_ids: list[CellId]
    valid: bool
    cleared_cell_ids: list[CellId] = Field(default_factory=list)
