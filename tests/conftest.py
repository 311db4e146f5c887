"""Shared fixtures and board helpers for HexaClear tests."""

from __future__ import annotations

import pytest

from hexaclear.engine.models import (
    ActivePiece,
    BoardState,
    CellId,
    CellState,
    GameMode,
    GameState,
)
from hexaclear.game.board import create_empty_board
from hexaclear.game.pieces import ALL_PIECE_SHAPES

# Rosette around the origin, center first
FLOWER_0 = ["0,0", "1,0", "1,-1", "0,-1", "-1,0", "-1,1", "0,1"]
# Full-length lines through the origin
LINE_R0 = [f"{q},0" for q in range(-3, 4)]
LINE_Q0 = [f"0,{r}" for r in range(-3, 4)]
# Center of the outer rosette at (3, -1); shares no pattern with the above
FAR_CELL = "3,-1"


def filled_board(cell_ids) -> BoardState:
    """Empty board with ``cell_ids`` filled."""
    board = create_empty_board()
    for cell_id in cell_ids:
        board[CellId(cell_id)] = CellState.FILLED
    return board


def monohex(piece_id: str = "mono") -> ActivePiece:
    return ActivePiece(id=piece_id, shape=ALL_PIECE_SHAPES[0])


def dihex(piece_id: str = "duo") -> ActivePiece:
    return ActivePiece(id=piece_id, shape=ALL_PIECE_SHAPES[1])


def make_state(board: BoardState, hand: list[ActivePiece] | None = None, **kwargs) -> GameState:
    hand = [monohex()] if hand is None else hand
    return GameState(board=board, hand=hand, hand_slots=[p.id for p in hand], **kwargs)


@pytest.fixture
def empty_board() -> BoardState:
    return create_empty_board()


@pytest.fixture
def flower_ready_state() -> GameState:
    """Endless state where a monohex at the origin completes flower-0 only."""
    cells = [c for c in FLOWER_0 if c != "0,0"] + [FAR_CELL]
    return make_state(filled_board(cells), mode=GameMode.ENDLESS)


@pytest.fixture
def triple_clear_state() -> GameState:
    """A monohex at the origin completes flower-0 and both lines through it."""
    cells = (set(FLOWER_0) | set(LINE_R0) | set(LINE_Q0)) - {"0,0"}
    return make_state(filled_board(cells | {"-2,-2"}), streak=2)
