"""Tests for the pydantic state models."""

from __future__ import annotations

from hexaclear.engine.models import (
    ActivePiece,
    BoardDefinition,
    CellState,
    GameMode,
    GameState,
    PatternType,
    PlacementPreview,
)
from hexaclear.game.board import BOARD_DEFINITION
from tests.conftest import FLOWER_0, monohex


def test_game_state_defaults(empty_board) -> None:
    state = GameState(board=empty_board)
    assert state.mode == GameMode.ENDLESS
    assert state.hand == []
    assert state.hand_slots == []
    assert state.daily_hits == {}
    assert state.daily_seed is None
    assert state.golden_cell_id is None
    assert not state.game_over


def test_enum_values_parse_from_strings() -> None:
    state = GameState.model_validate({
        "mode": "daily",
        "board": {"0,0": "filled"},
    })
    assert state.mode == GameMode.DAILY
    assert state.board["0,0"] == CellState.FILLED


def test_model_copy_does_not_share_updates(empty_board) -> None:
    state = GameState(board=empty_board, hand=[monohex()])
    other = state.model_copy(update={"score": 5})
    assert state.score == 0
    assert other.score == 5


def test_piece_roundtrip_keeps_tuples() -> None:
    piece = ActivePiece.model_validate_json(monohex().model_dump_json())
    assert piece.shape.cells == [(0, 0)]


def test_board_definition_helpers() -> None:
    assert BOARD_DEFINITION.coord_of("1,-1") == (1, -1)
    assert BOARD_DEFINITION.coord_of("9,9") is None
    assert [p.id for p in BOARD_DEFINITION.flower_patterns][:1] == ["flower-0"]
    assert all(p.type == PatternType.FLOWER for p in BOARD_DEFINITION.flower_patterns)


def test_board_definition_roundtrip() -> None:
    restored = BoardDefinition.model_validate_json(BOARD_DEFINITION.model_dump_json())
    assert restored == BOARD_DEFINITION


def test_preview_defaults() -> None:
    preview = PlacementPreview(target_cell_ids=FLOWER_0[:2], valid=False)
    assert preview.cleared_cell_ids == []
