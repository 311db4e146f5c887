from hexaclear.engine.game_simulator import play_piece, valid_moves
from hexaclear.engine.models import (
    ActivePiece,
    BoardDefinition,
    CellState,
    GameMode,
    GameState,
    Pattern,
    PieceShape,
    PlacementResult,
)
from hexaclear.game.board import BOARD_DEFINITION, build_board, create_empty_board, find_clears
from hexaclear.game.hand import deal_daily_hand, deal_hand, deal_playable_hand
from hexaclear.game.pieces import ALL_PIECE_SHAPES
from hexaclear.game.placement import apply_placement, can_place_piece, has_any_valid_move
from hexaclear.game.state import create_daily_game_state, create_initial_game_state

__all__ = [
    "ALL_PIECE_SHAPES",
    "BOARD_DEFINITION",
    "ActivePiece",
    "BoardDefinition",
    "CellState",
    "GameMode",
    "GameState",
    "Pattern",
    "PieceShape",
    "PlacementResult",
    "apply_placement",
    "build_board",
    "can_place_piece",
    "create_daily_game_state",
    "create_empty_board",
    "create_initial_game_state",
    "deal_daily_hand",
    "deal_hand",
    "deal_playable_hand",
    "find_clears",
    "has_any_valid_move",
    "play_piece",
    "valid_moves",
]
