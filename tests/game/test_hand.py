"""Tests for hand dealing, including the seeded daily stream."""

from __future__ import annotations

import logging
import re

from hexaclear.config import settings
from hexaclear.engine.rng import SeededRandom
from hexaclear.game.board import BOARD_DEFINITION, create_empty_board
from hexaclear.game.hand import (
    HAND_SIZE,
    MAX_HAND_CELLS,
    daily_stream,
    deal_daily_hand,
    deal_hand,
    deal_playable_hand,
)
from hexaclear.game.pieces import ALL_PIECE_SHAPES, rotate_cells
from hexaclear.game.placement import has_any_valid_move
from tests.conftest import FLOWER_0, filled_board

PIECE_ID = re.compile(r"^piece-[0-2]-[0-9a-f]{8}$")


class TestDealHand:
    def test_three_pieces(self) -> None:
        assert len(deal_hand(SeededRandom(1))) == HAND_SIZE

    def test_pieces_are_rotated_catalog_shapes(self) -> None:
        catalog = {s.id: s for s in ALL_PIECE_SHAPES}
        for seed in range(20):
            for piece in deal_hand(SeededRandom(seed)):
                base = catalog[piece.shape.id]
                rotations = [rotate_cells(base.cells, t) for t in range(6)]
                assert piece.shape.cells in rotations
                assert piece.shape.size == base.size

    def test_piece_ids(self) -> None:
        hand = deal_hand(SeededRandom(42))
        assert all(PIECE_ID.match(p.id) for p in hand)
        assert [p.id.split("-")[1] for p in hand] == ["0", "1", "2"]
        assert len({p.id for p in hand}) == HAND_SIZE

    def test_seeded_deal_is_deterministic(self) -> None:
        assert deal_hand(SeededRandom(9)) == deal_hand(SeededRandom(9))

    def test_hand_cell_cap(self) -> None:
        for seed in range(200):
            hand = deal_hand(SeededRandom(seed))
            assert sum(p.shape.size for p in hand) <= MAX_HAND_CELLS

    def test_three_draws_per_piece_at_least(self) -> None:
        rng = SeededRandom(3)
        deal_hand(rng)
        assert rng.draws >= 3 * HAND_SIZE


class TestDealPlayableHand:
    def test_returns_playable_hand(self) -> None:
        board = filled_board(FLOWER_0)
        for seed in range(10):
            hand = deal_playable_hand(board, rng=SeededRandom(seed))
            assert has_any_valid_move(board, hand)

    def test_first_hand_kept_when_playable(self, empty_board) -> None:
        assert deal_playable_hand(empty_board, rng=SeededRandom(5)) == deal_hand(SeededRandom(5))

    def test_gives_up_with_warning(self, caplog) -> None:
        board = filled_board(BOARD_DEFINITION.cell_ids)
        rng = SeededRandom(1)
        with caplog.at_level(logging.WARNING, logger="hexaclear.game.hand"):
            hand = deal_playable_hand(board, max_attempts=2, rng=rng)
        assert len(hand) == HAND_SIZE
        assert "No playable hand after 2 attempts" in caplog.text
        # initial deal plus two re-deals
        assert rng.draws >= 3 * 3 * HAND_SIZE

    def test_default_attempts_from_settings(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(settings, "max_deal_attempts", 1)
        board = filled_board(BOARD_DEFINITION.cell_ids)
        with caplog.at_level(logging.WARNING, logger="hexaclear.game.hand"):
            deal_playable_hand(board, rng=SeededRandom(1))
        assert "after 1 attempts" in caplog.text


class TestDailyStream:
    def test_exact_resume(self) -> None:
        reference = SeededRandom(77)
        reference.skip(17)
        stream = daily_stream(77, 3, draws_consumed=17)
        assert stream.draws == 17
        assert [stream() for _ in range(5)] == [reference() for _ in range(5)]

    def test_fixed_block_fallback(self) -> None:
        stream = daily_stream(77, 2)
        assert stream.draws == 2 * settings.daily_hand_block_size

    def test_first_hand_starts_at_zero(self) -> None:
        assert daily_stream(77, 0)() == SeededRandom(77)()

    def test_deal_daily_hand_uses_block(self) -> None:
        board = create_empty_board()
        rng = SeededRandom(-5)
        rng.skip(settings.daily_hand_block_size)
        assert deal_daily_hand(board, -5, 1) == deal_playable_hand(board, rng=rng)

    def test_deal_daily_hand_exact(self) -> None:
        board = create_empty_board()
        rng = SeededRandom(-5)
        rng.skip(40)
        assert deal_daily_hand(board, -5, 1, draws_consumed=40) == deal_playable_hand(board, rng=rng)

    def test_deal_daily_hand_is_deterministic(self) -> None:
        board = filled_board(FLOWER_0[1:])
        assert deal_daily_hand(board, 123, 4) == deal_daily_hand(board, 123, 4)
