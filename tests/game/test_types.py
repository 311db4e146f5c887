"""Tests for axial hex helpers."""

from __future__ import annotations

import pytest

from hexaclear.engine.errors import TopologyError
from hexaclear.game.types import (
    HEX_DIRECTIONS,
    PRIMARY_DIRECTIONS,
    hex_add,
    hex_neighbors,
    hex_to_key,
    key_to_hex,
    reflect_axial,
    rotate_axial,
)


class TestKeys:
    def test_roundtrip(self) -> None:
        for q, r in [(0, 0), (3, -1), (-4, 2)]:
            assert key_to_hex(hex_to_key(q, r)) == (q, r)

    def test_key_format(self) -> None:
        assert hex_to_key(-2, 3) == "-2,3"

    def test_malformed_key_raises(self) -> None:
        with pytest.raises(TopologyError):
            key_to_hex("not-a-cell")


class TestDirections:
    def test_six_unit_directions(self) -> None:
        assert len(set(HEX_DIRECTIONS)) == 6

    def test_primary_directions_have_opposites(self) -> None:
        for dq, dr in PRIMARY_DIRECTIONS:
            assert (-dq, -dr) in HEX_DIRECTIONS
            assert (-dq, -dr) not in PRIMARY_DIRECTIONS

    def test_neighbors(self) -> None:
        assert hex_neighbors(2, -1) == [hex_add((2, -1), d) for d in HEX_DIRECTIONS]


class TestRotation:
    def test_one_turn_steps_back_one_direction(self) -> None:
        for i, d in enumerate(HEX_DIRECTIONS):
            assert rotate_axial(d) == HEX_DIRECTIONS[(i - 1) % 6]

    def test_six_turns_is_identity(self) -> None:
        assert rotate_axial((2, -3), 6) == (2, -3)

    def test_zero_turns_is_identity(self) -> None:
        assert rotate_axial((1, 2), 0) == (1, 2)

    def test_double_reflection_is_identity(self) -> None:
        assert reflect_axial(reflect_axial((3, -5))) == (3, -5)

    def test_reflection_fixes_vertical_axis(self) -> None:
        assert reflect_axial((0, 1)) == (0, 1)
        assert reflect_axial((1, 0)) == (-1, 1)
