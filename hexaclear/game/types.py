"""Axial hex coordinate helpers for the HexaClear board."""

from __future__ import annotations

from hexaclear.engine.models import Axial, CellId
from hexaclear.engine.errors import TopologyError

# Axial hex directions: the 6 neighbors of (q, r)
HEX_DIRECTIONS: list[Axial] = [
    (1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1),
]

# One direction per axis; lines are walked along these
PRIMARY_DIRECTIONS: list[Axial] = HEX_DIRECTIONS[:3]


def hex_add(a: Axial, b: Axial) -> Axial:
    return a[0] + b[0], a[1] + b[1]


def hex_neighbors(q: int, r: int) -> list[Axial]:
    """Return the 6 axial-coordinate neighbors of hex (q, r)."""
    return [(q + dq, r + dr) for dq, dr in HEX_DIRECTIONS]


def hex_to_key(q: int, r: int) -> CellId:
    return CellId(f"{q},{r}")


def key_to_hex(key: str) -> Axial:
    try:
        q, r = key.split(",")
        return int(q), int(r)
    except ValueError as exc:
        raise TopologyError(f"Malformed cell id: {key!r}", cell_id=key) from exc


def rotate_axial(coord: Axial, times: int = 1) -> Axial:
    """Rotate an offset by ``times`` sixth-turns about the origin.

    Hex transform: (q, r) -> (-r, q + r)
    """
    q, r = coord
    for _ in range(times % 6):
        q, r = -r, q + r
    return q, r


def reflect_axial(coord: Axial) -> Axial:
    """Mirror an offset across the vertical axis.

    Hex transform: (q, r) -> (-q, q + r)
    """
    q, r = coord
    return -q, q + r
