from __future__ import annotations


class GameEngineError(Exception):
    """Base class for engine errors."""
    pass


class TopologyError(GameEngineError):
    """Board topology could not be built or addressed."""

    def __init__(self, message: str, cell_id: str | None = None):
        self.message = message
        self.cell_id = cell_id
        super().__init__(message)


class MalformedShapeError(GameEngineError):
    """Piece shape data is unusable (no cells, bad offsets)."""

    def __init__(self, message: str, cells: list | None = None):
        self.message = message
        self.cells = cells
        super().__init__(message)
