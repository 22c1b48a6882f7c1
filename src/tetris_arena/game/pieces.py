from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .shapes import Matrix, ShapeKind, shape_matrix


@dataclass
class Piece:
    """The active tetromino: its own matrix plus the grid offset of its top-left cell."""

    kind: ShapeKind
    matrix: Matrix
    x: int = 0
    y: int = 0

    @classmethod
    def spawn(cls, kind: ShapeKind, arena_width: int) -> "Piece":
        matrix = shape_matrix(kind)
        x = arena_width // 2 - matrix.shape[1] // 2
        return cls(kind=kind, matrix=matrix, x=x, y=0)

    @property
    def width(self) -> int:
        return int(self.matrix.shape[1])

    @property
    def color_id(self) -> int:
        return int(self.kind)

    def cells(self) -> list[tuple[int, int]]:
        """Grid coordinates (x, y) of the occupied cells at the current position."""
        return [(self.x + int(dx), self.y + int(dy)) for dy, dx in np.argwhere(self.matrix != 0)]
