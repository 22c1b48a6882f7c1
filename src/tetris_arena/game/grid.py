from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .pieces import Piece


class ArenaGrid:
    """Fixed-size arena the tetrominoes accumulate in.

    Cells use 0 for empty and the shape color id (1..7) for filled cells, the
    same encoding as piece matrices, so merging is a direct copy. Row 0 is the
    top of the arena.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.cells.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def collides(self, piece: Piece) -> bool:
        """True if any occupied piece cell is out of bounds or overlaps a filled cell."""
        for local_y, local_x in np.argwhere(piece.matrix != 0):
            x = piece.x + int(local_x)
            y = piece.y + int(local_y)
            # Bounds first: numpy would happily wrap a negative index
            if not self.is_inside(x, y):
                return True
            if self.cells[y, x] != 0:
                return True
        return False

    def merge(self, piece: Piece) -> None:
        """Copy the piece's occupied cells into the grid. Assumes no collision."""
        for local_y, local_x in np.argwhere(piece.matrix != 0):
            value = piece.matrix[local_y, local_x]
            self.cells[piece.y + int(local_y), piece.x + int(local_x)] = value

    def sweep_full_rows(self) -> int:
        """Remove full rows, shift the rows above down and return how many were cleared."""
        cleared = 0
        y = self.height - 1
        while y >= 0:
            if np.all(self.cells[y] != 0):
                # Rows above move down by one; the same index is examined again
                self.cells[1 : y + 1] = self.cells[0:y].copy()
                self.cells[0] = 0
                cleared += 1
            else:
                y -= 1
        return cleared

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()
