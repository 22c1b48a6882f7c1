from __future__ import annotations

import logging
from enum import IntEnum

from .grid import ArenaGrid
from .pieces import Piece
from .shapes import Matrix

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1


def rotate_matrix(matrix: Matrix, direction: int) -> None:
    """Rotate a square matrix 90 degrees in place.

    A transpose followed by reversing each row is a clockwise turn; a
    transpose followed by reversing the order of the rows is counter-clockwise.
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise ValueError(f"Only square matrices can be rotated in place, got {rows}x{cols}")
    matrix[...] = matrix.T.copy()
    if direction > 0:
        matrix[...] = matrix[:, ::-1].copy()
    else:
        matrix[...] = matrix[::-1, :].copy()


def rotate_with_recovery(grid: ArenaGrid, piece: Piece, direction: int) -> bool:
    """Rotate `piece`, nudging it sideways (+1, -2, +3, ...) until it fits.

    The search stops once the next nudge would be wider than the piece
    matrix; the rotation is then undone and the original column restored.
    Returns whether the rotation was applied.
    """
    original_x = piece.x
    rotate_matrix(piece.matrix, direction)

    offset = 1
    while grid.collides(piece):
        if abs(offset) > piece.width:
            rotate_matrix(piece.matrix, -direction)
            piece.x = original_x
            logger.debug("Rotation of %s declined at x=%d", piece.kind.name, original_x)
            return False
        piece.x += offset
        offset = -(offset + (1 if offset > 0 else -1))
    return True
