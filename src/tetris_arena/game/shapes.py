from __future__ import annotations

from enum import IntEnum
from typing import Dict, List

import numpy as np


class ShapeKind(IntEnum):
    """Tetromino kinds; the value doubles as the cell color id."""

    I = 1
    J = 2
    L = 3
    O = 4
    S = 5
    T = 6
    Z = 7


CATALOG_ORDER = "IJLOSTZ"

Matrix = np.ndarray


# Spawn orientation of every shape, cells hold the shape's color id
SPAWN_SHAPES: Dict[ShapeKind, List[List[int]]] = {
    ShapeKind.I: [
        [0, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 0, 0],
    ],
    ShapeKind.J: [
        [0, 2, 0],
        [0, 2, 0],
        [2, 2, 0],
    ],
    ShapeKind.L: [
        [0, 3, 0],
        [0, 3, 0],
        [0, 3, 3],
    ],
    ShapeKind.O: [
        [4, 4],
        [4, 4],
    ],
    ShapeKind.S: [
        [0, 5, 5],
        [5, 5, 0],
        [0, 0, 0],
    ],
    ShapeKind.T: [
        [6, 6, 6],
        [0, 6, 0],
        [0, 0, 0],
    ],
    ShapeKind.Z: [
        [7, 7, 0],
        [0, 7, 7],
        [0, 0, 0],
    ],
}


def shape_matrix(kind: ShapeKind | str) -> Matrix:
    """Return a fresh, writable spawn matrix for `kind` ("I" or ShapeKind.I)."""
    if isinstance(kind, str):
        kind = ShapeKind[kind]
    return np.array(SPAWN_SHAPES[kind], dtype=np.int8)


def kind_for_index(index: int) -> ShapeKind:
    return ShapeKind[CATALOG_ORDER[index]]
