from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

import numpy as np

from .shapes import CATALOG_ORDER


class ShapeSource(Protocol):
    def next_shape_index(self) -> int:
        """Index into the 7-shape catalog (I, J, L, O, S, T, Z)."""
        ...


class RandomShapeSource:
    """Uniform choice among the seven shapes."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def next_shape_index(self) -> int:
        return self.rng.randrange(len(CATALOG_ORDER))


class GeneratorShapeSource:
    """Uniform choice drawn from a numpy Generator, e.g. a gymnasium env's np_random."""

    def __init__(self, generator: np.random.Generator) -> None:
        self.generator = generator

    def next_shape_index(self) -> int:
        return int(self.generator.integers(len(CATALOG_ORDER)))


class SequenceShapeSource:
    """Cycles through a fixed list of indices or shape letters."""

    def __init__(self, sequence: Sequence[int | str]) -> None:
        if not sequence:
            raise ValueError("SequenceShapeSource needs at least one entry")
        self.sequence = [CATALOG_ORDER.index(s) if isinstance(s, str) else int(s) for s in sequence]
        self._pos = 0

    def next_shape_index(self) -> int:
        index = self.sequence[self._pos % len(self.sequence)]
        self._pos += 1
        return index
