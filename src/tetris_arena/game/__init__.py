"""Game module for Tetris Arena.

Exports the falling-block engine and supporting classes:
- ArenaGrid: Grid representation, collision, merging and row sweeping
- Piece: The active tetromino and its position
- ShapeKind / shape_matrix: The seven-shape catalog
- rotate_matrix / rotate_with_recovery: In-place rotation and wall kicks
- ScoringRules / ScoreState: Scoring and the back-to-back tetris flag
- GameController: Gravity, commands and the lock/clear/spawn state machine
"""

from .grid import ArenaGrid
from .pieces import Piece
from .shapes import ShapeKind, shape_matrix
from .rotation import Direction, rotate_matrix, rotate_with_recovery
from .rules import ScoringRules, ScoreState
from .randomizer import GeneratorShapeSource, RandomShapeSource, SequenceShapeSource, ShapeSource
from .core import Action, GameConfig, GameController, GamePhase, GameSession, LockResult

__all__ = [
    "ArenaGrid",
    "Piece",
    "ShapeKind",
    "shape_matrix",
    "Direction",
    "rotate_matrix",
    "rotate_with_recovery",
    "ScoringRules",
    "ScoreState",
    "GeneratorShapeSource",
    "RandomShapeSource",
    "SequenceShapeSource",
    "ShapeSource",
    "Action",
    "GameConfig",
    "GameController",
    "GamePhase",
    "GameSession",
    "LockResult",
]
