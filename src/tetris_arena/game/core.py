from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, Optional

import numpy as np

from .grid import ArenaGrid
from .pieces import Piece
from .randomizer import RandomShapeSource, ShapeSource
from .rotation import rotate_with_recovery
from .rules import ScoreState, ScoringRules
from .shapes import kind_for_index

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE_CW = 2
    ROTATE_CCW = 3
    DROP = 4
    NONE = 5


class GamePhase(Enum):
    FALLING = "falling"
    LOCKING = "locking"
    CLEARING = "clearing"
    SPAWNING = "spawning"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 12
    height: int = 20
    drop_interval_ms: float = 1000
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        # Every shape has to fit at its spawn column in an empty arena
        if self.width < 4 or self.height < 4:
            raise ValueError(f"Arena of {self.width}x{self.height} cannot hold every shape")
        if self.drop_interval_ms <= 0:
            raise ValueError(f"drop_interval_ms must be positive, got {self.drop_interval_ms}")


@dataclass
class LockResult:
    rows_cleared: int
    score_delta: int
    game_over: bool


@dataclass
class GameSession:
    """Everything that changes during play: arena, active piece, score and gravity timer."""

    grid: ArenaGrid
    piece: Optional[Piece] = None
    score: ScoreState = field(default_factory=ScoreState)
    last_drop_time: float = -1


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class GameController:
    """Drives a session: gravity ticks, player commands, locking, scoring and spawning.

    Locking, clearing and spawning all happen synchronously inside the drop
    that lands the piece, so between calls the game is always FALLING.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        shape_source: Optional[ShapeSource] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.shape_source = shape_source or RandomShapeSource(self.config.random_seed)
        self.clock = clock or _monotonic_ms
        self.session = GameSession(grid=ArenaGrid(self.config.width, self.config.height))
        self.phase = GamePhase.SPAWNING
        self.last_lock: Optional[LockResult] = None
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.games_played = 0
        self._spawn_piece()

    # Read-only views -------------------------------------------------

    @property
    def grid(self) -> ArenaGrid:
        return self.session.grid

    @property
    def piece(self) -> Piece:
        assert self.session.piece is not None
        return self.session.piece

    @property
    def score(self) -> int:
        return self.session.score.score

    @property
    def last_sweep_was_tetris(self) -> bool:
        return self.session.score.last_sweep_was_tetris

    def get_state(self) -> np.ndarray:
        """Grid copy with the active piece overlaid as negative color ids."""
        state = self.grid.clone_state()
        for x, y in self.piece.cells():
            if self.grid.is_inside(x, y):
                state[y, x] = -self.piece.color_id
        return state

    # Commands --------------------------------------------------------

    def tick(self, current_time: float) -> Optional[LockResult]:
        """Apply gravity if a full drop interval has passed since the last drop."""
        if current_time - self.session.last_drop_time >= self.config.drop_interval_ms:
            return self.drop_one_row(current_time)
        return None

    def drop_one_row(self, current_time: Optional[float] = None) -> Optional[LockResult]:
        """Move the piece down one row, locking it if it lands.

        Also restarts the gravity timer. Returns the lock result when the
        piece was merged into the arena, otherwise None.
        """
        piece = self.piece
        piece.y += 1
        self.session.last_drop_time = self.clock() if current_time is None else current_time

        if not self.grid.collides(piece):
            return None
        piece.y -= 1
        return self._lock_piece()

    def move_laterally(self, offset: int) -> bool:
        piece = self.piece
        piece.x += offset
        if self.grid.collides(piece):
            piece.x -= offset
            return False
        return True

    def rotate(self, direction: int) -> bool:
        return rotate_with_recovery(self.grid, self.piece, direction)

    def apply(self, action: Action | int) -> bool:
        """Dispatch a single command; returns whether it changed the piece."""
        action = Action(action)
        if action == Action.LEFT:
            return self.move_laterally(-1)
        if action == Action.RIGHT:
            return self.move_laterally(1)
        if action == Action.ROTATE_CW:
            return self.rotate(1)
        if action == Action.ROTATE_CCW:
            return self.rotate(-1)
        if action == Action.DROP:
            self.drop_one_row()
            return True
        return False

    def restart(self) -> None:
        self.session.grid.reset()
        self.session.score.reset()
        self.session.last_drop_time = -1
        self.last_lock = None
        self.lines_cleared_total = 0
        self.pieces_locked = 0
        self.games_played = 0
        self._spawn_piece()

    # State machine ---------------------------------------------------

    def _lock_piece(self) -> LockResult:
        self.phase = GamePhase.LOCKING
        self.grid.merge(self.piece)
        self.pieces_locked += 1

        self.phase = GamePhase.CLEARING
        rows = self.grid.sweep_full_rows()
        delta = self.session.score.apply_sweep(rows, self.rules)
        self.lines_cleared_total += rows
        if rows:
            logger.info(
                "Cleared %d row(s) for %d points (score %d%s)",
                rows,
                delta,
                self.score,
                ", tetris" if rows == self.rules.tetris_rows else "",
            )
        else:
            logger.debug("Locked %s at (%d, %d)", self.piece.kind.name, self.piece.x, self.piece.y)

        game_over = not self._spawn_piece()
        self.last_lock = LockResult(rows_cleared=rows, score_delta=delta, game_over=game_over)
        return self.last_lock

    def _spawn_piece(self) -> bool:
        """Spawn the next piece; on a blocked spawn run game over and spawn again.

        Returns False when the spawn ended a game.
        """
        self._place_next_piece()
        if self.grid.collides(self.piece):
            self._game_over()
            return False
        self.phase = GamePhase.FALLING
        return True

    def _place_next_piece(self) -> None:
        self.phase = GamePhase.SPAWNING
        kind = kind_for_index(self.shape_source.next_shape_index())
        self.session.piece = Piece.spawn(kind, self.grid.width)
        logger.debug("Spawned %s at x=%d", kind.name, self.session.piece.x)

    def _game_over(self) -> None:
        self.phase = GamePhase.GAME_OVER
        self.games_played += 1
        logger.info("Game over with score %d, starting a new game", self.score)
        self.session.grid.reset()
        self.session.score.reset()

        # The arena is empty again, which always has room for a spawn
        self._place_next_piece()
        self.phase = GamePhase.FALLING
