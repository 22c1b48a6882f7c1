from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from tetris_arena.game import Action, GameConfig, GameController, GeneratorShapeSource, LockResult, ShapeSource
from tetris_arena.visualization.palette import color_for_value


class TetrisArenaEnv(gym.Env):
    """Step-driven wrapper around the falling-block engine.

    Actions (6 total, see `Action`):
      0: Move left
      1: Move right
      2: Rotate clockwise
      3: Rotate counter-clockwise
      4: Drop one row
      5: Do nothing

    Wall-clock gravity does not apply here: every `gravity_every` steps the
    piece is dropped one row unless the action itself was a drop. The reward is
    the score gained by locks during the step. An episode terminates on the
    lock that ends a game; the engine has already started a fresh game by then.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        gravity_every: int = 4,
        max_episode_steps: int = 5000,
        invalid_action_penalty: float = 0.0,
        shape_source: Optional[ShapeSource] = None,
    ) -> None:
        super().__init__()
        if gravity_every < 1:
            raise ValueError(f"gravity_every must be at least 1, got {gravity_every}")
        self._steps = 0
        self._fixed_source = shape_source is not None
        if shape_source is None:
            shape_source = GeneratorShapeSource(self.np_random)
        self.game = GameController(config, shape_source=shape_source, clock=lambda: float(self._steps))
        self.render_mode = render_mode
        self.gravity_every = int(gravity_every)
        self.max_episode_steps = int(max_episode_steps)
        self.invalid_action_penalty = float(invalid_action_penalty)

        h, w = self.game.config.height, self.game.config.width
        self.observation_space = spaces.Box(low=-7, high=7, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "last_sweep_was_tetris": self.game.last_sweep_was_tetris,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if not self._fixed_source:
            # super().reset replaces np_random when a seed is given
            self.game.shape_source = GeneratorShapeSource(self.np_random)
        self._steps = 0
        self.game.restart()
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        locks: List[LockResult] = []
        reward = 0.0

        if action == Action.DROP:
            lock = self.game.drop_one_row()
            if lock is not None:
                locks.append(lock)
        else:
            applied = self.game.apply(action)
            if not applied and action != Action.NONE:
                reward += self.invalid_action_penalty

        self._steps += 1
        if action != Action.DROP and self._steps % self.gravity_every == 0:
            lock = self.game.drop_one_row()
            if lock is not None:
                locks.append(lock)

        reward += float(sum(lock.score_delta for lock in locks))
        terminated = any(lock.game_over for lock in locks)
        truncated = self._steps >= self.max_episode_steps

        info = self._get_info()
        info["rows_cleared"] = sum(lock.rows_cleared for lock in locks)
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
