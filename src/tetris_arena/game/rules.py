from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    tetris_points: int = 800
    back_to_back_tetris_points: int = 1600
    tetris_rows: int = 4

    def score_for_sweep(self, rows_cleared: int, last_sweep_was_tetris: bool) -> int:
        if rows_cleared == self.tetris_rows:
            return self.back_to_back_tetris_points if last_sweep_was_tetris else self.tetris_points
        return self.line_clear_points * max(0, rows_cleared)


@dataclass
class ScoreState:
    score: int = 0
    last_sweep_was_tetris: bool = False

    def reset(self) -> None:
        self.score = 0
        self.last_sweep_was_tetris = False

    def apply_sweep(self, rows_cleared: int, rules: ScoringRules) -> int:
        """Add the points for one sweep and update the tetris chain flag.

        The flag toggles on a tetris rather than counting a streak, so only
        the second tetris of a back-to-back pair earns the bonus.
        """
        delta = rules.score_for_sweep(rows_cleared, self.last_sweep_was_tetris)
        self.score += delta
        if rows_cleared == rules.tetris_rows:
            self.last_sweep_was_tetris = not self.last_sweep_was_tetris
        else:
            self.last_sweep_was_tetris = False
        return delta
