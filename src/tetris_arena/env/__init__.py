"""Gymnasium environments for Tetris Arena."""

from __future__ import annotations

from gymnasium.envs.registration import register

register(
    id="TetrisArena-12x20-v0",
    entry_point="tetris_arena.env.tetris_env:TetrisArenaEnv",
)
