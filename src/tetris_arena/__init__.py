"""Tetris Arena: a falling-block puzzle engine with a gymnasium environment and a pygame front end."""

__version__ = "0.1.0"
