import pytest

from tetris_arena.game import GameConfig, GameController, SequenceShapeSource


@pytest.fixture
def make_game():
    def _make(shapes="O", width=12, height=20, interval=1000, clock=None):
        return GameController(
            GameConfig(width=width, height=height, drop_interval_ms=interval),
            shape_source=SequenceShapeSource(list(shapes)),
            clock=clock or (lambda: 0.0),
        )

    return _make
