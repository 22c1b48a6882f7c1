import numpy as np
import pytest

from tetris_arena.game import (
    Action,
    GameConfig,
    GameController,
    GamePhase,
    GeneratorShapeSource,
    LockResult,
    RandomShapeSource,
    ShapeKind,
)


def _drop_until_lock(game, limit=100):
    for _ in range(limit):
        result = game.drop_one_row()
        if result is not None:
            return result
    raise AssertionError("piece never locked")


def test_spawn_is_centered(make_game):
    game = make_game("O")
    assert game.piece.kind == ShapeKind.O
    assert (game.piece.x, game.piece.y) == (5, 0)
    assert game.phase == GamePhase.FALLING

    game = make_game("I")
    assert (game.piece.x, game.piece.y) == (4, 0)


def test_gravity_tick_waits_for_full_interval(make_game):
    game = make_game("O")
    assert game.tick(998) is None
    assert game.piece.y == 0
    game.tick(999)
    assert game.piece.y == 1
    game.tick(1500)
    assert game.piece.y == 1
    game.tick(1999)
    assert game.piece.y == 2


def test_manual_drop_restarts_gravity_timer(make_game):
    game = make_game("O")
    game.drop_one_row(500)
    assert game.piece.y == 1
    game.tick(1400)
    assert game.piece.y == 1
    game.tick(1500)
    assert game.piece.y == 2


def test_drop_without_time_uses_clock(make_game):
    game = make_game("O", clock=lambda: 42.0)
    game.drop_one_row()
    assert game.session.last_drop_time == 42.0


def test_lateral_move_is_blocked_by_wall(make_game):
    game = make_game("O")
    for _ in range(5):
        assert game.move_laterally(-1)
    assert game.piece.x == 0
    assert not game.move_laterally(-1)
    assert game.piece.x == 0


def test_lateral_move_is_blocked_by_cells(make_game):
    game = make_game("O")
    game.grid.cells[1, 7] = 2
    assert not game.move_laterally(1)
    assert game.piece.x == 5


def test_piece_locks_at_bottom_and_next_spawns(make_game):
    game = make_game("OT")
    result = _drop_until_lock(game)
    assert result == LockResult(rows_cleared=0, score_delta=0, game_over=False)
    assert game.grid.cells[18:20, 5:7].tolist() == [[4, 4], [4, 4]]
    assert int(np.count_nonzero(game.grid.cells)) == 4
    assert game.piece.kind == ShapeKind.T
    assert (game.piece.x, game.piece.y) == (5, 0)
    assert game.pieces_locked == 1
    assert game.last_lock is result


def _prefill_well(game, rows):
    # Full rows at the bottom except the column the vertical I falls through
    for y in rows:
        game.grid.cells[y] = 3
        game.grid.cells[y, 1] = 0


def test_line_clears_and_back_to_back_tetris(make_game):
    game = make_game("I", width=4, height=8)
    assert game.piece.x == 0

    _prefill_well(game, range(4, 8))
    result = _drop_until_lock(game)
    assert result.rows_cleared == 4
    assert game.score == 800
    assert game.last_sweep_was_tetris
    assert not game.grid.cells.any()

    _prefill_well(game, range(4, 8))
    _drop_until_lock(game)
    assert game.score == 2400
    assert not game.last_sweep_was_tetris

    _prefill_well(game, [7])
    result = _drop_until_lock(game)
    assert result.rows_cleared == 1
    assert result.score_delta == 100
    assert game.score == 2500
    assert game.lines_cleared_total == 9


def test_blocked_spawn_ends_the_game_and_starts_over(make_game):
    game = make_game("O")
    game.session.score.score = 300
    game.session.score.last_sweep_was_tetris = True
    game.grid.cells[2, 5:7] = 1

    result = game.drop_one_row()
    assert result is not None
    assert result.game_over
    assert game.games_played == 1
    assert not game.grid.cells.any()
    assert game.score == 0
    assert not game.last_sweep_was_tetris
    assert (game.piece.x, game.piece.y) == (5, 0)
    assert game.phase == GamePhase.FALLING


def test_rotate_command(make_game):
    game = make_game("T")
    assert game.rotate(1)
    assert game.piece.matrix.tolist() == [[0, 0, 6], [0, 6, 6], [0, 0, 6]]
    assert game.score == 0


def test_apply_dispatch(make_game):
    game = make_game("O")
    assert game.apply(Action.RIGHT)
    assert game.piece.x == 6
    assert game.apply(Action.LEFT)
    assert game.apply(Action.DROP)
    assert game.piece.y == 1
    assert not game.apply(Action.NONE)
    assert game.apply(Action.ROTATE_CW)
    with pytest.raises(ValueError):
        game.apply(9)


def test_get_state_overlays_piece(make_game):
    game = make_game("O")
    game.grid.cells[19, 0] = 2
    state = game.get_state()
    assert state[0:2, 5:7].tolist() == [[-4, -4], [-4, -4]]
    assert state[19, 0] == 2
    assert game.grid.cells[0, 5] == 0


def test_restart_clears_session(make_game):
    game = make_game("O")
    game.grid.cells[19] = 1
    game.session.score.score = 900
    game.drop_one_row(10)
    game.restart()
    assert not game.grid.cells.any()
    assert game.score == 0
    assert game.session.last_drop_time == -1
    assert game.piece.y == 0


@pytest.mark.parametrize("kwargs", [{"width": 3}, {"height": 2}, {"drop_interval_ms": 0}])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_seeded_random_source_is_reproducible():
    a = RandomShapeSource(7)
    b = RandomShapeSource(7)
    seq = [a.next_shape_index() for _ in range(50)]
    assert seq == [b.next_shape_index() for _ in range(50)]
    assert all(0 <= i < 7 for i in seq)


def test_default_controller_runs_a_full_game():
    game = GameController(GameConfig(random_seed=3), clock=lambda: 0.0)
    for _ in range(2000):
        game.drop_one_row()
    assert game.pieces_locked > 0
    assert game.games_played >= 1


def test_restart_zeroes_counters(make_game):
    game = make_game("O")
    _drop_until_lock(game)
    game.grid.cells[2, 5:7] = 1
    game.drop_one_row()
    assert game.pieces_locked == 2
    assert game.games_played == 1

    game.restart()
    assert (game.lines_cleared_total, game.pieces_locked, game.games_played) == (0, 0, 0)


def test_generator_source_follows_numpy_seed():
    a = GeneratorShapeSource(np.random.default_rng(5))
    b = GeneratorShapeSource(np.random.default_rng(5))
    seq = [a.next_shape_index() for _ in range(50)]
    assert seq == [b.next_shape_index() for _ in range(50)]
    assert all(0 <= i < 7 for i in seq)
