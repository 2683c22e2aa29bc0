import pytest

from falling_blocks.game import GameGrid, LineClearer, Progress, ScoringRules


@pytest.mark.parametrize("lines,level,expected", [
    (0, 1, 0),
    (1, 1, 100),
    (2, 1, 300),
    (3, 1, 500),
    (4, 1, 800),
    (1, 3, 300),
    (4, 5, 4000),
])
def test_score_for_lines(lines, level, expected):
    assert ScoringRules().score_for_lines(lines, level) == expected


def test_level_for_lines():
    rules = ScoringRules()
    assert rules.level_for_lines(0) == 1
    assert rules.level_for_lines(9) == 1
    assert rules.level_for_lines(10) == 2
    assert rules.level_for_lines(95) == 10


@pytest.mark.parametrize("level,interval", [(1, 1000), (2, 900), (9, 200), (10, 100), (11, 100), (30, 100)])
def test_drop_interval_floor(level, interval):
    assert ScoringRules().drop_interval_for_level(level) == interval


@pytest.mark.parametrize("kwargs", [
    {"line_clear_scores": (100, 300, 500, 800)},
    {"line_clear_scores": (10, 100, 300, 500, 800)},
    {"lines_per_level": 0},
    {"min_drop_interval_ms": 0},
    {"base_drop_interval_ms": 50},
])
def test_invalid_rules(kwargs):
    with pytest.raises(ValueError):
        ScoringRules(**kwargs)


def test_progress_starts_at_level_one():
    progress = Progress.initial(ScoringRules())
    assert (progress.score, progress.level, progress.lines, progress.drop_interval_ms) == (0, 1, 0, 1000)


def test_clear_without_full_rows_changes_nothing():
    board = GameGrid(20, 10)
    board.grid[19, :9] = 1
    progress = Progress.initial(ScoringRules())
    assert LineClearer(ScoringRules()).clear(board, progress) == 0
    assert progress == Progress.initial(ScoringRules())


def test_tetris_scores_800_times_level():
    board = GameGrid(20, 10)
    board.grid[16:, :] = 2
    progress = Progress(score=50, level=2, lines=12, drop_interval_ms=900)
    assert LineClearer(ScoringRules()).clear(board, progress) == 4
    assert progress.score == 50 + 800 * 2
    assert progress.lines == 16
    assert progress.level == 2
    assert not board.grid.any()


def test_level_up_uses_old_level_for_score_and_speeds_up():
    board = GameGrid(20, 10)
    board.grid[19, :] = 2
    progress = Progress(score=0, level=1, lines=9, drop_interval_ms=1000)
    LineClearer(ScoringRules()).clear(board, progress)
    assert progress.score == 100
    assert progress.lines == 10
    assert progress.level == 2
    assert progress.drop_interval_ms == 900
