import numpy as np
import pytest

from falling_blocks.game import GameGrid
from helpers import piece


def test_new_grid_is_empty_with_fixed_shape():
    board = GameGrid(20, 10)
    assert board.grid.shape == (20, 10)
    assert board.shape == (20, 10)
    assert board.filled_cells() == 0


def test_reset_discards_contents():
    board = GameGrid(20, 10)
    board.grid[19, :] = 3
    board.reset()
    assert not board.grid.any()
    assert board.grid.shape == (20, 10)


def test_is_occupied():
    board = GameGrid(20, 10)
    board.grid[5, 2] = 4
    assert board.is_occupied(5, 2)
    assert not board.is_occupied(5, 3)


def test_merge_writes_only_the_footprint():
    board = GameGrid(20, 10)
    board.grid[19, :] = np.arange(10) % 7 + 1
    before = board.clone_state()
    t = piece([[0, 6, 0], [6, 6, 6]], x=2, y=17)
    board.merge(t)
    assert board.grid[17, 3] == 6
    assert list(board.grid[18, 2:5]) == [6, 6, 6]
    mask = np.zeros_like(before, dtype=bool)
    mask[17, 3] = True
    mask[18, 2:5] = True
    assert np.array_equal(board.grid[~mask], before[~mask])


def test_merge_skips_cells_above_the_top():
    board = GameGrid(20, 10)
    t = piece([[0, 6, 0], [6, 6, 6]], x=2, y=-1)
    board.merge(t)
    assert list(board.grid[0, 2:5]) == [6, 6, 6]
    assert board.filled_cells() == 3


def test_merge_outside_grid_is_an_invariant_violation():
    board = GameGrid(20, 10)
    with pytest.raises(AssertionError):
        board.merge(piece([[1, 1, 1, 1]], x=8, y=0))
    with pytest.raises(AssertionError):
        board.merge(piece([[1, 1, 1, 1]], x=0, y=20))


@pytest.mark.parametrize("full", [[], [19], [18, 19], [10, 15, 19], [0, 5, 12, 19]])
def test_clear_full_rows_removes_exactly_the_full_rows(full):
    rng = np.random.default_rng(7)
    board = GameGrid(20, 10)
    rows = rng.integers(0, 8, size=(20, 10)).astype(np.int8)
    rows[:, 0] = 0  # nothing is full unless listed
    for r in full:
        rows[r, :] = rng.integers(1, 8, size=10)
    board.grid = rows.copy()

    cleared = board.clear_full_rows()

    assert cleared == len(full)
    assert board.grid.shape == (20, 10)
    survivors = np.delete(rows, full, axis=0)
    expected = np.vstack((np.zeros((len(full), 10), dtype=np.int8), survivors))
    assert np.array_equal(board.grid, expected)


def test_clear_full_rows_handles_adjacent_full_rows():
    board = GameGrid(20, 10)
    board.grid[16, :4] = 2
    board.grid[17:, :] = 5
    assert board.clear_full_rows() == 3
    assert list(board.grid[19, :4]) == [2, 2, 2, 2]
    assert board.filled_cells() == 4


def test_load_validates_shape_and_values():
    board = GameGrid(4, 4)
    board.load([[0, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 0], [7, 7, 7, 0]])
    assert board.grid.dtype == np.int8
    assert board.is_occupied(1, 1)
    with pytest.raises(ValueError):
        board.load([[0, 0], [0, 0]])
    with pytest.raises(ValueError):
        board.load([[0, 0, 0, 8]] * 4)


def test_max_height():
    board = GameGrid(20, 10)
    assert board.get_max_height() == 0
    board.grid[15, 3] = 1
    assert board.get_max_height() == 5
