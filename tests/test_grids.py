import copy

import pytest

from algokit.grids import UNREACHABLE, nearest_exit, oranges_rotting


def _corridor(width):
    return [
        ["+"] * width,
        ["."] * width,
        ["+"] * width,
    ]


def test_nearest_exit_worked_example():
    maze = [
        ["+", "+", ".", "+"],
        [".", ".", ".", "+"],
        ["+", "+", "+", "."],
    ]
    assert nearest_exit(maze, [1, 2]) == 1


def test_nearest_exit_fully_walled():
    maze = [
        ["+", "+", "+"],
        ["+", ".", "+"],
        ["+", "+", "+"],
    ]
    assert nearest_exit(maze, (1, 1)) == UNREACHABLE


def test_entrance_on_border_is_not_an_exit():
    maze = [[".", "+"]]
    assert nearest_exit(maze, (0, 0)) == UNREACHABLE


@pytest.mark.parametrize("col", [1, 2, 3])
def test_corridor_distance_to_left_end(col):
    maze = _corridor(9)
    assert nearest_exit(maze, (1, col)) == col


def test_mirrored_maze_gives_same_distance():
    maze = [
        ["+", "+", "+", "+", "+"],
        ["+", ".", ".", ".", "."],
        ["+", ".", "+", ".", "+"],
        ["+", ".", ".", ".", "+"],
        ["+", "+", "+", "+", "+"],
    ]
    mirrored = [list(reversed(row)) for row in maze]
    width = len(maze[0])
    assert nearest_exit(maze, (3, 1)) == nearest_exit(mirrored, (3, width - 2))


def test_nearest_exit_does_not_modify_maze():
    maze = _corridor(5)
    before = copy.deepcopy(maze)
    nearest_exit(maze, (1, 2))
    assert maze == before


def test_nearest_exit_rejects_empty_maze():
    with pytest.raises(ValueError):
        nearest_exit([], (0, 0))


def test_nearest_exit_rejects_entrance_outside():
    with pytest.raises(ValueError):
        nearest_exit(_corridor(3), (5, 0))


def test_oranges_worked_example():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    assert oranges_rotting(grid) == 4


def test_oranges_without_fresh_take_no_time():
    assert oranges_rotting([[0, 2]]) == 0


def test_isolated_fresh_orange_never_rots():
    grid = [[2, 1, 1], [0, 1, 1], [1, 0, 1]]
    assert oranges_rotting(grid) == UNREACHABLE


def test_fresh_without_rotten_never_rots():
    assert oranges_rotting([[1, 1]]) == UNREACHABLE


@pytest.mark.parametrize("length", [2, 3, 6])
def test_row_rots_one_cell_per_minute(length):
    row = [2] + [1] * (length - 1)
    assert oranges_rotting([row]) == length - 1


def test_oranges_does_not_modify_grid():
    grid = [[2, 1, 1], [1, 1, 0], [0, 1, 1]]
    before = copy.deepcopy(grid)
    oranges_rotting(grid)
    assert grid == before


def test_oranges_rejects_empty_grid():
    with pytest.raises(ValueError):
        oranges_rotting([])