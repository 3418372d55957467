import pytest

from interviewkit.grid_path import shortest_path_binary_matrix


def test_diagonal_step_sample():
    assert shortest_path_binary_matrix([[0, 1], [1, 0]]) == 2


def test_single_open_cell():
    assert shortest_path_binary_matrix([[0]]) == 1


def test_blocked_start_has_no_path():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1


def test_blocked_end_has_no_path():
    assert shortest_path_binary_matrix([[0, 0], [0, 1]]) == -1


def test_walled_off_target_has_no_path():
    grid = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]
    assert shortest_path_binary_matrix(grid) == -1


def test_empty_grid_has_no_path():
    assert shortest_path_binary_matrix([]) == -1


@pytest.mark.parametrize("n", [2, 3, 5, 8])
def test_open_grid_follows_diagonal(n):
    grid = [[0] * n for _ in range(n)]
    assert shortest_path_binary_matrix(grid) == n


def test_detour_is_longer_than_diagonal():
    grid = [[0, 0, 0], [1, 1, 0], [1, 1, 0]]
    result = shortest_path_binary_matrix(grid)
    open_result = shortest_path_binary_matrix([[0] * 3 for _ in range(3)])
    assert result > open_result


def test_grid_is_not_modified():
    grid = [[0, 1, 0], [0, 0, 1], [1, 0, 0]]
    snapshot = [row[:] for row in grid]
    shortest_path_binary_matrix(grid)
    assert grid == snapshot