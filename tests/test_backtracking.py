import pytest

from algoshelf.backtracking import rat_in_maze, solve_n_queens

SAMPLE_MAZE = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]

STEPS = {"D": (1, 0), "U": (-1, 0), "L": (0, -1), "R": (0, 1)}


def _replay(grid, path):
    """Return the cells visited by ``path`` starting from the top-left corner."""
    i, j = 0, 0
    cells = [(i, j)]
    for letter in path:
        di, dj = STEPS[letter]
        i, j = i + di, j + dj
        cells.append((i, j))
    return cells


def _queens(board):
    return [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]


def test_four_queens_has_two_solutions():
    assert len(solve_n_queens(4)) == 2


@pytest.mark.parametrize("n", [2, 3])
def test_small_boards_have_no_solution(n):
    assert solve_n_queens(n) == []


@pytest.mark.parametrize("n", [4, 5, 6])
def test_every_board_is_valid(n):
    boards = solve_n_queens(n)
    assert len({tuple(board) for board in boards}) == len(boards)
    for board in boards:
        assert len(board) == n and all(len(row) == n for row in board)
        queens = _queens(board)
        assert len(queens) == n
        assert len({r for r, _ in queens}) == n
        assert len({c for _, c in queens}) == n
        assert len({r - c for r, c in queens}) == n
        assert len({r + c for r, c in queens}) == n


def test_negative_board_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_sample_maze_paths():
    assert rat_in_maze(SAMPLE_MAZE) == ["DDRDRR", "DRDDRR"]


def test_blocked_start_has_no_path():
    grid = [row[:] for row in SAMPLE_MAZE]
    grid[0][0] = 0
    assert not rat_in_maze(grid)


def test_open_maze_paths_are_valid_and_sorted():
    grid = [[1] * 3 for _ in range(3)]
    paths = rat_in_maze(grid)
    assert paths == sorted(paths)
    assert len(set(paths)) == len(paths)
    for path in paths:
        cells = _replay(grid, path)
        assert cells[-1] == (2, 2)
        assert len(set(cells)) == len(cells)
        assert all(0 <= i < 3 and 0 <= j < 3 for i, j in cells)


def test_paths_avoid_walls():
    for path in rat_in_maze(SAMPLE_MAZE):
        assert all(SAMPLE_MAZE[i][j] == 1 for i, j in _replay(SAMPLE_MAZE, path))


def test_non_square_maze():
    with pytest.raises(ValueError):
        rat_in_maze([[1, 1, 1], [1, 1, 1]])