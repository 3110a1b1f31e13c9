import pytest

from algobox.backtracking import is_safe, solve_n_queens, solve_rat_maze, solve_sudoku

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

DIGITS = set(range(1, 10))


def _is_valid_solution(grid):
    rows = all(set(row) == DIGITS for row in grid)
    cols = all({grid[r][c] for r in range(9)} == DIGITS for c in range(9))
    boxes = all(
        {grid[r][c] for r in range(top, top + 3) for c in range(left, left + 3)} == DIGITS
        for top in (0, 3, 6)
        for left in (0, 3, 6)
    )
    return rows and cols and boxes


def _empty_board():
    return [[0] * 9 for _ in range(9)]


def test_is_safe_checks_row_column_and_box():
    board = _empty_board()
    board[0][0] = 5
    assert is_safe(board, 0, 8, 5) is False
    assert is_safe(board, 8, 0, 5) is False
    assert is_safe(board, 1, 1, 5) is False
    assert is_safe(board, 4, 4, 5) is True
    assert is_safe(board, 0, 8, 4) is True


def test_solve_sudoku_produces_valid_grid_keeping_givens():
    solved = solve_sudoku(PUZZLE)
    assert solved is not None
    assert _is_valid_solution(solved)
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]


def test_solve_sudoku_does_not_modify_input():
    original = [row[:] for row in PUZZLE]
    solve_sudoku(PUZZLE)
    assert PUZZLE == original


def test_solve_sudoku_on_solved_board_returns_it():
    solved = solve_sudoku(PUZZLE)
    assert solve_sudoku(solved) == solved


def test_solve_sudoku_unsolvable_returns_none():
    board = _empty_board()
    board[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    board[5][8] = 9
    assert solve_sudoku(board) is None


def test_solve_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_solve_sudoku_rejects_bad_value():
    board = _empty_board()
    board[3][3] = 10
    with pytest.raises(ValueError):
        solve_sudoku(board)


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_n_queens_places_non_attacking_queens(n):
    grid = solve_n_queens(n)
    assert grid is not None
    assert len(grid) == n
    queens = [(r, row.index(1)) for r, row in enumerate(grid)]
    assert all(sum(row) == 1 for row in grid)
    cols = [c for _, c in queens]
    assert len(set(cols)) == n
    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1 :]:
            assert abs(r1 - r2) != abs(c1 - c2)


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_impossible_sizes(n):
    assert solve_n_queens(n) is None


def test_n_queens_zero_is_empty_board():
    assert solve_n_queens(0) == []


def test_n_queens_negative_raises():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_rat_maze_open_grid_path_is_monotone():
    n = 4
    maze = [[1] * n for _ in range(n)]
    path = solve_rat_maze(maze)
    assert path is not None
    assert path[0][0] == 1 and path[n - 1][n - 1] == 1
    assert sum(map(sum, path)) == 2 * n - 1


def test_rat_maze_path_stays_on_open_cells():
    maze = [
        [1, 0, 0, 0],
        [1, 1, 0, 1],
        [0, 1, 0, 0],
        [1, 1, 1, 1],
    ]
    path = solve_rat_maze(maze)
    assert path is not None
    for r in range(4):
        for c in range(4):
            if path[r][c]:
                assert maze[r][c] == 1
    assert sum(map(sum, path)) == 7


def test_rat_maze_blocked_returns_none():
    assert solve_rat_maze([[1, 0], [0, 1]]) is None


def test_rat_maze_destination_reached_even_if_closed():
    path = solve_rat_maze([[1, 1], [1, 0]])
    assert path is not None
    assert path[1][1] == 1


def test_rat_maze_rejects_non_square():
    with pytest.raises(ValueError):
        solve_rat_maze([[1, 1], [1]])