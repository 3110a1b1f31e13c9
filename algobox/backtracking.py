"""Backtracking solvers: sudoku, N queens and a rat in a maze."""

from __future__ import annotations

from typing import Optional, Sequence

Grid = list[list[int]]

_SIZE = 9
_BOX = 3


def _validate_sudoku(board: Sequence[Sequence[int]]) -> None:
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError("a sudoku board must be 9 by 9")
    if any(not 0 <= value <= _SIZE for row in board for value in row):
        raise ValueError("sudoku cells must hold 0 (empty) or a digit 1-9")


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Return whether ``num`` appears in none of the row, column and box of a cell."""
    if num in board[row]:
        return False
    if any(line[col] == num for line in board):
        return False
    top = row - row % _BOX
    left = col - col % _BOX
    return all(num not in board[r][left : left + _BOX] for r in range(top, top + _BOX))


def _first_empty(grid: Grid) -> Optional[tuple[int, int]]:
    return next(
        (
            (r, c)
            for r, line in enumerate(grid)
            for c, value in enumerate(line)
            if value == 0
        ),
        None,
    )


def _fill(grid: Grid) -> bool:
    cell = _first_empty(grid)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, _SIZE + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid):
                return True
            grid[row][col] = 0
    return False


def solve_sudoku(board: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Return a solved copy of a 9x9 board (0 marks an empty cell), or None."""
    _validate_sudoku(board)
    grid = [list(line) for line in board]
    return grid if _fill(grid) else None


def solve_n_queens(n: int) -> Optional[Grid]:
    """Place ``n`` non-attacking queens row by row.

    Returns an ``n`` by ``n`` grid with 1 where a queen stands, or None when
    no placement exists.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if all(
                placed != col and abs(placed - col) != row - placed_row
                for placed_row, placed in enumerate(columns)
            ):
                columns.append(col)
                if place(row + 1):
                    return True
                columns.pop()
        return False

    if not place(0):
        return None
    return [[1 if c == queen else 0 for c in range(n)] for queen in columns]


def solve_rat_maze(maze: Sequence[Sequence[int]]) -> Optional[Grid]:
    """Find a path from the top-left to the bottom-right cell moving down or right.

    Open cells hold 1. The path is returned as a grid with 1 on each visited
    cell, or None when there is none. Reaching the bottom-right cell ends the
    search whatever that cell holds.
    """
    n = len(maze)
    if n == 0 or any(len(line) != n for line in maze):
        raise ValueError("the maze must be a non-empty square grid")
    path = [[0] * n for _ in range(n)]

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1:
            path[x][y] = 1
            return True
        if x < n and y < n and maze[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None