"""Backtracking solvers: the rat-in-a-maze path and 9x9 sudoku."""

from __future__ import annotations

from collections.abc import Sequence

Grid = list[list[int]]

_SUDOKU_SIZE = 9
_BOX = 3


def solve_maze(maze: Sequence[Sequence[int]]) -> Grid | None:
    """Find a path from the top-left to the bottom-right cell of a square maze.

    The rat may only move right or down and only onto cells holding 1.  Moving
    right is tried before moving down.  Returns a matrix with 1 on the cells of
    the path, or None when no path exists.
    """
    size = len(maze)
    if size == 0 or any(len(row) != size for row in maze):
        raise ValueError("maze must be a non-empty square matrix")

    solution = [[0] * size for _ in range(size)]
    last = size - 1

    def walk(row: int, col: int) -> bool:
        solution[row][col] = 1
        if row == last and col == last:
            return True
        if col < last and maze[row][col + 1] == 1 and walk(row, col + 1):
            return True
        if row < last and maze[row + 1][col] == 1 and walk(row + 1, col):
            return True
        solution[row][col] = 0
        return False

    return solution if walk(0, 0) else None


def is_valid_placement(grid: Sequence[Sequence[int]], row: int, col: int, value: int) -> bool:
    """Return True if value appears neither in the row, the column nor the 3x3 box."""
    for x in range(_SUDOKU_SIZE):
        if grid[x][col] == value or grid[row][x] == value:
            return False
    top = (row // _BOX) * _BOX
    left = (col // _BOX) * _BOX
    return all(
        grid[r][c] != value
        for r in range(top, top + _BOX)
        for c in range(left, left + _BOX)
    )


def _checked_copy(grid: Sequence[Sequence[int]]) -> Grid:
    if len(grid) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in grid):
        raise ValueError("sudoku grid must be 9x9")
    board = [list(row) for row in grid]
    if any(not 0 <= value <= _SUDOKU_SIZE for row in board for value in row):
        raise ValueError("sudoku cells must hold 0 (empty) or 1-9")
    return board


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid | None:
    """Solve a 9x9 sudoku where 0 marks an empty cell.

    Cells are filled in row-major order, trying 1 to 9 in turn.  The input is
    left untouched; the solved grid is returned, or None if there is none.
    """
    board = _checked_copy(grid)
    empty = [
        (r, c)
        for r in range(_SUDOKU_SIZE)
        for c in range(_SUDOKU_SIZE)
        if board[r][c] == 0
    ]

    def fill(k: int) -> bool:
        if k == len(empty):
            return True
        row, col = empty[k]
        for value in range(1, _SUDOKU_SIZE + 1):
            if is_valid_placement(board, row, col, value):
                board[row][col] = value
                if fill(k + 1):
                    return True
        board[row][col] = 0
        return False

    return board if fill(0) else None


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with a tab after every third column and a blank line after every third row."""
    lines = []
    for r, row in enumerate(grid, 1):
        cells = "".join(
            f"{value} " + ("\t" if c % _BOX == 0 else "")
            for c, value in enumerate(row, 1)
        )
        lines.append(cells + ("\n" if r % _BOX == 0 else "") + "\n")
    return "".join(lines)