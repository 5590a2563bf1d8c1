"""Backtracking searches: the n-queens puzzle and paths through a maze."""

from __future__ import annotations

from typing import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))


def _render(queen_rows: list[int], n: int) -> list[str]:
    return [
        "".join("Q" if queen_rows[col] == row else "." for col in range(n))
        for row in range(n)
    ]


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each board is a list of row strings with ``Q`` for a queen and ``.`` for
    an empty square. Columns are filled left to right, trying rows top to
    bottom, and solutions come out in that search order.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    solutions: list[list[str]] = []
    queen_rows: list[int] = []
    used_rows: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(_render(queen_rows, n))
            return
        for row in range(n):
            if row in used_rows or row - col in diagonals or row + col in anti_diagonals:
                continue
            queen_rows.append(row)
            used_rows.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(col + 1)
            queen_rows.pop()
            used_rows.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions


def rat_in_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right of a square maze.

    Cells holding 1 are open. Paths are strings of ``D``, ``L``, ``R`` and
    ``U`` moves that never revisit a cell, in lexicographic order.
    """
    cells = [list(row) for row in grid]
    n = len(cells)
    if any(len(row) != n for row in cells):
        raise ValueError("maze must be a square grid")
    if n == 0 or cells[0][0] != 1:
        return []

    paths: list[str] = []
    visited = {(0, 0)}
    moves: list[str] = []

    def walk(i: int, j: int) -> None:
        if (i, j) == (n - 1, n - 1):
            paths.append("".join(moves))
            return
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < n and (ni, nj) not in visited and cells[ni][nj] == 1:
                visited.add((ni, nj))
                moves.append(letter)
                walk(ni, nj)
                moves.pop()
                visited.discard((ni, nj))

    walk(0, 0)
    return paths