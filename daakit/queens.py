"""N-queens by column-wise backtracking."""

from __future__ import annotations

from collections.abc import Sequence

MIN_SIZE = 4
MAX_SIZE = 15


def solve_n_queens(n: int) -> list[list[bool]]:
    """First placement of n queens found column by column, rows tried top down.

    Returns a board indexed as board[row][col], True where a queen stands.
    """
    if not MIN_SIZE <= n <= MAX_SIZE:
        raise ValueError(f"board size must be between {MIN_SIZE} and {MAX_SIZE}")

    rows: list[int] = []

    def safe(row: int) -> bool:
        col = len(rows)
        return all(
            placed != row and abs(placed - row) != col - c
            for c, placed in enumerate(rows)
        )

    def place() -> bool:
        if len(rows) == n:
            return True
        for row in range(n):
            if safe(row):
                rows.append(row)
                if place():
                    return True
                rows.pop()
        return False

    if not place():
        raise ValueError(f"no solution for a board of size {n}")
    board = [[False] * n for _ in range(n)]
    for col, row in enumerate(rows):
        board[row][col] = True
    return board


def render_board(board: Sequence[Sequence[bool]]) -> str:
    """Draw the board with Q for a queen and . for an empty square."""
    return "\n".join(" ".join("Q" if cell else "." for cell in row) for row in board)


def queen_positions(board: Sequence[Sequence[bool]]) -> list[tuple[int, int]]:
    """(row, col) of every queen, in row-major order."""
    return [
        (r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell
    ]