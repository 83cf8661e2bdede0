"""Dynamic programming: matrix chain ordering and longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class MatrixChainResult:
    """Fewest scalar multiplications for a chain, and the bracketing that achieves it."""

    cost: int
    parenthesization: str


def matrix_chain_order(dims: Sequence[int]) -> MatrixChainResult:
    """Optimal order for multiplying matrices A1..An where Ai is dims[i-1] x dims[i]."""
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("at least two dimensions are required")
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")

    cost = [[0] * (count + 1) for _ in range(count + 1)]
    split = [[0] * (count + 1) for _ in range(count + 1)]
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            best: int | None = None
            for k in range(i, j):
                candidate = cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if best is None or candidate < best:
                    best = candidate
                    split[i][j] = k
            cost[i][j] = best

    def render(i: int, j: int) -> str:
        if i == j:
            return f"A{i}"
        k = split[i][j]
        return f"({render(i, k)}{render(k + 1, j)})"

    return MatrixChainResult(cost[1][count], render(1, count))


def lcs(first: str, second: str) -> str:
    """A longest common subsequence of two strings."""
    rows = [[0] * (len(second) + 1)]
    for a in first:
        above = rows[-1]
        row = [0]
        for j, b in enumerate(second, start=1):
            row.append(above[j - 1] + 1 if a == b else max(above[j], row[j - 1]))
        rows.append(row)

    i, j = len(first), len(second)
    picked = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif rows[i - 1][j] > rows[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))