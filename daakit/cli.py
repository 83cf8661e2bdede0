"""Command-line readers for rows of integers and traces of 3 x 3 matrices."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

_MATRIX_SIZE = 3


def trace(matrix: Sequence[Sequence[int]]) -> int:
    """Sum of the main diagonal of a square matrix."""
    rows = list(matrix)
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return sum(row[i] for i, row in enumerate(rows))


def _leading_ints(line: str) -> list[int]:
    values = []
    for token in line.split():
        try:
            values.append(int(token))
        except ValueError:
            break
    return values


def parse_int_rows(lines: Iterable[str]) -> list[list[int]]:
    """Integers of each line; a line stops at its first token that is not an integer."""
    return [_leading_ints(line) for line in lines]


def _parse_count(token: str) -> int:
    try:
        count = int(token)
    except ValueError:
        raise ValueError(f"expected a count, got {token!r}") from None
    if count < 0:
        raise ValueError("count must not be negative")
    return count


def _read_rows(stream: TextIO) -> list[list[int]]:
    lines = stream.read().splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing the number of rows")
    count = _parse_count(lines[0].strip())
    rows = parse_int_rows(lines[1:1 + count])
    rows.extend([] for _ in range(count - len(rows)))
    return rows


def _read_traces(stream: TextIO) -> Iterator[int]:
    tokens = stream.read().split()
    if not tokens:
        raise ValueError("missing the number of matrices")
    count = _parse_count(tokens[0])
    cells = _MATRIX_SIZE * _MATRIX_SIZE
    values = tokens[1:]
    for index in range(count):
        chunk = values[index * cells:(index + 1) * cells]
        if len(chunk) < cells:
            raise ValueError(f"matrix {index + 1} is incomplete")
        try:
            numbers = [int(token) for token in chunk]
        except ValueError as exc:
            raise ValueError(f"matrix {index + 1}: {exc}") from None
        yield trace(
            [numbers[r * _MATRIX_SIZE:(r + 1) * _MATRIX_SIZE] for r in range(_MATRIX_SIZE)]
        )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daakit", description="Read integer data from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "rows", help="read a count and that many lines of integers, and echo them"
    )
    commands.add_parser(
        "trace", help="read a count and that many 3 x 3 matrices, and print each trace"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command on standard input; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "rows":
            for row in _read_rows(sys.stdin):
                print("".join(f"{value} " for value in row))
        else:
            for value in _read_traces(sys.stdin):
                print(value)
    except ValueError as exc:
        print(f"daakit: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())