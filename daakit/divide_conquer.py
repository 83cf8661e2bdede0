"""Divide and conquer: Karatsuba multiplication, maximum subarray, randomised quicksort."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Subarray:
    """A contiguous run of values, given by inclusive start and end indices, and its sum."""

    start: int
    end: int
    total: int


def karatsuba(x: int, y: int) -> int:
    """Multiply two integers by Karatsuba's method on decimal digits."""
    if x < 10 or y < 10:
        return x * y
    half = max(len(str(x)), len(str(y))) // 2
    base = 10**half
    a, b = divmod(x, base)
    c, d = divmod(y, base)
    ac = karatsuba(a, c)
    bd = karatsuba(b, d)
    middle = karatsuba(a + b, c + d) - ac - bd
    return ac * base * base + middle * base + bd


def _crossing(values: Sequence[int], low: int, mid: int, high: int) -> Subarray:
    best_left = None
    running = 0
    left_index = mid
    for i in range(mid, low - 1, -1):
        running += values[i]
        if best_left is None or running > best_left:
            best_left = running
            left_index = i

    best_right = None
    running = 0
    right_index = mid + 1
    for i in range(mid + 1, high + 1):
        running += values[i]
        if best_right is None or running > best_right:
            best_right = running
            right_index = i

    return Subarray(left_index, right_index, best_left + best_right)


def _max_subarray(values: Sequence[int], low: int, high: int) -> Subarray:
    if low == high:
        return Subarray(low, high, values[low])
    mid = (low + high) // 2
    left = _max_subarray(values, low, mid)
    right = _max_subarray(values, mid + 1, high)
    cross = _crossing(values, low, mid, high)
    if left.total >= right.total and left.total >= cross.total:
        return left
    if right.total >= cross.total:
        return right
    return cross


def max_subarray(values: Iterable[int]) -> Subarray:
    """The non-empty contiguous subarray with the largest sum."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    return _max_subarray(values, 0, len(values) - 1)


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[low]
    i, j = low - 1, high + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def quicksort(values: Iterable, rng: random.Random | None = None) -> list:
    """Return the values sorted ascending, by quicksort with a random pivot."""
    rng = random.Random() if rng is None else rng
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pick = rng.randint(low, high)
        items[low], items[pick] = items[pick], items[low]
        split = _partition(items, low, high)
        pending.append((low, split))
        pending.append((split + 1, high))
    return items