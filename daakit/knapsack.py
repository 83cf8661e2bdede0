"""Fractional (greedy) and 0/1 (dynamic programming) knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An object that can go into the knapsack."""

    name: str
    weight: float
    profit: float

    @property
    def ratio(self) -> float:
        """Profit per unit of weight."""
        return self.profit / self.weight


@dataclass(frozen=True)
class FractionalChoice:
    """How much of an item was taken, from 0 to 1."""

    item: Item
    fraction: float

    @property
    def profit(self) -> float:
        """Profit earned by the part of the item taken."""
        return self.item.profit * self.fraction


def fractional_knapsack(
    items: Iterable[Item], capacity: float
) -> tuple[list[FractionalChoice], float]:
    """Greedy fractional knapsack.

    Items are taken whole in descending profit/weight order until one does not
    fit; a fraction of that one fills the rest. Returns a choice for every item,
    in that order, and the total profit.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = list(items)
    for item in items:
        if item.weight <= 0:
            raise ValueError(f"item {item.name!r} must have a positive weight")

    ordered = sorted(items, key=lambda it: it.ratio, reverse=True)
    remaining = float(capacity)
    filling = True
    choices = []
    for item in ordered:
        if not filling:
            fraction = 0.0
        elif item.weight <= remaining:
            fraction = 1.0
            remaining -= item.weight
        else:
            fraction = remaining / item.weight
            filling = False
        choices.append(FractionalChoice(item, fraction))
    return choices, sum(choice.profit for choice in choices)


def knapsack_01(items: Iterable[Item], capacity: int) -> tuple[int, list[Item]]:
    """0/1 knapsack with integer weights.

    Returns the maximum profit and the items chosen, in input order.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    items = list(items)
    for item in items:
        if item.weight < 0 or int(item.weight) != item.weight:
            raise ValueError(f"item {item.name!r} must have a non-negative integer weight")

    table = [[0] * (capacity + 1)]
    for item in items:
        previous = table[-1]
        weight = int(item.weight)
        table.append([
            max(item.profit + previous[w - weight], previous[w]) if weight <= w else previous[w]
            for w in range(capacity + 1)
        ])

    best = table[-1][capacity]
    remaining_profit = best
    w = capacity
    chosen = []
    for i in range(len(items), 0, -1):
        if remaining_profit <= 0:
            break
        if remaining_profit != table[i - 1][w]:
            item = items[i - 1]
            chosen.append(item)
            remaining_profit -= item.profit
            w -= int(item.weight)
    chosen.reverse()
    return best, chosen