import pytest

from daakit.knapsack import FractionalChoice, Item, fractional_knapsack, knapsack_01

CLASSIC = [Item("one", 10, 60), Item("two", 20, 100), Item("three", 30, 120)]


def test_fractional_classic_total():
    choices, total = fractional_knapsack(CLASSIC, 50)
    assert total == pytest.approx(240)
    assert [c.item.name for c in choices] == ["one", "two", "three"]


def test_fractional_orders_by_ratio():
    items = [Item("low", 10, 10), Item("high", 10, 50), Item("mid", 10, 30)]
    choices, _ = fractional_knapsack(items, 15)
    ratios = [c.item.ratio for c in choices]
    assert ratios == sorted(ratios, reverse=True)


def test_fractional_fills_capacity_exactly():
    capacity = 45
    choices, total = fractional_knapsack(CLASSIC, capacity)
    used = sum(c.item.weight * c.fraction for c in choices)
    assert used == pytest.approx(capacity)
    assert all(0.0 <= c.fraction <= 1.0 for c in choices)
    assert total == pytest.approx(sum(c.profit for c in choices))


def test_fractional_takes_everything_when_it_fits():
    choices, total = fractional_knapsack(CLASSIC, 1000)
    assert all(c.fraction == 1.0 for c in choices)
    assert total == pytest.approx(sum(it.profit for it in CLASSIC))


def test_fractional_only_one_partial_item():
    choices, _ = fractional_knapsack(CLASSIC, 25)
    partial = [c for c in choices if 0.0 < c.fraction < 1.0]
    assert len(partial) == 1
    after = choices[choices.index(partial[0]) + 1:]
    assert all(c.fraction == 0.0 for c in after)


def test_fractional_choice_profit():
    choice = FractionalChoice(Item("x", 4, 8), 0.5)
    assert choice.profit == pytest.approx(4)


def test_fractional_rejects_bad_input():
    with pytest.raises(ValueError):
        fractional_knapsack(CLASSIC, -1)
    with pytest.raises(ValueError):
        fractional_knapsack([Item("weightless", 0, 5)], 10)


def test_knapsack_01_classic():
    best, chosen = knapsack_01(CLASSIC, 50)
    assert best == 220
    assert [it.name for it in chosen] == ["two", "three"]


def test_knapsack_01_selection_is_consistent():
    items = [Item("a", 3, 4), Item("b", 4, 5), Item("c", 2, 3), Item("d", 5, 8), Item("e", 1, 1)]
    capacity = 9
    best, chosen = knapsack_01(items, capacity)
    assert sum(it.weight for it in chosen) <= capacity
    assert sum(it.profit for it in chosen) == best
    assert best >= max(it.profit for it in items if it.weight <= capacity)


def test_knapsack_01_at_most_fractional_bound():
    best, _ = knapsack_01(CLASSIC, 50)
    _, fractional_total = fractional_knapsack(CLASSIC, 50)
    assert best <= fractional_total


def test_knapsack_01_zero_capacity():
    assert knapsack_01(CLASSIC, 0) == (0, [])


def test_knapsack_01_nothing_fits():
    assert knapsack_01([Item("big", 100, 5)], 10) == (0, [])


def test_knapsack_01_rejects_bad_input():
    with pytest.raises(ValueError):
        knapsack_01(CLASSIC, -5)
    with pytest.raises(ValueError):
        knapsack_01([Item("odd", 1.5, 3)], 10)