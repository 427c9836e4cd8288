"""Tests for the fractional-relaxation bound and the item rankings."""

import pytest

from conftest import random_problem
from knapsack01.business_objects import Item
from knapsack01.heuristics.bound import bound
from knapsack01.heuristics.ranking.selector import density_order, rank_items
from knapsack01.planning.solvers import run_dynamic_programming


def _items(pairs):
    return [Item(value=v, weight=w) for v, w in pairs]


def test_bound_adds_whole_items_then_truncated_fraction():
    items = _items([(16, 2), (19, 3), (23, 4), (28, 5)])
    # 16 + 19 fit (weight 5), then 2/4 of 23 -> 11.5 truncated to 11
    assert bound(items, 0, 0, 7) == 46


def test_bound_from_later_index_and_accumulated_value():
    items = _items([(16, 2), (19, 3), (23, 4), (28, 5)])
    assert bound(items, 2, 16, 5) == 16 + 23 + (1 * 28) // 5


def test_bound_with_everything_fitting():
    items = _items([(4, 1), (3, 1)])
    assert bound(items, 0, 10, 100) == 17


def test_bound_at_end_is_accumulated_value():
    items = _items([(4, 1)])
    assert bound(items, 1, 9, 3) == 9


def test_bound_zero_capacity_counts_only_weightless_items():
    items = _items([(5, 0), (7, 3)])
    assert bound(items, 0, 0, 0) == 5


@pytest.mark.parametrize("seed", range(25))
def test_bound_never_below_optimum(seed):
    problem = random_problem(seed)
    order = density_order(problem.items)
    items = [problem.items[i] for i in order]
    optimum = run_dynamic_programming(problem).objective_value
    assert bound(items, 0, 0, problem.capacity) >= optimum


def test_rank_items_directions_and_stability():
    items = _items([(5, 3), (9, 3), (5, 1), (9, 9)])
    assert rank_items(items, "value") == [1, 3, 0, 2]
    assert rank_items(items, "weight") == [2, 0, 1, 3]
    # densities: 1.67, 3.0, 5.0, 1.0
    assert rank_items(items, "density") == [2, 1, 0, 3]


def test_rank_items_ties_keep_input_order():
    items = _items([(4, 2), (4, 2), (4, 2)])
    for key in ("value", "weight", "density"):
        assert rank_items(items, key) == [0, 1, 2]


def test_rank_items_unknown_key():
    with pytest.raises(ValueError):
        rank_items(_items([(1, 1)]), "profit")
