"""Tests for the exhaustive enumeration oracle."""

from knapsack01.business_objects import Problem
from knapsack01.planning import SearchStats
from knapsack01.planning.solvers import run_exhaustive


def test_exhaustive_four_items(four_items):
    sol = run_exhaustive(four_items)
    assert sol.objective_value == 44
    assert sol.decision_variables == (1, 0, 0, 1)
    assert sol.optimal is True


def test_exhaustive_three_items(three_items):
    sol = run_exhaustive(three_items)
    assert sol.objective_value == 11
    assert sol.decision_variables == (1, 1, 0)


def test_exhaustive_keeps_first_of_equal_solutions():
    # {0} and {1} both reach 5; the include-first walk finds {0} first.
    problem = Problem.from_pairs([(5, 3), (5, 3)], capacity=4)
    assert run_exhaustive(problem).decision_variables == (1, 0)


def test_exhaustive_visits_every_node_when_everything_fits():
    problem = Problem.from_pairs([(1, 1)] * 4, capacity=10)
    stats = SearchStats()
    run_exhaustive(problem, stats=stats)
    # full binary tree of depth 4 has 2**5 - 1 nodes
    assert stats.nodes_explored == 31
    assert stats.nodes_pruned == 0
