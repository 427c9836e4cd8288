"""Tests for the depth-first, best-first and limited-discrepancy solvers."""

import pytest

from conftest import random_problem
from knapsack01.business_objects import Problem
from knapsack01.planning import SearchStats
from knapsack01.planning.solvers import (
    run_best_first,
    run_depth_first,
    run_dynamic_programming,
    run_exhaustive,
    run_limited_discrepancy,
)
from knapsack01.quality_metrics.core import verify_solution

BNB_SOLVERS = [run_depth_first, run_best_first, run_limited_discrepancy]


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_four_items(solver, four_items):
    sol = solver(four_items)
    assert sol.objective_value == 44
    assert sol.decision_variables == (1, 0, 0, 1)
    assert sol.optimal is True


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_three_items(solver, three_items):
    sol = solver(three_items)
    assert sol.objective_value == 11
    assert sol.decision_variables == (1, 1, 0)


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_decisions_reported_in_input_order(solver):
    # density order is 2, 1, 0; the optimum is items 1 and 2
    problem = Problem.from_pairs([(6, 4), (10, 5), (9, 2)], capacity=7)
    sol = solver(problem)
    assert sol.objective_value == 19
    assert sol.decision_variables == (0, 1, 1)


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_zero_capacity(solver):
    problem = Problem.from_pairs([(5, 1), (7, 2)], capacity=0)
    sol = solver(problem)
    assert sol.objective_value == 0
    assert sol.decision_variables == (0, 0)


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_empty_problem(solver):
    sol = solver(Problem.from_pairs([], capacity=10))
    assert sol.objective_value == 0
    assert sol.decision_variables == ()


@pytest.mark.parametrize("solver", BNB_SOLVERS)
@pytest.mark.parametrize("seed", range(40))
def test_matches_exhaustive_oracle(solver, seed):
    problem = random_problem(seed)
    sol = solver(problem)
    verify_solution(problem, sol)
    assert sol.objective_value == run_exhaustive(problem).objective_value


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_nineteen_items_agree_with_dp(solver, nineteen_items):
    sol = solver(nineteen_items)
    verify_solution(nineteen_items, sol)
    assert sol.objective_value == run_dynamic_programming(nineteen_items).objective_value


@pytest.mark.parametrize("seed", range(40))
def test_limited_discrepancy_ends_at_depth_first_result(seed):
    problem = random_problem(seed, max_items=12)
    assert (
        run_limited_discrepancy(problem).objective_value
        == run_depth_first(problem).objective_value
    )


@pytest.mark.parametrize("solver", [run_depth_first, run_limited_discrepancy])
def test_deep_recursion(solver):
    problem = Problem.from_pairs([(1, 1)] * 1500, capacity=1500)
    sol = solver(problem)
    assert sol.objective_value == 1500
    assert all(x == 1 for x in sol.decision_variables)


def test_best_first_handles_many_items_without_recursion():
    problem = Problem.from_pairs([(1, 1)] * 1500, capacity=1500)
    assert run_best_first(problem).objective_value == 1500


def test_depth_first_prunes_more_than_exhaustive(nineteen_items):
    dfs, full = SearchStats(), SearchStats()
    run_depth_first(nineteen_items, stats=dfs)
    run_exhaustive(nineteen_items, stats=full)
    assert dfs.nodes_pruned > 0
    assert dfs.nodes_explored < full.nodes_explored


def test_best_first_drains_queue_into_pruned_count(four_items):
    stats = SearchStats()
    run_best_first(four_items, stats=stats)
    assert stats.nodes_explored > 0
    # the exclude-first subtree (bound 42) is still queued when 44 is found
    assert stats.nodes_pruned > 0


def test_best_first_stops_at_first_leaf_matching_root_bound():
    # greedy density fill uses all capacity, so the root bound equals the optimum
    problem = Problem.from_pairs([(8, 2), (6, 3)], capacity=5)
    stats = SearchStats()
    sol = run_best_first(problem, stats=stats)
    assert sol.objective_value == 14
    assert sol.decision_variables == (1, 1)
    # root, include child, leaf; the two exclude children are drained
    assert stats.nodes_explored == 3
    assert stats.nodes_pruned == 2


@pytest.mark.parametrize("solver", BNB_SOLVERS)
def test_idempotent(solver, nineteen_items):
    assert solver(nineteen_items) == solver(nineteen_items)
