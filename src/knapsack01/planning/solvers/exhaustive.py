# -*- coding: utf-8 -*-
"""
Exhaustive search: full binary enumeration with feasibility-only pruning.

Exponential in the number of items. It exists as a baseline oracle for
checking the other exact solvers on small instances.
"""

from __future__ import annotations
from typing import Optional, Sequence

from knapsack01.business_objects.items import Item
from knapsack01.business_objects.problem import Problem
from knapsack01.planning.solution import SearchStats, Solution
from knapsack01.planning.state import WorkingSolution, ensure_recursion_depth


def _search(
    items: Sequence[Item],
    index: int,
    remaining: int,
    current: WorkingSolution,
    best: WorkingSolution,
    stats: SearchStats,
) -> None:
    stats.nodes_explored += 1
    if index >= len(items):
        return

    item = items[index]
    if item.weight <= remaining:
        current.include(index, item.value)
        if current.objective_value > best.objective_value:
            best.copy_from(current)
        _search(items, index + 1, remaining - item.weight, current, best, stats)
        current.exclude(index, item.value)

    _search(items, index + 1, remaining, current, best, stats)


def run_exhaustive(problem: Problem, stats: Optional[SearchStats] = None) -> Solution:
    """
    Enumerate every feasible subset and return the best one.
    Among equal objective values the first one found is kept.
    """
    if stats is None:
        stats = SearchStats()
    n = problem.n_items
    ensure_recursion_depth(n + 1)

    current = WorkingSolution(n)
    best = WorkingSolution(n)
    _search(problem.items, 0, problem.capacity, current, best, stats)
    return best.freeze(optimal=True)
