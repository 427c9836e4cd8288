# -*- coding: utf-8 -*-
"""
Limited-discrepancy search with branch-and-bound pruning.

The density ranking's default decision is "include the item". Pass `d`
(for d = 0..n) allows at most n-d accordances (includes) and d
discrepancies (excludes) along any path. The incumbent survives across
passes, so good solutions found close to the greedy descent prune the
wider passes. Once d = n has run, every complete assignment has been
covered by some pass and the result is exact.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from knapsack01.business_objects.items import Item
from knapsack01.business_objects.problem import Problem
from knapsack01.heuristics.bound import bound
from knapsack01.heuristics.ranking.selector import density_order
from knapsack01.planning.solution import SearchStats, Solution
from knapsack01.planning.state import WorkingSolution, ensure_recursion_depth, unsort

log = logging.getLogger(__name__)


def _search(
    items: Sequence[Item],
    index: int,
    remaining: int,
    node_bound: int,
    accordances: int,
    discrepancies: int,
    current: WorkingSolution,
    best: WorkingSolution,
    stats: SearchStats,
) -> None:
    stats.nodes_explored += 1
    if node_bound <= best.objective_value:
        stats.nodes_pruned += 1
        return
    if index >= len(items):
        return

    item = items[index]
    if item.weight <= remaining and accordances > 0:
        current.include(index, item.value)
        if current.objective_value > best.objective_value:
            best.copy_from(current)
        _search(
            items, index + 1, remaining - item.weight, node_bound,
            accordances - 1, discrepancies, current, best, stats,
        )
        current.exclude(index, item.value)

    if discrepancies > 0:
        exclude_bound = bound(items, index + 1, current.objective_value, remaining)
        _search(
            items, index + 1, remaining, exclude_bound,
            accordances, discrepancies - 1, current, best, stats,
        )


def run_limited_discrepancy(problem: Problem, stats: Optional[SearchStats] = None) -> Solution:
    """
    Exact solve by widening discrepancy passes d = 0..n.
    Decisions are reported in the problem's input order.
    """
    if stats is None:
        stats = SearchStats()
    order: List[int] = density_order(problem.items)
    items = [problem.items[i] for i in order]
    n = len(items)
    ensure_recursion_depth(n + 1)

    current = WorkingSolution(n)
    best = WorkingSolution(n)
    root_bound = bound(items, 0, 0, problem.capacity)
    for d in range(n + 1):
        current.reset()
        _search(items, 0, problem.capacity, root_bound, n - d, d, current, best, stats)
        log.debug("discrepancy pass d=%d: best=%d", d, best.objective_value)

    return Solution(
        objective_value=best.objective_value,
        decision_variables=tuple(unsort(order, best.decision_variables)),
        optimal=True,
    )
