# -*- coding: utf-8 -*-
"""
Depth-first branch-and-bound.

Items are visited in non-increasing value density. At each node:
  - prune if bound <= best or every item is decided;
  - include the item (if it fits) and recurse with the parent's bound;
  - exclude the item and recurse with a fresh bound from index+1.

Include-before-exclude on density-sorted items makes the first descent a
greedy fill, which gives a strong incumbent early.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from knapsack01.business_objects.items import Item
from knapsack01.business_objects.problem import Problem
from knapsack01.heuristics.bound import bound
from knapsack01.heuristics.ranking.selector import density_order
from knapsack01.planning.solution import SearchStats, Solution
from knapsack01.planning.state import WorkingSolution, ensure_recursion_depth, unsort


def _search(
    items: Sequence[Item],
    index: int,
    remaining: int,
    node_bound: int,
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
    if item.weight <= remaining:
        current.include(index, item.value)
        if current.objective_value > best.objective_value:
            best.copy_from(current)
        _search(items, index + 1, remaining - item.weight, node_bound, current, best, stats)
        current.exclude(index, item.value)

    exclude_bound = bound(items, index + 1, current.objective_value, remaining)
    _search(items, index + 1, remaining, exclude_bound, current, best, stats)


def run_depth_first(problem: Problem, stats: Optional[SearchStats] = None) -> Solution:
    """
    Exact solve by depth-first branch-and-bound.
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
    _search(items, 0, problem.capacity, root_bound, current, best, stats)

    return Solution(
        objective_value=best.objective_value,
        decision_variables=tuple(unsort(order, best.decision_variables)),
        optimal=True,
    )
