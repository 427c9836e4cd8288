# -*- coding: utf-8 -*-
"""
Greedy constructive solver (rank-and-fill).

Pipeline:
  1) Rank item indices by a single key (see heuristics.ranking.selector):
        - "value"   -> most valuable first
        - "weight"  -> lightest first
        - "density" -> highest value per unit weight first
  2) Scan the ranking once; accept an item if it still fits, skip otherwise.
     No backtracking.

The result is feasible but never claimed optimal (Solution.optimal is False).
"""

from __future__ import annotations
import logging
from typing import List

from knapsack01.business_objects.problem import Problem
from knapsack01.heuristics.ranking.selector import rank_items
from knapsack01.planning.solution import Solution

log = logging.getLogger(__name__)


def run_greedy(problem: Problem, key: str = "density") -> Solution:
    """
    Fill the knapsack following the ranking by `key`.

    Parameters
    ----------
    problem : Problem
        Immutable instance (items + capacity).
    key : str
        "value" | "weight" | "density".

    Returns
    -------
    Solution
        Feasible solution with optimal=False.
    """
    items = problem.items
    ordered: List[int] = rank_items(items, key)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("greedy[%s] order: %s", key, ordered)

    decisions = [0] * len(items)
    used = 0
    total = 0
    for idx in ordered:
        it = items[idx]
        if used + it.weight > problem.capacity:
            continue
        used += it.weight
        total += it.value
        decisions[idx] = 1

    return Solution(objective_value=total, decision_variables=tuple(decisions), optimal=False)