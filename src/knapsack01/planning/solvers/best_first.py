# -*- coding: utf-8 -*-
"""
Best-first branch-and-bound driven by an explicit max-heap on bounds.

Loop:
  1) pop the node with the highest bound; adopt it as incumbent if better;
  2) stop outright if the node is a leaf or its bound cannot beat the
     incumbent: it was the best bound in the queue, so nothing left can;
  3) otherwise push the include child (if it fits; inherits the bound)
     and the exclude child (fresh bound from index+1).
Whatever is still queued at the end is drained once.
"""

from __future__ import annotations
from typing import List, Optional

from knapsack01.business_objects.problem import Problem
from knapsack01.heuristics.bound import bound
from knapsack01.heuristics.ranking.selector import density_order
from knapsack01.planning.priority_queue import NodeHeap, SearchNode
from knapsack01.planning.solution import SearchStats, Solution
from knapsack01.planning.state import unsort


def run_best_first(problem: Problem, stats: Optional[SearchStats] = None) -> Solution:
    """
    Exact solve by best-first branch-and-bound.
    Decisions are reported in the problem's input order.
    """
    if stats is None:
        stats = SearchStats()
    order: List[int] = density_order(problem.items)
    items = [problem.items[i] for i in order]
    n = len(items)

    best_value = 0
    best_decisions: List[int] = [0] * n

    queue = NodeHeap()
    queue.push(SearchNode(
        objective_value=0,
        decision_variables=[0] * n,
        index=0,
        remaining=problem.capacity,
        bound=bound(items, 0, 0, problem.capacity),
    ))

    while queue:
        node = queue.pop()
        stats.nodes_explored += 1
        if node.objective_value > best_value:
            best_value = node.objective_value
            best_decisions = node.decision_variables
        if node.index >= n or node.bound <= best_value:
            break

        item = items[node.index]
        if item.weight <= node.remaining:
            included = node.decision_variables[:]
            included[node.index] = 1
            queue.push(SearchNode(
                objective_value=node.objective_value + item.value,
                decision_variables=included,
                index=node.index + 1,
                remaining=node.remaining - item.weight,
                bound=node.bound,
            ))

        # The exclude child takes over the parent's buffer.
        queue.push(SearchNode(
            objective_value=node.objective_value,
            decision_variables=node.decision_variables,
            index=node.index + 1,
            remaining=node.remaining,
            bound=bound(items, node.index + 1, node.objective_value, node.remaining),
        ))

    stats.nodes_pruned += queue.drain()

    return Solution(
        objective_value=best_value,
        decision_variables=tuple(unsort(order, best_decisions)),
        optimal=True,
    )
