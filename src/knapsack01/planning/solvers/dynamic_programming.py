# -*- coding: utf-8 -*-
"""
Exact bottom-up dynamic programming solver.

Table T has (n+1) rows and (capacity+1) columns:
  T[0][c]   = 0
  T[row][c] = T[row-1][c]                                    if w > c
            = max(T[row-1][c], v + T[row-1][c - w])          otherwise
with (v, w) the value/weight of items[row-1]. T[n][capacity] is the optimum.

The decision vector is recovered by walking rows n..1: a cell that beats
the cell above means the row's item was taken.

Memory is (n+1)*(capacity+1) integers; that is the dominant cost and the
price paid for exactness. The cell count is checked before allocating.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from knapsack01.business_objects.errors import InvalidCapacityError, TableAllocationError
from knapsack01.business_objects.problem import Problem
from knapsack01.planning.solution import Solution

log = logging.getLogger(__name__)


def table_cells(n_items: int, capacity: int) -> int:
    return (n_items + 1) * (capacity + 1)


def _build_table(problem: Problem) -> List[List[int]]:
    width = problem.capacity + 1
    table: List[List[int]] = [[0] * width]
    for item in problem.items:
        prev = table[-1]
        v, w = item.value, item.weight
        row = prev[:]
        # Columns below w keep the row above.
        for c in range(w, width):
            picked = v + prev[c - w]
            if picked > row[c]:
                row[c] = picked
        table.append(row)
    return table


def run_dynamic_programming(problem: Problem, max_table_cells: Optional[int] = None) -> Solution:
    """
    Solve exactly with the DP table.

    Raises
    ------
    InvalidCapacityError
        Capacity is not a nonnegative int (cannot size the table).
    TableAllocationError
        The table exceeds `max_table_cells` or cannot be allocated.
    """
    capacity = problem.capacity
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
        raise InvalidCapacityError(f"Cannot size a DP table for capacity {capacity!r}.")

    n = problem.n_items
    cells = table_cells(n, capacity)
    if max_table_cells is not None and cells > max_table_cells:
        raise TableAllocationError(
            f"DP table needs {cells} cells (n={n}, capacity={capacity}); limit is {max_table_cells}."
        )
    log.debug("DP table: %d x %d = %d cells", n + 1, capacity + 1, cells)

    try:
        table = _build_table(problem)
    except MemoryError as e:
        raise TableAllocationError(f"Could not allocate DP table of {cells} cells.") from e

    decisions = [0] * n
    c = capacity
    for row in range(n, 0, -1):
        if table[row][c] > table[row - 1][c]:
            item_index = row - 1
            decisions[item_index] = 1
            c -= problem.items[item_index].weight
            assert c >= 0, f"backtrack went below zero capacity at row {row}"

    return Solution(objective_value=table[n][capacity], decision_variables=tuple(decisions), optimal=True)
