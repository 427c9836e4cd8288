# -*- coding: utf-8 -*-
"""
Fractional-relaxation upper bound for branch-and-bound.

Given items already ordered by non-increasing value density, the best
completion of a partial solution can never beat:

    accumulated value
    + every whole item (from start_index on) that still fits, in order
    + the fraction of the first item that does not fit

That is the LP relaxation of the remaining subproblem, so it is an
admissible over-estimate. The fraction is truncated toward zero; it is
computed as `remaining * value // weight` so no float rounding can make
the bound fall below the true optimum.
"""

from __future__ import annotations
from typing import Sequence

from knapsack01.business_objects.items import Item


def bound(
    items: Sequence[Item],
    start_index: int,
    accumulated_value: int,
    remaining_capacity: int,
) -> int:
    """
    Optimistic value of the best completion from `start_index`.

    Parameters
    ----------
    items : Sequence[Item]
        Items in density order (the order the search walks them).
    start_index : int
        First undecided item.
    accumulated_value : int
        Value already packed.
    remaining_capacity : int
        Capacity still free.
    """
    assert remaining_capacity >= 0, f"negative remaining capacity {remaining_capacity}"
    total = accumulated_value
    remaining = remaining_capacity
    for j in range(start_index, len(items)):
        it = items[j]
        if it.weight <= remaining:
            remaining -= it.weight
            total += it.value
            continue
        # it.weight > remaining >= 0, so the division is safe
        total += remaining * it.value // it.weight
        break
    return total
