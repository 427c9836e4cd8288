# -*- coding: utf-8 -*-
"""
Run-time state containers for the recursive solvers.

This module defines:
  - WorkingSolution: mutable scratch solution with set/undo semantics
  - unsort:          map a decision vector from sorted order back to input order
  - ensure_recursion_depth: headroom for the recursive searches

Notes
-----
- Business (timeless) entities live in `business_objects/`.
- A WorkingSolution may temporarily exceed capacity while a search is
  descending; only frozen `Solution` snapshots leave a solver.
"""

from __future__ import annotations
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Sequence

from .solution import Solution

log = logging.getLogger(__name__)


@dataclass
class WorkingSolution:
    """
    Mutable solution used during a search.

    Attributes
    ----------
    objective_value : int
        Running sum of selected values.
    decision_variables : list[int]
        Per-item 0/1 flags (indexed by the solver's working order).
    """
    n_items: int
    objective_value: int = field(default=0, init=False)
    decision_variables: List[int] = field(init=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        self.decision_variables = [0] * self.n_items

    def include(self, index: int, value: int) -> None:
        self.objective_value += value
        self.decision_variables[index] = 1

    def exclude(self, index: int, value: int) -> None:
        """Undo a previous include()."""
        assert self.decision_variables[index] == 1, f"item {index} was not included"
        self.objective_value -= value
        self.decision_variables[index] = 0

    def copy_from(self, other: "WorkingSolution") -> None:
        self.objective_value = other.objective_value
        self.decision_variables[:] = other.decision_variables

    def reset(self) -> None:
        self.objective_value = 0
        for i in range(self.n_items):
            self.decision_variables[i] = 0

    def freeze(self, optimal: bool = False) -> Solution:
        return Solution(
            objective_value=self.objective_value,
            decision_variables=tuple(self.decision_variables),
            optimal=optimal,
        )


def unsort(order: Sequence[int], sorted_decisions: Sequence[int]) -> List[int]:
    """
    `sorted_decisions[k]` is the decision for item `order[k]`;
    return the same decisions indexed by original item position.
    """
    out = [0] * len(order)
    for k, original_index in enumerate(order):
        out[original_index] = sorted_decisions[k]
    return out


# Frames used by the caller's own stack on top of the search recursion.
_RECURSION_MARGIN = 500


def ensure_recursion_depth(depth: int) -> None:
    """
    Make sure a recursion `depth` frames deep fits under the interpreter limit.
    The limit is only ever raised, never lowered, so concurrent solver calls
    cannot shrink each other's headroom.
    """
    needed = depth + _RECURSION_MARGIN
    current = sys.getrecursionlimit()
    if current < needed:
        log.debug("Raising recursion limit from %d to %d", current, needed)
        sys.setrecursionlimit(needed)
