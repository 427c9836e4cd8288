# -*- coding: utf-8 -*-
"""
Solution and report models for knapsack solver results.

These data classes define the shape of outputs produced by the solvers
and consumed by the metrics/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class Solution:
    """
    Result of a single solver invocation.

    Attributes
    ----------
    objective_value : int
        Sum of values over selected items.
    decision_variables : tuple[int, ...]
        One 0/1 flag per item, in the problem's input order.
    optimal : bool
        True when the solver that produced it is exact.
    """
    objective_value: int
    decision_variables: Tuple[int, ...]
    optimal: bool = False

    def __post_init__(self) -> None:  # type: ignore[override]
        object.__setattr__(self, "decision_variables", tuple(self.decision_variables))

    @classmethod
    def empty(cls, n_items: int, optimal: bool = False) -> "Solution":
        return cls(objective_value=0, decision_variables=(0,) * n_items, optimal=optimal)

    def selected_indices(self) -> List[int]:
        return [i for i, x in enumerate(self.decision_variables) if x == 1]


@dataclass
class SearchStats:
    """
    Optional counters filled in by the search-based solvers.

    Attributes
    ----------
    nodes_explored : int
        Search nodes entered (recursive calls or queue pops).
    nodes_pruned : int
        Nodes discarded because their bound could not beat the incumbent.
    """
    nodes_explored: int = 0
    nodes_pruned: int = 0


@dataclass(frozen=True)
class SolverReport:
    """
    One solver's outcome inside an orchestrated run.
    """
    solver: str
    solution: Solution
    elapsed_seconds: float
    stats: SearchStats = field(default_factory=SearchStats)
