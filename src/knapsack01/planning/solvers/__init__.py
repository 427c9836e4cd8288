# -*- coding: utf-8 -*-
"""
Solver registry.

Every entry adapts one solver to the uniform call shape
    fn(problem, policy, stats) -> Solution
used by the orchestrator. Order here is the order a full run uses.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict

from knapsack01.business_objects.problem import Problem
from knapsack01.planning.policy import Policy
from knapsack01.planning.solution import SearchStats, Solution

from .best_first import run_best_first
from .depth_first import run_depth_first
from .discrepancy import run_limited_discrepancy
from .dynamic_programming import run_dynamic_programming
from .exhaustive import run_exhaustive
from .greedy import run_greedy

SolverFn = Callable[[Problem, Policy, SearchStats], Solution]


@dataclass(frozen=True)
class SolverEntry:
    name: str
    fn: SolverFn
    exact: bool


SOLVERS: Dict[str, SolverEntry] = {
    e.name: e
    for e in (
        SolverEntry("greedy_value", lambda p, pol, s: run_greedy(p, key="value"), exact=False),
        SolverEntry("greedy_weight", lambda p, pol, s: run_greedy(p, key="weight"), exact=False),
        SolverEntry("greedy_density", lambda p, pol, s: run_greedy(p, key="density"), exact=False),
        SolverEntry(
            "dynamic_programming",
            lambda p, pol, s: run_dynamic_programming(p, max_table_cells=pol.max_table_cells),
            exact=True,
        ),
        SolverEntry("exhaustive", lambda p, pol, s: run_exhaustive(p, stats=s), exact=True),
        SolverEntry("depth_first", lambda p, pol, s: run_depth_first(p, stats=s), exact=True),
        SolverEntry("best_first", lambda p, pol, s: run_best_first(p, stats=s), exact=True),
        SolverEntry("limited_discrepancy", lambda p, pol, s: run_limited_discrepancy(p, stats=s), exact=True),
    )
}

__all__ = [
    "SOLVERS",
    "SolverEntry",
    "SolverFn",
    "run_best_first",
    "run_depth_first",
    "run_dynamic_programming",
    "run_exhaustive",
    "run_greedy",
    "run_limited_discrepancy",
]
