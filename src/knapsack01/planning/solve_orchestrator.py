# -*- coding: utf-8 -*-
"""
Run orchestrator: every selected solver on one Problem.

Thin wrapper that connects Policy -> solver registry, and (optionally)
writes CSV reports of the run via planning.Tracker.

- Reads the solver selection from Policy.solvers (None = all, registry order)
- Times each solver and collects its SearchStats
- Verifies every returned Solution against the Problem before reporting it
- Skips the exhaustive oracle above Policy.max_exhaustive_items
"""

from __future__ import annotations
import logging
import time
from typing import List, Optional

from knapsack01.business_objects.problem import Problem
from knapsack01.planning.policy import Policy
from knapsack01.planning.solution import SearchStats, SolverReport
from knapsack01.planning.solvers import SOLVERS
from knapsack01.planning.tracker import Tracker
from knapsack01.quality_metrics.core import verify_solution

log = logging.getLogger(__name__)


def _selected_solvers(policy: Policy) -> List[str]:
    if not policy.solvers:
        return list(SOLVERS)
    unknown = [s for s in policy.solvers if s not in SOLVERS]
    if unknown:
        raise ValueError(f"Unknown solver(s) {unknown}. Allowed: {list(SOLVERS)}")
    # Registry order, duplicates dropped.
    return [name for name in SOLVERS if name in policy.solvers]


def run_solver(problem: Problem, name: str, policy: Optional[Policy] = None) -> SolverReport:
    """
    Run one registered solver and verify its output.

    Raises
    ------
    KeyError
        `name` is not registered.
    StateValidationError
        The solver returned an inconsistent or infeasible solution.
    """
    policy = policy or Policy()
    entry = SOLVERS[name]
    stats = SearchStats()
    start = time.perf_counter()
    solution = entry.fn(problem, policy, stats)
    elapsed = time.perf_counter() - start

    verify_solution(problem, solution)
    log.info(
        "%s: objective=%d optimal=%d time=%.4fs nodes=%d pruned=%d",
        name, solution.objective_value, int(solution.optimal), elapsed,
        stats.nodes_explored, stats.nodes_pruned,
    )
    return SolverReport(solver=name, solution=solution, elapsed_seconds=elapsed, stats=stats)


def run_solvers(
    problem: Problem,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> List[SolverReport]:
    """
    Execute every selected solver independently.

    Parameters
    ----------
    problem : Problem
        Immutable instance shared by all solvers.
    policy : Policy | None
        Solver selection and resource guards; defaults to Policy().
    tracker : Tracker | None
        If provided, writes solutions.csv, decisions.csv and
        problem_summary.csv into tracker.out_dir.

    Returns
    -------
    List[SolverReport]
        One report per solver that ran, in registry order.
    """
    policy = policy or Policy()
    reports: List[SolverReport] = []
    for name in _selected_solvers(policy):
        if (
            name == "exhaustive"
            and policy.max_exhaustive_items is not None
            and problem.n_items > policy.max_exhaustive_items
        ):
            log.warning(
                "Skipping exhaustive search: %d items > max_exhaustive_items=%d",
                problem.n_items, policy.max_exhaustive_items,
            )
            continue
        reports.append(run_solver(problem, name, policy))

    if tracker is not None:
        tracker.write_run(problem, reports)

    return reports
