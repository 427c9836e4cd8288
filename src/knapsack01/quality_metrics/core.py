# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to check and score knapsack solutions.
- No side effects
- No external dependencies
- Works off Problem, Solution and SolverReport

Public API:
  - total_weight(problem, solution) -> int
  - is_feasible(problem, solution) -> bool
  - verify_solution(problem, solution) -> None   (raises on violation)
  - compute_solution_metrics(problem, solution, optimum=None) -> Dict[str, float]
  - best_known_optimum(reports) -> int | None
"""

from __future__ import annotations
from typing import Dict, Iterable, Optional

from knapsack01.business_objects.errors import StateValidationError
from knapsack01.business_objects.problem import Problem
from knapsack01.planning.solution import Solution, SolverReport


def total_weight(problem: Problem, solution: Solution) -> int:
    return sum(it.weight for it, x in zip(problem.items, solution.decision_variables) if x == 1)


def is_feasible(problem: Problem, solution: Solution) -> bool:
    return total_weight(problem, solution) <= problem.capacity


def verify_solution(problem: Problem, solution: Solution) -> None:
    """
    Check a solver's output against the problem it solved.

    Raises
    ------
    StateValidationError
        Wrong vector length, non-binary decisions, objective mismatch, or
        selected weight above capacity.
    """
    n = problem.n_items
    decisions = solution.decision_variables
    if len(decisions) != n:
        raise StateValidationError(f"Solution has {len(decisions)} decisions for {n} items.")
    bad = [i for i, x in enumerate(decisions) if x not in (0, 1)]
    if bad:
        raise StateValidationError(f"Non-binary decision variables at indices {bad}.")

    value = sum(it.value for it, x in zip(problem.items, decisions) if x == 1)
    if value != solution.objective_value:
        raise StateValidationError(
            f"Objective value {solution.objective_value} != sum of selected values {value}."
        )
    weight = total_weight(problem, solution)
    if weight > problem.capacity:
        raise StateValidationError(f"Selected weight {weight} exceeds capacity {problem.capacity}.")


def compute_solution_metrics(
    problem: Problem,
    solution: Solution,
    optimum: Optional[int] = None,
) -> Dict[str, float]:
    """
    Returns:
      {
        "Objective": ...,
        "Used Weight": ...,
        "Utilization": ...,     # percent of capacity (0..100)
        "Selected Items": ...,
        "Gap": ...,             # percent below `optimum`; only when optimum is given
      }
    """
    used = total_weight(problem, solution)
    cap = problem.capacity
    metrics: Dict[str, float] = {
        "Objective": float(solution.objective_value),
        "Used Weight": float(used),
        "Utilization": 0.0 if cap == 0 else (used / cap) * 100.0,
        "Selected Items": float(len(solution.selected_indices())),
    }
    if optimum is not None:
        metrics["Gap"] = 0.0 if optimum == 0 else ((optimum - solution.objective_value) / optimum) * 100.0
    return metrics


def best_known_optimum(reports: Iterable[SolverReport]) -> Optional[int]:
    """Objective value of the first exact report, or None if none ran."""
    for rep in reports:
        if rep.solution.optimal:
            return rep.solution.objective_value
    return None
