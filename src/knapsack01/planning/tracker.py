# -*- coding: utf-8 -*-
"""
Run tracker: CSV artifacts for a multi-solver run.

Files produced (when Tracker is used):
  - solutions.csv        (one row per solver)
  - decisions.csv        (one row per solver x item)
  - problem_summary.csv  (instance facts + best objective found)

Notes
-----
- Callers decide when to invoke these writers; the orchestrator calls
  write_run() once all solvers are done.
"""

from __future__ import annotations
import csv
import os
from dataclasses import dataclass
from typing import List, Optional

from knapsack01.business_objects.problem import Problem
from knapsack01.planning.solution import SolverReport
from knapsack01.quality_metrics.core import best_known_optimum, compute_solution_metrics


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def write_solutions_csv(
        self,
        problem: Problem,
        reports: List[SolverReport],
        filename: str = "solutions.csv",
    ) -> str:
        """
        Columns:
          solver, objective_value, optimal, total_weight, capacity,
          utilization_pct, gap_pct, elapsed_seconds, nodes_explored, nodes_pruned
        """
        path = os.path.join(self.out_dir, filename)
        optimum = best_known_optimum(reports)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow([
                "solver",
                "objective_value",
                "optimal",
                "total_weight",
                "capacity",
                "utilization_pct",
                "gap_pct",
                "elapsed_seconds",
                "nodes_explored",
                "nodes_pruned",
            ])
            for rep in reports:
                m = compute_solution_metrics(problem, rep.solution, optimum=optimum)
                w.writerow([
                    rep.solver,
                    rep.solution.objective_value,
                    1 if rep.solution.optimal else 0,
                    int(m["Used Weight"]),
                    problem.capacity,
                    round(m["Utilization"], 5),
                    "" if "Gap" not in m else round(m["Gap"], 5),
                    round(rep.elapsed_seconds, 6),
                    rep.stats.nodes_explored,
                    rep.stats.nodes_pruned,
                ])

        return path

    def write_decisions_csv(
        self,
        problem: Problem,
        reports: List[SolverReport],
        filename: str = "decisions.csv",
    ) -> str:
        """
        Columns:
          solver, item_index, value, weight, selected (0/1)
        """
        path = os.path.join(self.out_dir, filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["solver", "item_index", "value", "weight", "selected"])
            for rep in reports:
                for idx, (it, x) in enumerate(zip(problem.items, rep.solution.decision_variables)):
                    w.writerow([rep.solver, idx, it.value, it.weight, x])
        return path

    def write_problem_summary_csv(
        self,
        problem: Problem,
        reports: List[SolverReport],
        filename: str = "problem_summary.csv",
    ) -> str:
        """
        Columns:
          n_items, capacity, total_value, total_weight, best_objective
        """
        path = os.path.join(self.out_dir, filename)
        best: Optional[int] = max((r.solution.objective_value for r in reports), default=None)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["n_items", "capacity", "total_value", "total_weight", "best_objective"])
            w.writerow([
                problem.n_items,
                problem.capacity,
                sum(problem.values),
                sum(problem.weights),
                "" if best is None else best,
            ])
        return path

    def write_run(self, problem: Problem, reports: List[SolverReport]) -> List[str]:
        """Write every artifact; returns the paths written."""
        return [
            self.write_solutions_csv(problem, reports),
            self.write_decisions_csv(problem, reports),
            self.write_problem_summary_csv(problem, reports),
        ]
